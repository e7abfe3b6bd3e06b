"""Email connectors and models for gmail-mcp."""

from gmail_mcp.email.connectors.base import BaseConnector
from gmail_mcp.email.connectors.config import GmailConfig
from gmail_mcp.email.connectors.gmail import GmailConnector
from gmail_mcp.email.models import Email, EmailSummary, Label

__all__ = [
    "BaseConnector",
    "Email",
    "EmailSummary",
    "GmailConfig",
    "GmailConnector",
    "Label",
]
