"""Email connectors for gmail-mcp."""

from gmail_mcp.email.connectors.base import BaseConnector
from gmail_mcp.email.connectors.config import GmailConfig
from gmail_mcp.email.connectors.gmail import GmailConnector, authorize

__all__ = [
    "BaseConnector",
    "GmailConfig",
    "GmailConnector",
    "authorize",
]
