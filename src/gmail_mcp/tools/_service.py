"""Shared connector and settings helpers for tools."""

from functools import lru_cache

from gmail_mcp.attachments.store import AttachmentStore
from gmail_mcp.config import Settings, get_settings_eager
from gmail_mcp.email.connectors.base import BaseConnector
from gmail_mcp.email.connectors.gmail import GmailConnector


@lru_cache
def get_settings() -> Settings:
    """Get or load the settings singleton.

    Raises:
        ConfigError: If configuration is invalid.
    """
    return get_settings_eager()


def create_connector() -> BaseConnector:
    """Create a Gmail connector; use it as a context manager to connect."""
    return GmailConnector(get_settings().gmail)


def get_attachment_store() -> AttachmentStore:
    """Create the store for saved attachments."""
    attachments_dir = get_settings().attachments_dir
    assert attachments_dir is not None
    return AttachmentStore(attachments_dir)


def get_default_max_results() -> int:
    return get_settings().default_max_results
