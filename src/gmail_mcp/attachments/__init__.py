"""Attachment classification and safe persistence."""

from gmail_mcp.attachments.classifier import classify_attachment, select_attachment
from gmail_mcp.attachments.filenames import sanitize_filename, validate_message_id
from gmail_mcp.attachments.models import (
    AttachmentDescriptor,
    AttachmentResult,
    ImageAttachment,
    SavedFileAttachment,
    TextAttachment,
)
from gmail_mcp.attachments.store import AttachmentStore

__all__ = [
    "AttachmentDescriptor",
    "AttachmentResult",
    "AttachmentStore",
    "ImageAttachment",
    "SavedFileAttachment",
    "TextAttachment",
    "classify_attachment",
    "sanitize_filename",
    "select_attachment",
    "validate_message_id",
]
