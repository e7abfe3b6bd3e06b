"""A Gmail MCP server that wraps untrusted email content in unguessable boundaries."""

__version__ = "0.1.0"

from gmail_mcp.attachments import (  # noqa: E402
    AttachmentDescriptor,
    AttachmentStore,
    ImageAttachment,
    SavedFileAttachment,
    TextAttachment,
    classify_attachment,
    sanitize_filename,
)
from gmail_mcp.protection import (  # noqa: E402
    UNTRUSTED_FIELDS,
    build_security_context,
    generate_boundary,
    sanitize,
    sanitize_record,
    sanitize_records,
)

__all__ = [
    "UNTRUSTED_FIELDS",
    "AttachmentDescriptor",
    "AttachmentStore",
    "ImageAttachment",
    "SavedFileAttachment",
    "TextAttachment",
    "build_security_context",
    "classify_attachment",
    "generate_boundary",
    "sanitize",
    "sanitize_record",
    "sanitize_records",
    "sanitize_filename",
]
