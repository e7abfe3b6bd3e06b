"""Assemble tool results from sanitized records and attachment results.

Any response carrying untrusted content starts with the security context
naming a freshly generated boundary, followed by the sanitized JSON.
Responses without untrusted content are plain JSON.
"""

import json
from typing import Any, assert_never

from fastmcp.tools.tool import ToolResult
from mcp.types import ImageContent, TextContent

from gmail_mcp.attachments.models import (
    AttachmentResult,
    ImageAttachment,
    SavedFileAttachment,
    TextAttachment,
)
from gmail_mcp.protection.boundary import generate_boundary
from gmail_mcp.protection.preamble import build_security_context
from gmail_mcp.protection.sanitizer import sanitize, sanitize_record


def to_json(data: Any) -> str:
    """Serialize data as pretty-printed JSON."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def _text(text: str) -> TextContent:
    return TextContent(type="text", text=text)


def email_result(data: Any, boundary: str | None = None) -> ToolResult:
    """Build a two-part result: security context, then sanitized JSON.

    Args:
        data: A message record or a list of records.
        boundary: Boundary to use. A fresh one is generated when omitted.
    """
    boundary = boundary or generate_boundary()
    sanitized = sanitize(data, boundary)
    return ToolResult(content=[_text(build_security_context(boundary)), _text(to_json(sanitized))])


def json_result(data: Any) -> ToolResult:
    """Build a single-part result for data without untrusted content."""
    return ToolResult(content=[_text(to_json(data))])


def attachment_record(result: AttachmentResult) -> dict[str, Any]:
    """Return the metadata record for an attachment result (without the image payload)."""
    record: dict[str, Any] = {
        "messageId": result.message_id,
        "index": result.index,
        "filename": result.filename,
        "mimeType": result.mime_type,
        "sizeBytes": result.size_bytes,
    }
    if isinstance(result, TextAttachment):
        record["content"] = result.content
    elif isinstance(result, ImageAttachment):
        record["savedTo"] = result.saved_to
    elif isinstance(result, SavedFileAttachment):
        record["savedTo"] = result.saved_to
        record["content"] = f"Binary attachment saved to: {result.saved_to}"
    else:
        assert_never(result)
    return record


def attachment_result(result: AttachmentResult, boundary: str | None = None) -> ToolResult:
    """Build the result for get_attachment.

    Text and saved-file attachments use the two-part layout. Images add a
    third part with the inline image, which is not subject to wrapping.
    """
    if not isinstance(result, ImageAttachment):
        return email_result(attachment_record(result), boundary)

    boundary = boundary or generate_boundary()
    metadata = sanitize_record(attachment_record(result), boundary)
    return ToolResult(
        content=[
            _text(build_security_context(boundary)),
            _text(to_json(metadata)),
            ImageContent(type="image", data=result.base64_data, mimeType=result.mime_type),
        ]
    )
