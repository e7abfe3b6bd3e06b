"""Decide how an attachment is surfaced to the agent: inline text, inline image, or saved file."""

import base64
import logging
from collections.abc import Callable, Sequence

from gmail_mcp.attachments.models import (
    AttachmentDescriptor,
    AttachmentResult,
    ImageAttachment,
    SavedFileAttachment,
    TextAttachment,
)
from gmail_mcp.attachments.store import AttachmentStore
from gmail_mcp.defaults import MAX_ATTACHMENT_TEXT_LENGTH, MAX_INLINE_IMAGE_BYTES
from gmail_mcp.exceptions import AttachmentIndexError
from gmail_mcp.protection.html import strip_html
from gmail_mcp.protection.sanitizer import truncate

logger = logging.getLogger(__name__)


def select_attachment(
    descriptors: Sequence[AttachmentDescriptor], index: int
) -> AttachmentDescriptor:
    """Return the descriptor at index.

    Raises:
        AttachmentIndexError: If index is outside [0, len(descriptors)).
    """
    if index < 0 or index >= len(descriptors):
        raise AttachmentIndexError(index, len(descriptors))
    return descriptors[index]


def decode_text(data: bytes, mime_type: str) -> str:
    """Decode a text attachment, converting HTML to plain text and truncating."""
    text = data.decode("utf-8", errors="replace")
    if mime_type.lower().startswith("text/html"):
        text = strip_html(text)
    return truncate(text, MAX_ATTACHMENT_TEXT_LENGTH)


def classify_attachment(
    message_id: str,
    descriptor: AttachmentDescriptor,
    fetch_bytes: Callable[[], bytes | None],
    store: AttachmentStore,
) -> AttachmentResult:
    """Fetch an attachment and produce exactly one result variant.

    text/* attachments are decoded and returned inline without touching the
    disk. Every other attachment is saved via the store. Images no larger
    than MAX_INLINE_IMAGE_BYTES are additionally returned as base64.

    Args:
        message_id: ID of the message the attachment belongs to.
        descriptor: Attachment metadata.
        fetch_bytes: Retrieves the attachment bytes. Called exactly once.
        store: Where non-text attachments are persisted.

    Returns:
        TextAttachment, ImageAttachment or SavedFileAttachment.

    Raises:
        OSError: If a non-text attachment cannot be written to disk.
    """
    common = {
        "message_id": message_id,
        "index": descriptor.index,
        "filename": descriptor.filename,
        "mime_type": descriptor.mime_type,
        "size_bytes": descriptor.size_bytes,
    }
    mime_type = descriptor.mime_type.lower()

    data = fetch_bytes()
    if data is None:
        logger.info(
            "Attachment %d of message %s has no data; using empty content",
            descriptor.index,
            message_id,
        )
        data = b""

    if mime_type.startswith("text/"):
        return TextAttachment(**common, content=decode_text(data, mime_type))

    saved_to = str(store.save(message_id, descriptor.filename, data))

    if mime_type.startswith("image/") and 0 < len(data) <= MAX_INLINE_IMAGE_BYTES:
        return ImageAttachment(
            **common,
            base64_data=base64.b64encode(data).decode("ascii"),
            saved_to=saved_to,
        )

    return SavedFileAttachment(**common, saved_to=saved_to)
