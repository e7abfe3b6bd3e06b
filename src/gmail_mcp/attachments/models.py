"""Attachment descriptor and classification result models."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class AttachmentDescriptor(BaseModel):
    """Metadata for one attachment part of a message.

    Attributes:
        index: Zero-based position in depth-first order over the part tree.
        filename: Filename as sent by the sender (untrusted).
        mime_type: Declared MIME type.
        size_bytes: Declared size in bytes. Advisory only.
        data: Inline base64url payload, when the part carries its body.
        attachment_id: Reference for fetching the body separately.
    """

    index: int
    filename: str
    mime_type: str = "application/octet-stream"
    size_bytes: int = 0
    data: str | None = Field(default=None, repr=False)
    attachment_id: str | None = None

    def to_record(self) -> dict[str, object]:
        """Return the metadata shown to the agent in read_email output."""
        return {
            "index": self.index,
            "filename": self.filename,
            "mimeType": self.mime_type,
            "sizeBytes": self.size_bytes,
        }


class _AttachmentResultBase(BaseModel):
    message_id: str
    index: int
    filename: str
    mime_type: str
    size_bytes: int


class TextAttachment(_AttachmentResultBase):
    """Attachment decoded to text and returned inline."""

    kind: Literal["text"] = "text"
    content: str


class ImageAttachment(_AttachmentResultBase):
    """Image returned inline as base64 and also saved to disk."""

    kind: Literal["image"] = "image"
    base64_data: str = Field(repr=False)
    saved_to: str


class SavedFileAttachment(_AttachmentResultBase):
    """Binary attachment saved to disk; only the path is returned."""

    kind: Literal["saved_file"] = "saved_file"
    saved_to: str


AttachmentResult = Annotated[
    TextAttachment | ImageAttachment | SavedFileAttachment,
    Field(discriminator="kind"),
]
