"""Email data models.

Models serialize to the record shape handed to the sanitizer: camelCase
identifiers and a "from" key for the sender.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from gmail_mcp.attachments.models import AttachmentDescriptor


class Label(BaseModel):
    """Gmail label."""

    id: str
    name: str
    type: str | None = None

    def to_record(self) -> dict[str, Any]:
        return self.model_dump()


class EmailSummary(BaseModel):
    """Lightweight email representation for list and search views."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    thread_id: str | None = Field(default=None, alias="threadId")
    snippet: str | None = None
    sender: str = Field(default="", alias="from")
    to: str = ""
    subject: str = ""
    date: str = ""

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class Email(BaseModel):
    """Full email content."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    thread_id: str | None = Field(default=None, alias="threadId")
    sender: str = Field(default="", alias="from")
    to: str = ""
    subject: str = ""
    date: str = ""
    body: str = ""
    labels: list[str] | None = None
    attachments: list[AttachmentDescriptor] = []

    def to_record(self) -> dict[str, Any]:
        """Return the message record; labels and attachments appear only when present."""
        record = self.model_dump(by_alias=True, exclude={"labels", "attachments"})
        if self.labels is not None:
            record["labels"] = list(self.labels)
        if self.attachments:
            record["attachments"] = [a.to_record() for a in self.attachments]
        return record
