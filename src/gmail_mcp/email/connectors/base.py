"""Abstract base class for email connectors."""

from abc import ABC, abstractmethod
from types import TracebackType

from gmail_mcp.attachments.models import AttachmentDescriptor
from gmail_mcp.email.models import Email, EmailSummary, Label


class BaseConnector(ABC):
    """Abstract base class defining the interface for email connectors."""

    @abstractmethod
    def connect(self) -> None:
        """Establish connection to the email service."""
        ...

    @abstractmethod
    def disconnect(self) -> None:
        """Release the connection to the email service."""
        ...

    @abstractmethod
    def list_messages(self, query: str | None = None, max_results: int = 10) -> list[EmailSummary]:
        """List message summaries, newest first.

        Args:
            query: Optional provider search query.
            max_results: Maximum number of messages to return.

        Returns:
            List of EmailSummary objects.
        """
        ...

    def search_messages(self, query: str, max_results: int = 10) -> list[EmailSummary]:
        """Search messages. Defaults to list_messages with the query."""
        return self.list_messages(query, max_results)

    @abstractmethod
    def get_message(self, message_id: str) -> Email:
        """Fetch full message content, including attachment metadata."""
        ...

    @abstractmethod
    def list_labels(self) -> list[Label]:
        """List all labels/folders of the mailbox."""
        ...

    @abstractmethod
    def get_attachments(self, message_id: str) -> list[AttachmentDescriptor]:
        """Return descriptors for every attachment of a message, in index order."""
        ...

    @abstractmethod
    def fetch_attachment_bytes(
        self, message_id: str, descriptor: AttachmentDescriptor
    ) -> bytes | None:
        """Fetch the raw bytes of one attachment.

        Returns:
            Attachment bytes, or None if the service has no data for it.
        """
        ...

    def __enter__(self) -> "BaseConnector":
        """Context manager entry - connect to the service."""
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Context manager exit - disconnect from the service."""
        self.disconnect()
