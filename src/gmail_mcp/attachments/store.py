"""On-disk persistence for fetched attachments."""

import logging
from pathlib import Path

from gmail_mcp.attachments.filenames import sanitize_filename, validate_message_id

logger = logging.getLogger(__name__)


class AttachmentStore:
    """Saves attachment bytes under <base_dir>/<message_id>/<sanitized filename>.

    The base directory is restricted to owner-only access where the
    filesystem supports POSIX permissions.
    """

    def __init__(self, base_dir: Path) -> None:
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, message_id: str, filename: str | None) -> Path:
        """Return the path an attachment would be saved to."""
        validate_message_id(message_id)
        return self._base_dir / message_id / sanitize_filename(filename)

    def save(self, message_id: str, filename: str | None, data: bytes) -> Path:
        """Write attachment bytes to disk, overwriting any previous copy.

        Args:
            message_id: Gmail message ID, used as the subdirectory name.
            filename: Untrusted filename from the email.
            data: Raw attachment bytes.

        Returns:
            Path of the written file.

        Raises:
            InvalidArgumentError: If message_id is not a safe path component.
            OSError: If the directory or file cannot be written.
        """
        path = self.path_for(message_id, filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._restrict_permissions()

        path.write_bytes(data)
        logger.debug("Saved attachment (message=%s, bytes=%d) to %s", message_id, len(data), path)
        return path

    def _restrict_permissions(self) -> None:
        try:
            self._base_dir.chmod(0o700)
        except (OSError, NotImplementedError):
            # Non-POSIX filesystem
            logger.debug("Could not restrict permissions on %s", self._base_dir)
