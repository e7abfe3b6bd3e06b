"""Filename and path-component sanitization for saved attachments."""

import re

from gmail_mcp.defaults import FALLBACK_FILENAME, MAX_FILENAME_LENGTH
from gmail_mcp.exceptions import InvalidArgumentError

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9._-]")


def sanitize_filename(filename: str | None) -> str:
    """Reduce an attacker-controlled filename to a safe, bounded name.

    Directory components and leading dots are removed, characters outside
    [a-zA-Z0-9._-] are replaced with "_", and the result is limited to
    MAX_FILENAME_LENGTH characters. Never fails: anything that sanitizes to
    an empty name becomes FALLBACK_FILENAME. The function is idempotent.

    Args:
        filename: Raw filename from the email, possibly None.

    Returns:
        Filename that is safe to join onto a directory path.
    """
    if filename is None or not filename.strip():
        return FALLBACK_FILENAME

    name = re.split(r"[/\\]", filename)[-1]
    name = name.lstrip(".")
    name = _UNSAFE_CHARS.sub("_", name)
    name = name[:MAX_FILENAME_LENGTH]

    return name or FALLBACK_FILENAME


def validate_message_id(message_id: str) -> str:
    """Reject message IDs that could escape the attachments directory.

    Raises:
        InvalidArgumentError: If the ID is blank or contains a path separator or "..".
    """
    if not message_id or not message_id.strip():
        raise InvalidArgumentError("'message_id' is required")
    if "/" in message_id or "\\" in message_id or ".." in message_id:
        raise InvalidArgumentError("Invalid message_id")
    return message_id
