"""Boundary wrapping for untrusted email fields."""

from collections.abc import Mapping, Sequence
from typing import Any

from gmail_mcp.defaults import MAX_BODY_LENGTH, TRUNCATION_MARKER

# Closed set; any other field is passed through unwrapped.
UNTRUSTED_FIELDS: frozenset[str] = frozenset(
    {"from", "subject", "snippet", "body", "filename", "content"}
)


def truncate(text: str, max_length: int) -> str:
    """Cut text to max_length characters, appending a marker if anything was removed."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + TRUNCATION_MARKER


def wrap(value: str, boundary: str) -> str:
    """Enclose a value between two boundary lines."""
    return f"{boundary}\n{value}\n{boundary}"


def _wrap_untrusted(record: dict[str, Any], boundary: str) -> None:
    for field in UNTRUSTED_FIELDS:
        value = record.get(field)
        if isinstance(value, str):
            record[field] = wrap(value, boundary)


def sanitize_record(record: Mapping[str, Any], boundary: str) -> dict[str, Any]:
    """Return a copy of a message record with its untrusted fields wrapped.

    The body is truncated to MAX_BODY_LENGTH before wrapping. Nested
    attachment metadata gets its untrusted fields wrapped with the same
    boundary but is never truncated. The input record is not modified.

    Args:
        record: Message record (field name to value).
        boundary: Boundary token for the current response.

    Returns:
        New record with untrusted string fields wrapped.
    """
    sanitized = dict(record)

    body = sanitized.get("body")
    if isinstance(body, str):
        sanitized["body"] = truncate(body, MAX_BODY_LENGTH)

    _wrap_untrusted(sanitized, boundary)

    attachments = sanitized.get("attachments")
    if isinstance(attachments, list):
        sanitized_attachments = []
        for item in attachments:
            if isinstance(item, Mapping):
                entry = dict(item)
                _wrap_untrusted(entry, boundary)
                sanitized_attachments.append(entry)
        sanitized["attachments"] = sanitized_attachments

    return sanitized


def sanitize_records(records: Sequence[Mapping[str, Any]], boundary: str) -> list[dict[str, Any]]:
    """Sanitize a list of records, sharing one boundary across all of them."""
    return [sanitize_record(record, boundary) for record in records]


def sanitize(data: Any, boundary: str) -> Any:
    """Sanitize a single record or a list of records.

    Values that are neither are returned unchanged.
    """
    if isinstance(data, Mapping):
        return sanitize_record(data, boundary)
    if isinstance(data, list):
        return sanitize_records(data, boundary)
    return data
