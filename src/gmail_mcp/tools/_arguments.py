"""Validation helpers for tool arguments."""

from gmail_mcp.defaults import MAX_RESULTS_LIMIT
from gmail_mcp.exceptions import InvalidArgumentError
from gmail_mcp.tools._service import get_default_max_results


def require_text(value: str | None, name: str) -> str:
    """Return value, or raise if it is missing or blank."""
    if value is None or not value.strip():
        raise InvalidArgumentError(f"'{name}' is required")
    return value


def resolve_max_results(max_results: int | None) -> int:
    """Apply the configured default and clamp to [1, MAX_RESULTS_LIMIT]."""
    if max_results is None:
        max_results = get_default_max_results()
    return max(1, min(max_results, MAX_RESULTS_LIMIT))
