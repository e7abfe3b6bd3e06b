"""Per-response content boundary tokens."""

import secrets
from collections.abc import Callable

from gmail_mcp.defaults import BOUNDARY_PREFIX, BOUNDARY_RANDOM_BYTES


def generate_boundary(random_bytes: Callable[[int], bytes] = secrets.token_bytes) -> str:
    """Generate a fresh, unguessable boundary token.

    The token is a fixed prefix followed by 16 hex characters drawn from
    the operating system's CSPRNG. A new token must be generated for every
    response; tokens are never derived from message content.

    Args:
        random_bytes: Source of random bytes. Defaults to secrets.token_bytes.

    Returns:
        Boundary string, e.g. "----UNTRUSTED_CONTENT_3f9a0c1d2e4b5a69".
    """
    return BOUNDARY_PREFIX + random_bytes(BOUNDARY_RANDOM_BYTES).hex()
