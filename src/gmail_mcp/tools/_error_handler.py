"""Common error handling for MCP tools."""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from fastmcp.exceptions import ToolError
from google.auth.exceptions import RefreshError, TransportError
from googleapiclient.errors import HttpError

from gmail_mcp.exceptions import AuthorizationError, ConfigError, InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _describe_http_error(error: HttpError) -> str:
    status = getattr(error.resp, "status", None)
    reason = error.reason or str(error)
    if status == 404:
        return "Gmail API error: message or attachment not found"
    if status is not None:
        return f"Gmail API error ({status}): {reason}"
    return f"Gmail API error: {reason}"


def handle_tool_errors(func: Callable[..., T]) -> Callable[..., T]:
    """Wrap an MCP tool function so failures become error results.

    Every exception is re-raised as a ToolError, which FastMCP reports to
    the caller as an isError result carrying the message.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return func(*args, **kwargs)
        except ToolError:
            raise
        except InvalidArgumentError as e:
            raise ToolError(f"Invalid input: {e}") from e
        except AuthorizationError as e:
            raise ToolError(f"Authorization error: {e}") from e
        except ConfigError as e:
            raise ToolError(f"Configuration error: {e}") from e
        except RefreshError as e:
            logger.warning("Token refresh failed in tool %s: %s", func.__name__, e)
            raise ToolError(
                "Gmail authorization expired or was revoked. Run 'gmail-mcp auth' again."
            ) from e
        except HttpError as e:
            logger.warning("Gmail API error in tool %s: %s", func.__name__, e)
            raise ToolError(_describe_http_error(e)) from e
        except TransportError as e:
            logger.warning("Transport error in tool %s: %s", func.__name__, e)
            raise ToolError(f"Could not reach Gmail: {e}") from e
        except ValueError as e:
            raise ToolError(f"Invalid input: {e}") from e
        except TimeoutError as e:
            raise ToolError("Connection timed out. Gmail did not respond.") from e
        except ConnectionError as e:
            raise ToolError(f"Could not connect to Gmail: {e}") from e
        except OSError as e:
            logger.warning("I/O error in tool %s: %s", func.__name__, e)
            raise ToolError(f"I/O error: {e}") from e
        except Exception as e:
            logger.exception("Unexpected error in tool %s", func.__name__)
            raise ToolError(
                "An unexpected error occurred. Check the server logs for details."
            ) from e

    return wrapper
