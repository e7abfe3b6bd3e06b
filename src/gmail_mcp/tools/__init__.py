"""MCP tools, registered on the shared FastMCP instance at import time."""

# isort: skip_file

from gmail_mcp.tools._app import mcp

# Import tool modules to trigger registration via decorators
from gmail_mcp.tools import get_attachment as _get_attachment  # noqa: F401
from gmail_mcp.tools import list_emails as _list_emails  # noqa: F401
from gmail_mcp.tools import list_labels as _list_labels  # noqa: F401
from gmail_mcp.tools import read_email as _read_email  # noqa: F401
from gmail_mcp.tools import search_emails as _search_emails  # noqa: F401

__all__ = ["mcp"]
