"""List labels MCP tool."""

from fastmcp.tools.tool import ToolResult

from gmail_mcp.tools._app import mcp
from gmail_mcp.tools._error_handler import handle_tool_errors
from gmail_mcp.tools._response import json_result
from gmail_mcp.tools._service import create_connector


@mcp.tool
@handle_tool_errors
def list_labels() -> ToolResult:
    """List all Gmail labels (inbox, sent, custom labels, etc.)."""
    with create_connector() as connector:
        labels = connector.list_labels()
    return json_result([label.to_record() for label in labels])
