"""Shared FastMCP application instance."""

from fastmcp import FastMCP

# Arguments are coerced by pydantic, so "3" is accepted for an int parameter
mcp = FastMCP(name="gmail-mcp", strict_input_validation=False)
