"""MCP server entry point for gmail-mcp."""

import logging
import sys

from gmail_mcp.config import Settings
from gmail_mcp.tools import mcp
from gmail_mcp.tools._service import get_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log output to stderr; stdout carries the MCP protocol."""
    logging.basicConfig(
        stream=sys.stderr,
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_server(settings: Settings | None = None) -> None:
    """Run the MCP server over stdio.

    Raises:
        ConfigError: If configuration is invalid.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    logger.info("Gmail MCP server starting (attachments in %s)", settings.attachments_dir)
    mcp.run()
    logger.info("Gmail MCP server stopped")


def main() -> None:
    """Entry point for the MCP server."""
    run_server()


if __name__ == "__main__":
    main()
