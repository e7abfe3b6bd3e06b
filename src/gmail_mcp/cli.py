"""CLI entry point for gmail-mcp."""

import argparse
import sys

from gmail_mcp.exceptions import ConfigError


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="gmail-mcp",
        description="Gmail MCP server with prompt injection boundaries for untrusted content",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.add_parser("serve", help="Run the MCP server over stdio (default)")
    subparsers.add_parser("auth", help="Authorize Gmail access and store the OAuth token")

    args = parser.parse_args(argv)

    try:
        if args.command == "auth":
            return _handle_auth()
        return _handle_serve()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _handle_auth() -> int:
    """Run the OAuth flow."""
    from gmail_mcp.config import get_settings_eager
    from gmail_mcp.email.connectors.gmail import authorize

    settings = get_settings_eager()
    authorize(settings.gmail)
    print("Authorization successful. You can now start the MCP server.", file=sys.stderr)
    return 0


def _handle_serve() -> int:
    """Run the MCP server until the client disconnects."""
    from gmail_mcp.server import run_server

    run_server()
    return 0


if __name__ == "__main__":
    sys.exit(main())
