"""Connector configuration models."""

from pathlib import Path

from pydantic import BaseModel


class GmailConfig(BaseModel):
    """Gmail API OAuth configuration.

    Attributes:
        credentials_file: OAuth client secret downloaded from Google Cloud Console.
        token_file: Where the authorized user token is stored.
    """

    credentials_file: Path
    token_file: Path
