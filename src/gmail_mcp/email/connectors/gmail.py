"""Gmail API connector for reading emails."""

from __future__ import annotations

import base64
import binascii
import logging
import os
from typing import Any

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from gmail_mcp.attachments.models import AttachmentDescriptor
from gmail_mcp.defaults import MAX_RESULTS_LIMIT
from gmail_mcp.email.connectors.base import BaseConnector
from gmail_mcp.email.connectors.config import GmailConfig
from gmail_mcp.email.models import Email, EmailSummary, Label
from gmail_mcp.exceptions import AuthorizationError, ConfigError
from gmail_mcp.protection.html import strip_html

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/gmail.readonly"]

_METADATA_HEADERS = ["From", "To", "Subject", "Date"]


def _get_header(headers: list[dict[str, str]], name: str) -> str:
    """Get a header value by name (case-insensitive)."""
    lower_name = name.lower()
    for h in headers:
        if h.get("name", "").lower() == lower_name:
            return h.get("value", "")
    return ""


def _decode_base64url(data: str) -> bytes:
    """Decode Gmail's base64url encoding, tolerating missing padding."""
    return base64.urlsafe_b64decode(data + "=" * (-len(data) % 4))


def _find_body(part: dict[str, Any] | None, mime_type: str) -> str | None:
    """Depth-first search for the first non-attachment part of mime_type with inline data."""
    if not part:
        return None

    if not part.get("filename") and part.get("mimeType") == mime_type:
        data = (part.get("body") or {}).get("data")
        if isinstance(data, str) and data:
            try:
                return _decode_base64url(data).decode("utf-8", errors="replace")
            except (binascii.Error, ValueError):
                logger.warning("Skipping body part with malformed base64 data")

    for child in part.get("parts") or []:
        found = _find_body(child, mime_type)
        if found is not None:
            return found
    return None


def _extract_body(payload: dict[str, Any] | None) -> str:
    """Return the plain text body, falling back to stripped HTML, or ""."""
    plain = _find_body(payload, "text/plain")
    if plain is not None:
        return plain
    html = _find_body(payload, "text/html")
    if html is not None:
        return strip_html(html)
    return ""


def _collect_attachments(
    part: dict[str, Any] | None, result: list[AttachmentDescriptor]
) -> list[AttachmentDescriptor]:
    """Collect parts with a filename in depth-first pre-order, assigning indexes."""
    if not part:
        return result

    filename = part.get("filename")
    if filename:
        body = part.get("body") or {}
        size = body.get("size")
        result.append(
            AttachmentDescriptor(
                index=len(result),
                filename=filename,
                mime_type=part.get("mimeType") or "application/octet-stream",
                size_bytes=size if isinstance(size, int) else 0,
                data=body.get("data"),
                attachment_id=body.get("attachmentId"),
            )
        )

    for child in part.get("parts") or []:
        _collect_attachments(child, result)
    return result


def _write_token(config: GmailConfig, creds: Credentials) -> None:
    """Save token with restrictive permissions (owner-only read/write)."""
    token_file = config.token_file
    token_file.parent.mkdir(parents=True, exist_ok=True, mode=0o700)
    fd = os.open(token_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w") as f:
        f.write(creds.to_json())


def authorize(config: GmailConfig) -> Credentials:
    """Run the interactive OAuth flow and store the resulting token.

    Raises:
        ConfigError: If the OAuth client secret file does not exist.
    """
    if not config.credentials_file.exists():
        raise ConfigError(
            f"OAuth client secret not found at {config.credentials_file}. "
            "Download it from Google Cloud Console."
        )

    flow = InstalledAppFlow.from_client_secrets_file(str(config.credentials_file), SCOPES)
    creds = flow.run_local_server(port=0)
    _write_token(config, creds)
    logger.info("Authorization successful, token saved to %s", config.token_file)
    return creds


class GmailConnector(BaseConnector):
    """Connector for reading emails via the Gmail API (read-only scope)."""

    def __init__(self, config: GmailConfig) -> None:
        self.config = config
        self._service: Any = None
        self._creds: Credentials | None = None

    def connect(self) -> None:
        """Load the stored token, refreshing it if expired, and build the service.

        Raises:
            AuthorizationError: If no usable token is stored.
        """
        try:
            creds = Credentials.from_authorized_user_file(  # type: ignore[no-untyped-call]
                str(self.config.token_file), SCOPES
            )
        except (FileNotFoundError, ValueError) as e:
            raise AuthorizationError(
                "No stored credentials found. Run 'gmail-mcp auth' first."
            ) from e

        if creds.expired and creds.refresh_token:
            creds.refresh(Request())
            _write_token(self.config, creds)
        elif not creds.valid:
            raise AuthorizationError("Stored credentials are invalid. Run 'gmail-mcp auth' again.")

        self._creds = creds
        self._service = build("gmail", "v1", credentials=creds, cache_discovery=False)

    def disconnect(self) -> None:
        """Close the Gmail API service."""
        self._service = None
        self._creds = None

    def _get_service(self) -> Any:
        if not self._service:
            raise RuntimeError("Not connected. Call connect() first.")
        return self._service

    def list_messages(self, query: str | None = None, max_results: int = 10) -> list[EmailSummary]:
        """List message summaries using Gmail search syntax."""
        service = self._get_service()
        max_results = max(1, min(max_results, MAX_RESULTS_LIMIT))

        params: dict[str, Any] = {"userId": "me", "maxResults": max_results}
        if query and query.strip():
            params["q"] = query

        response = service.users().messages().list(**params).execute()
        messages: list[dict[str, str]] = response.get("messages") or []

        summaries = []
        for msg_ref in messages:
            msg = (
                service.users()
                .messages()
                .get(
                    userId="me",
                    id=msg_ref["id"],
                    format="metadata",
                    metadataHeaders=_METADATA_HEADERS,
                )
                .execute()
            )
            headers: list[dict[str, str]] = (msg.get("payload") or {}).get("headers") or []

            summaries.append(
                EmailSummary(
                    id=msg["id"],
                    thread_id=msg.get("threadId"),
                    snippet=msg.get("snippet"),
                    sender=_get_header(headers, "From"),
                    to=_get_header(headers, "To"),
                    subject=_get_header(headers, "Subject"),
                    date=_get_header(headers, "Date"),
                )
            )
        return summaries

    def _get_full_message(self, message_id: str) -> dict[str, Any]:
        service = self._get_service()
        msg: dict[str, Any] = (
            service.users().messages().get(userId="me", id=message_id, format="full").execute()
        )
        return msg

    def get_message(self, message_id: str) -> Email:
        """Fetch full message content by ID."""
        msg = self._get_full_message(message_id)
        payload: dict[str, Any] = msg.get("payload") or {}
        headers: list[dict[str, str]] = payload.get("headers") or []

        return Email(
            id=msg["id"],
            thread_id=msg.get("threadId"),
            sender=_get_header(headers, "From"),
            to=_get_header(headers, "To"),
            subject=_get_header(headers, "Subject"),
            date=_get_header(headers, "Date"),
            body=_extract_body(payload),
            labels=msg.get("labelIds"),
            attachments=_collect_attachments(payload, []),
        )

    def list_labels(self) -> list[Label]:
        """List Gmail labels."""
        service = self._get_service()
        results = service.users().labels().list(userId="me").execute()
        labels: list[dict[str, str]] = results.get("labels") or []
        return [
            Label(id=label["id"], name=label.get("name", label["id"]), type=label.get("type"))
            for label in labels
        ]

    def get_attachments(self, message_id: str) -> list[AttachmentDescriptor]:
        """Return attachment descriptors for a message."""
        msg = self._get_full_message(message_id)
        return _collect_attachments(msg.get("payload"), [])

    def fetch_attachment_bytes(
        self, message_id: str, descriptor: AttachmentDescriptor
    ) -> bytes | None:
        """Fetch attachment bytes from inline data or the attachments endpoint."""
        data = descriptor.data
        if not data and descriptor.attachment_id:
            service = self._get_service()
            fetched = (
                service.users()
                .messages()
                .attachments()
                .get(userId="me", messageId=message_id, id=descriptor.attachment_id)
                .execute()
            )
            data = fetched.get("data")

        if not data:
            return None
        try:
            return _decode_base64url(data)
        except (binascii.Error, ValueError):
            logger.warning(
                "Attachment %d of message %s has malformed base64 data",
                descriptor.index,
                message_id,
            )
            return None
