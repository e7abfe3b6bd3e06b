"""Tests for Gmail connector."""

import base64
import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from gmail_mcp.attachments.models import AttachmentDescriptor
from gmail_mcp.email.connectors.config import GmailConfig
from gmail_mcp.email.connectors.gmail import (
    GmailConnector,
    _collect_attachments,
    _extract_body,
    _find_body,
    _get_header,
    authorize,
)
from gmail_mcp.exceptions import AuthorizationError, ConfigError


def _b64(text: str | bytes) -> str:
    raw = text.encode() if isinstance(text, str) else text
    return base64.urlsafe_b64encode(raw).decode().rstrip("=")


def _part(mime_type: str, data: str | None = None, filename: str = "", **body: object) -> dict:
    part_body: dict[str, object] = dict(body)
    if data is not None:
        part_body["data"] = _b64(data)
    return {"mimeType": mime_type, "filename": filename, "body": part_body}


class TestHelpers:
    def test_get_header_case_insensitive(self) -> None:
        headers = [{"name": "FROM", "value": "sender@example.com"}]
        assert _get_header(headers, "from") == "sender@example.com"

    def test_get_header_not_found(self) -> None:
        assert _get_header([{"name": "From", "value": "x"}], "Subject") == ""

    def test_find_body_single_part(self) -> None:
        assert _find_body(_part("text/plain", "Hello"), "text/plain") == "Hello"

    def test_find_body_mismatch(self) -> None:
        assert _find_body(_part("text/html", "<p>x</p>"), "text/plain") is None

    def test_find_body_deeply_nested(self) -> None:
        payload = {
            "mimeType": "multipart/mixed",
            "parts": [
                {
                    "mimeType": "multipart/alternative",
                    "parts": [_part("text/html", "<b>x</b>"), _part("text/plain", "Deep")],
                }
            ],
        }
        assert _find_body(payload, "text/plain") == "Deep"

    def test_find_body_skips_attachment_parts(self) -> None:
        payload = {
            "mimeType": "multipart/mixed",
            "parts": [_part("text/plain", "attached notes", filename="notes.txt")],
        }
        assert _find_body(payload, "text/plain") is None

    def test_find_body_handles_missing_body(self) -> None:
        assert _find_body({"mimeType": "text/plain"}, "text/plain") is None
        assert _find_body(None, "text/plain") is None

    def test_find_body_utf8(self) -> None:
        assert _find_body(_part("text/plain", "Café ☕"), "text/plain") == "Café ☕"

    def test_find_body_malformed_base64(self) -> None:
        part = {"mimeType": "text/plain", "filename": "", "body": {"data": "!!!"}}
        assert _find_body(part, "text/plain") is None

    def test_extract_body_prefers_plain(self) -> None:
        payload = {
            "mimeType": "multipart/alternative",
            "parts": [_part("text/html", "<p>HTML</p>"), _part("text/plain", "Plain")],
        }
        assert _extract_body(payload) == "Plain"

    def test_extract_body_falls_back_to_stripped_html(self) -> None:
        payload = _part("text/html", "<p>Hello</p><script>x()</script><p>there</p>")
        assert _extract_body(payload) == "Hello\nthere"

    def test_extract_body_empty_when_missing(self) -> None:
        assert _extract_body({"mimeType": "multipart/mixed", "parts": []}) == ""
        assert _extract_body(None) == ""

    def test_collect_attachments_depth_first(self) -> None:
        payload = {
            "mimeType": "multipart/mixed",
            "filename": "",
            "parts": [
                _part("text/plain", "Body"),
                {
                    "mimeType": "multipart/related",
                    "filename": "",
                    "parts": [
                        _part("image/png", filename="inline.png", attachmentId="a1", size=10),
                    ],
                },
                _part("application/pdf", filename="report.pdf", attachmentId="a2", size=2048),
            ],
        }
        attachments = _collect_attachments(payload, [])

        assert [(a.index, a.filename) for a in attachments] == [
            (0, "inline.png"),
            (1, "report.pdf"),
        ]
        assert attachments[1].mime_type == "application/pdf"
        assert attachments[1].size_bytes == 2048
        assert attachments[1].attachment_id == "a2"

    def test_collect_attachments_recurses_into_named_parts(self) -> None:
        payload = {
            "mimeType": "message/rfc822",
            "filename": "forwarded.eml",
            "body": {"size": 5},
            "parts": [_part("text/plain", "x", filename="inner.txt")],
        }
        attachments = _collect_attachments(payload, [])
        assert [a.filename for a in attachments] == ["forwarded.eml", "inner.txt"]

    def test_collect_attachments_ignores_empty_filenames(self) -> None:
        payload = {
            "mimeType": "multipart/mixed",
            "parts": [
                {"mimeType": "application/pdf", "filename": "", "body": {}},
                {"mimeType": "application/pdf", "body": {}},
            ],
        }
        assert _collect_attachments(payload, []) == []
        assert _collect_attachments(None, []) == []

    def test_collect_attachments_missing_mime_type(self) -> None:
        payload = {"filename": "blob", "body": {}}
        [descriptor] = _collect_attachments(payload, [])
        assert descriptor.mime_type == "application/octet-stream"
        assert descriptor.size_bytes == 0


@pytest.fixture
def config(tmp_path: Path) -> GmailConfig:
    return GmailConfig(
        credentials_file=tmp_path / "client_secret.json",
        token_file=tmp_path / "token.json",
    )


@pytest.fixture
def service() -> MagicMock:
    return MagicMock()


@pytest.fixture
def connector(config: GmailConfig, service: MagicMock) -> GmailConnector:
    c = GmailConnector(config)
    c._service = service
    return c


class TestConnect:
    def test_missing_token_raises(self, config: GmailConfig) -> None:
        with pytest.raises(AuthorizationError, match="gmail-mcp auth"):
            GmailConnector(config).connect()

    @patch("gmail_mcp.email.connectors.gmail.build")
    @patch("gmail_mcp.email.connectors.gmail.Credentials")
    def test_valid_token(
        self, mock_creds_class: MagicMock, mock_build: MagicMock, config: GmailConfig
    ) -> None:
        creds = MagicMock(expired=False, valid=True)
        mock_creds_class.from_authorized_user_file.return_value = creds

        connector = GmailConnector(config)
        connector.connect()

        mock_build.assert_called_once_with(
            "gmail", "v1", credentials=creds, cache_discovery=False
        )
        assert connector._service is mock_build.return_value

    @patch("gmail_mcp.email.connectors.gmail.build")
    @patch("gmail_mcp.email.connectors.gmail.Request")
    @patch("gmail_mcp.email.connectors.gmail.Credentials")
    def test_expired_token_refreshed_and_saved(
        self,
        mock_creds_class: MagicMock,
        mock_request: MagicMock,
        mock_build: MagicMock,
        config: GmailConfig,
    ) -> None:
        creds = MagicMock(expired=True, refresh_token="r")
        creds.to_json.return_value = json.dumps({"token": "new"})
        mock_creds_class.from_authorized_user_file.return_value = creds

        GmailConnector(config).connect()

        creds.refresh.assert_called_once_with(mock_request.return_value)
        assert json.loads(config.token_file.read_text()) == {"token": "new"}
        assert config.token_file.stat().st_mode & 0o777 == 0o600

    @patch("gmail_mcp.email.connectors.gmail.Credentials")
    def test_invalid_token_without_refresh(
        self, mock_creds_class: MagicMock, config: GmailConfig
    ) -> None:
        mock_creds_class.from_authorized_user_file.return_value = MagicMock(
            expired=True, refresh_token=None, valid=False
        )
        with pytest.raises(AuthorizationError):
            GmailConnector(config).connect()

    def test_disconnect(self, connector: GmailConnector) -> None:
        connector.disconnect()
        with pytest.raises(RuntimeError, match="Not connected"):
            connector.list_labels()


class TestAuthorize:
    def test_missing_client_secret(self, config: GmailConfig) -> None:
        with pytest.raises(ConfigError, match="client secret not found"):
            authorize(config)

    @patch("gmail_mcp.email.connectors.gmail.InstalledAppFlow")
    def test_runs_flow_and_saves_token(self, mock_flow_class: MagicMock, config: GmailConfig) -> None:
        config.credentials_file.write_text("{}")
        creds = MagicMock()
        creds.to_json.return_value = '{"token": "t"}'
        mock_flow_class.from_client_secrets_file.return_value.run_local_server.return_value = creds

        assert authorize(config) is creds
        assert config.token_file.read_text() == '{"token": "t"}'
        mock_flow_class.from_client_secrets_file.assert_called_once_with(
            str(config.credentials_file), ["https://www.googleapis.com/auth/gmail.readonly"]
        )


class TestListMessages:
    def _setup(self, service: MagicMock, messages: list[dict]) -> None:
        messages_api = service.users.return_value.messages.return_value
        messages_api.list.return_value.execute.return_value = {
            "messages": [{"id": m["id"]} for m in messages]
        }
        messages_api.get.return_value.execute.side_effect = messages

    def test_builds_summaries(self, connector: GmailConnector, service: MagicMock) -> None:
        self._setup(
            service,
            [
                {
                    "id": "m1",
                    "threadId": "t1",
                    "snippet": "Hello there",
                    "payload": {
                        "headers": [
                            {"name": "From", "value": "Alice <alice@example.com>"},
                            {"name": "To", "value": "me@example.com"},
                            {"name": "Subject", "value": "Hi"},
                            {"name": "Date", "value": "Mon, 1 Jan 2024 10:00:00 +0000"},
                        ]
                    },
                }
            ],
        )

        [summary] = connector.list_messages("is:unread", 5)

        assert summary.id == "m1"
        assert summary.thread_id == "t1"
        assert summary.sender == "Alice <alice@example.com>"
        assert summary.subject == "Hi"
        assert summary.snippet == "Hello there"
        messages_api = service.users.return_value.messages.return_value
        messages_api.list.assert_called_once_with(userId="me", maxResults=5, q="is:unread")
        messages_api.get.assert_called_once_with(
            userId="me",
            id="m1",
            format="metadata",
            metadataHeaders=["From", "To", "Subject", "Date"],
        )

    def test_missing_headers_are_empty(self, connector: GmailConnector, service: MagicMock) -> None:
        self._setup(service, [{"id": "m1", "payload": {}}])
        [summary] = connector.list_messages()
        assert summary.sender == ""
        assert summary.date == ""

    def test_no_messages(self, connector: GmailConnector, service: MagicMock) -> None:
        messages_api = service.users.return_value.messages.return_value
        messages_api.list.return_value.execute.return_value = {}
        assert connector.list_messages() == []

    @pytest.mark.parametrize(("requested", "sent"), [(0, 1), (-5, 1), (500, 100), (50, 50)])
    def test_max_results_clamped(
        self, connector: GmailConnector, service: MagicMock, requested: int, sent: int
    ) -> None:
        messages_api = service.users.return_value.messages.return_value
        messages_api.list.return_value.execute.return_value = {}
        connector.list_messages(None, requested)
        messages_api.list.assert_called_once_with(userId="me", maxResults=sent)

    def test_search_delegates(self, connector: GmailConnector, service: MagicMock) -> None:
        messages_api = service.users.return_value.messages.return_value
        messages_api.list.return_value.execute.return_value = {}
        connector.search_messages("from:bob", 3)
        messages_api.list.assert_called_once_with(userId="me", maxResults=3, q="from:bob")


class TestGetMessage:
    def test_full_message(self, connector: GmailConnector, service: MagicMock) -> None:
        messages_api = service.users.return_value.messages.return_value
        messages_api.get.return_value.execute.return_value = {
            "id": "m1",
            "threadId": "t1",
            "labelIds": ["INBOX", "UNREAD"],
            "payload": {
                "mimeType": "multipart/mixed",
                "headers": [
                    {"name": "From", "value": "a@x.com"},
                    {"name": "Subject", "value": "Report"},
                ],
                "parts": [
                    _part("text/plain", "See attached"),
                    _part("application/pdf", filename="report.pdf", attachmentId="a1", size=2048),
                ],
            },
        }

        email = connector.get_message("m1")

        messages_api.get.assert_called_once_with(userId="me", id="m1", format="full")
        assert email.sender == "a@x.com"
        assert email.to == ""
        assert email.body == "See attached"
        assert email.labels == ["INBOX", "UNREAD"]
        assert [a.filename for a in email.attachments] == ["report.pdf"]

    def test_message_without_payload(self, connector: GmailConnector, service: MagicMock) -> None:
        messages_api = service.users.return_value.messages.return_value
        messages_api.get.return_value.execute.return_value = {"id": "m1"}

        email = connector.get_message("m1")
        assert email.body == ""
        assert email.labels is None
        assert email.attachments == []


class TestListLabels:
    def test_labels(self, connector: GmailConnector, service: MagicMock) -> None:
        labels_api = service.users.return_value.labels.return_value
        labels_api.list.return_value.execute.return_value = {
            "labels": [
                {"id": "INBOX", "name": "INBOX", "type": "system"},
                {"id": "Label_1", "name": "Work", "type": "user"},
            ]
        }
        labels = connector.list_labels()
        assert [(label.id, label.name, label.type) for label in labels] == [
            ("INBOX", "INBOX", "system"),
            ("Label_1", "Work", "user"),
        ]


class TestAttachments:
    def test_get_attachments(self, connector: GmailConnector, service: MagicMock) -> None:
        messages_api = service.users.return_value.messages.return_value
        messages_api.get.return_value.execute.return_value = {
            "id": "m1",
            "payload": {
                "mimeType": "multipart/mixed",
                "parts": [_part("text/csv", "a,b", filename="data.csv")],
            },
        }
        [descriptor] = connector.get_attachments("m1")
        assert descriptor.filename == "data.csv"
        assert descriptor.data is not None

    def test_fetch_inline_data(self, connector: GmailConnector, service: MagicMock) -> None:
        descriptor = AttachmentDescriptor(index=0, filename="a.txt", data=_b64(b"inline"))
        assert connector.fetch_attachment_bytes("m1", descriptor) == b"inline"
        service.users.return_value.messages.return_value.attachments.assert_not_called()

    def test_fetch_by_attachment_id(self, connector: GmailConnector, service: MagicMock) -> None:
        attachments_api = service.users.return_value.messages.return_value.attachments.return_value
        attachments_api.get.return_value.execute.return_value = {"data": _b64(b"\x00\x01binary")}
        descriptor = AttachmentDescriptor(index=0, filename="a.bin", attachment_id="att-1")

        assert connector.fetch_attachment_bytes("m1", descriptor) == b"\x00\x01binary"
        attachments_api.get.assert_called_once_with(userId="me", messageId="m1", id="att-1")

    def test_fetch_without_data_returns_none(
        self, connector: GmailConnector, service: MagicMock
    ) -> None:
        attachments_api = service.users.return_value.messages.return_value.attachments.return_value
        attachments_api.get.return_value.execute.return_value = {}
        descriptor = AttachmentDescriptor(index=0, filename="a.bin", attachment_id="att-1")
        assert connector.fetch_attachment_bytes("m1", descriptor) is None

    def test_fetch_without_reference_returns_none(self, connector: GmailConnector) -> None:
        descriptor = AttachmentDescriptor(index=0, filename="a.bin")
        assert connector.fetch_attachment_bytes("m1", descriptor) is None

    def test_fetch_malformed_data_returns_none(self, connector: GmailConnector) -> None:
        descriptor = AttachmentDescriptor(index=0, filename="a.bin", data="!!!")
        assert connector.fetch_attachment_bytes("m1", descriptor) is None
