"""Tests for the command line interface."""

from unittest.mock import patch

import pytest

from gmail_mcp.cli import main
from gmail_mcp.exceptions import ConfigError


class TestCli:
    def test_serve_is_default(self) -> None:
        with patch("gmail_mcp.server.run_server") as mock_run:
            assert main([]) == 0
        mock_run.assert_called_once_with()

    def test_serve(self) -> None:
        with patch("gmail_mcp.server.run_server") as mock_run:
            assert main(["serve"]) == 0
        mock_run.assert_called_once_with()

    def test_auth(self, capsys: pytest.CaptureFixture[str]) -> None:
        with (
            patch("gmail_mcp.config.get_settings_eager") as mock_settings,
            patch("gmail_mcp.email.connectors.gmail.authorize") as mock_authorize,
        ):
            assert main(["auth"]) == 0

        mock_authorize.assert_called_once_with(mock_settings.return_value.gmail)
        assert "Authorization successful" in capsys.readouterr().err

    def test_config_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch(
            "gmail_mcp.config.get_settings_eager",
            side_effect=ConfigError("Invalid YAML syntax in gmail-mcp.yaml"),
        ):
            assert main(["auth"]) == 1

        assert capsys.readouterr().err == "Error: Invalid YAML syntax in gmail-mcp.yaml\n"

    def test_serve_config_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("gmail_mcp.server.run_server", side_effect=ConfigError("bad config")):
            assert main(["serve"]) == 1
        assert "Error: bad config" in capsys.readouterr().err

    def test_unknown_command(self) -> None:
        with pytest.raises(SystemExit):
            main(["delete-everything"])
