"""Shared fixtures for tool tests."""

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def default_max_results() -> Iterator[MagicMock]:
    with patch(
        "gmail_mcp.tools._arguments.get_default_max_results", return_value=10
    ) as mock_default:
        yield mock_default
