"""Tests for DocsApi, the requests-based API client."""

from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import requests

from docs_browser.client.api import DocsApi
from docs_browser.errors import NetworkFailure


@pytest.fixture
def api_with_mock_session() -> tuple[DocsApi, MagicMock]:
    """Create a DocsApi with a mocked requests.Session."""
    with patch("docs_browser.client.api.requests.Session") as mock_session_cls:
        mock_session = MagicMock()
        mock_session_cls.return_value = mock_session
        api = DocsApi("http://docs.test/")
    return api, mock_session


def _make_response(data: Any, *, status: int = 200) -> MagicMock:
    """Create a mock HTTP response with given JSON data."""
    response = MagicMock()
    response.ok = 200 <= status < 300
    response.status_code = status
    response.json.return_value = data
    return response


def test_navigation_parses_tree(api_with_mock_session: tuple[DocsApi, MagicMock]) -> None:
    api, session = api_with_mock_session
    session.get.return_value = _make_response(
        [
            {
                "name": "guides",
                "type": "directory",
                "path": "guides",
                "children": [{"name": "intro", "type": "file", "path": "guides/intro"}],
            }
        ]
    )

    tree = api.navigation()

    assert session.get.call_args.args[0] == "http://docs.test/api/navigation"
    assert tree[0].is_directory
    assert tree[0].children[0].path == "guides/intro"


def test_content_quotes_path(api_with_mock_session: tuple[DocsApi, MagicMock]) -> None:
    api, session = api_with_mock_session
    session.get.return_value = _make_response(
        {"title": "Hello", "content": "<h1>Hello</h1>", "path": "my docs/hello"}
    )

    record = api.content("my docs/hello")

    assert session.get.call_args.args[0] == "http://docs.test/api/content/my%20docs/hello"
    assert record.title == "Hello"


def test_search_sends_query_param(api_with_mock_session: tuple[DocsApi, MagicMock]) -> None:
    api, session = api_with_mock_session
    session.get.return_value = _make_response(
        [{"file": "a", "line": 2, "content": "x y", "title": "A"}]
    )

    hits = api.search("x y")

    assert session.get.call_args.kwargs["params"] == {"q": "x y"}
    assert hits[0].line == 2


def test_http_error_raises_network_failure(
    api_with_mock_session: tuple[DocsApi, MagicMock],
) -> None:
    api, session = api_with_mock_session
    session.get.return_value = _make_response({"error": "File not found"}, status=404)

    with pytest.raises(NetworkFailure) as exc_info:
        api.content("missing")
    assert exc_info.value.status == 404


def test_connection_error_raises_network_failure(
    api_with_mock_session: tuple[DocsApi, MagicMock],
) -> None:
    api, session = api_with_mock_session
    session.get.side_effect = requests.ConnectionError("refused")

    with pytest.raises(NetworkFailure, match="refused"):
        api.navigation()
    assert session.get.call_count == 1


def test_invalid_json_raises_network_failure(
    api_with_mock_session: tuple[DocsApi, MagicMock],
) -> None:
    api, session = api_with_mock_session
    response = _make_response(None)
    response.json.side_effect = ValueError("not json")
    session.get.return_value = response

    with pytest.raises(NetworkFailure, match="not JSON"):
        api.search("query")
