"""Tests for the docs-browser CLI."""

import json
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from loguru import logger
from typer.testing import CliRunner

from docs_browser.cli import app
from docs_browser.errors import NetworkFailure
from docs_browser.models.node import DocumentRecord, NavNode, NodeKind

runner = CliRunner()


@pytest.fixture(autouse=True)
def _drop_log_sinks() -> Iterator[None]:
    """The CLI callback points loguru at the runner's stderr; detach it afterwards."""
    yield
    logger.remove()


def test_tree_prints_indented_tree(docs_root: Path) -> None:
    result = runner.invoke(app, ["tree", "--docs-dir", str(docs_root)])
    assert result.exit_code == 0
    assert "guides/\n  advanced/\n    tips  (guides/advanced/tips)\n" in result.output


def test_tree_json(docs_root: Path) -> None:
    result = runner.invoke(app, ["tree", "-d", str(docs_root), "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data[2] == {"name": "README", "type": "file", "path": "README"}


def test_missing_docs_dir_exits_nonzero(tmp_path: Path) -> None:
    result = runner.invoke(app, ["tree", "-d", str(tmp_path / "missing")])
    assert result.exit_code == 1


def test_search_json(docs_root: Path) -> None:
    result = runner.invoke(app, ["search", "foobar", "-d", str(docs_root), "--json"])
    assert result.exit_code == 0
    hits = json.loads(result.output)
    assert [h["file"] for h in hits] == ["guides/intro", "guides/setup"]


def test_search_text_output(docs_root: Path) -> None:
    result = runner.invoke(app, ["search", "foobar", "-d", str(docs_root), "-n", "1"])
    assert result.exit_code == 0
    assert "Found 1 results" in result.output
    assert "guides/intro:3" in result.output


def test_read_markdown_and_html(docs_root: Path) -> None:
    result = runner.invoke(app, ["read", "guides/intro", "-d", str(docs_root)])
    assert result.exit_code == 0
    assert result.output.startswith("# Introduction")

    result = runner.invoke(app, ["read", "guides/intro", "-d", str(docs_root), "--html"])
    assert "<h1>Introduction</h1>" in result.output


def test_read_missing_document(docs_root: Path) -> None:
    result = runner.invoke(app, ["read", "nope", "-d", str(docs_root)])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_serve_runs_uvicorn_with_settings(docs_root: Path) -> None:
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(
            app, ["serve", "-d", str(docs_root), "-p", "8080", "--mode", "pages"]
        )

    assert result.exit_code == 0
    fastapi_app = mock_run.call_args.args[0]
    assert fastapi_app.state.settings.mode == "pages"
    assert fastapi_app.state.settings.docs_root == docs_root
    assert mock_run.call_args.kwargs["port"] == 8080


def test_serve_rejects_unknown_mode(docs_root: Path) -> None:
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(app, ["serve", "-d", str(docs_root), "--mode", "static"])
    assert result.exit_code == 1
    mock_run.assert_not_called()


def _fake_api(record: DocumentRecord | None) -> MagicMock:
    api = MagicMock()
    api.navigation.return_value = [
        NavNode(
            name="guides",
            kind=NodeKind.DIRECTORY,
            path="guides",
            children=(NavNode(name="intro", kind=NodeKind.FILE, path="guides/intro"),),
        )
    ]
    if record is None:
        api.content.side_effect = NetworkFailure("HTTP 404", status=404)
    else:
        api.content.return_value = record
    return api


def test_open_renders_document_as_text(tmp_path: Path) -> None:
    record = DocumentRecord(
        title="Introduction", content="<h1>Introduction</h1><p>Hello there</p>", path="guides/intro"
    )
    with (
        patch("docs_browser.cli.DocsApi", return_value=_fake_api(record)),
        patch("docs_browser.cli.CLIENT_STORE_FILE", tmp_path / "client.json"),
    ):
        result = runner.invoke(app, ["open", "guides/intro"])

    assert result.exit_code == 0
    assert "Home > guides > intro" in result.output
    assert "Hello there" in result.output
    assert json.loads((tmp_path / "client.json").read_text()) == {"theme": "dark"}


def test_open_missing_document_exits_nonzero(tmp_path: Path) -> None:
    with (
        patch("docs_browser.cli.DocsApi", return_value=_fake_api(None)),
        patch("docs_browser.cli.CLIENT_STORE_FILE", tmp_path / "client.json"),
    ):
        result = runner.invoke(app, ["open", "guides/nope"])

    assert result.exit_code == 1
