"""Tests for title extraction, Markdown rendering and document loading."""

from pathlib import Path

import pytest

from docs_browser.core.document.loader import find_directory, load_document, read_source
from docs_browser.core.document.markdown import (
    highlight_code,
    highlight_stylesheet,
    render_markdown,
)
from docs_browser.core.document.title import title_from_text
from docs_browser.errors import NotFoundError


def test_title_is_first_h1_line() -> None:
    assert title_from_text("## Not this\n# Real Title\n", "fallback") == "Real Title"


def test_title_ignores_hash_without_space() -> None:
    assert title_from_text("#hashtag\nbody\n", "stem") == "stem"


def test_title_strips_carriage_return() -> None:
    assert title_from_text("# Windows\r\nbody\r\n", "stem") == "Windows"


def test_fenced_code_is_highlighted() -> None:
    html = render_markdown("```python\nprint('hi')\n```\n")
    assert '<pre class="highlight">' in html
    assert 'class="language-python"' in html
    assert "print" in html


def test_unknown_language_still_renders_code() -> None:
    html = highlight_code("some plain words", "no-such-language")
    assert html.startswith("<pre")
    assert "words" in html


def test_code_is_escaped() -> None:
    html = render_markdown("```\n<script>alert(1)</script>\n```\n")
    assert "<script>" not in html


def test_single_newline_becomes_line_break() -> None:
    assert "<br" in render_markdown("line one\nline two\n")


def test_tables_render() -> None:
    html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n")
    assert "<table>" in html
    assert "<td>2</td>" in html


def test_raw_html_passes_through() -> None:
    html = render_markdown('<div class="note">Heads up</div>\n')
    assert '<div class="note">Heads up</div>' in html


def test_highlight_stylesheet_per_theme() -> None:
    assert ".highlight" in highlight_stylesheet("light")
    assert highlight_stylesheet("light") != highlight_stylesheet("dark")
    with pytest.raises(ValueError, match="Unknown theme"):
        highlight_stylesheet("sepia")


def test_load_document(docs_root: Path) -> None:
    record = load_document(docs_root, "guides/intro")
    assert record.title == "Introduction"
    assert record.path == "guides/intro"
    assert "<h1>Introduction</h1>" in record.content


def test_load_document_falls_back_to_file_stem(docs_root: Path) -> None:
    assert load_document(docs_root, "README").title == "README"


def test_missing_document_raises_not_found(docs_root: Path) -> None:
    with pytest.raises(NotFoundError):
        load_document(docs_root, "guides/missing")


def test_directory_is_not_a_document(docs_root: Path) -> None:
    with pytest.raises(NotFoundError):
        read_source(docs_root, "guides")
    assert find_directory(docs_root, "guides") == docs_root / "guides"


def test_paths_outside_root_are_not_found(docs_root: Path) -> None:
    (docs_root.parent / "secret.md").write_text("# Secret\n")
    with pytest.raises(NotFoundError):
        read_source(docs_root, "../secret")
    assert find_directory(docs_root, "..") is None


def test_highlighting_error_falls_back_to_escaped_block(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def broken(*args: object, **kwargs: object) -> str:
        raise RuntimeError("lexer exploded")

    monkeypatch.setattr("docs_browser.core.document.markdown.highlight", broken)

    assert highlight_code("<b>bold</b>", "python") == (
        '<pre><code class="language-python">&lt;b&gt;bold&lt;/b&gt;</code></pre>'
    )
    html = render_markdown("```python\n<b>x</b>\n```\n")
    assert '<pre><code class="language-python">&lt;b&gt;x&lt;/b&gt;' in html
