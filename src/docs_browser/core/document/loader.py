"""Resolve document paths to rendered records."""

from pathlib import Path

from docs_browser.config import MARKDOWN_SUFFIX
from docs_browser.core.document.markdown import render_markdown
from docs_browser.core.document.title import title_from_text
from docs_browser.errors import NotFoundError, ReadFailure
from docs_browser.models.node import DocumentRecord


def find_document(root: Path, path: str) -> Path | None:
    """Return the Markdown file for a document path, or None.

    Paths that resolve outside the corpus root, or cannot be resolved at
    all (an embedded NUL byte), never match.
    """
    path = path.strip("/")
    if not path:
        return None
    candidate = root / f"{path}{MARKDOWN_SUFFIX}"
    try:
        resolved = candidate.resolve()
        if not resolved.is_relative_to(root.resolve()):
            return None
        return candidate if candidate.is_file() else None
    except (OSError, ValueError):
        return None


def find_directory(root: Path, path: str) -> Path | None:
    """Return the category directory for a path, or None."""
    path = path.strip("/")
    if not path:
        return None
    candidate = root / path
    try:
        if not candidate.resolve().is_relative_to(root.resolve()):
            return None
        return candidate if candidate.is_dir() else None
    except (OSError, ValueError):
        return None


def read_source(root: Path, path: str) -> tuple[Path, str]:
    """Return the file and raw Markdown for a document path.

    Raises:
        NotFoundError: If no `<path>.md` exists in the corpus.
        ReadFailure: If the file exists but cannot be read.
    """
    file_path = find_document(root, path)
    if file_path is None:
        raise NotFoundError(path)
    try:
        return file_path, file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        msg = f"Cannot read {path!r}: {e}"
        raise ReadFailure(msg) from e


def load_document(root: Path, path: str) -> DocumentRecord:
    """Resolve a document path to its title and rendered HTML.

    Raises:
        NotFoundError: If no `<path>.md` exists in the corpus.
        ReadFailure: If the file cannot be read.
        RenderFailure: If Markdown conversion fails.
    """
    file_path, text = read_source(root, path)
    fallback = file_path.name.removesuffix(MARKDOWN_SUFFIX)
    return DocumentRecord(
        title=title_from_text(text, fallback),
        content=render_markdown(text),
        path=path.strip("/"),
    )
