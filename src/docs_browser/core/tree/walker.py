"""Walk the corpus directory into a navigation tree."""

import re
from collections.abc import Iterator
from pathlib import Path

from loguru import logger

from docs_browser.config import MARKDOWN_SUFFIX
from docs_browser.errors import ReadFailure
from docs_browser.models.node import NavNode, NodeKind, TreeResult, WalkFailure

_DIGITS = re.compile(r"(\d+)")


def natural_sort_key(name: str) -> tuple[list[str | int], str]:
    """Numeric-aware, case-insensitive sort key ("doc2" before "doc10").

    re.split with a capturing group alternates text and digit runs, so
    positions never compare a str against an int.
    """
    parts: list[str | int] = [
        int(part) if i % 2 else part.casefold() for i, part in enumerate(_DIGITS.split(name))
    ]
    return parts, name


def is_markdown(path: Path) -> bool:
    return path.name.endswith(MARKDOWN_SUFFIX)


def doc_path_for(root: Path, file_path: Path) -> str:
    """Corpus-relative, slash-separated path with the extension stripped."""
    relative = file_path.relative_to(root).as_posix()
    return relative.removesuffix(MARKDOWN_SUFFIX)


def _sorted_entries(directory: Path) -> list[Path]:
    return sorted(directory.iterdir(), key=lambda p: natural_sort_key(p.name))


def _build_nodes(
    root: Path, entries: list[Path], failures: list[WalkFailure]
) -> tuple[NavNode, ...]:
    nodes: list[NavNode] = []
    for entry in entries:
        rel = entry.relative_to(root).as_posix()
        try:
            is_dir = entry.is_dir()
        except OSError as e:
            logger.warning("Skipping unreadable entry {}: {}", rel, e)
            failures.append(WalkFailure(path=rel, reason=str(e)))
            continue

        if is_dir:
            try:
                children = _build_nodes(root, _sorted_entries(entry), failures)
            except OSError as e:
                # Keep the category, abandon its subtree.
                logger.warning("Skipping unreadable directory {}: {}", rel, e)
                failures.append(WalkFailure(path=rel, reason=str(e)))
                children = ()
            nodes.append(
                NavNode(name=entry.name, kind=NodeKind.DIRECTORY, path=rel, children=children)
            )
        elif is_markdown(entry):
            nodes.append(
                NavNode(
                    name=entry.name.removesuffix(MARKDOWN_SUFFIX),
                    kind=NodeKind.FILE,
                    path=rel.removesuffix(MARKDOWN_SUFFIX),
                )
            )
    return tuple(nodes)


def walk_corpus(root: Path) -> TreeResult:
    """Build the navigation forest and collect per-subtree failures.

    Raises:
        ReadFailure: If the corpus root itself cannot be listed.
    """
    if not root.is_dir():
        msg = f"Corpus root {str(root)!r} is not a directory"
        raise ReadFailure(msg)
    try:
        entries = _sorted_entries(root)
    except OSError as e:
        msg = f"Cannot read corpus root {str(root)!r}: {e}"
        raise ReadFailure(msg) from e

    failures: list[WalkFailure] = []
    nodes = _build_nodes(root, entries, failures)
    return TreeResult(nodes=nodes, failures=tuple(failures))


def build_tree(root: Path) -> list[NavNode]:
    """Return the navigation forest, logging (not raising) subtree failures."""
    result = walk_corpus(root)
    if not result.complete:
        logger.warning("Navigation tree is partial: {} subtree(s) unreadable", len(result.failures))
    return list(result.nodes)


def iter_documents(root: Path) -> Iterator[Path]:
    """Yield Markdown files depth-first, in the same order as build_tree."""
    try:
        entries = _sorted_entries(root)
    except OSError as e:
        logger.warning("Skipping unreadable directory {}: {}", root, e)
        return

    for entry in entries:
        try:
            is_dir = entry.is_dir()
        except OSError as e:
            logger.warning("Skipping unreadable entry {}: {}", entry, e)
            continue
        if is_dir:
            yield from iter_documents(entry)
        elif is_markdown(entry):
            yield entry
