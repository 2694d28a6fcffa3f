"""Line-level full-text search over the corpus."""

from pathlib import Path

from loguru import logger

from docs_browser.config import MARKDOWN_SUFFIX, MIN_QUERY_LENGTH
from docs_browser.core.document.title import title_from_text
from docs_browser.core.tree.walker import doc_path_for, iter_documents
from docs_browser.models.node import SearchHit


def _search_file(root: Path, file_path: Path, needle: str) -> list[SearchHit]:
    try:
        text = file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("Skipping unreadable file {}: {}", file_path, e)
        return []

    hits: list[SearchHit] = []
    title: str | None = None
    for number, line in enumerate(text.split("\n"), start=1):
        if needle not in line.lower():
            continue
        if title is None:
            title = title_from_text(text, file_path.name.removesuffix(MARKDOWN_SUFFIX))
        hits.append(
            SearchHit(
                file=doc_path_for(root, file_path),
                line=number,
                content=line.strip(),
                title=title,
            )
        )
    return hits


def search_corpus(root: Path, query: str, *, limit: int) -> list[SearchHit]:
    """Case-insensitive substring search, one hit per matching line.

    Every call re-reads the whole corpus. Hits come in depth-first file
    order, then line order; the first `limit` of them are returned.

    Args:
        root: Corpus root directory.
        query: Search text; under 2 characters (after trimming) yields no hits.
        limit: Max hits to return.

    Returns:
        Prefix of all hits in discovery order.
    """
    needle = query.strip().lower()
    if len(needle) < MIN_QUERY_LENGTH or limit <= 0:
        return []

    hits: list[SearchHit] = []
    for file_path in iter_documents(root):
        hits.extend(_search_file(root, file_path, needle))
    logger.debug("Search {!r}: {} hits, returning {}", query, len(hits), min(len(hits), limit))
    return hits[:limit]
