"""Self-hosted Markdown documentation browser."""

__version__ = "0.1.0"

from docs_browser.client.router import ClientRouter
from docs_browser.core.document.loader import load_document
from docs_browser.core.search.searcher import search_corpus
from docs_browser.core.tree.walker import build_tree, walk_corpus
from docs_browser.web.app import create_app

__all__ = [
    "ClientRouter",
    "__version__",
    "build_tree",
    "create_app",
    "load_document",
    "search_corpus",
    "walk_corpus",
]
