"""Server-rendered HTML pages with inlined sidebar and content."""

from pathlib import Path
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from loguru import logger

from docs_browser.config import MIN_QUERY_LENGTH, PAGE_SEARCH_LIMIT
from docs_browser.core.document.article import prepare_article
from docs_browser.core.document.loader import find_directory, load_document
from docs_browser.core.search.searcher import search_corpus
from docs_browser.core.tree.navigation import find_node, get_breadcrumbs, get_siblings, iter_files
from docs_browser.core.tree.walker import build_tree
from docs_browser.errors import NotFoundError

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


def _docs_root(request: Request) -> Path:
    return request.app.state.settings.docs_root


def _render(
    request: Request, name: str, context: dict[str, Any], *, status_code: int = 200
) -> HTMLResponse:
    return templates.TemplateResponse(request, name, context, status_code=status_code)


def _error_page(request: Request, message: str) -> HTMLResponse:
    return _render(request, "error.html", {"tree": [], "message": message}, status_code=500)


@router.get("/", response_class=HTMLResponse)
def index_page(request: Request) -> HTMLResponse:
    try:
        tree = build_tree(_docs_root(request))
    except Exception:
        logger.exception("Error rendering index page")
        return _error_page(request, "Error getting navigation")
    categories = [node for node in tree if node.is_directory]
    return _render(request, "index.html", {"tree": tree, "categories": categories})


@router.get("/search", response_class=HTMLResponse)
def search_page(request: Request, q: str = "") -> HTMLResponse:
    query = q.strip()
    try:
        tree = build_tree(_docs_root(request))
        hits = []
        if len(query) >= MIN_QUERY_LENGTH:
            hits = search_corpus(_docs_root(request), query, limit=PAGE_SEARCH_LIMIT)
    except Exception:
        logger.exception("Error rendering search page for {!r}", q)
        return _error_page(request, "Search error")
    return _render(
        request,
        "search.html",
        {
            "tree": tree,
            "query": query,
            "hits": hits,
            "limit": PAGE_SEARCH_LIMIT,
            "too_short": 0 < len(query) < MIN_QUERY_LENGTH,
        },
    )


@router.get("/{page_path:path}", response_class=HTMLResponse)
def document_page(page_path: str, request: Request) -> HTMLResponse:
    root = _docs_root(request)
    page_path = page_path.strip("/")
    try:
        tree = build_tree(root)
        try:
            record = load_document(root, page_path)
        except NotFoundError:
            record = None

        if record is not None:
            previous, following = get_siblings(tree, record.path)
            article = prepare_article(
                record.content,
                previous=previous,
                following=following,
                link_prefix="/",
                rewrite_links=False,
            )
            return _render(
                request,
                "document.html",
                {
                    "tree": tree,
                    "record": record,
                    "article": article,
                    "breadcrumbs": get_breadcrumbs(record.path),
                    "current_path": record.path,
                },
            )

        category = find_node(tree, page_path)
        if category is not None and category.is_directory and find_directory(root, page_path):
            return _render(
                request,
                "category.html",
                {
                    "tree": tree,
                    "category": category,
                    "documents": list(iter_files(category.children)),
                    "breadcrumbs": get_breadcrumbs(category.path),
                    "current_path": category.path,
                },
            )
    except Exception:
        logger.exception("Error rendering page {!r}", page_path)
        return _error_page(request, "Error getting content")

    return _render(request, "not_found.html", {"tree": tree, "path": page_path}, status_code=404)
