"""JSON API: navigation, content and search."""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from loguru import logger

from docs_browser.config import API_SEARCH_LIMIT, MIN_QUERY_LENGTH
from docs_browser.core.document.loader import load_document
from docs_browser.core.search.searcher import search_corpus
from docs_browser.core.tree.walker import build_tree
from docs_browser.errors import NotFoundError

router = APIRouter(prefix="/api")


def _docs_root(request: Request) -> Path:
    return request.app.state.settings.docs_root


@router.get("/navigation")
def get_navigation(request: Request) -> JSONResponse:
    try:
        tree = build_tree(_docs_root(request))
    except Exception:
        logger.exception("Error getting navigation")
        return JSONResponse({"error": "Error getting navigation"}, status_code=500)
    return JSONResponse([node.to_dict() for node in tree])


@router.get("/content/{doc_path:path}")
def get_content(doc_path: str, request: Request) -> JSONResponse:
    try:
        record = load_document(_docs_root(request), doc_path)
    except NotFoundError:
        return JSONResponse({"error": "File not found"}, status_code=404)
    except Exception:
        logger.exception("Error getting content for {!r}", doc_path)
        return JSONResponse({"error": "Error getting content"}, status_code=500)
    return JSONResponse(record.to_dict())


@router.get("/search")
def get_search(request: Request, q: str | None = None) -> JSONResponse:
    if not q or len(q.strip()) < MIN_QUERY_LENGTH:
        return JSONResponse([])
    try:
        hits = search_corpus(_docs_root(request), q, limit=API_SEARCH_LIMIT)
    except Exception:
        logger.exception("Error searching for {!r}", q)
        return JSONResponse({"error": "Search error"}, status_code=500)
    return JSONResponse([hit.to_dict() for hit in hits])
