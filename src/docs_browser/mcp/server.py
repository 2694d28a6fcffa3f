"""MCP server exposing documentation navigation, reading and search tools."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import Context, FastMCP

from docs_browser.config import (
    API_SEARCH_LIMIT,
    MIN_QUERY_LENGTH,
    PAGE_SEARCH_LIMIT,
    resolve_docs_root,
)
from docs_browser.core.document.loader import load_document, read_source
from docs_browser.core.document.title import title_from_text
from docs_browser.core.search.searcher import search_corpus
from docs_browser.core.tree.navigation import get_breadcrumbs, get_siblings, iter_files
from docs_browser.core.tree.walker import build_tree, walk_corpus
from docs_browser.errors import DocsBrowserError, NotFoundError

# --- Core functions (testable without MCP context) ---


def docs_navigation(root: Path) -> dict[str, Any]:
    """Return the navigation tree plus any subtrees that could not be read."""
    try:
        result = walk_corpus(root)
    except DocsBrowserError as e:
        return {"error": str(e), "tree": [], "document_count": 0}
    return {
        "tree": [node.to_dict() for node in result.nodes],
        "document_count": sum(1 for _ in iter_files(result.nodes)),
        "failures": [{"path": f.path, "reason": f.reason} for f in result.failures],
    }


def docs_read(root: Path, *, path: str, output_format: str = "markdown") -> dict[str, Any]:
    """Read a document as raw Markdown or rendered HTML.

    Args:
        path: Document path without extension, e.g. "guides/intro".
        output_format: "markdown" (source) or "html" (rendered).
    """
    try:
        if output_format == "html":
            record = load_document(root, path)
            title, content = record.title, record.content
        else:
            file_path, content = read_source(root, path)
            title = title_from_text(content, file_path.stem)
    except NotFoundError:
        return {"error": f"Document '{path}' not found."}
    except DocsBrowserError as e:
        return {"error": str(e)}

    return {
        "path": path.strip("/"),
        "title": title,
        "content": content,
        "breadcrumbs": " > ".join(c.label for c in get_breadcrumbs(path)),
    }


def docs_search(root: Path, *, query: str, limit: int = API_SEARCH_LIMIT) -> dict[str, Any]:
    """Case-insensitive line search across every document.

    Args:
        query: Search text (at least 2 characters).
        limit: Max hits (1-50, default 20).
    """
    if len(query.strip()) < MIN_QUERY_LENGTH:
        return {"error": "Query must be at least 2 characters.", "results": [], "count": 0}

    limit = max(1, min(limit, PAGE_SEARCH_LIMIT))
    hits = search_corpus(root, query, limit=limit)
    return {"results": [hit.to_dict() for hit in hits], "count": len(hits)}


def docs_neighbors(root: Path, *, path: str) -> dict[str, Any]:
    """Previous and next documents within the document's top-level category."""
    try:
        tree = build_tree(root)
    except DocsBrowserError as e:
        return {"error": str(e)}
    previous, following = get_siblings(tree, path.strip("/"))
    return {
        "path": path.strip("/"),
        "previous": previous.to_dict() if previous else None,
        "next": following.to_dict() if following else None,
    }


# --- MCP Server Setup ---


@dataclass
class ServerContext:
    """Shared resources for the MCP server lifetime."""

    docs_root: Path


@asynccontextmanager
async def server_lifespan(_server: FastMCP) -> AsyncIterator[ServerContext]:
    yield ServerContext(docs_root=resolve_docs_root())


mcp_server = FastMCP(
    "docs-browser",
    instructions="""\
A Markdown documentation corpus organized in categories (directories).

1. Call docs_navigation_tool to see categories and document paths.
2. Call docs_search_tool to find lines mentioning a term; each hit names its
   document path and line number.
3. Call docs_read_tool with a document path to read it in full.
4. Use docs_neighbors_tool to walk a category in reading order.
""",
    lifespan=server_lifespan,
)


def _root(mcp_ctx: Context) -> Path:
    ctx: ServerContext = mcp_ctx.request_context.lifespan_context  # type: ignore[assignment]
    return ctx.docs_root


@mcp_server.tool()
async def docs_navigation_tool(ctx: Context) -> dict[str, Any]:
    """List every category and document in the corpus as a tree."""
    return docs_navigation(_root(ctx))


@mcp_server.tool()
async def docs_read_tool(
    ctx: Context, path: str, output_format: str = "markdown"
) -> dict[str, Any]:
    """Read one document.

    Args:
        path: Document path without extension, e.g. "guides/intro".
        output_format: "markdown" (source) or "html" (rendered).
    """
    return docs_read(_root(ctx), path=path, output_format=output_format)


@mcp_server.tool()
async def docs_search_tool(ctx: Context, query: str, limit: int = 20) -> dict[str, Any]:
    """Search all documents for lines containing the query (case-insensitive).

    Args:
        query: Search text, at least 2 characters.
        limit: Max results (1-50, default 20).
    """
    return docs_search(_root(ctx), query=query, limit=limit)


@mcp_server.tool()
async def docs_neighbors_tool(ctx: Context, path: str) -> dict[str, Any]:
    """Get the previous and next documents in the same category."""
    return docs_neighbors(_root(ctx), path=path)


def run_mcp_server() -> None:
    """Run the MCP server with stdio transport."""
    from docs_browser.logging_config import configure_logging

    configure_logging(verbose=False)
    mcp_server.run(transport="stdio")
