"""CLI for the documentation browser (serve, tree, search, read, open, mcp)."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from docs_browser.client.api import DocsApi
from docs_browser.client.router import ClientRouter
from docs_browser.client.scheduler import TimerScheduler
from docs_browser.client.storage import JsonFileStore
from docs_browser.client.view import ConsoleView
from docs_browser.config import (
    API_SEARCH_LIMIT,
    CLIENT_STORE_FILE,
    DEFAULT_SERVER_URL,
    MODES,
    ServerSettings,
)
from docs_browser.core.document.loader import load_document, read_source
from docs_browser.core.search.searcher import search_corpus
from docs_browser.core.tree.walker import walk_corpus
from docs_browser.errors import DocsBrowserError, NotFoundError
from docs_browser.logging_config import configure_logging
from docs_browser.models.node import NavNode

app = typer.Typer(help="Browse, search and serve a directory of Markdown documentation.")

DocsDirOption = Annotated[
    Path | None,
    typer.Option("--docs-dir", "-d", help="Corpus root (default: $DOCS_BROWSER_ROOT or ./docs)"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _docs_root(docs_dir: Path | None) -> Path:
    root = docs_dir or ServerSettings.from_env().docs_root
    if not root.is_dir():
        logger.error("Documentation directory not found: {}", root)
        raise typer.Exit(1)
    return root


def _echo_tree(nodes: tuple[NavNode, ...], depth: int = 0) -> None:
    for node in nodes:
        indent = "  " * depth
        if node.is_directory:
            typer.echo(f"{indent}{node.name}/")
            _echo_tree(node.children, depth + 1)
        else:
            typer.echo(f"{indent}{node.name}  ({node.path})")


def log_categories(root: Path) -> None:
    """Log the top-level categories, the way the server announces itself."""
    try:
        nodes = walk_corpus(root).nodes
    except DocsBrowserError as e:
        logger.warning("Cannot list categories: {}", e)
        return
    categories = [n.name for n in nodes if n.is_directory]
    if not categories:
        logger.info("No categories found in {}", root)
        return
    logger.info("Available categories:")
    for name in categories:
        logger.info("  • {}", name)


@app.command()
def serve(
    docs_dir: DocsDirOption = None,
    port: Annotated[int | None, typer.Option("--port", "-p", help="Port (default: $PORT or 3000)")] = None,
    host: Annotated[str | None, typer.Option("--host", help="Interface to bind")] = None,
    mode: Annotated[
        str | None,
        typer.Option("--mode", "-m", help=f"Server variant: {' or '.join(MODES)}"),
    ] = None,
) -> None:
    """Start the documentation web server."""
    import uvicorn

    from docs_browser.web.app import create_app

    env = ServerSettings.from_env()
    try:
        settings = ServerSettings(
            docs_root=docs_dir or env.docs_root,
            host=host or env.host,
            port=port or env.port,
            mode=mode or env.mode,
        )
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None

    if not settings.docs_root.is_dir():
        logger.warning("Documentation directory {} does not exist yet", settings.docs_root)

    logger.info(
        "Documentation server ({} mode) running on http://{}:{}",
        settings.mode,
        settings.host,
        settings.port,
    )
    log_categories(settings.docs_root)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level="warning")


@app.command()
def tree(
    docs_dir: DocsDirOption = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Print the navigation tree."""
    root = _docs_root(docs_dir)
    try:
        result = walk_corpus(root)
    except DocsBrowserError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None

    if output_json:
        typer.echo(json.dumps([node.to_dict() for node in result.nodes], indent=2))
    else:
        _echo_tree(result.nodes)
    for failure in result.failures:
        typer.echo(f"warning: could not read {failure.path}: {failure.reason}", err=True)


@app.command()
def search(
    query: str = typer.Argument(..., help="Search text (at least 2 characters)"),
    docs_dir: DocsDirOption = None,
    limit: int = typer.Option(API_SEARCH_LIMIT, "--limit", "-n", help="Max results"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Search every document for matching lines."""
    root = _docs_root(docs_dir)
    hits = search_corpus(root, query, limit=limit)

    if output_json:
        typer.echo(json.dumps([hit.to_dict() for hit in hits], indent=2))
        return

    typer.echo(f"Found {len(hits)} results:\n")
    for hit in hits:
        typer.echo(f"  [{hit.title}] {hit.content[:80]}")
        typer.echo(f"    {hit.file}:{hit.line}")
        typer.echo()


@app.command()
def read(
    path: str = typer.Argument(..., help="Document path without extension, e.g. guides/intro"),
    docs_dir: DocsDirOption = None,
    html: bool = typer.Option(False, "--html", help="Print rendered HTML instead of Markdown"),
) -> None:
    """Print a document."""
    root = _docs_root(docs_dir)
    try:
        if html:
            typer.echo(load_document(root, path).content)
        else:
            typer.echo(read_source(root, path)[1])
    except NotFoundError:
        typer.echo(f"Document '{path}' not found.")
        raise typer.Exit(1) from None
    except DocsBrowserError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None


@app.command(name="open")
def open_cmd(
    path: str = typer.Argument("", help="Document path; empty opens the start page"),
    url: str = typer.Option(DEFAULT_SERVER_URL, "--url", "-u", help="Running server URL"),
) -> None:
    """Open a document through the client router against a running server."""
    router = ClientRouter(
        DocsApi(url),
        ConsoleView(),
        JsonFileStore(CLIENT_STORE_FILE),
        TimerScheduler(),
    )
    router.start(f"#{path}" if path else "")
    if path and router.state.current_path != path.strip("/"):
        raise typer.Exit(1)


@app.command(name="mcp")
def mcp_cmd() -> None:
    """Start the MCP server (stdio transport)."""
    from docs_browser.mcp.server import run_mcp_server

    run_mcp_server()
