"""Console adapter for the client router."""

import itertools
from collections.abc import Sequence

import typer
from bs4 import BeautifulSoup

from docs_browser.models.node import Breadcrumb, DocumentRecord, NavNode, SearchHit


class ConsoleView:
    """Render router output as plain text on the terminal.

    Sidebar, theme and loading state have no terminal equivalent and are
    only tracked so callers can inspect them.
    """

    def __init__(self) -> None:
        self.sidebar_open = True
        self.theme: str | None = None
        self.active_document: str | None = None
        self.active_category: str | None = None
        self.history: list[str] = []
        self._notification_ids = itertools.count(1)

    def render_navigation(self, nodes: Sequence[NavNode]) -> None:
        pass

    def show_welcome(self) -> None:
        typer.echo("Documentation home. Open a document by path, e.g. `open guides/intro`.")

    def show_document(
        self, record: DocumentRecord, article: str, breadcrumbs: Sequence[Breadcrumb]
    ) -> None:
        trail = " > ".join(["Home", *(c.label for c in breadcrumbs)])
        text = BeautifulSoup(article, "html.parser").get_text()
        typer.echo(trail)
        typer.echo(f"\n{record.title}\n{'=' * len(record.title)}\n")
        typer.echo(text.strip())

    def set_active_document(self, path: str | None) -> None:
        self.active_document = path

    def set_active_category(self, name: str | None) -> None:
        self.active_category = name

    def set_sidebar_open(self, is_open: bool) -> None:
        self.sidebar_open = is_open

    def apply_theme(self, theme: str, stylesheet_url: str) -> None:
        self.theme = theme

    def show_search_results(self, hits: Sequence[SearchHit]) -> None:
        if not hits:
            typer.echo("No results found")
            return
        for hit in hits:
            typer.echo(f"  [{hit.title}] {hit.content[:80]}")
            typer.echo(f"    {hit.file} (line {hit.line})")

    def set_search_panel_visible(self, visible: bool) -> None:
        pass

    def clear_search_results(self) -> None:
        pass

    def push_history(self, state: dict[str, str], title: str, url: str) -> None:
        self.history.append(url)

    def set_loading(self, loading: bool) -> None:
        pass

    def show_notification(self, message: str) -> int:
        typer.echo(f"! {message}", err=True)
        return next(self._notification_ids)

    def dismiss_notification(self, notification_id: int) -> None:
        pass
