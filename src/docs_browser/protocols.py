"""Protocols for the client router's ports."""

from collections.abc import Callable, Sequence
from typing import Any, Protocol, runtime_checkable

from docs_browser.models.node import Breadcrumb, DocumentRecord, NavNode, SearchHit


@runtime_checkable
class DocsApiProtocol(Protocol):
    """Protocol for clients of the documentation HTTP API."""

    def navigation(self) -> list[NavNode]:
        """Fetch the navigation forest."""
        ...

    def content(self, path: str) -> DocumentRecord:
        """Fetch a rendered document."""
        ...

    def search(self, query: str) -> list[SearchHit]:
        """Fetch search hits for a query."""
        ...


@runtime_checkable
class KeyValueStore(Protocol):
    """Durable per-origin key-value storage."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value."""
        ...


@runtime_checkable
class SchedulerProtocol(Protocol):
    """Deferred callbacks, used for debouncing and delayed UI updates."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Any:
        """Run callback after delay seconds, returning a cancellable handle."""
        ...

    def cancel(self, handle: Any) -> None:
        """Cancel a pending callback. Cancelling a fired handle is a no-op."""
        ...


@runtime_checkable
class ViewProtocol(Protocol):
    """What the router needs from a UI toolkit."""

    def render_navigation(self, nodes: Sequence[NavNode]) -> None: ...

    def show_welcome(self) -> None: ...

    def show_document(
        self, record: DocumentRecord, article: str, breadcrumbs: Sequence[Breadcrumb]
    ) -> None: ...

    def set_active_document(self, path: str | None) -> None: ...

    def set_active_category(self, name: str | None) -> None: ...

    def set_sidebar_open(self, is_open: bool) -> None: ...

    def apply_theme(self, theme: str, stylesheet_url: str) -> None: ...

    def show_search_results(self, hits: Sequence[SearchHit]) -> None: ...

    def set_search_panel_visible(self, visible: bool) -> None: ...

    def clear_search_results(self) -> None: ...

    def push_history(self, state: dict[str, str], title: str, url: str) -> None: ...

    def set_loading(self, loading: bool) -> None: ...

    def show_notification(self, message: str) -> int:
        """Show a transient message, returning an id for dismissal."""
        ...

    def dismiss_notification(self, notification_id: int) -> None: ...
