"""Client router: keeps the URL fragment, sidebar and rendered content consistent.

The router is a state machine over Welcome and Document(path), with the
search panel as an orthogonal overlay. Every transition is a method; a
view adapter binds them to a concrete UI toolkit (the browser page, the
console view, or a test fake).

Transitions are serialized with a lock, the analogue of a browser's single
UI thread, since scheduler callbacks may arrive from timer threads.
"""

import threading
from collections.abc import Mapping

from loguru import logger

from docs_browser.client.state import ClientState, Theme, is_wide
from docs_browser.config import (
    MIN_QUERY_LENGTH,
    NOTIFICATION_TTL,
    RESULTS_HIDE_DELAY,
    SEARCH_DEBOUNCE,
    THEME_KEY,
)
from docs_browser.core.document.article import prepare_article
from docs_browser.core.tree.navigation import (
    find_node,
    first_document,
    get_breadcrumbs,
    get_category,
    get_siblings,
)
from docs_browser.errors import NetworkFailure
from docs_browser.models.node import SearchHit
from docs_browser.protocols import DocsApiProtocol, KeyValueStore, SchedulerProtocol, ViewProtocol

WELCOME_TITLE = "Documentation"


def stylesheet_url(theme: Theme) -> str:
    return f"/highlight/{theme.value}.css"


class ClientRouter:
    """Owns ClientState and exposes the named transitions of the client."""

    def __init__(
        self,
        api: DocsApiProtocol,
        view: ViewProtocol,
        store: KeyValueStore,
        scheduler: SchedulerProtocol,
        *,
        viewport_width: int = 1024,
    ) -> None:
        self.api = api
        self.view = view
        self.store = store
        self.scheduler = scheduler
        self.state = ClientState.initial(
            theme=Theme.parse(store.get(THEME_KEY)), viewport_width=viewport_width
        )
        self._lock = threading.RLock()

    # --- Startup and routing ---

    def start(self, fragment: str = "") -> None:
        """Apply the persisted theme, load navigation, resolve the initial route."""
        with self._lock:
            self.apply_theme(self.state.theme)
            self.view.set_sidebar_open(self.state.sidebar_open)
            self.load_navigation()
            path = fragment.removeprefix("#").strip("/")
            if path:
                self.navigate_to_doc(path)
            else:
                self.show_welcome()

    def load_navigation(self) -> bool:
        with self._lock:
            self.view.set_loading(True)
            try:
                self.state.navigation = self.api.navigation()
            except NetworkFailure as e:
                self._fail("Error loading navigation", e)
                return False
            finally:
                self.view.set_loading(False)
            self.view.render_navigation(self.state.navigation)
            return True

    def navigate_to_doc(self, path: str, *, push: bool = True) -> bool:
        """Fetch and show a document. On failure the current view stays put."""
        with self._lock:
            self.view.set_loading(True)
            try:
                record = self.api.content(path)
            except NetworkFailure as e:
                self._fail("Error loading document", e)
                return False
            finally:
                self.view.set_loading(False)

            self.state.current_path = record.path
            if push:
                self.view.push_history({"path": record.path}, record.title, f"#{record.path}")

            previous, following = get_siblings(self.state.navigation, record.path)
            article = prepare_article(
                record.content, previous=previous, following=following, link_prefix="#"
            )
            self.view.show_document(record, article, get_breadcrumbs(record.path))
            self.view.set_active_document(record.path)

            if not is_wide(self.state.viewport_width):
                self.close_sidebar()
            return True

    def navigate_to_category(self, name: str) -> bool:
        """Mark a category active and open its first document, if it has one."""
        with self._lock:
            self.state.active_category = name
            self.view.set_active_category(name)
            category = get_category(self.state.navigation, name)
            if category is None:
                return False
            first = first_document(category)
            if first is None:
                return False
            return self.navigate_to_doc(first.path)

    def follow_link(self, path: str) -> bool:
        """Route an in-content or breadcrumb link; directories open their first document."""
        with self._lock:
            node = find_node(self.state.navigation, path)
            if node is not None and node.is_directory:
                first = first_document(node)
                return self.navigate_to_doc(first.path) if first else False
            return self.navigate_to_doc(path)

    def show_welcome(self, *, push: bool = True) -> None:
        with self._lock:
            self.state.current_path = ""
            self.state.active_category = None
            self.view.show_welcome()
            self.view.set_active_category(None)
            self.view.set_active_document(None)
            if push:
                self.view.push_history({}, WELCOME_TITLE, "#")

    def pop_state(self, entry: Mapping[str, str] | None) -> None:
        """Browser back/forward: restore from history metadata."""
        with self._lock:
            path = entry.get("path") if entry else None
            if path:
                self.navigate_to_doc(path, push=False)
            else:
                self.show_welcome(push=False)

    # --- Search ---

    def on_search_input(self, text: str) -> None:
        """Debounce keystrokes; only the latest one within the window searches."""
        with self._lock:
            query = text.strip()
            self._cancel_pending_search()
            # Any response still in flight belongs to an older query now.
            self.state.search_seq += 1

            if len(query) < MIN_QUERY_LENGTH:
                self.view.clear_search_results()
                self._set_search_open(False)
                return

            seq = self.state.search_seq
            self.state.search_handle = self.scheduler.call_later(
                SEARCH_DEBOUNCE, lambda: self._run_search(query, seq)
            )

    def _cancel_pending_search(self) -> None:
        if self.state.search_handle is not None:
            self.scheduler.cancel(self.state.search_handle)
            self.state.search_handle = None

    def _run_search(self, query: str, seq: int) -> None:
        with self._lock:
            if seq != self.state.search_seq:
                return
            self.state.search_handle = None
        self.perform_search(query, seq)

    def perform_search(self, query: str, seq: int | None = None) -> bool:
        """Query the API and show results unless a newer query superseded this one."""
        with self._lock:
            if seq is None:
                self.state.search_seq += 1
                seq = self.state.search_seq
        try:
            hits = self.api.search(query)
        except NetworkFailure as e:
            logger.warning("Search for {!r} failed: {}", query, e)
            return False

        with self._lock:
            if seq != self.state.search_seq:
                logger.debug("Dropping stale results for {!r}", query)
                return False
            self.view.show_search_results(hits)
            self._set_search_open(True)
            return True

    def select_search_result(self, hit: SearchHit) -> bool:
        with self._lock:
            self._set_search_open(False)
            return self.navigate_to_doc(hit.file)

    def on_search_focus(self) -> None:
        """Show the panel; refocusing within the grace period keeps it open."""
        with self._lock:
            self._cancel_pending_hide()
            self._set_search_open(True)

    def on_search_blur(self) -> None:
        """Close the panel after a grace period so a click on a result still lands."""
        with self._lock:
            self._cancel_pending_hide()
            self.state.hide_handle = self.scheduler.call_later(
                RESULTS_HIDE_DELAY, self._hide_search_panel
            )

    def _cancel_pending_hide(self) -> None:
        if self.state.hide_handle is not None:
            self.scheduler.cancel(self.state.hide_handle)
            self.state.hide_handle = None

    def _hide_search_panel(self) -> None:
        with self._lock:
            self.state.hide_handle = None
            self._set_search_open(False)

    def _set_search_open(self, visible: bool) -> None:
        with self._lock:
            self.state.search_open = visible
            self.view.set_search_panel_visible(visible)

    # --- Layout ---

    def open_sidebar(self) -> None:
        with self._lock:
            self.state.sidebar_open = True
            self.view.set_sidebar_open(True)

    def close_sidebar(self) -> None:
        with self._lock:
            self.state.sidebar_open = False
            self.view.set_sidebar_open(False)

    def toggle_sidebar(self) -> None:
        with self._lock:
            if self.state.sidebar_open:
                self.close_sidebar()
            else:
                self.open_sidebar()

    def on_resize(self, width: int) -> None:
        with self._lock:
            self.state.viewport_width = width
            if is_wide(width):
                self.open_sidebar()
            else:
                self.close_sidebar()

    def on_click(self, *, inside_sidebar: bool, inside_toggle: bool) -> None:
        """Clicks outside the sidebar close it on narrow viewports."""
        with self._lock:
            if (
                not is_wide(self.state.viewport_width)
                and self.state.sidebar_open
                and not inside_sidebar
                and not inside_toggle
            ):
                self.close_sidebar()

    # --- Theme ---

    def apply_theme(self, theme: Theme) -> None:
        with self._lock:
            self.state.theme = theme
            self.store.set(THEME_KEY, theme.value)
            self.view.apply_theme(theme.value, stylesheet_url(theme))

    def toggle_theme(self) -> Theme:
        with self._lock:
            self.apply_theme(self.state.theme.toggled())
            return self.state.theme

    # --- Notifications ---

    def _fail(self, message: str, error: Exception) -> None:
        logger.error("{}: {}", message, error)
        notification_id = self.view.show_notification(message)
        self.scheduler.call_later(
            NOTIFICATION_TTL, lambda: self.view.dismiss_notification(notification_id)
        )
