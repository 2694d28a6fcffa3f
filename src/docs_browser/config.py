"""Configuration constants for docs-browser."""

import os
from dataclasses import dataclass
from pathlib import Path

# Corpus location, relative to the working directory unless overridden.
DEFAULT_DOCS_ROOT: Path = Path("docs")

DEFAULT_PORT: int = 3000
DEFAULT_HOST: str = "127.0.0.1"

MARKDOWN_SUFFIX: str = ".md"

# "spa" serves the client entry page for unmatched paths,
# "pages" renders every page on the server.
MODES: tuple[str, ...] = ("spa", "pages")
DEFAULT_MODE: str = "spa"

MIN_QUERY_LENGTH: int = 2
API_SEARCH_LIMIT: int = 20
PAGE_SEARCH_LIMIT: int = 50

# Client timings, in seconds.
SEARCH_DEBOUNCE: float = 0.3
RESULTS_HIDE_DELAY: float = 0.2
NOTIFICATION_TTL: float = 5.0

# Viewports at or below this width (px) get a collapsible sidebar.
SIDEBAR_BREAKPOINT: int = 768

THEMES: tuple[str, ...] = ("light", "dark")
DEFAULT_THEME: str = "dark"
THEME_KEY: str = "theme"

# Pygments styles backing /highlight/<theme>.css
HIGHLIGHT_STYLES: dict[str, str] = {
    "light": "default",
    "dark": "github-dark",
}

# Key-value file used by the client router to persist the theme.
CLIENT_STORE_FILE: Path = Path("~/.config/docs-browser/client.json").expanduser()

DEFAULT_SERVER_URL: str = f"http://localhost:{DEFAULT_PORT}"


def resolve_docs_root() -> Path:
    """Return the corpus root, honoring DOCS_BROWSER_ROOT."""
    root_env = os.environ.get("DOCS_BROWSER_ROOT")
    return Path(root_env).expanduser() if root_env else DEFAULT_DOCS_ROOT


def resolve_port() -> int:
    """Return the listening port, honoring PORT."""
    port_env = os.environ.get("PORT")
    if not port_env:
        return DEFAULT_PORT
    try:
        return int(port_env)
    except ValueError:
        msg = f"Invalid PORT value {port_env!r}, expected an integer"
        raise ValueError(msg) from None


@dataclass(frozen=True)
class ServerSettings:
    """Everything the HTTP surface needs to know at startup."""

    docs_root: Path = DEFAULT_DOCS_ROOT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    mode: str = DEFAULT_MODE

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            msg = f"Unknown mode {self.mode!r}, expected one of {MODES!r}"
            raise ValueError(msg)

    @classmethod
    def from_env(cls) -> "ServerSettings":
        return cls(
            docs_root=resolve_docs_root(),
            host=os.environ.get("DOCS_BROWSER_HOST", DEFAULT_HOST),
            port=resolve_port(),
            mode=os.environ.get("DOCS_BROWSER_MODE", DEFAULT_MODE),
        )
