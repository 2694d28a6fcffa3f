"""Client session state owned by the router."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from docs_browser.config import DEFAULT_THEME, SIDEBAR_BREAKPOINT
from docs_browser.models.node import NavNode


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, value: str | None) -> "Theme":
        """Stored value as a Theme, falling back to the default for junk."""
        try:
            return cls(value)
        except ValueError:
            return cls(DEFAULT_THEME)

    def toggled(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


def is_wide(viewport_width: int) -> bool:
    return viewport_width > SIDEBAR_BREAKPOINT


@dataclass
class ClientState:
    """Mutable browser-session state. Only `theme` outlives a reload."""

    theme: Theme = Theme(DEFAULT_THEME)
    viewport_width: int = 1024
    sidebar_open: bool = True
    current_path: str = ""
    navigation: list[NavNode] = field(default_factory=list)
    search_handle: Any = None
    search_seq: int = 0
    search_open: bool = False
    hide_handle: Any = None
    active_category: str | None = None

    @classmethod
    def initial(cls, *, theme: Theme, viewport_width: int) -> "ClientState":
        return cls(
            theme=theme,
            viewport_width=viewport_width,
            sidebar_open=is_wide(viewport_width),
        )

    @property
    def on_welcome(self) -> bool:
        return not self.current_path
