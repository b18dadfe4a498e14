"""Navigation state for one interactive session."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.pokemon import Pokemon

MAX_HISTORY = 200


class Screen(str, Enum):
    MAIN = "main"
    SEARCH = "search"
    BROWSE_TYPE = "browse_type"
    BROWSE_GENERATION = "browse_generation"
    BROWSE_GENERATION_LIST = "browse_generation_list"
    FAVORITES = "favorites"
    DETAIL = "detail"


class RenderMode(str, Enum):
    HALF_BLOCK = "ascii"
    SIXEL = "sixel"


def scroll_offset(cursor: int, window: int) -> int:
    """First visible row of a list window that keeps `cursor` on screen."""
    return max(0, cursor - window + 1)


def visible_window(items: list, cursor: int, window: int) -> tuple[int, list]:
    """Return (offset, visible items) of a scrolling list."""
    start = scroll_offset(cursor, window)
    return start, items[start:start + window]


@dataclass
class NavigationState:
    """Everything the renderer needs to draw the current screen.

    Created once per session and mutated by the Navigator on every key.
    `current` and the lists hold references to catalog records, never copies.
    """

    screen: Screen = Screen.MAIN
    current: Pokemon | None = None
    show_shiny: bool = False
    render_mode: RenderMode = RenderMode.HALF_BLOCK

    # Search
    search_query: str = ""
    search_results: list[Pokemon] = field(default_factory=list)
    search_cursor: int = 0

    # Browse option cursors
    type_cursor: int = 0
    generation_cursor: int = 0

    # Shared list buffer (type / generation / favorites browsing)
    pokemon_list: list[Pokemon] = field(default_factory=list)
    pokemon_list_cursor: int = 0
    generation_list_cursor: int = 0
    favorites_cursor: int = 0

    # Viewport
    width: int = 80
    height: int = 24

    # One-shot warning shown by the renderer; cleared on the next key.
    status_message: str | None = None

    # Session history for debugging
    session_history: list[str] = field(default_factory=list)

    def add_to_history(self, screen: Screen) -> None:
        """Record a screen visit, keeping the most recent MAX_HISTORY entries."""
        self.session_history.append(screen.value)
        if len(self.session_history) > MAX_HISTORY:
            del self.session_history[:-MAX_HISTORY]

    def reset_search(self) -> None:
        self.search_query = ""
        self.search_results = []
        self.search_cursor = 0
