"""Main event loop and screen registry for the TUI."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

import readchar
from rich.live import Live
from rich.panel import Panel

from .state import Screen

if TYPE_CHECKING:
    from rich.console import Console, RenderableType

    from ..settings import Settings
    from .art import ArtProvider
    from .navigator import Navigator

logger = logging.getLogger(__name__)

# Raw key sequences -> symbolic key names understood by the Navigator.
KEY_NAMES = {
    readchar.key.UP: "up",
    readchar.key.DOWN: "down",
    readchar.key.LEFT: "left",
    readchar.key.RIGHT: "right",
    readchar.key.ENTER: "enter",
    readchar.key.CR: "enter",
    readchar.key.LF: "enter",
    readchar.key.ESC: "esc",
    readchar.key.BACKSPACE: "backspace",
    "\x7f": "backspace",
    "\x08": "backspace",
}


class Router:
    """Main input loop with screen dispatch.

    The router reads one key at a time, hands it to the Navigator, and redraws
    the screen registered for the resulting state. Nothing else touches the
    navigation state, so each key is fully applied before the next is read.
    """

    def __init__(
        self,
        console: Console,
        settings: Settings,
        nav: Navigator,
        art: ArtProvider,
        *,
        read_key: Callable[[], str] = readchar.readkey,
        screen: bool = True,
    ):
        """Initialize router with dependencies.

        Args:
            console: Rich Console for output
            settings: Application settings
            nav: Navigator owning the session state
            art: Art lookup used by the main and detail screens
            read_key: Blocking key reader (readchar by default)
            screen: Draw on the alternate screen buffer
        """
        self.console = console
        self.settings = settings
        self.nav = nav
        self.art = art
        self.read_key = read_key
        self.screen = screen

    @property
    def language(self) -> str:
        return getattr(self.settings, "POKEDEX_LANGUAGE", "en")

    def render(self) -> RenderableType:
        """Render the screen registered for the current navigation state."""
        current_screen = self.nav.screen
        screen_fn = SCREENS.get(current_screen)

        if screen_fn is None:
            # Unknown screen - reset to home
            logger.warning("No renderer for screen %r, returning to main view", current_screen)
            self.nav.home()
            screen_fn = SCREENS.get(Screen.MAIN)
            if screen_fn is None:
                return Panel.fit("[yellow]Warning:[/yellow] no screens registered")

        return screen_fn(self)

    def run(self) -> None:
        """Run the input loop until the navigator asks to exit.

        Ctrl+C and end-of-input also end the session.
        """
        self._sync_size()
        self.nav.state.add_to_history(self.nav.screen)
        with Live(
            self.render(),
            console=self.console,
            screen=self.screen,
            auto_refresh=False,
            transient=not self.screen,
        ) as live:
            while True:
                try:
                    raw = self.read_key()
                except (KeyboardInterrupt, EOFError):
                    logger.info("Input closed, ending session")
                    break

                keys = self._split_keys(raw)
                if not keys:
                    continue

                self._sync_size()
                if self._apply(keys) == "exit":
                    break
                live.update(self.render(), refresh=True)

        logger.info("Session ended after %d screen visits", len(self.nav.state.session_history))

    def _apply(self, keys: list[str]) -> str | None:
        for key in keys:
            before = self.nav.screen
            if self.nav.handle_key(key) == "exit":
                return "exit"
            if self.nav.screen is not before:
                self.nav.state.add_to_history(self.nav.screen)
        return None

    def _sync_size(self) -> None:
        size = self.console.size
        self.nav.resize(size.width, size.height)

    @staticmethod
    def _normalize_key(raw: str | None) -> str | None:
        """Map a raw key sequence to a symbolic name.

        Single printable characters pass through unchanged; other escape
        sequences (function keys, unknown combos) are dropped.
        """
        if not raw:
            return None
        if raw in KEY_NAMES:
            return KEY_NAMES[raw]
        if len(raw) == 1 and raw.isprintable():
            return raw
        return None

    @classmethod
    def _split_keys(cls, raw: str | None) -> list[str]:
        """Turn one `readkey()` result into the symbolic keys it contains.

        readchar cannot return a lone Esc: it reads one more byte and hands
        back both, e.g. "\\x1bj". That becomes ["esc", "j"]. Unknown CSI/SS3
        sequences ("\\x1b[..." or "\\x1bO...") are function keys and dropped.
        """
        key = cls._normalize_key(raw)
        if key is not None:
            return [key]
        if not raw or not raw.startswith(readchar.key.ESC):
            return []
        rest = raw[1:]
        if rest[:1] in ("[", "O"):
            return []
        follow = cls._split_keys(rest)
        return ["esc", *follow]


# Screen registry - maps screens to render functions
SCREENS: dict[Screen, Callable[[Router], RenderableType]] = {}


def register_screen(screen: Screen):
    """Decorator to register a screen render function.

    Usage:
        @register_screen(Screen.MAIN)
        def render_main(router: Router) -> RenderableType:
            ...
    """
    def decorator(fn: Callable[[Router], RenderableType]):
        SCREENS[screen] = fn
        return fn
    return decorator
