"""Unit tests for Router class."""
from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import readchar
from rich.console import Console

import pokedex.tui  # noqa: F401  (registers screens)
from pokedex.models.pokemon import Pokedex
from pokedex.tui.art import FileArtProvider
from pokedex.tui.navigator import Navigator
from pokedex.tui.router import SCREENS, Router, register_screen
from pokedex.tui.state import RenderMode, Screen


@pytest.fixture
def mock_settings():
    """Create mock settings."""
    settings = MagicMock()
    settings.POKEDEX_LANGUAGE = "en"
    return settings


def _scripted(keys):
    it = iter(keys)

    def read_key():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_key


def _router(nav, settings, tmp_path: Path, keys=()) -> tuple[Router, io.StringIO]:
    out = io.StringIO()
    console = Console(file=out, width=100, height=40, force_terminal=False)
    router = Router(console, settings, nav, FileArtProvider(tmp_path / "art"), read_key=_scripted(keys), screen=False)
    return router, out


def test_router_initialization(sample_pokedex, favorites, mock_settings, tmp_path):
    """Test router initializes with correct components."""
    nav = Navigator(sample_pokedex, favorites)
    router, _ = _router(nav, mock_settings, tmp_path)

    assert router.settings == mock_settings
    assert router.nav is nav
    assert router.language == "en"


def test_every_screen_is_registered():
    assert set(SCREENS) == set(Screen)


@pytest.mark.parametrize("screen", list(Screen))
def test_every_screen_renders(sample_pokedex, favorites, mock_settings, tmp_path, screen):
    nav = Navigator(sample_pokedex, favorites)
    nav.state.screen = screen
    router, out = _router(nav, mock_settings, tmp_path)

    router.console.print(router.render())

    assert out.getvalue().strip()


def test_register_screen_decorator():
    """Test screen registration decorator."""
    original_screens = SCREENS.copy()
    SCREENS.clear()

    @register_screen(Screen.MAIN)
    def test_screen_fn(router):
        return "main"

    assert SCREENS[Screen.MAIN] is test_screen_fn

    SCREENS.clear()
    SCREENS.update(original_screens)


def test_unknown_screen_falls_back_to_main(sample_pokedex, favorites, mock_settings, tmp_path):
    nav = Navigator(sample_pokedex, favorites)
    nav.state.screen = Screen.DETAIL
    router, _ = _router(nav, mock_settings, tmp_path)

    original_screens = SCREENS.copy()
    try:
        del SCREENS[Screen.DETAIL]
        router.render()
    finally:
        SCREENS.clear()
        SCREENS.update(original_screens)

    assert nav.screen is Screen.MAIN


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (readchar.key.UP, "up"),
        (readchar.key.DOWN, "down"),
        (readchar.key.LEFT, "left"),
        (readchar.key.RIGHT, "right"),
        (readchar.key.ENTER, "enter"),
        (readchar.key.ESC, "esc"),
        ("\x7f", "backspace"),
        ("q", "q"),
        (" ", " "),
        ("", None),
        ("\x1b[15~", None),
    ],
)
def test_normalize_key(raw, expected):
    assert Router._normalize_key(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("\x1bj", ["esc", "j"]),
        ("\x1b\x1b", ["esc", "esc"]),
        ("\x1b\r", ["esc", "enter"]),
        (readchar.key.ESC, ["esc"]),
        (readchar.key.UP, ["up"]),
        ("\x1b[15~", []),
        ("\x1bOP", []),
        ("", []),
    ],
)
def test_split_keys(raw, expected):
    assert Router._split_keys(raw) == expected


def test_escape_from_real_key_reader_goes_back(sample_pokedex, favorites, mock_settings, tmp_path, monkeypatch):
    """Esc followed by another key arrives from readchar as one string."""
    posix_read = pytest.importorskip("readchar._posix_read")
    chars = iter(["\x1b", "j"])

    def fake_readchar():
        try:
            return next(chars)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(posix_read, "readchar", fake_readchar)

    nav = Navigator(sample_pokedex, favorites)
    nav.handle_key("3")
    nav.handle_key("enter")
    assert nav.screen is Screen.BROWSE_GENERATION_LIST

    router, _ = _router(nav, mock_settings, tmp_path)
    router.read_key = posix_read.readkey

    router.run()

    assert nav.screen is Screen.BROWSE_GENERATION
    assert nav.state.generation_cursor == 1
    assert nav.state.session_history[-1] == "browse_generation"


def test_run_until_quit(sample_pokedex, favorites, mock_settings, tmp_path):
    nav = Navigator(sample_pokedex, favorites)
    router, _ = _router(nav, mock_settings, tmp_path, keys=[readchar.key.RIGHT, readchar.key.ENTER, "f", "q", "q"])

    router.run()

    assert nav.current().id == 4
    assert favorites.is_favorite(4)
    assert nav.state.session_history == ["main", "detail", "main"]


def test_run_ends_on_end_of_input(sample_pokedex, favorites, mock_settings, tmp_path):
    nav = Navigator(sample_pokedex, favorites)
    router, _ = _router(nav, mock_settings, tmp_path, keys=["1", "p", "i"])

    router.run()

    assert nav.screen is Screen.SEARCH
    assert [p.id for p in nav.state.search_results] == [25]


def test_run_with_empty_catalog(favorites, mock_settings, tmp_path):
    nav = Navigator(Pokedex(), favorites)
    router, _ = _router(nav, mock_settings, tmp_path, keys=["q"])

    router.run()

    assert nav.current() is None


def test_art_files_are_preferred(sample_pokedex, tmp_path):
    art_dir = tmp_path / "art"
    art_dir.mkdir()
    (art_dir / "25.ascii").write_text("PIKA", encoding="utf-8")
    provider = FileArtProvider(art_dir)
    pikachu = sample_pokedex.get_by_id(25)

    assert provider.get_art(pikachu, shiny=False, mode=RenderMode.HALF_BLOCK) == "PIKA"
    assert provider.path_for(pikachu, shiny=True, mode=RenderMode.SIXEL) == art_dir / "25_shiny.sixel"
    assert provider.get_art(pikachu, shiny=True, mode=RenderMode.HALF_BLOCK) == pikachu.art_shiny


def test_sixel_art_is_written_untouched(sample_pokedex, favorites, mock_settings, tmp_path):
    art_dir = tmp_path / "art"
    art_dir.mkdir()
    payload = "\x1bPq#0;2;0;0;0" + "~" * 300 + "\x1b\\"
    (art_dir / "1.sixel").write_text(payload + "\n", encoding="utf-8")

    nav = Navigator(sample_pokedex, favorites)
    nav.handle_key("v")
    assert nav.state.render_mode is RenderMode.SIXEL

    out = io.StringIO()
    console = Console(file=out, width=80, height=40, force_terminal=True)
    router = Router(console, mock_settings, nav, FileArtProvider(art_dir), read_key=_scripted([]), screen=False)

    console.print(router.render())

    assert payload in out.getvalue()
