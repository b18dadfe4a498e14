"""Screen state machine for the Pokédex browser."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from ..errors import FavoritesPersistError
from ..models.favorites import FavoritesStore
from ..models.generation import GENERATIONS, TYPE_NAMES, Generation
from ..models.pokemon import Pokedex, Pokemon, PokemonFilter
from .state import NavigationState, RenderMode, Screen, visible_window

logger = logging.getLogger(__name__)

EXIT = "exit"

EXIT_KEYS = {"q", "esc"}
SELECT_KEYS = {"enter", " "}
UP_KEYS = {"up", "k"}
DOWN_KEYS = {"down", "j"}
PREV_KEYS = {"left", "h"}
NEXT_KEYS = {"right", "l"}


class Navigator:
    """Applies one symbolic key at a time to a NavigationState.

    Keys are the names delivered by the Router: "up", "down", "left", "right",
    "enter", "esc", "backspace" or a single printable character.

    Screen transitions:
    - q/esc from any screen goes to its parent; from the main view it ends the
      session (`handle_key` returns "exit").
    - The generation list's parent is the generation picker; every other
      screen's parent is the main view.
    """

    SCREEN_LABELS = {
        Screen.MAIN: "Pokédex",
        Screen.SEARCH: "Search",
        Screen.BROWSE_TYPE: "Types",
        Screen.BROWSE_GENERATION: "Generations",
        Screen.BROWSE_GENERATION_LIST: "Generation",
        Screen.FAVORITES: "Favorites",
        Screen.DETAIL: "Details",
    }

    PARENTS = {
        Screen.BROWSE_GENERATION_LIST: Screen.BROWSE_GENERATION,
    }

    def __init__(
        self,
        pokedex: Pokedex,
        favorites: FavoritesStore,
        state: NavigationState | None = None,
        *,
        type_names: Sequence[str] = TYPE_NAMES,
        generations: Sequence[Generation] = GENERATIONS,
        search_window: int = 8,
        list_window: int = 10,
    ):
        self.pokedex = pokedex
        self.favorites = favorites
        self.state = state or NavigationState()
        self.type_names = list(type_names)
        self.generations = list(generations)
        self.search_window = search_window
        self.list_window = list_window
        if self.state.current is None:
            self.state.current = pokedex.first()

    # ------------------------------------------------------------------
    # Read accessors for the renderer
    # ------------------------------------------------------------------

    @property
    def screen(self) -> Screen:
        return self.state.screen

    def current(self) -> Pokemon | None:
        """Current Pokémon; falls back to the first catalog entry."""
        if self.state.current is None:
            self.state.current = self.pokedex.first()
        return self.state.current

    @property
    def current_is_favorite(self) -> bool:
        pokemon = self.current()
        return pokemon is not None and self.favorites.is_favorite(pokemon.id)

    def current_list(self) -> list[Pokemon]:
        return self.state.pokemon_list

    def list_cursor(self) -> int:
        """Cursor of whichever list screen is active."""
        if self.state.screen is Screen.FAVORITES:
            return self.state.favorites_cursor
        if self.state.screen is Screen.BROWSE_GENERATION_LIST:
            return self.state.generation_list_cursor
        return self.state.pokemon_list_cursor

    def visible_results(self) -> tuple[int, list[Pokemon]]:
        return visible_window(self.state.search_results, self.state.search_cursor, self.search_window)

    def visible_list(self) -> tuple[int, list[Pokemon]]:
        return visible_window(self.state.pokemon_list, self.list_cursor(), self.list_window)

    def selected_generation(self) -> Generation | None:
        if 0 <= self.state.generation_cursor < len(self.generations):
            return self.generations[self.state.generation_cursor]
        return None

    def selected_type(self) -> str | None:
        if 0 <= self.state.type_cursor < len(self.type_names):
            return self.type_names[self.state.type_cursor]
        return None

    def breadcrumbs(self) -> str:
        screens = [Screen.MAIN]
        if self.state.screen is not Screen.MAIN:
            parent = self.parent(self.state.screen)
            if parent is not Screen.MAIN:
                screens.append(parent)
            screens.append(self.state.screen)
        return " > ".join(self.SCREEN_LABELS.get(s, s.value) for s in screens)

    @classmethod
    def parent(cls, screen: Screen) -> Screen:
        return cls.PARENTS.get(screen, Screen.MAIN)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def home(self) -> None:
        self.state.screen = Screen.MAIN

    def resize(self, width: int, height: int) -> None:
        if width > 0:
            self.state.width = width
        if height > 0:
            self.state.height = height

    def handle_key(self, key: str) -> str | None:
        """Apply `key` to the state. Returns "exit" when the session should end."""
        self.state.status_message = None

        if key in EXIT_KEYS:
            if self.state.screen is Screen.MAIN:
                return EXIT
            self.state.screen = self.parent(self.state.screen)
            return None

        handler = {
            Screen.MAIN: self._update_main,
            Screen.SEARCH: self._update_search,
            Screen.BROWSE_TYPE: self._update_browse_type,
            Screen.BROWSE_GENERATION: self._update_browse_generation,
            Screen.BROWSE_GENERATION_LIST: self._update_generation_list,
            Screen.FAVORITES: self._update_favorites,
            Screen.DETAIL: self._update_detail,
        }[self.state.screen]
        handler(key)
        return None

    # ------------------------------------------------------------------
    # Per-screen updates
    # ------------------------------------------------------------------

    def _update_main(self, key: str) -> None:
        st = self.state
        if key in PREV_KEYS:
            self._step(-1)
        elif key in NEXT_KEYS:
            self._step(1)
        elif key == "1":
            st.reset_search()
            st.screen = Screen.SEARCH
        elif key == "2":
            st.type_cursor = 0
            st.screen = Screen.BROWSE_TYPE
        elif key == "3":
            st.generation_cursor = 0
            st.screen = Screen.BROWSE_GENERATION
        elif key == "4":
            st.pokemon_list = self._favorite_pokemon()
            st.favorites_cursor = 0
            st.screen = Screen.FAVORITES
        elif key == "v":
            st.render_mode = (
                RenderMode.SIXEL if st.render_mode is RenderMode.HALF_BLOCK else RenderMode.HALF_BLOCK
            )
        elif key in SELECT_KEYS:
            if self.current() is not None:
                st.screen = Screen.DETAIL

    def _update_search(self, key: str) -> None:
        st = self.state
        if key == "backspace":
            if st.search_query:
                st.search_query = st.search_query[:-1]
                self._run_search()
        elif key == "enter":
            if 0 <= st.search_cursor < len(st.search_results):
                self._select(st.search_results[st.search_cursor])
        elif key == "up":
            st.search_cursor = _move_cursor(st.search_cursor, -1, len(st.search_results))
        elif key == "down":
            st.search_cursor = _move_cursor(st.search_cursor, 1, len(st.search_results))
        elif len(key) == 1 and key.isprintable():
            st.search_query += key
            self._run_search()

    def _run_search(self) -> None:
        st = self.state
        if st.search_query:
            st.search_results = self.pokedex.search(PokemonFilter(query=st.search_query))
        else:
            st.search_results = []
        st.search_cursor = 0

    def _update_browse_type(self, key: str) -> None:
        st = self.state
        if key in UP_KEYS:
            st.type_cursor = _move_cursor(st.type_cursor, -1, len(self.type_names))
        elif key in DOWN_KEYS:
            st.type_cursor = _move_cursor(st.type_cursor, 1, len(self.type_names))
        elif key in SELECT_KEYS:
            type_name = self.selected_type()
            if type_name is None:
                return
            st.pokemon_list = self.pokedex.get_by_type(type_name)
            st.pokemon_list_cursor = 0
            if st.pokemon_list:
                st.current = st.pokemon_list[0]
            st.screen = Screen.MAIN

    def _update_browse_generation(self, key: str) -> None:
        st = self.state
        if key in UP_KEYS:
            st.generation_cursor = _move_cursor(st.generation_cursor, -1, len(self.generations))
        elif key in DOWN_KEYS:
            st.generation_cursor = _move_cursor(st.generation_cursor, 1, len(self.generations))
        elif key in SELECT_KEYS:
            generation = self.selected_generation()
            if generation is None:
                return
            st.pokemon_list = self.pokedex.get_by_generation(generation.id)
            st.generation_list_cursor = 0
            if st.pokemon_list:
                st.screen = Screen.BROWSE_GENERATION_LIST

    def _update_generation_list(self, key: str) -> None:
        st = self.state
        if key in UP_KEYS:
            st.generation_list_cursor = _move_cursor(st.generation_list_cursor, -1, len(st.pokemon_list))
        elif key in DOWN_KEYS:
            st.generation_list_cursor = _move_cursor(st.generation_list_cursor, 1, len(st.pokemon_list))
        elif key in SELECT_KEYS:
            if 0 <= st.generation_list_cursor < len(st.pokemon_list):
                self._select(st.pokemon_list[st.generation_list_cursor])

    def _update_favorites(self, key: str) -> None:
        st = self.state
        if key in UP_KEYS:
            st.favorites_cursor = _move_cursor(st.favorites_cursor, -1, len(st.pokemon_list))
        elif key in DOWN_KEYS:
            st.favorites_cursor = _move_cursor(st.favorites_cursor, 1, len(st.pokemon_list))
        elif key in SELECT_KEYS:
            if 0 <= st.favorites_cursor < len(st.pokemon_list):
                self._select(st.pokemon_list[st.favorites_cursor])

    def _update_detail(self, key: str) -> None:
        st = self.state
        if key == "s":
            st.show_shiny = not st.show_shiny
        elif key == "f":
            self._toggle_current_favorite()
        elif key in PREV_KEYS:
            self._step(-1)
        elif key in NEXT_KEYS:
            self._step(1)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _select(self, pokemon: Pokemon) -> None:
        self.state.current = pokemon
        self.state.screen = Screen.MAIN

    def _step(self, direction: int) -> None:
        pokemon = self.current()
        if pokemon is None:
            return
        if direction < 0:
            self.state.current = self.pokedex.get_prev(pokemon.id)
        else:
            self.state.current = self.pokedex.get_next(pokemon.id)

    def _favorite_pokemon(self) -> list[Pokemon]:
        result: list[Pokemon] = []
        for pokemon_id in self.favorites.sorted_ids():
            pokemon = self.pokedex.get_by_id(pokemon_id)
            if pokemon is not None:
                result.append(pokemon)
        return result

    def _toggle_current_favorite(self) -> None:
        pokemon = self.current()
        if pokemon is None:
            return
        try:
            self.favorites.toggle_favorite(pokemon.id)
        except FavoritesPersistError as e:
            logger.warning("Favorite change for #%d not saved: %s", pokemon.id, e)
            self.state.status_message = f"Favorite changed but not saved: {e}"


def _move_cursor(cursor: int, delta: int, length: int) -> int:
    """Move a cursor by `delta`, clamped to [0, length - 1]. Empty lists stay put."""
    if length <= 0:
        return cursor
    return max(0, min(cursor + delta, length - 1))
