"""Browse by type and by generation."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Group
from rich.text import Text

from ..components import CURSOR_STYLE, hint, pokemon_list, render_breadcrumbs, title_panel, type_emoji
from ..router import register_screen
from ..state import Screen

if TYPE_CHECKING:
    from rich.console import RenderableType

    from ..router import Router


def _option(text: str, selected: bool) -> Text:
    return Text(f"{'>' if selected else ' '} {text}", style=CURSOR_STYLE if selected else "white")


@register_screen(Screen.BROWSE_TYPE)
def render_browse_type(router: Router) -> RenderableType:
    nav = router.nav
    rows = []
    for i, type_name in enumerate(nav.type_names):
        count = len(nav.pokedex.by_type.get(type_name, ()))
        rows.append(_option(f"{type_emoji(type_name)} {type_name:<12} - {count:>3} Pokémon", i == nav.state.type_cursor))
    return Group(
        render_breadcrumbs(router),
        title_panel("Browse by type"),
        *rows,
        Text(""),
        hint("↑/↓ move   Enter select   Esc back"),
    )


@register_screen(Screen.BROWSE_GENERATION)
def render_browse_generation(router: Router) -> RenderableType:
    nav = router.nav
    rows = []
    for i, gen in enumerate(nav.generations):
        count = len(nav.pokedex.by_generation.get(gen.id, ()))
        label = f"{gen.display_name(router.language):<20} ({gen.region:<10}) - {count:>3} Pokémon"
        rows.append(_option(label, i == nav.state.generation_cursor))
    return Group(
        render_breadcrumbs(router),
        title_panel("Browse by generation"),
        *rows,
        Text(""),
        hint("↑/↓ move   Enter select   Esc back"),
    )


@register_screen(Screen.BROWSE_GENERATION_LIST)
def render_generation_list(router: Router) -> RenderableType:
    nav = router.nav
    gen = nav.selected_generation()
    title = f"{gen.display_name(router.language)} - {gen.region}" if gen else "Generation"
    offset, visible = nav.visible_list()
    return Group(
        render_breadcrumbs(router),
        title_panel(title),
        pokemon_list(visible, offset=offset, cursor=nav.state.generation_list_cursor, language=router.language),
        Text(""),
        hint(f"{len(nav.current_list())} Pokémon   ↑/↓ move   Enter select   Esc back"),
    )
