"""Main Pokédex view."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.align import Align
from rich.console import Group
from rich.text import Text

from ..components import art_block, hint, no_pokemon_panel, status_line, title_panel, type_badges
from ..router import register_screen
from ..state import Screen

if TYPE_CHECKING:
    from rich.console import RenderableType

    from ..router import Router

MENU_ITEMS = [
    ("1", "🔍 Search"),
    ("2", "🎨 Types"),
    ("3", "📚 Generations"),
    ("4", "⭐ Favorites"),
]


@register_screen(Screen.MAIN)
def render_main(router: Router) -> RenderableType:
    nav = router.nav
    pokemon = nav.current()
    if pokemon is None:
        return Group(title_panel("📖 POKÉDEX"), no_pokemon_panel())

    name = Text(f"#{pokemon.id} {pokemon.display_name(router.language)} ", style="bold")
    if nav.current_is_favorite:
        name.append("⭐ ")
    name.append_text(type_badges(pokemon))

    width = max(len(label) for _, label in MENU_ITEMS) + 4
    menu = Group(*(Align.center(Text(f"[{key}] {label}".ljust(width))) for key, label in MENU_ITEMS))

    parts = [
        title_panel("📖 POKÉDEX", subtitle=f"{nav.pokedex.count} Pokémon"),
        art_block(router, pokemon),
        Align.center(name),
        Text(""),
        menu,
        Text(""),
        Align.center(Text("◀ Previous   Enter for details   Next ▶")),
        Align.center(hint(f"[v] art mode: {nav.state.render_mode.value}   [q] quit")),
    ]
    warning = status_line(router)
    if warning is not None:
        parts.append(warning)
    return Group(*parts)
