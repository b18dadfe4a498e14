"""Favorites list."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Group
from rich.text import Text

from ..components import hint, pokemon_list, render_breadcrumbs, title_panel
from ..router import register_screen
from ..state import Screen

if TYPE_CHECKING:
    from rich.console import RenderableType

    from ..router import Router


@register_screen(Screen.FAVORITES)
def render_favorites(router: Router) -> RenderableType:
    nav = router.nav
    parts: list[RenderableType] = [render_breadcrumbs(router), title_panel("⭐ Favorites")]

    if nav.current_list():
        offset, visible = nav.visible_list()
        parts.append(pokemon_list(visible, offset=offset, cursor=nav.state.favorites_cursor, language=router.language))
        parts.append(Text(""))
        parts.append(hint(f"Total: {len(nav.current_list())} Pokémon"))
    else:
        parts.append(hint("No favorites yet. Press f on a Pokémon's details to add one."))

    parts.extend([Text(""), hint("↑/↓ move   Enter select   Esc back")])
    return Group(*parts)
