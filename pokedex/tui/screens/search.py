"""Incremental search screen."""
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


@register_screen(Screen.SEARCH)
def render_search(router: Router) -> RenderableType:
    """Query line plus a scrolling window of results."""
    nav = router.nav
    state = nav.state

    parts: list[RenderableType] = [
        render_breadcrumbs(router),
        title_panel("🔍 Search"),
        Text("Type a Pokémon name or number:", style="bold deep_sky_blue1"),
        Text(f"> {state.search_query}_", style="yellow1"),
        Text(""),
        Text("Results:", style="bold deep_sky_blue1"),
    ]

    if state.search_results:
        offset, visible = nav.visible_results()
        parts.append(pokemon_list(visible, offset=offset, cursor=state.search_cursor, language=router.language))
        parts.append(hint(f"{len(state.search_results)} match(es)"))
    elif state.search_query:
        parts.append(hint("No results found"))

    parts.extend([Text(""), hint("↑/↓ move   Enter select   Esc back")])
    return Group(*parts)
