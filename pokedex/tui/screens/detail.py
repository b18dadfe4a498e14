"""Detail view of the current Pokémon."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Group
from rich.text import Text

from ..components import art_block, detail_table, hint, no_pokemon_panel, render_breadcrumbs, status_line, type_badges
from ..router import register_screen
from ..state import Screen

if TYPE_CHECKING:
    from rich.console import RenderableType

    from ..router import Router


@register_screen(Screen.DETAIL)
def render_detail(router: Router) -> RenderableType:
    nav = router.nav
    pokemon = nav.current()
    if pokemon is None:
        return no_pokemon_panel()

    header = Text(f"#{pokemon.id} {pokemon.display_name(router.language)} ", style="bold yellow1")
    header.append_text(type_badges(pokemon))

    favorite = Text("[f] ⭐ Favorite", style="yellow1")
    if nav.current_is_favorite:
        favorite.append("  ★ saved", style="bold yellow1")

    mode = Text()
    if nav.state.show_shiny:
        mode.append("  [ Normal ]  ")
        mode.append("[ Shiny ✨ ] ◄", style="bold yellow1")
    else:
        mode.append("◄ [ Normal ]", style="bold deep_sky_blue1")
        mode.append("  [ Shiny ✨ ]")

    parts: list[RenderableType] = [
        render_breadcrumbs(router),
        header,
        art_block(router, pokemon),
        favorite,
        mode,
        Text(""),
        detail_table(pokemon, language=router.language),
        Text(""),
        hint("[s] shiny   [f] favorite   [◀/▶] browse   [q] back"),
    ]
    warning = status_line(router)
    if warning is not None:
        parts.append(warning)
    return Group(*parts)
