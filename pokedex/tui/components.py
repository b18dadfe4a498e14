"""Reusable UI components for the TUI and CLI."""
from __future__ import annotations

from typing import TYPE_CHECKING

import questionary
from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.segment import ControlType, Segment
from rich.table import Table
from rich.text import Text

from .state import RenderMode

if TYPE_CHECKING:
    from rich.console import Console, ConsoleOptions, RenderableType, RenderResult

    from ..models.pokemon import Pokemon
    from .router import Router


# ═══════════════════════════════════════════════════════════════════════════════
# BRAND STYLING
# ═══════════════════════════════════════════════════════════════════════════════

BRAND_STYLE = questionary.Style([
    ("qmark", "fg:#00b4d8 bold"),         # Cyan accent
    ("question", "bold"),
    ("answer", "fg:#ffd60a bold"),         # Pikachu yellow for answers
    ("highlighted", "fg:#00b4d8 bold"),    # Highlighted item
    ("pointer", "fg:#ffd60a bold"),        # Arrow pointer
    ("selected", "fg:#90e0ef"),            # Selected item
])

TYPE_COLORS = {
    "normal": "grey70",
    "fire": "dark_orange",
    "water": "dodger_blue2",
    "grass": "chartreuse3",
    "electric": "yellow1",
    "ice": "turquoise2",
    "fighting": "red3",
    "poison": "medium_purple2",
    "ground": "orange3",
    "flying": "light_slate_blue",
    "psychic": "indian_red1",
    "bug": "yellow4",
    "rock": "light_goldenrod3",
    "ghost": "slate_blue1",
    "dragon": "purple",
    "dark": "grey37",
    "steel": "light_steel_blue",
    "fairy": "hot_pink",
}

TYPE_EMOJI = {
    "normal": "⚪",
    "fire": "🔥",
    "water": "💧",
    "grass": "🌿",
    "electric": "⚡",
    "ice": "❄️",
    "fighting": "👊",
    "poison": "☠️",
    "ground": "🌍",
    "flying": "🕊️",
    "psychic": "🔮",
    "bug": "🐛",
    "rock": "🪨",
    "ghost": "👻",
    "dragon": "🐉",
    "dark": "🌑",
    "steel": "⚙️",
    "fairy": "🧚",
}

CURSOR_STYLE = "bold yellow1"
STAT_MAX = 150
STAT_BAR_WIDTH = 15


def type_color(type_name: str | None) -> str:
    return TYPE_COLORS.get(type_name or "", "white")


def type_emoji(type_name: str | None) -> str:
    return TYPE_EMOJI.get(type_name or "", "⚪")


def type_badges(pokemon: Pokemon) -> Text:
    text = Text()
    for type_name in pokemon.types:
        text.append(f"{type_emoji(type_name)} {type_name} ", style=f"bold {type_color(type_name)}")
    return text


def stat_bar(value: int, max_value: int = STAT_MAX, width: int = STAT_BAR_WIDTH) -> str:
    if max_value <= 0:
        max_value = STAT_MAX
    filled = min(width, int(value / max_value * width))
    return "█" * filled + "░" * (width - filled) + f" {value:>3}"


# ═══════════════════════════════════════════════════════════════════════════════
# SCREEN PIECES
# ═══════════════════════════════════════════════════════════════════════════════

def title_panel(title: str, subtitle: str | None = None) -> Panel:
    return Panel(
        Align.center(Text(title, style="bold deep_sky_blue1")),
        subtitle=subtitle,
        border_style="deep_sky_blue1",
        padding=(0, 2),
    )


def render_breadcrumbs(router: Router) -> Text:
    return Text(router.nav.breadcrumbs(), style="dim")


def hint(text: str) -> Text:
    return Text(text, style="dim")


def status_line(router: Router) -> Text | None:
    message = router.nav.state.status_message
    if not message:
        return None
    return Text(f"⚠  {message}", style="yellow")


# DCS introducer that opens a sixel image.
SIXEL_START = "\x1bP"


class SixelArt:
    """Raw sixel image data written to the terminal untouched.

    The payload goes out as a single control segment: rich gives it no cell
    width, so it is never wrapped, cropped or styled.
    """

    def __init__(self, payload: str):
        self.payload = payload

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield Segment(self.payload, None, [(ControlType.CURSOR_MOVE_TO_COLUMN, 0)])
        yield Segment.line()


def art_block(router: Router, pokemon: Pokemon) -> RenderableType:
    state = router.nav.state
    art = router.art.get_art(pokemon, shiny=state.show_shiny, mode=state.render_mode)
    if not art.strip():
        return Align.center(Text("(no art)", style="dim"))
    if state.render_mode is RenderMode.SIXEL and art.lstrip("\n").startswith(SIXEL_START):
        return SixelArt(art.strip("\n"))
    if "\x1b[" in art:
        # Pre-coloured art carries its own ANSI styling.
        return Align.center(Text.from_ansi(art))
    return Align.center(Text(art.strip("\n"), style=type_color(pokemon.primary_type)))


def pokemon_row(pokemon: Pokemon, *, selected: bool, language: str) -> Text:
    cursor = ">" if selected else " "
    line = f"{cursor} #{pokemon.id:>4} {pokemon.display_name(language):<20} {type_emoji(pokemon.primary_type)}"
    return Text(line, style=CURSOR_STYLE if selected else "white")


def pokemon_list(
    items: list[Pokemon],
    *,
    offset: int,
    cursor: int,
    language: str,
) -> Group:
    rows = [
        pokemon_row(pokemon, selected=(offset + i == cursor), language=language)
        for i, pokemon in enumerate(items)
    ]
    return Group(*rows)


def no_pokemon_panel() -> Panel:
    return Panel.fit(
        "[yellow]No Pokémon loaded.[/yellow]\n\n[dim]→ Check POKEDEX_CATALOG_PATH, then press q to quit.[/dim]",
        title="Empty catalog",
        border_style="yellow",
    )


# ═══════════════════════════════════════════════════════════════════════════════
# CLI OUTPUT
# ═══════════════════════════════════════════════════════════════════════════════

def render_error(
    console: Console,
    title: str,
    cause: str,
    action: str | None = None,
) -> None:
    """Render a friendly error panel with 3-part structure.

    Args:
        console: Rich Console for output
        title: Error title
        cause: What caused the error
        action: Suggested action to resolve
    """
    content = f"[bold red]✗ {title}[/bold red]\n\n"
    content += f"[yellow]Cause:[/yellow] {cause}\n"

    if action:
        content += f"\n[dim]→ {action}[/dim]"

    console.print(Panel.fit(content, border_style="red", title="Error"))
    console.print()


def render_stats_table(console: Console, stats: dict[str, str | int], title: str = "Stats") -> None:
    """Render a two-column statistics table.

    Args:
        console: Rich Console for output
        stats: Statistics to display
        title: Table title
    """
    table = Table(title=f"[bold]{title}[/bold]", show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", style="cyan", justify="right")

    for key, value in stats.items():
        if isinstance(value, int):
            table.add_row(key, f"{value:,}")
        else:
            table.add_row(key, str(value))

    console.print(table)
    console.print()


def pokemon_table(results: list[Pokemon], *, title: str, language: str, favorites: set[int]) -> Table:
    table = Table(title=f"[bold]{title}[/bold]")
    table.add_column("#", style="cyan", no_wrap=True, justify="right")
    table.add_column("★", justify="center", width=2)
    table.add_column("Name", style="bold")
    table.add_column("Types")
    table.add_column("Gen", justify="right")

    for pokemon in results:
        table.add_row(
            str(pokemon.id),
            "★" if pokemon.id in favorites else "",
            pokemon.display_name(language),
            type_badges(pokemon),
            str(pokemon.generation),
        )
    return table


def detail_table(pokemon: Pokemon, *, language: str) -> Group:
    """Measurements, stats, evolution and signature moves of one Pokémon."""
    parts: list[RenderableType] = [
        Text(f"Height {pokemon.height / 10:.1f} m   Weight {pokemon.weight / 10:.1f} kg   "
             f"Base exp {pokemon.base_experience}"),
        Text(""),
        Text("Stats", style="bold deep_sky_blue1"),
    ]
    for name, value in pokemon.stats.as_pairs():
        parts.append(Text(f"  {name:<8} {stat_bar(value)}"))

    if pokemon.evolution is not None:
        chain = pokemon.evolution
        current_stage = chain.find_stage(pokemon.id)
        line = Text("  ")
        for index, stage in enumerate(chain.stages()):
            if index:
                requirement = stage.requirement()
                line.append(f" → {'(' + requirement + ') ' if requirement else ''}", style="dim")
            line.append(stage.name, style="bold yellow1" if index == current_stage else "white")
        parts.extend([Text(""), Text("Evolution", style="bold deep_sky_blue1"), line])

    if pokemon.signature_moves:
        parts.extend([Text(""), Text("Signature moves", style="bold deep_sky_blue1")])
        for move in pokemon.signature_moves:
            parts.append(Text(
                f"  • {move.display_name(language)} ({type_emoji(move.type)} {move.type}) "
                f"- {move.power} power, {move.category}"
            ))
    return Group(*parts)
