from __future__ import annotations

import json
from typing import Optional

import questionary
import typer
from rich.console import Console
from rich.panel import Panel

from .errors import CatalogLoadError, FavoritesLoadError, FavoritesPersistError
from .loader import load_catalog, normalize_type
from .logging import setup_logging
from .models.favorites import FavoritesStore
from .models.pokemon import Pokedex, Pokemon, PokemonFilter
from .settings import Settings, load_settings
from .tui.components import BRAND_STYLE, detail_table, pokemon_table, render_error, render_stats_table, type_badges

app = typer.Typer(
    add_completion=False,
    help="pokedex: browse, search and bookmark Pokémon from the terminal",
    rich_markup_mode="rich",
)
favorites_app = typer.Typer(help="Manage the favorites list", rich_markup_mode="rich")
app.add_typer(favorites_app, name="favorites")
app.add_typer(favorites_app, name="fav", hidden=True)  # Alias

console = Console()


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def _load_catalog_or_exit(s: Settings) -> Pokedex:
    try:
        return load_catalog(s.POKEDEX_CATALOG_PATH)
    except CatalogLoadError as e:
        render_error(
            console,
            "Could not load the catalog",
            str(e),
            "Fix the file or unset POKEDEX_CATALOG_PATH to use the sample catalog.",
        )
        raise typer.Exit(code=1)


def _open_favorites(s: Settings, *, interactive: bool = False) -> FavoritesStore:
    """Open the favorites store.

    A malformed file is always reported. Interactive sessions may back it up
    and continue with an empty list; one-shot commands stop instead.
    """
    try:
        return FavoritesStore.open(s.POKEDEX_FAVORITES_PATH)
    except FavoritesLoadError as e:
        render_error(
            console,
            "Favorites file is malformed",
            str(e),
            f"Fix or delete {s.POKEDEX_FAVORITES_PATH}.",
        )
        if not interactive:
            raise typer.Exit(code=1)

    confirmed = questionary.confirm(
        "Back up the broken file and start with no favorites?",
        default=True,
        style=BRAND_STYLE,
    ).ask()
    if not confirmed:
        raise typer.Exit(code=1)
    return FavoritesStore.recover(s.POKEDEX_FAVORITES_PATH)


def _resolve_pokemon(pokedex: Pokedex, ref: str) -> Pokemon | None:
    """Look up by number, exact name, then the first search match."""
    ref = ref.strip()
    if ref.isdigit():
        return pokedex.get_by_id(int(ref))
    found = pokedex.get_by_name(ref)
    if found is not None:
        return found
    matches = pokedex.search(PokemonFilter(query=ref))
    return matches[0] if matches else None


def _require_pokemon(pokedex: Pokedex, pokemon_id: int) -> Pokemon:
    pokemon = pokedex.get_by_id(pokemon_id)
    if pokemon is None:
        console.print(f"[yellow]No Pokémon #{pokemon_id} in the catalog.[/yellow]")
        raise typer.Exit(code=1)
    return pokemon


def _persist_or_exit(action, pokemon: Pokemon) -> None:
    try:
        action(pokemon.id)
    except FavoritesPersistError as e:
        render_error(console, "Favorites not saved", str(e), "Check the file permissions and try again.")
        raise typer.Exit(code=1)


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN CALLBACK
# ═══════════════════════════════════════════════════════════════════════════════

@app.callback(invoke_without_command=True)
def _root(ctx: typer.Context):
    """
    [bold]pokedex[/bold]: a terminal Pokédex.

    [dim]Run without arguments to open the interactive browser.[/dim]

    [bold]Examples:[/bold]
      pokedex find char           # Search by name
      pokedex find --type fire    # Filter by type
      pokedex show 25             # Details for #25
      pokedex favorites list      # Your favorites
    """
    if ctx.invoked_subcommand is None:
        browse()
        raise typer.Exit(code=0)


# ═══════════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════════

@app.command("browse", help="[bold cyan]B[/bold cyan]rowse the Pokédex interactively")
def browse():
    """Open the interactive browser."""
    from .tui import FileArtProvider, Navigator, Router

    s = load_settings()
    setup_logging(s)

    pokedex = _load_catalog_or_exit(s)
    favorites = _open_favorites(s, interactive=True)

    nav = Navigator(
        pokedex,
        favorites,
        search_window=s.POKEDEX_SEARCH_WINDOW,
        list_window=s.POKEDEX_LIST_WINDOW,
    )
    Router(console, s, nav, FileArtProvider(s.POKEDEX_ART_DIR)).run()


@app.command("find", help="[bold cyan]F[/bold cyan]ind Pokémon by name, number, type or generation")
@app.command("search", hidden=True)  # Alias
def find(
    query: str = typer.Argument("", help="Name substring or national dex number"),
    type_name: Optional[str] = typer.Option(None, "--type", "-t", help="Only this type"),
    generation: int = typer.Option(0, "--gen", "-g", min=0, max=9, help="Only this generation"),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Search the catalog."""
    s = load_settings()
    setup_logging(s, console=True)
    pokedex = _load_catalog_or_exit(s)
    favorites = _open_favorites(s)

    results = pokedex.search(
        PokemonFilter(query=query, type=normalize_type(type_name or ""), generation=generation)
    )

    if json_out:
        payload = [
            {
                "id": p.id,
                "name_en": p.name_en,
                "name_pt": p.name_pt,
                "generation": p.generation,
                "types": p.types,
                "favorite": favorites.is_favorite(p.id),
            }
            for p in results
        ]
        console.print_json(json.dumps(payload, ensure_ascii=False))
        return

    if not results:
        console.print(f"[yellow]No results found for:[/yellow] {query!r}")
        return

    console.print(pokemon_table(
        results,
        title=f"Results for: [cyan]{query or '(all)'}[/cyan]",
        language=s.POKEDEX_LANGUAGE,
        favorites=favorites.get_all(),
    ))
    console.print(f"[dim]Showing {len(results)} results.[/dim]")


@app.command("show", help="[bold cyan]S[/bold cyan]how details for one Pokémon")
def show(ref: str = typer.Argument(..., help="National dex number or name")):
    s = load_settings()
    setup_logging(s, console=True)
    pokedex = _load_catalog_or_exit(s)
    favorites = _open_favorites(s)

    pokemon = _resolve_pokemon(pokedex, ref)
    if pokemon is None:
        console.print(f"[yellow]No Pokémon matches:[/yellow] {ref!r}")
        raise typer.Exit(code=1)

    title = f"#{pokemon.id} {pokemon.display_name(s.POKEDEX_LANGUAGE)}"
    if favorites.is_favorite(pokemon.id):
        title += " ⭐"
    console.print(type_badges(pokemon))
    console.print(Panel.fit(detail_table(pokemon, language=s.POKEDEX_LANGUAGE), title=f"[bold]{title}[/bold]"))


@app.command("status", help="Show configuration and catalog stats")
def status():
    s = load_settings()
    setup_logging(s, console=True)
    pokedex = _load_catalog_or_exit(s)
    favorites = _open_favorites(s)

    console.print(Panel.fit(
        "\n".join([
            f"[bold]Catalog:[/bold]     {s.POKEDEX_CATALOG_PATH or '[dim](bundled sample)[/dim]'}",
            f"[bold]Favorites:[/bold]   {s.POKEDEX_FAVORITES_PATH}",
            f"[bold]Art:[/bold]         {s.POKEDEX_ART_DIR}",
            f"[bold]Language:[/bold]    {s.POKEDEX_LANGUAGE}",
        ]),
        title="[bold]Configuration[/bold]",
    ))
    render_stats_table(console, {
        "Pokémon": pokedex.count,
        "Types in use": len(pokedex.types_in_use()),
        "Generations": len(pokedex.by_generation),
        "Favorites": favorites.count,
    }, title="Catalog")


# ═══════════════════════════════════════════════════════════════════════════════
# FAVORITES
# ═══════════════════════════════════════════════════════════════════════════════

@favorites_app.command("list", help="List favorite Pokémon")
def favorites_list(json_out: bool = typer.Option(False, "--json", help="Output as JSON")):
    s = load_settings()
    setup_logging(s, console=True)
    pokedex = _load_catalog_or_exit(s)
    favorites = _open_favorites(s)

    ids = favorites.sorted_ids()
    if json_out:
        console.print_json(json.dumps(ids))
        return

    resolved = [p for p in (pokedex.get_by_id(i) for i in ids) if p is not None]
    if not resolved:
        console.print("[dim]No favorites yet.[/dim]")
        return
    console.print(pokemon_table(
        resolved, title="Favorites", language=s.POKEDEX_LANGUAGE, favorites=set(ids)
    ))
    missing = len(ids) - len(resolved)
    if missing:
        console.print(f"[dim]{missing} favorite(s) not in the current catalog.[/dim]")


@favorites_app.command("add", help="Add a Pokémon to favorites")
def favorites_add(pokemon_id: int = typer.Argument(..., help="National dex number")):
    s = load_settings()
    setup_logging(s, console=True)
    pokedex = _load_catalog_or_exit(s)
    favorites = _open_favorites(s)

    pokemon = _require_pokemon(pokedex, pokemon_id)
    _persist_or_exit(favorites.add_favorite, pokemon)
    console.print(f"[green]✓[/green] #{pokemon.id} {pokemon.name_en} added to favorites")


@favorites_app.command("remove", help="Remove a Pokémon from favorites")
def favorites_remove(pokemon_id: int = typer.Argument(..., help="National dex number")):
    s = load_settings()
    setup_logging(s, console=True)
    favorites = _open_favorites(s)

    if not favorites.is_favorite(pokemon_id):
        console.print(f"[dim]#{pokemon_id} is not a favorite.[/dim]")
        return
    try:
        favorites.remove_favorite(pokemon_id)
    except FavoritesPersistError as e:
        render_error(console, "Favorites not saved", str(e), "Check the file permissions and try again.")
        raise typer.Exit(code=1)
    console.print(f"[green]✓[/green] #{pokemon_id} removed from favorites")


@favorites_app.command("toggle", help="Toggle a Pokémon's favorite flag")
def favorites_toggle(pokemon_id: int = typer.Argument(..., help="National dex number")):
    s = load_settings()
    setup_logging(s, console=True)
    pokedex = _load_catalog_or_exit(s)
    favorites = _open_favorites(s)

    pokemon = _require_pokemon(pokedex, pokemon_id)
    _persist_or_exit(favorites.toggle_favorite, pokemon)
    state = "now a favorite" if favorites.is_favorite(pokemon.id) else "no longer a favorite"
    console.print(f"[green]✓[/green] #{pokemon.id} {pokemon.name_en} is {state}")


def main():
    app()
