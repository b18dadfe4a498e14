"""Art lookup for the main and detail screens."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from .state import RenderMode

if TYPE_CHECKING:
    from ..models.pokemon import Pokemon

logger = logging.getLogger(__name__)


class ArtProvider(Protocol):
    def get_art(self, pokemon: Pokemon, *, shiny: bool, mode: RenderMode) -> str: ...


class FileArtProvider:
    """Reads `<art_dir>/<id>[_shiny].<ascii|sixel>`, falling back to inline art.

    Files are cached after the first read.
    """

    def __init__(self, art_dir: Path):
        self.art_dir = Path(art_dir)
        self._cache: dict[Path, str | None] = {}

    def path_for(self, pokemon: Pokemon, *, shiny: bool, mode: RenderMode) -> Path:
        suffix = "_shiny" if shiny else ""
        return self.art_dir / f"{pokemon.id}{suffix}.{mode.value}"

    def _read(self, path: Path) -> str | None:
        if path not in self._cache:
            try:
                self._cache[path] = path.read_text(encoding="utf-8")
            except FileNotFoundError:
                self._cache[path] = None
            except OSError as e:
                logger.warning("Could not read art file %s: %s", path, e)
                self._cache[path] = None
        return self._cache[path]

    def get_art(self, pokemon: Pokemon, *, shiny: bool, mode: RenderMode) -> str:
        art = self._read(self.path_for(pokemon, shiny=shiny, mode=mode))
        if art is not None:
            return art
        return pokemon.art_shiny if shiny else pokemon.art_standard
