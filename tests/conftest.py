from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    # When running via the venv's pytest entrypoint, the CWD is not guaranteed to
    # be on sys.path. Ensure the repository root (containing `pokedex/`) is importable.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()

from pokedex.loader import build_pokedex, load_catalog  # noqa: E402
from pokedex.models.favorites import FavoritesStore  # noqa: E402


def make_record(pokemon_id: int, name: str, types: list[str], **extra) -> dict:
    record = {"id": pokemon_id, "name_en": name, "name_pt": extra.pop("name_pt", name), "types": types}
    record.update(extra)
    return record


@pytest.fixture
def sample_pokedex():
    """The bundled five-Pokémon catalog (#1, #4, #7, #25, #150)."""
    return load_catalog()


@pytest.fixture
def starters_pokedex():
    """Kanto starter lines plus a gen-2 record, in dex order."""
    return build_pokedex([
        make_record(1, "Bulbasaur", ["grass", "poison"]),
        make_record(4, "Charmander", ["fire"]),
        make_record(5, "Charmeleon", ["fire"]),
        make_record(6, "Charizard", ["fire", "flying"]),
        make_record(7, "Squirtle", ["water"], name_pt="Squirtle"),
        make_record(152, "Chikorita", ["grass"]),
    ])


@pytest.fixture
def favorites(tmp_path: Path) -> FavoritesStore:
    return FavoritesStore(tmp_path / "favorites.json")
