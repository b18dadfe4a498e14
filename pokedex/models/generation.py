"""Generations and type names: the option lists of the browse screens."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Generation:
    id: int
    name_pt: str
    name_en: str
    region: str

    def display_name(self, language: str = "en") -> str:
        return self.name_pt if language == "pt" else self.name_en


GENERATIONS: tuple[Generation, ...] = (
    Generation(1, "Primeira Geração", "Generation I", "Kanto"),
    Generation(2, "Segunda Geração", "Generation II", "Johto"),
    Generation(3, "Terceira Geração", "Generation III", "Hoenn"),
    Generation(4, "Quarta Geração", "Generation IV", "Sinnoh"),
    Generation(5, "Quinta Geração", "Generation V", "Unova"),
    Generation(6, "Sexta Geração", "Generation VI", "Kalos"),
    Generation(7, "Sétima Geração", "Generation VII", "Alola"),
    Generation(8, "Oitava Geração", "Generation VIII", "Galar"),
    Generation(9, "Nona Geração", "Generation IX", "Paldea"),
)

# Last national dex number of each generation, in order.
_GENERATION_BOUNDS = (151, 251, 386, 493, 649, 721, 809, 905)

TYPE_NAMES: tuple[str, ...] = (
    "normal",
    "fire",
    "water",
    "grass",
    "electric",
    "ice",
    "fighting",
    "poison",
    "ground",
    "flying",
    "psychic",
    "bug",
    "rock",
    "ghost",
    "dragon",
    "dark",
    "steel",
    "fairy",
)


def get_generation(gen_id: int) -> Generation | None:
    for gen in GENERATIONS:
        if gen.id == gen_id:
            return gen
    return None


def infer_generation(pokemon_id: int) -> int:
    """Guess the generation of a national dex number from the id ranges."""
    for gen_id, last_id in enumerate(_GENERATION_BOUNDS, start=1):
        if pokemon_id <= last_id:
            return gen_id
    return len(_GENERATION_BOUNDS) + 1
