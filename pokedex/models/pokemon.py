"""Pokémon records and the in-memory Pokédex catalog."""
from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from .evolution import EvolutionChain

_INT_QUERY = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class Stats:
    hp: int = 0
    attack: int = 0
    defense: int = 0
    sp_atk: int = 0
    sp_def: int = 0
    speed: int = 0

    def as_pairs(self) -> list[tuple[str, int]]:
        return [
            ("HP", self.hp),
            ("Attack", self.attack),
            ("Defense", self.defense),
            ("Sp.Atk", self.sp_atk),
            ("Sp.Def", self.sp_def),
            ("Speed", self.speed),
        ]

    @property
    def total(self) -> int:
        return self.hp + self.attack + self.defense + self.sp_atk + self.sp_def + self.speed


@dataclass(frozen=True)
class Move:
    name_pt: str
    name_en: str
    type: str
    power: int = 0
    category: str = "physical"  # physical | special | status

    def display_name(self, language: str = "en") -> str:
        return self.name_pt if language == "pt" else self.name_en


@dataclass(eq=False)
class Pokemon:
    """A single catalog record.

    Records are owned by the `Pokedex`; everything else holds references.
    Favorite status is not stored here, ask the FavoritesStore.
    """

    id: int
    name_en: str
    name_pt: str
    generation: int
    types: list[str]
    height: float = 0.0
    weight: float = 0.0
    base_experience: int = 0
    stats: Stats = field(default_factory=Stats)
    signature_moves: list[Move] = field(default_factory=list)
    evolution: EvolutionChain | None = None
    art_standard: str = ""
    art_shiny: str = ""

    @property
    def primary_type(self) -> str | None:
        return self.types[0] if self.types else None

    def has_type(self, type_name: str) -> bool:
        return type_name in self.types

    def display_name(self, language: str = "en") -> str:
        return self.name_pt if language == "pt" else self.name_en

    def matches_query(self, query: str) -> bool:
        """Numeric queries match the id exactly; any query may match a name substring."""
        if _INT_QUERY.match(query) and int(query) == self.id:
            return True
        needle = query.lower()
        return needle in self.name_pt.lower() or needle in self.name_en.lower()


@dataclass
class PokemonFilter:
    query: str = ""
    type: str = ""
    generation: int = 0


class Pokedex:
    """Insertion-ordered catalog with id, name, generation and type indexes."""

    def __init__(self) -> None:
        self.pokemon: list[Pokemon] = []
        self.by_id: dict[int, Pokemon] = {}
        self.by_name: dict[str, Pokemon] = {}
        self.by_generation: dict[int, list[Pokemon]] = {}
        self.by_type: dict[str, list[Pokemon]] = {}
        # First master-list position of each id, for neighbour lookups.
        self._position: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self.pokemon)

    def __iter__(self) -> Iterator[Pokemon]:
        return iter(self.pokemon)

    @property
    def count(self) -> int:
        return len(self.pokemon)

    def add_pokemon(self, pokemon: Pokemon) -> None:
        self._position.setdefault(pokemon.id, len(self.pokemon))
        self.pokemon.append(pokemon)
        self.by_id[pokemon.id] = pokemon
        # Both language variants point at the same record; a later insert wins.
        self.by_name[pokemon.name_en] = pokemon
        self.by_name[pokemon.name_pt] = pokemon

        self.by_generation.setdefault(pokemon.generation, []).append(pokemon)
        for type_name in pokemon.types:
            self.by_type.setdefault(type_name, []).append(pokemon)

    def first(self) -> Pokemon | None:
        return self.pokemon[0] if self.pokemon else None

    def get_by_id(self, pokemon_id: int) -> Pokemon | None:
        return self.by_id.get(pokemon_id)

    def get_by_name(self, name: str) -> Pokemon | None:
        return self.by_name.get(name)

    def search(self, filter: PokemonFilter) -> list[Pokemon]:
        results: list[Pokemon] = []
        for pokemon in self.pokemon:
            if filter.generation and pokemon.generation != filter.generation:
                continue
            if filter.type and not pokemon.has_type(filter.type):
                continue
            if filter.query and not pokemon.matches_query(filter.query):
                continue
            results.append(pokemon)
        return results

    def get_by_generation(self, generation: int) -> list[Pokemon]:
        return list(self.by_generation.get(generation, ()))

    def get_by_type(self, type_name: str) -> list[Pokemon]:
        return list(self.by_type.get(type_name, ()))

    def types_in_use(self) -> list[str]:
        return list(self.by_type)

    def get_next(self, pokemon_id: int) -> Pokemon | None:
        """Next record in insertion order, wrapping to the first.

        Unknown ids also resolve to the first record.
        """
        if not self.pokemon:
            return None
        index = self._position.get(pokemon_id)
        if index is not None and index < len(self.pokemon) - 1:
            return self.pokemon[index + 1]
        return self.pokemon[0]

    def get_prev(self, pokemon_id: int) -> Pokemon | None:
        """Previous record in insertion order, wrapping to the last.

        Unknown ids also resolve to the last record.
        """
        if not self.pokemon:
            return None
        index = self._position.get(pokemon_id)
        if index is not None and index > 0:
            return self.pokemon[index - 1]
        return self.pokemon[-1]
