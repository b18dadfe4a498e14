"""Build a Pokedex from a catalog JSON file or the bundled sample records.

A catalog file holds a JSON array of records, or an object with a "pokemon"
array and an optional "moves" pool. Each record looks like
`pokedex.sample_data.SAMPLE_RECORDS[0]`; only `id`, `name_en` and `types` are
required.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import CatalogLoadError
from .models.evolution import EvolutionChain, EvolutionStage, EvolutionTrigger
from .models.generation import infer_generation
from .models.moves import MovePool, select_signature_moves
from .models.pokemon import Move, Pokedex, Pokemon, Stats
from .sample_data import SAMPLE_RECORDS

logger = logging.getLogger(__name__)

# Portuguese type names used by older catalog exports.
TYPE_ALIASES = {
    "fogo": "fire",
    "água": "water",
    "agua": "water",
    "grama": "grass",
    "erva": "grass",
    "elétrico": "electric",
    "eletrico": "electric",
    "gelo": "ice",
    "lutador": "fighting",
    "veneno": "poison",
    "terra": "ground",
    "voador": "flying",
    "psíquico": "psychic",
    "psiquico": "psychic",
    "inseto": "bug",
    "pedra": "rock",
    "fantasma": "ghost",
    "dragão": "dragon",
    "dragao": "dragon",
    "sombrio": "dark",
    "metálico": "steel",
    "metalico": "steel",
    "fada": "fairy",
}


def normalize_type(name: str) -> str:
    s = str(name or "").strip().lower()
    return TYPE_ALIASES.get(s, s)


class StatsRecord(BaseModel):
    hp: int = 0
    attack: int = 0
    defense: int = 0
    sp_atk: int = 0
    sp_def: int = 0
    speed: int = 0


class MoveRecord(BaseModel):
    name_en: str
    name_pt: str | None = None
    type: str = "normal"
    power: int | None = 0
    category: str = "physical"

    @field_validator("type")
    @classmethod
    def _normalize_type(cls, v: str) -> str:
        return normalize_type(v)

    def to_move(self) -> Move:
        return Move(
            name_pt=self.name_pt or self.name_en,
            name_en=self.name_en,
            type=self.type,
            power=self.power or 0,
            category=self.category.strip().lower(),
        )


class StageRecord(BaseModel):
    pokemon_id: int
    name: str
    trigger: str | None = None
    min_level: int | None = 0
    item: str | None = None

    def to_stage(self) -> EvolutionStage:
        return EvolutionStage(
            pokemon_id=self.pokemon_id,
            name=self.name,
            trigger=EvolutionTrigger.parse(self.trigger),
            min_level=self.min_level or 0,
            item=self.item or None,
        )


class EvolutionRecord(BaseModel):
    base: StageRecord
    evolutions: list[StageRecord] = Field(default_factory=list)

    def to_chain(self) -> EvolutionChain:
        return EvolutionChain(
            base=self.base.to_stage(),
            evolutions=tuple(stage.to_stage() for stage in self.evolutions),
        )


class PokemonRecord(BaseModel):
    id: int = Field(gt=0)
    name_en: str
    name_pt: str | None = None
    generation: int | None = Field(default=None, ge=1, le=9)
    types: list[str] = Field(min_length=1, max_length=2)
    height: float = 0.0
    weight: float = 0.0
    base_experience: int | None = 0
    stats: StatsRecord = Field(default_factory=StatsRecord)
    moves: list[MoveRecord] = Field(default_factory=list)
    evolution: EvolutionRecord | None = None
    art_standard: str = ""
    art_shiny: str = ""

    @field_validator("types")
    @classmethod
    def _normalize_types(cls, v: list[str]) -> list[str]:
        return [normalize_type(t) for t in v]

    def to_pokemon(self, pool: MovePool | None = None) -> Pokemon:
        pokemon = Pokemon(
            id=self.id,
            name_en=self.name_en,
            name_pt=self.name_pt or self.name_en,
            generation=self.generation or infer_generation(self.id),
            types=list(self.types),
            height=self.height,
            weight=self.weight,
            base_experience=self.base_experience or 0,
            stats=Stats(**self.stats.model_dump()),
            evolution=self.evolution.to_chain() if self.evolution else None,
            art_standard=self.art_standard,
            art_shiny=self.art_shiny,
        )
        pokemon.signature_moves = select_signature_moves(
            pokemon, (m.to_move() for m in self.moves), pool
        )
        return pokemon


def build_move_pool(records: Iterable[dict], *, source: str = "<records>") -> MovePool:
    pool = MovePool()
    for position, raw in enumerate(records):
        try:
            pool.add_move(MoveRecord.model_validate(raw).to_move())
        except ValidationError as e:
            raise CatalogLoadError(f"{source}: move #{position} is invalid:\n{e}") from e
    return pool


def build_pokedex(
    records: Iterable[dict],
    *,
    pool: MovePool | None = None,
    source: str = "<records>",
) -> Pokedex:
    """Validate raw records and add them to a new Pokedex in order.

    With a move pool, each record's moves are resolved against it and moves
    missing from the pool are dropped before ranking.
    """
    parsed: list[PokemonRecord] = []
    for position, raw in enumerate(records):
        try:
            parsed.append(PokemonRecord.model_validate(raw))
        except ValidationError as e:
            raise CatalogLoadError(f"{source}: record #{position} is invalid:\n{e}") from e

    pokedex = Pokedex()
    for record in parsed:
        pokemon = record.to_pokemon(pool)
        for name in {pokemon.name_en, pokemon.name_pt}:
            existing = pokedex.get_by_name(name)
            if existing is not None and existing.id != pokemon.id:
                logger.warning(
                    "Name %r of #%d already maps to #%d; the later record wins",
                    name,
                    pokemon.id,
                    existing.id,
                )
        pokedex.add_pokemon(pokemon)
    return pokedex


def _read_catalog_file(path: Path) -> tuple[list, list | None]:
    """Return (pokemon records, move pool records or None)."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CatalogLoadError(f"catalog file not found: {path}") from e
    except OSError as e:
        raise CatalogLoadError(f"{path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"{path}: invalid JSON ({e.msg} at line {e.lineno})") from e

    moves = None
    if isinstance(raw, dict):
        moves = raw.get("moves")
        raw = raw.get("pokemon")
    if not isinstance(raw, list):
        raise CatalogLoadError(f"{path}: expected a list of Pokémon records")
    if moves is not None and not isinstance(moves, list):
        raise CatalogLoadError(f"{path}: \"moves\" must be a list of move records")
    return raw, moves


def load_catalog(path: Path | None = None) -> Pokedex:
    """Load the catalog from `path`, or the bundled sample when no path is given."""
    if path is None:
        pokedex = build_pokedex(SAMPLE_RECORDS, source="sample catalog")
        logger.info("Loaded sample catalog (%d Pokémon)", pokedex.count)
        return pokedex

    path = Path(path)
    records, move_records = _read_catalog_file(path)
    pool = build_move_pool(move_records, source=str(path)) if move_records is not None else None
    pokedex = build_pokedex(records, pool=pool, source=str(path))
    logger.info("Loaded catalog %s (%d Pokémon)", path, pokedex.count)
    return pokedex
