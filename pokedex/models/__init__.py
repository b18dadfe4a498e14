"""Catalog, favorites and evolution models."""
from .evolution import EvolutionChain, EvolutionStage, EvolutionTrigger
from .favorites import FavoritesStore
from .generation import GENERATIONS, TYPE_NAMES, Generation, get_generation, infer_generation
from .moves import MovePool, select_signature_moves
from .pokemon import Move, Pokedex, Pokemon, PokemonFilter, Stats

__all__ = [
    "EvolutionChain",
    "EvolutionStage",
    "EvolutionTrigger",
    "FavoritesStore",
    "GENERATIONS",
    "Generation",
    "Move",
    "MovePool",
    "Pokedex",
    "Pokemon",
    "PokemonFilter",
    "Stats",
    "TYPE_NAMES",
    "get_generation",
    "infer_generation",
    "select_signature_moves",
]
