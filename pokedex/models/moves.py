from __future__ import annotations

from collections.abc import Iterable

from .pokemon import Move, Pokemon

MAX_SIGNATURE_MOVES = 5

# Ranking bonuses
_SAME_TYPE_BONUS = 50
_STATUS_BONUS = 20


class MovePool:
    """All known moves, indexed by English name and by type."""

    def __init__(self, moves: Iterable[Move] = ()) -> None:
        self.moves: list[Move] = []
        self.by_name: dict[str, Move] = {}
        self.by_type: dict[str, list[Move]] = {}
        for move in moves:
            self.add_move(move)

    def add_move(self, move: Move) -> None:
        self.moves.append(move)
        self.by_name[move.name_en] = move
        self.by_type.setdefault(move.type, []).append(move)

    def get(self, name_en: str) -> Move | None:
        return self.by_name.get(name_en)


def score_move(pokemon: Pokemon, move: Move) -> int:
    score = move.power
    if move.type in pokemon.types:
        score += _SAME_TYPE_BONUS
    if move.category == "status":
        score += _STATUS_BONUS
    return score


def select_signature_moves(
    pokemon: Pokemon,
    candidates: Iterable[Move],
    pool: MovePool | None = None,
    *,
    limit: int = MAX_SIGNATURE_MOVES,
) -> list[Move]:
    """Rank a Pokémon's moves and keep the best `limit` of them.

    When a pool is given, candidates are resolved against it by English name
    and unknown moves are dropped. Ties keep their original order.
    """
    resolved: list[Move] = []
    seen: set[str] = set()
    for move in candidates:
        if move.name_en in seen:
            continue
        if pool is not None:
            pool_move = pool.get(move.name_en)
            if pool_move is None:
                continue
            move = pool_move
        seen.add(move.name_en)
        resolved.append(move)

    ranked = sorted(resolved, key=lambda m: score_move(pokemon, m), reverse=True)
    return ranked[:limit]
