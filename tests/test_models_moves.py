from __future__ import annotations

from pokedex.models.moves import MovePool, score_move, select_signature_moves
from pokedex.models.pokemon import Move, Pokemon


def _pikachu() -> Pokemon:
    return Pokemon(id=25, name_en="Pikachu", name_pt="Pikachu", generation=1, types=["electric"])


def test_score_same_type_and_status_bonus():
    pikachu = _pikachu()
    assert score_move(pikachu, Move("Choque do Trovão", "Thunderbolt", "electric", 90, "special")) == 140
    assert score_move(pikachu, Move("Cauda de Ferro", "Iron Tail", "steel", 100)) == 100
    assert score_move(pikachu, Move("Onda de Trovão", "Thunder Wave", "electric", 0, "status")) == 70


def test_sample_pikachu_moves_ranked(sample_pokedex):
    moves = sample_pokedex.get_by_id(25).signature_moves
    assert [m.name_en for m in moves] == ["Thunderbolt", "Iron Tail", "Thunder Wave", "Quick Attack"]


def test_selection_keeps_top_five_and_drops_duplicates():
    pikachu = _pikachu()
    candidates = [Move(f"m{i}", f"Move {i}", "normal", power=i * 10) for i in range(8)]
    candidates.append(Move("dup", "Move 7", "electric", power=500))

    selected = select_signature_moves(pikachu, candidates)

    assert len(selected) == 5
    assert [m.name_en for m in selected] == ["Move 7", "Move 6", "Move 5", "Move 4", "Move 3"]
    assert selected[0].power == 70


def test_ties_keep_original_order():
    pikachu = _pikachu()
    a = Move("a", "Alpha", "normal", 40)
    b = Move("b", "Beta", "normal", 40)
    assert select_signature_moves(pikachu, [a, b]) == [a, b]


def test_pool_resolves_and_filters_unknown_moves():
    pool = MovePool([Move("Choque do Trovão", "Thunderbolt", "electric", 90, "special")])
    candidates = [
        Move("?", "Thunderbolt", "normal", 0),
        Move("?", "Splash", "water", 0),
    ]

    selected = select_signature_moves(_pikachu(), candidates, pool)

    assert selected == [pool.get("Thunderbolt")]
    assert pool.by_type["electric"] == selected
    assert pool.get("Splash") is None
