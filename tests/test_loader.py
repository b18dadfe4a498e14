from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from pokedex.errors import CatalogLoadError
from pokedex.loader import build_pokedex, load_catalog, normalize_type
from pokedex.models.generation import get_generation, infer_generation


def _write(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def test_sample_catalog_loads_by_default():
    pokedex = load_catalog()
    assert pokedex.count == 5
    assert pokedex.get_by_name("Pikachu").id == 25
    assert pokedex.get_by_id(1).types == ["grass", "poison"]
    assert pokedex.get_by_id(150).stats.total == 680


def test_catalog_file_list_form(tmp_path: Path):
    path = _write(tmp_path / "catalog.json", [
        {"id": 152, "name_en": "Chikorita", "types": ["Grama"]},
        {"id": 906, "name_en": "Sprigatito", "name_pt": "Sprigatito", "types": ["grass"]},
    ])

    pokedex = load_catalog(path)

    chikorita = pokedex.get_by_id(152)
    assert chikorita.types == ["grass"]
    assert chikorita.name_pt == "Chikorita"
    assert chikorita.generation == 2
    assert pokedex.get_by_id(906).generation == 9


def test_catalog_file_with_move_pool(tmp_path: Path):
    path = _write(tmp_path / "catalog.json", {
        "moves": [
            {"name_en": "Ember", "name_pt": "Brasas", "type": "fogo", "power": 40, "category": "Special"},
        ],
        "pokemon": [
            {
                "id": 4,
                "name_en": "Charmander",
                "types": ["fire"],
                "moves": [{"name_en": "Ember"}, {"name_en": "Made Up Move", "power": 999}],
            },
        ],
    })

    pokemon = load_catalog(path).get_by_id(4)

    assert [m.name_en for m in pokemon.signature_moves] == ["Ember"]
    ember = pokemon.signature_moves[0]
    assert ember.type == "fire"
    assert ember.category == "special"
    assert ember.display_name("pt") == "Brasas"


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(CatalogLoadError, match="not found"):
        load_catalog(tmp_path / "missing.json")


def test_invalid_json_raises(tmp_path: Path):
    path = tmp_path / "catalog.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(CatalogLoadError, match="invalid JSON"):
        load_catalog(path)


def test_wrong_top_level_shape_raises(tmp_path: Path):
    with pytest.raises(CatalogLoadError):
        load_catalog(_write(tmp_path / "catalog.json", {"pokemon": "nope"}))
    with pytest.raises(CatalogLoadError):
        load_catalog(_write(tmp_path / "catalog2.json", {"pokemon": [], "moves": {}}))


@pytest.mark.parametrize(
    "record",
    [
        {"id": 0, "name_en": "Zero", "types": ["normal"]},
        {"id": 1, "name_en": "NoTypes", "types": []},
        {"id": 1, "name_en": "ThreeTypes", "types": ["fire", "water", "grass"]},
        {"id": 1, "name_en": "BadGen", "types": ["fire"], "generation": 10},
        {"name_en": "NoId", "types": ["fire"]},
    ],
)
def test_invalid_record_reports_position(record):
    with pytest.raises(CatalogLoadError, match="record #1"):
        build_pokedex([{"id": 1, "name_en": "Ok", "types": ["normal"]}, record])


def test_name_collision_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="pokedex.loader"):
        pokedex = build_pokedex([
            {"id": 1, "name_en": "Twin", "types": ["normal"]},
            {"id": 2, "name_en": "Twin", "types": ["normal"]},
        ])

    assert pokedex.get_by_name("Twin").id == 2
    assert "already maps to #1" in caplog.text


def test_normalize_type():
    assert normalize_type(" Água ") == "water"
    assert normalize_type("Erva") == "grass"
    assert normalize_type("Fire") == "fire"
    assert normalize_type("") == ""


def test_infer_generation_bounds():
    assert infer_generation(1) == 1
    assert infer_generation(151) == 1
    assert infer_generation(152) == 2
    assert infer_generation(493) == 4
    assert infer_generation(905) == 8
    assert infer_generation(1000) == 9


def test_get_generation():
    assert get_generation(1).region == "Kanto"
    assert get_generation(9).display_name("pt") == "Nona Geração"
    assert get_generation(42) is None
