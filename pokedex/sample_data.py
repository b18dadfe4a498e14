"""Bundled sample catalog, used when no catalog file is configured.

Records use the same shape as a catalog JSON file (see `pokedex.loader`).
"""
from __future__ import annotations

SAMPLE_RECORDS: list[dict] = [
    {
        "id": 1,
        "name_pt": "Bulbasaur",
        "name_en": "Bulbasaur",
        "generation": 1,
        "types": ["grass", "poison"],
        "height": 7.0,
        "weight": 69.0,
        "base_experience": 64,
        "stats": {"hp": 45, "attack": 49, "defense": 49, "sp_atk": 65, "sp_def": 65, "speed": 45},
        "moves": [
            {"name_pt": "Folha Navalha", "name_en": "Razor Leaf", "type": "grass", "power": 55, "category": "physical"},
            {"name_pt": "Chicote de Vinha", "name_en": "Vine Whip", "type": "grass", "power": 45, "category": "physical"},
        ],
        "evolution": {
            "base": {"pokemon_id": 1, "name": "Bulbasaur", "trigger": "level-up"},
            "evolutions": [
                {"pokemon_id": 2, "name": "Ivysaur", "trigger": "level-up", "min_level": 16},
                {"pokemon_id": 3, "name": "Venusaur", "trigger": "level-up", "min_level": 32},
            ],
        },
    },
    {
        "id": 4,
        "name_pt": "Charmander",
        "name_en": "Charmander",
        "generation": 1,
        "types": ["fire"],
        "height": 6.0,
        "weight": 85.0,
        "base_experience": 62,
        "stats": {"hp": 39, "attack": 52, "defense": 43, "sp_atk": 60, "sp_def": 50, "speed": 65},
        "moves": [
            {"name_pt": "Brasas", "name_en": "Ember", "type": "fire", "power": 40, "category": "special"},
            {"name_pt": "Lança-Chamas", "name_en": "Flamethrower", "type": "fire", "power": 90, "category": "special"},
        ],
        "evolution": {
            "base": {"pokemon_id": 4, "name": "Charmander", "trigger": "level-up"},
            "evolutions": [
                {"pokemon_id": 5, "name": "Charmeleon", "trigger": "level-up", "min_level": 16},
                {"pokemon_id": 6, "name": "Charizard", "trigger": "level-up", "min_level": 36},
            ],
        },
    },
    {
        "id": 7,
        "name_pt": "Squirtle",
        "name_en": "Squirtle",
        "generation": 1,
        "types": ["water"],
        "height": 5.0,
        "weight": 90.0,
        "base_experience": 63,
        "stats": {"hp": 44, "attack": 48, "defense": 65, "sp_atk": 50, "sp_def": 64, "speed": 43},
        "moves": [
            {"name_pt": "Revólver d'Água", "name_en": "Water Gun", "type": "water", "power": 40, "category": "special"},
            {"name_pt": "Hidro Bomba", "name_en": "Hydro Pump", "type": "water", "power": 110, "category": "special"},
        ],
        "evolution": {
            "base": {"pokemon_id": 7, "name": "Squirtle", "trigger": "level-up"},
            "evolutions": [
                {"pokemon_id": 8, "name": "Wartortle", "trigger": "level-up", "min_level": 16},
                {"pokemon_id": 9, "name": "Blastoise", "trigger": "level-up", "min_level": 36},
            ],
        },
    },
    {
        "id": 25,
        "name_pt": "Pikachu",
        "name_en": "Pikachu",
        "generation": 1,
        "types": ["electric"],
        "height": 4.0,
        "weight": 60.0,
        "base_experience": 112,
        "stats": {"hp": 35, "attack": 55, "defense": 40, "sp_atk": 50, "sp_def": 50, "speed": 90},
        "moves": [
            {"name_pt": "Choque do Trovão", "name_en": "Thunderbolt", "type": "electric", "power": 90, "category": "special"},
            {"name_pt": "Ataque Rápido", "name_en": "Quick Attack", "type": "normal", "power": 40, "category": "physical"},
            {"name_pt": "Cauda de Ferro", "name_en": "Iron Tail", "type": "steel", "power": 100, "category": "physical"},
            {"name_pt": "Onda de Trovão", "name_en": "Thunder Wave", "type": "electric", "power": 0, "category": "status"},
        ],
        "evolution": {
            "base": {"pokemon_id": 172, "name": "Pichu", "trigger": "friendship"},
            "evolutions": [
                {"pokemon_id": 25, "name": "Pikachu", "trigger": "stone", "item": "Thunder Stone"},
                {"pokemon_id": 26, "name": "Raichu", "trigger": ""},
            ],
        },
    },
    {
        "id": 150,
        "name_pt": "Mewtwo",
        "name_en": "Mewtwo",
        "generation": 1,
        "types": ["psychic"],
        "height": 20.0,
        "weight": 1220.0,
        "base_experience": 340,
        "stats": {"hp": 106, "attack": 110, "defense": 90, "sp_atk": 154, "sp_def": 90, "speed": 130},
        "moves": [
            {"name_pt": "Psíquico", "name_en": "Psychic", "type": "psychic", "power": 90, "category": "special"},
            {"name_pt": "Bola Sombria", "name_en": "Shadow Ball", "type": "ghost", "power": 80, "category": "special"},
            {"name_pt": "Psicoataque", "name_en": "Psystrike", "type": "psychic", "power": 100, "category": "special"},
        ],
        "evolution": None,
    },
]
