"""Tests for the Pokedex catalog index and search."""
from __future__ import annotations

from pokedex.models.pokemon import Pokedex, Pokemon, PokemonFilter


def _pokemon(pokemon_id: int, name: str, types: list[str], generation: int = 1, name_pt: str | None = None) -> Pokemon:
    return Pokemon(id=pokemon_id, name_en=name, name_pt=name_pt or name, generation=generation, types=types)


def test_sample_catalog_neighbours_wrap(sample_pokedex):
    ids = [p.id for p in sample_pokedex]
    assert ids == [1, 4, 7, 25, 150]

    assert sample_pokedex.get_next(150).id == 1
    assert sample_pokedex.get_prev(1).id == 150
    assert sample_pokedex.get_next(7).id == 25
    assert sample_pokedex.get_prev(25).id == 7


def test_next_and_prev_are_inverse_for_every_record(sample_pokedex):
    for pokemon in sample_pokedex:
        assert sample_pokedex.get_prev(sample_pokedex.get_next(pokemon.id).id) is pokemon
        assert sample_pokedex.get_next(sample_pokedex.get_prev(pokemon.id).id) is pokemon


def test_unknown_id_falls_back_to_first_and_last(sample_pokedex):
    assert sample_pokedex.get_next(999).id == 1
    assert sample_pokedex.get_prev(999).id == 150


def test_empty_pokedex_has_no_neighbours():
    pokedex = Pokedex()
    assert pokedex.first() is None
    assert pokedex.get_next(1) is None
    assert pokedex.get_prev(1) is None
    assert pokedex.search(PokemonFilter(query="a")) == []
    assert len(pokedex) == 0


def test_indexes_point_at_the_same_record():
    pokedex = Pokedex()
    bulbasaur = _pokemon(1, "Bulbasaur", ["grass", "poison"])
    pokedex.add_pokemon(bulbasaur)

    assert pokedex.get_by_id(1) is bulbasaur
    assert pokedex.get_by_name("Bulbasaur") is bulbasaur
    assert pokedex.get_by_generation(1) == [bulbasaur]
    assert pokedex.get_by_type("grass") == [bulbasaur]
    assert pokedex.get_by_type("poison") == [bulbasaur]
    assert pokedex.count == 1


def test_both_names_are_indexed():
    pokedex = Pokedex()
    mewtwo = _pokemon(150, "Mewtwo", ["psychic"], name_pt="Mewtwo-PT")
    pokedex.add_pokemon(mewtwo)

    assert pokedex.get_by_name("Mewtwo") is mewtwo
    assert pokedex.get_by_name("Mewtwo-PT") is mewtwo
    assert pokedex.get_by_name("mewtwo") is None


def test_name_collision_last_insert_wins():
    pokedex = Pokedex()
    first = _pokemon(1, "Twin", ["normal"])
    second = _pokemon(2, "Twin", ["normal"])
    pokedex.add_pokemon(first)
    pokedex.add_pokemon(second)

    assert pokedex.get_by_name("Twin") is second
    assert pokedex.count == 2


def test_group_lookups_return_copies():
    pokedex = Pokedex()
    pokedex.add_pokemon(_pokemon(4, "Charmander", ["fire"]))

    fire = pokedex.get_by_type("fire")
    fire.clear()
    assert len(pokedex.get_by_type("fire")) == 1
    assert pokedex.get_by_type("dragon") == []
    assert pokedex.get_by_generation(9) == []


def test_search_by_number_is_exact(starters_pokedex):
    assert [p.id for p in starters_pokedex.search(PokemonFilter(query="4"))] == [4]
    assert [p.id for p in starters_pokedex.search(PokemonFilter(query="152"))] == [152]
    assert starters_pokedex.search(PokemonFilter(query="15")) == []


def test_search_by_name_is_case_insensitive_substring(starters_pokedex):
    results = starters_pokedex.search(PokemonFilter(query="CHAR"))
    assert [p.name_en for p in results] == ["Charmander", "Charmeleon", "Charizard"]


def test_search_combines_filters(starters_pokedex):
    fire_flying = starters_pokedex.search(PokemonFilter(type="flying"))
    assert [p.id for p in fire_flying] == [6]

    gen2 = starters_pokedex.search(PokemonFilter(generation=2))
    assert [p.id for p in gen2] == [152]

    assert starters_pokedex.search(PokemonFilter(query="char", type="water")) == []
    assert len(starters_pokedex.search(PokemonFilter())) == starters_pokedex.count


def test_search_preserves_insertion_order():
    pokedex = Pokedex()
    for pokemon in (_pokemon(25, "Pikachu", ["electric"]), _pokemon(1, "Bulbasaur", ["grass"])):
        pokedex.add_pokemon(pokemon)

    assert [p.id for p in pokedex.search(PokemonFilter(query="a"))] == [25, 1]


def test_types_in_use_follow_first_appearance(starters_pokedex):
    assert starters_pokedex.types_in_use() == ["grass", "poison", "fire", "flying", "water"]


def test_primary_type_and_display_name():
    pokemon = _pokemon(7, "Squirtle", ["water"], name_pt="Squirtle-PT")
    assert pokemon.primary_type == "water"
    assert pokemon.display_name("pt") == "Squirtle-PT"
    assert pokemon.display_name("en") == "Squirtle"


def test_empty_filter_returns_everything_in_order(sample_pokedex):
    assert sample_pokedex.search(PokemonFilter()) == list(sample_pokedex)


def test_numeric_query_matches_id(sample_pokedex):
    assert [p.name_en for p in sample_pokedex.search(PokemonFilter(query="25"))] == ["Pikachu"]
    assert [p.id for p in sample_pokedex.search(PokemonFilter(query="+7"))] == [7]
