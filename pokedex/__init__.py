"""pokedex: a terminal Pokédex browser with search, filters and favorites."""

__version__ = "0.1.0"
