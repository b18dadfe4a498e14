from __future__ import annotations


class PokedexError(RuntimeError):
    pass


class CatalogLoadError(PokedexError):
    """The catalog file could not be read or contains invalid records."""


class FavoritesLoadError(PokedexError):
    """The favorites file exists but is not a valid favorites mapping."""


class FavoritesPersistError(PokedexError):
    """Writing the favorites file failed.

    The in-memory favorites set has already been changed when this is raised.
    """
