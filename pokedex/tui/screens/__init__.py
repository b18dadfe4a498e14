"""Screen renderers. Importing this package registers every screen."""
from . import browse, detail, favorites, main, search

__all__ = ["browse", "detail", "favorites", "main", "search"]
