"""Persisted set of favorite Pokémon ids.

On disk the set is a JSON object mapping string ids to `true`:

    {"7": true, "25": true}

Every mutation writes the whole file. Writes go to a temp file first and are
moved into place with `os.replace`, so a crash never leaves half a file.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path

from ..errors import FavoritesLoadError, FavoritesPersistError

logger = logging.getLogger(__name__)


def _parse_favorites(raw: object, path: Path) -> set[int]:
    if not isinstance(raw, dict):
        raise FavoritesLoadError(f"{path}: expected a JSON object of id -> true")
    ids: set[int] = set()
    for key, value in raw.items():
        try:
            pokemon_id = int(key)
        except (TypeError, ValueError):
            raise FavoritesLoadError(f"{path}: invalid favorite id {key!r}") from None
        if not isinstance(value, bool):
            raise FavoritesLoadError(f"{path}: favorite {key!r} must be true or false")
        if value:
            ids.add(pokemon_id)
    return ids


class FavoritesStore:
    """Favorite ids with synchronous, best-effort persistence.

    A failed write raises FavoritesPersistError but the in-memory change is
    kept; the next successful write brings the file back in line.
    """

    def __init__(self, path: Path, favorites: set[int] | None = None) -> None:
        self.path = Path(path)
        self._favorites: set[int] = set(favorites or ())

    @classmethod
    def open(cls, path: Path) -> FavoritesStore:
        """Load the store from `path`. A missing file is an empty store."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No favorites file at %s, starting empty", path)
            return cls(path)
        except OSError as e:
            raise FavoritesLoadError(f"{path}: {e}") from e

        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise FavoritesLoadError(f"{path}: invalid JSON ({e.msg} at line {e.lineno})") from e

        store = cls(path, _parse_favorites(raw, path))
        logger.info("Loaded %d favorites from %s", store.count, path)
        return store

    @classmethod
    def recover(cls, path: Path) -> FavoritesStore:
        """Move a malformed favorites file aside and start with an empty store."""
        path = Path(path)
        if path.exists():
            stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            backup = path.with_name(f"{path.name}.corrupt-{stamp}")
            os.replace(path, backup)
            logger.warning("Moved malformed favorites file %s to %s", path, backup)
        return cls(path)

    @property
    def count(self) -> int:
        return len(self._favorites)

    def is_favorite(self, pokemon_id: int) -> bool:
        return pokemon_id in self._favorites

    def get_all(self) -> set[int]:
        return set(self._favorites)

    def sorted_ids(self) -> list[int]:
        return sorted(self._favorites)

    def add_favorite(self, pokemon_id: int) -> None:
        self._favorites.add(pokemon_id)
        self.save()

    def remove_favorite(self, pokemon_id: int) -> None:
        self._favorites.discard(pokemon_id)
        self.save()

    def toggle_favorite(self, pokemon_id: int) -> bool:
        """Flip the favorite flag of `pokemon_id` and return the new state."""
        if pokemon_id in self._favorites:
            self._favorites.discard(pokemon_id)
            is_favorite = False
        else:
            self._favorites.add(pokemon_id)
            is_favorite = True
        self.save()
        return is_favorite

    def to_json(self) -> str:
        payload = {str(pokemon_id): True for pokemon_id in sorted(self._favorites)}
        return json.dumps(payload, indent=2) + "\n"

    def save(self) -> None:
        data = self.to_json()
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(data)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            logger.warning("Could not save favorites to %s: %s", self.path, e)
            raise FavoritesPersistError(f"could not save favorites to {self.path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
