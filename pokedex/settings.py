from __future__ import annotations

from pathlib import Path
from typing import Literal

import typer
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "pokedex"


def app_dir() -> Path:
    """Per-user data directory (e.g. ~/.config/pokedex on Linux)."""
    return Path(typer.get_app_dir(APP_NAME))


class Settings(BaseSettings):
    """Configuration for the Pokédex browser.

    Values are loaded from environment variables and `.env`.

    Notes:
    - Leave POKEDEX_CATALOG_PATH unset to browse the bundled sample catalog.
    - Favorites and logs default to the per-user app directory, so they are the
      same wherever the command is run from. The favorites file and its
      directory are only created when the first favorite is saved.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Data
    POKEDEX_CATALOG_PATH: Path | None = Field(default=None)
    POKEDEX_FAVORITES_PATH: Path = Field(default_factory=lambda: app_dir() / "favorites.json")
    POKEDEX_ART_DIR: Path = Field(default=Path("assets/art"))

    # Display
    POKEDEX_LANGUAGE: Literal["en", "pt"] = Field(default="en")
    POKEDEX_SEARCH_WINDOW: int = Field(default=8, ge=1)
    POKEDEX_LIST_WINDOW: int = Field(default=10, ge=1)

    # Logging (diagnostic; the TUI owns the terminal so logs go to a file)
    # Unset: <app dir>/logs. Relative paths are taken from the working directory.
    POKEDEX_LOG_DIR: Path | None = Field(default=None)
    POKEDEX_LOG_LEVEL: str = Field(default="INFO")
    # Timed rotation retention count (days). Old log files are auto-deleted.
    POKEDEX_LOG_BACKUP_COUNT: int = Field(default=14)


def load_settings() -> Settings:
    return Settings()
