"""Entrypoint for `python -m pokedex`."""

from .cli import main


if __name__ == "__main__":
    main()
