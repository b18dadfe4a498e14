"""TUI (Terminal User Interface) module for the Pokédex browser.

Provides the key-driven navigation state machine and the screens that draw it.
"""
from . import screens  # noqa: F401  (registers screen renderers)
from .art import ArtProvider, FileArtProvider
from .navigator import Navigator
from .router import Router
from .state import NavigationState, RenderMode, Screen

__all__ = [
    "ArtProvider",
    "FileArtProvider",
    "NavigationState",
    "Navigator",
    "RenderMode",
    "Router",
    "Screen",
]
