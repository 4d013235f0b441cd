"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.imdb_commands import (
    imdb_episodes,
    imdb_search,
    imdb_title,
)

__all__ = [
    "imdb_episodes",
    "imdb_search",
    "imdb_title",
]
