"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont les couches externes (API HTTP, CLI) ont besoin de l'extraction
sans spécifier comment ces besoins sont satisfaits.

- IMediaScraper : Recherche et extraction de titres IMDb
"""

from src.core.ports.scraper import IMediaScraper

__all__ = [
    "IMediaScraper",
]
