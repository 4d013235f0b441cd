"""
Facade d'extraction IMDb implementant IMediaScraper.

Applique la politique d'echec du service : toute ScraperError est journalisee
et convertie en resultat absent (None) ou vide ([]). Une echeance optionnelle
annule l'extraction en cours; la page est tout de meme liberee par les
extracteurs (context manager).

Usage:
    scraper = IMDbScraper(title_extractor, season_crawler, search_extractor)
    item = await scraper.find_title("tt0111161", "fr")
    results = await scraper.search("Inception", "en", ContentType.MOVIE, 2010)
"""

import asyncio
import time
from typing import Awaitable, Optional, TypeVar

from loguru import logger
from playwright.async_api import Error as PlaywrightError

from src.adapters.imdb.search_extractor import SearchExtractor
from src.adapters.imdb.season_crawler import SeasonCrawler
from src.adapters.imdb.title_extractor import TitleExtractor
from src.core.entities.media import EpisodeRecord, SearchResultRecord, TitleRecord
from src.core.exceptions import ScraperError
from src.core.ports.scraper import IMediaScraper
from src.core.value_objects.content_type import ContentType

T = TypeVar("T")


class IMDbScraper(IMediaScraper):
    """
    Point d'entree de l'extraction pour l'API HTTP et la CLI.

    Chaque appel est independant : aucun cache, aucune deduplication des
    appels concurrents identiques.
    """

    def __init__(
        self,
        title_extractor: TitleExtractor,
        season_crawler: SeasonCrawler,
        search_extractor: SearchExtractor,
        default_timeout: Optional[float] = None,
    ) -> None:
        """
        Args:
            title_extractor: Extracteur des pages titre
            season_crawler: Extracteur des pages d'episodes
            search_extractor: Extracteur de la page de recherche
            default_timeout: Echeance par defaut en secondes (None = aucune)
        """
        self._title_extractor = title_extractor
        self._season_crawler = season_crawler
        self._search_extractor = search_extractor
        self._default_timeout = default_timeout

    async def find_title(
        self,
        imdb_id: str,
        language: str,
        include_episodes: bool = False,
        timeout: Optional[float] = None,
    ) -> Optional[TitleRecord]:
        return await self._run(
            "find_title",
            self._title_extractor.extract_title(imdb_id, language, include_episodes),
            timeout,
            imdb_id=imdb_id,
            language=language,
        )

    async def find_episodes(
        self,
        imdb_id: str,
        language: str,
        timeout: Optional[float] = None,
    ) -> Optional[list[EpisodeRecord]]:
        return await self._run(
            "find_episodes",
            self._season_crawler.extract_episodes(imdb_id, language),
            timeout,
            imdb_id=imdb_id,
            language=language,
        )

    async def search(
        self,
        query: str,
        language: str,
        content_type: Optional[ContentType] = None,
        year: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> list[SearchResultRecord]:
        results = await self._run(
            "search",
            self._search_extractor.search(query, language, content_type, year),
            timeout,
            query=query,
            language=language,
        )
        return results if results is not None else []

    async def _run(
        self,
        operation: str,
        extraction: Awaitable[T],
        timeout: Optional[float],
        **context,
    ) -> Optional[T]:
        deadline = timeout if timeout is not None else self._default_timeout
        started = time.perf_counter()
        try:
            async with asyncio.timeout(deadline):
                result = await extraction
        except TimeoutError:
            logger.error("Echeance depassee", operation=operation, timeout=deadline, **context)
            return None
        except ScraperError as e:
            logger.error(
                "Extraction en echec",
                operation=operation,
                error_type=type(e).__name__,
                error=str(e),
                **context,
            )
            return None
        except PlaywrightError as e:
            logger.error(
                "Erreur du navigateur pendant l'extraction",
                operation=operation,
                error=str(e),
                **context,
            )
            return None
        logger.info(
            "Extraction terminee",
            operation=operation,
            elapsed=round(time.perf_counter() - started, 3),
            **context,
        )
        return result
