"""
Extraction d'une page titre IMDb en TitleRecord.

Sources, par ordre de priorite :
1. Le bloc JSON-LD de la page (source de verite)
2. Le <title> de la page et la meta og:description (annee, duree)
3. Le selecteur de saisons (nombre de saisons des series)
"""

import json
from typing import Any, Optional

from loguru import logger
from playwright.async_api import Page
from playwright.async_api import Error as PlaywrightError

from src.adapters.browser.navigator import Navigator
from src.adapters.browser.session_manager import BrowserSessionManager
from src.adapters.imdb import field_parsers, selectors, urls
from src.adapters.imdb.dom import read_optional
from src.adapters.imdb.season_crawler import SeasonCrawler
from src.core.entities.media import EpisodeRecord, TitleRecord
from src.core.exceptions import ExtractionError, ScraperError
from src.core.value_objects.content_type import ContentType, classify


class TitleExtractor:
    """
    Extracteur des pages /title/<id>.

    Example:
        extractor = TitleExtractor(manager, navigator, crawler, base_url)
        record = await extractor.extract_title("tt0111161", "en")
    """

    def __init__(
        self,
        session_manager: BrowserSessionManager,
        navigator: Navigator,
        season_crawler: SeasonCrawler,
        base_url: str,
    ) -> None:
        self._session_manager = session_manager
        self._navigator = navigator
        self._season_crawler = season_crawler
        self._base_url = base_url

    async def extract_title(
        self,
        imdb_id: str,
        language: str,
        include_episodes: bool = False,
    ) -> TitleRecord:
        """
        Extrait un titre.

        Args:
            imdb_id: ID IMDb
            language: Code langue de la page
            include_episodes: Parcourir aussi les saisons (series uniquement)

        Raises:
            NavigationError: Si la page n'a pas pu etre chargee
            ExtractionError: Si le JSON-LD ou l'annee sont introuvables
            SessionError: Si aucune page n'a pu etre ouverte
        """
        url = urls.title_url(self._base_url, imdb_id, language)

        async with self._session_manager.page(language) as page:
            await self._navigator.navigate(page, url)

            data = await self._read_json_ld(page)
            page_title = await page.title()
            description = await read_optional(page, selectors.OG_DESCRIPTION, selectors.READ_CONTENT)
            content_type = classify(data.get("@type"))

            if content_type == ContentType.TV_EPISODE:
                year = field_parsers.parse_iso_year(data.get("datePublished"))
                runtime = field_parsers.parse_duration(
                    data.get("timeRequired") or data.get("duration")
                )
            else:
                year = field_parsers.parse_title_year(page_title)
                runtime = field_parsers.parse_description_runtime(description)

            if not year:
                raise ExtractionError(f"Year not found for {imdb_id} ({page_title!r})")

            seasons: Optional[int] = None
            if content_type == ContentType.TV_SERIES:
                seasons = field_parsers.parse_season_count(
                    await read_optional(page, selectors.SEASON_SELECT, selectors.READ_ARIA_LABEL)
                )

        # La page titre est liberee avant le parcours des saisons
        episodes: Optional[tuple[EpisodeRecord, ...]] = None
        if content_type == ContentType.TV_SERIES and include_episodes:
            episodes = await self._crawl_episodes(imdb_id, language)

        return build_title_record(
            imdb_id,
            data,
            content_type=content_type,
            year=year,
            runtime=runtime,
            seasons=seasons,
            episodes=episodes,
        )

    async def _read_json_ld(self, page: Page) -> dict[str, Any]:
        raw = await read_optional(page, selectors.JSON_LD, selectors.READ_TEXT)
        if not raw:
            raise ExtractionError(f"Structured data block not found on {page.url}")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ExtractionError(f"Invalid structured data on {page.url}: {e}") from e
        if not isinstance(data, dict):
            raise ExtractionError(f"Unexpected structured data on {page.url}")
        return data

    async def _crawl_episodes(
        self, imdb_id: str, language: str
    ) -> Optional[tuple[EpisodeRecord, ...]]:
        try:
            return tuple(await self._season_crawler.extract_episodes(imdb_id, language))
        except (ScraperError, PlaywrightError) as e:
            logger.warning("Episodes indisponibles", imdb_id=imdb_id, error=str(e))
            return None


def build_title_record(
    imdb_id: str,
    data: dict[str, Any],
    *,
    content_type: ContentType,
    year: int,
    runtime: Optional[int] = None,
    seasons: Optional[int] = None,
    episodes: Optional[tuple[EpisodeRecord, ...]] = None,
) -> TitleRecord:
    """Assemble un TitleRecord a partir du JSON-LD et des champs deja parses."""
    aggregate = data.get("aggregateRating")
    rating = aggregate.get("ratingValue") if isinstance(aggregate, dict) else None
    name = data.get("name") or ""
    return TitleRecord(
        imdb_id=imdb_id,
        title=data.get("alternateName") or name,
        original_title=name,
        content_type=content_type,
        year=year,
        synopsis=data.get("description"),
        rating=field_parsers.parse_rating(rating),
        genres=field_parsers.parse_genres(data.get("genre")),
        keywords=field_parsers.parse_keywords(data.get("keywords")),
        poster_url=data.get("image"),
        runtime=runtime,
        seasons=seasons,
        episodes=episodes,
    )
