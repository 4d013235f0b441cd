"""
Parcours des saisons d'une serie (pages /title/<id>/episodes).

La page de la saison 1 est chargee, puis chaque onglet de saison est suivi
l'un apres l'autre. Le nombre de saisons est lu une seule fois, sur le
dernier onglet de la premiere page; le compteur de saison augmente a chaque
tour, ce qui borne le parcours a exactement ce nombre de pages.
"""

import re
from typing import Any

from loguru import logger
from playwright.async_api import Page
from playwright.async_api import Error as PlaywrightError

from src.adapters.browser.navigator import Navigator
from src.adapters.browser.session_manager import BrowserSessionManager
from src.adapters.imdb import field_parsers, selectors, urls
from src.adapters.imdb.dom import read_optional
from src.core.entities.media import EpisodeRecord
from src.core.exceptions import ExtractionError


class SeasonCrawler:
    """Extracteur des episodes d'une serie, saison par saison."""

    def __init__(
        self,
        session_manager: BrowserSessionManager,
        navigator: Navigator,
        base_url: str,
        tabs_timeout_ms: int = 3_000,
    ) -> None:
        self._session_manager = session_manager
        self._navigator = navigator
        self._base_url = base_url
        self._tabs_timeout_ms = tabs_timeout_ms

    async def extract_episodes(self, series_id: str, language: str) -> list[EpisodeRecord]:
        """
        Extrait tous les episodes de toutes les saisons.

        Args:
            series_id: ID IMDb de la serie
            language: Code langue (pages et format des dates)

        Returns:
            Les episodes, saison 1 en premier, dans l'ordre des pages

        Raises:
            NavigationError: Si une page de saison n'a pas pu etre chargee
            ExtractionError: Si les onglets de saison sont introuvables
        """
        url = urls.episodes_url(self._base_url, series_id, language)
        episodes: list[EpisodeRecord] = []

        async with self._session_manager.page(language) as page:
            await self._navigator.navigate(page, url)
            series_title = (
                await read_optional(page, selectors.SERIES_SUBTITLE, selectors.READ_TEXT) or ""
            ).strip()

            season_count = await self._read_season_count(page)
            logger.debug("Parcours des saisons", series_id=series_id, seasons=season_count)

            season = 1
            while season <= season_count:
                raw_episodes = await page.eval_on_selector_all(
                    selectors.EPISODE_ITEM, selectors.READ_EPISODES
                )
                episodes.extend(
                    build_episode(raw, series_id, series_title, season, language)
                    for raw in raw_episodes
                )

                season += 1
                if season > season_count:
                    break
                await self._open_season(page, season)

        return episodes

    async def _season_tabs(self, page: Page) -> list:
        try:
            await page.wait_for_selector(selectors.SEASON_TAB, timeout=self._tabs_timeout_ms)
        except PlaywrightError as e:
            raise ExtractionError(f"Season tabs not found on {page.url}") from e
        return await page.query_selector_all(selectors.SEASON_TAB)

    async def _read_season_count(self, page: Page) -> int:
        tabs = await self._season_tabs(page)
        if not tabs:
            raise ExtractionError(f"Season tabs not found on {page.url}")
        return field_parsers.parse_season_count(await tabs[-1].inner_text())

    async def _open_season(self, page: Page, season: int) -> None:
        # Les onglets sont relus : les elements precedents sont detaches apres navigation
        tabs = await self._season_tabs(page)
        if len(tabs) < season:
            raise ExtractionError(f"Season {season} tab not found on {page.url}")
        await self._navigator.follow(page, tabs[season - 1], re.compile(rf"season={season}\b"))


def build_episode(
    raw: dict[str, Any],
    series_id: str,
    series_title: str,
    season: int,
    language: str,
) -> EpisodeRecord:
    """Convertit une entree brute de la liste d'episodes en EpisodeRecord."""
    number, title = field_parsers.parse_episode_label(raw.get("label"))
    release = field_parsers.parse_release_date(raw.get("release"), language)
    return EpisodeRecord(
        imdb_id=field_parsers.parse_imdb_id(raw.get("href")) or "",
        series_imdb_id=series_id,
        title=title,
        series_title=series_title,
        season=season,
        number=number,
        synopsis=raw.get("synopsis"),
        rating=field_parsers.parse_rating(raw.get("rating")),
        poster_url=raw.get("posterUrl"),
        release=release,
        year=release.year if release else None,
    )
