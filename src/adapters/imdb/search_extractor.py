"""
Extraction de la page de recherche avancee IMDb (/search/title/).

La recherche ne fait jamais echouer l'appel pour un resultat mal forme :
l'entree fautive est ignoree et les autres sont retournees.
"""

from typing import Any, Optional

from loguru import logger
from playwright.async_api import Error as PlaywrightError

from src.adapters.browser.navigator import Navigator
from src.adapters.browser.session_manager import BrowserSessionManager
from src.adapters.imdb import field_parsers, selectors, urls
from src.core.entities.media import SearchResultRecord
from src.core.exceptions import ParseError
from src.core.value_objects.content_type import ContentType, classify

DEFAULT_RESULT_TYPE = "Movie"


class SearchExtractor:
    """Extracteur des resultats de recherche, dans l'ordre du site."""

    def __init__(
        self,
        session_manager: BrowserSessionManager,
        navigator: Navigator,
        base_url: str,
        results_timeout_ms: int = 5_000,
    ) -> None:
        self._session_manager = session_manager
        self._navigator = navigator
        self._base_url = base_url
        self._results_timeout_ms = results_timeout_ms

    async def search(
        self,
        query: str,
        language: str,
        content_type: Optional[ContentType] = None,
        year: Optional[int] = None,
    ) -> list[SearchResultRecord]:
        """
        Recherche des titres.

        Returns:
            Les resultats bien formes; vide si la liste n'apparait pas a temps

        Raises:
            NavigationError: Si la page de recherche n'a pas pu etre chargee
        """
        url = urls.search_url(self._base_url, query, language, content_type, year)

        async with self._session_manager.page(language) as page:
            await self._navigator.navigate(page, url)
            try:
                await page.wait_for_selector(
                    selectors.SEARCH_ITEM,
                    timeout=self._results_timeout_ms,
                    state="visible",
                )
            except PlaywrightError:
                logger.info("Aucun resultat affiche", query=query, url=url)
                return []
            raw_results = await page.eval_on_selector_all(
                selectors.SEARCH_ITEM, selectors.READ_SEARCH_RESULTS
            )

        results = []
        for position, raw in enumerate(raw_results, start=1):
            try:
                results.append(build_search_result(raw))
            except ParseError as e:
                logger.debug("Resultat ignore", position=position, error=str(e))
        return results


def build_search_result(raw: dict[str, Any]) -> SearchResultRecord:
    """
    Convertit une entree brute de la liste de resultats.

    Raises:
        ParseError: Si l'entree n'a pas d'ID IMDb exploitable
    """
    imdb_id = field_parsers.parse_imdb_id(raw.get("href"))
    if imdb_id is None:
        raise ParseError(f"No IMDb ID in result link {raw.get('href')!r}")
    return SearchResultRecord(
        imdb_id=imdb_id,
        title=field_parsers.strip_rank(raw.get("title")),
        content_type=classify(raw.get("type") or DEFAULT_RESULT_TYPE),
        poster_url=raw.get("posterUrl"),
        rating=field_parsers.parse_rating(raw.get("rating")),
        year=field_parsers.parse_year_badges(raw.get("metadata") or ()),
    )
