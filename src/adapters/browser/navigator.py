"""
Navigation avec attente de stabilite reseau et politique d'echec unique.

Les pages IMDb sont fortement scriptees : l'evenement "load" arrive avant que
le contenu ne soit present. La navigation attend donc que le reseau soit au
repos ("networkidle").

En cas d'echec (timeout, erreur reseau, cible plantee), le navigateur est
entierement redemarre puis l'erreur est remontee en NavigationError. La
navigation n'est PAS retentee : c'est a l'appelant de relancer toute son
operation.
"""

import re
from typing import Pattern, Union

from loguru import logger
from playwright.async_api import ElementHandle, Page
from playwright.async_api import Error as PlaywrightError

from src.adapters.browser.session_manager import BrowserSessionManager
from src.core.exceptions import NavigationError

WAIT_UNTIL = "networkidle"


class Navigator:
    """
    Point unique de navigation des extracteurs.

    Regroupe la sequence capture / redemarrage / propagation pour que les
    extracteurs ne la reimplementent pas.
    """

    def __init__(self, session_manager: BrowserSessionManager, timeout_ms: int = 30_000) -> None:
        """
        Args:
            session_manager: Gestionnaire du navigateur a redemarrer en cas d'echec
            timeout_ms: Delai maximum d'une navigation en millisecondes
        """
        self._session_manager = session_manager
        self._timeout_ms = timeout_ms

    async def navigate(self, page: Page, url: str) -> None:
        """
        Charge une URL et attend le repos du reseau.

        Raises:
            NavigationError: Si la page n'a pas pu etre chargee (apres redemarrage)
        """
        logger.debug("Navigation", url=url)
        try:
            await page.goto(url, wait_until=WAIT_UNTIL, timeout=self._timeout_ms)
        except PlaywrightError as e:
            await self._fail(url, e)

    async def follow(
        self,
        page: Page,
        element: ElementHandle,
        url_pattern: Union[str, Pattern[str]],
    ) -> None:
        """
        Clique sur un lien et attend que la nouvelle URL soit stable.

        Args:
            page: Page courante
            element: Element a cliquer (onglet, lien)
            url_pattern: Motif (glob ou regex) de l'URL attendue apres le clic

        Raises:
            NavigationError: Si la navigation n'aboutit pas (apres redemarrage)
        """
        target = url_pattern.pattern if isinstance(url_pattern, re.Pattern) else url_pattern
        logger.debug("Navigation par clic", target=target)
        try:
            await element.click()
            await page.wait_for_url(url_pattern, wait_until=WAIT_UNTIL, timeout=self._timeout_ms)
        except PlaywrightError as e:
            await self._fail(target, e)

    async def _fail(self, url: str, error: PlaywrightError) -> None:
        logger.error(
            "Echec du chargement de la page, redemarrage du navigateur",
            url=url,
            error=str(error),
        )
        await self._session_manager.restart()
        raise NavigationError(url, reason=type(error).__name__) from error
