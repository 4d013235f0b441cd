"""
Gestion du processus navigateur partage (Playwright / chromium).

Un seul navigateur existe pour toute la duree de vie du service. Chaque
extraction ouvre son propre contexte isole (cookies, langue, en-tetes) et le
ferme a la fin. Les transitions start/stop/restart sont serialisees par un
verrou asyncio.

Usage:
    manager = BrowserSessionManager(settings)
    await manager.start()
    async with manager.page("fr") as page:
        await page.goto(...)
    await manager.stop()
"""

import asyncio
import re
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from loguru import logger
from playwright.async_api import (
    Browser,
    Page,
    Playwright,
    Route,
    async_playwright,
)
from playwright.async_api import Error as PlaywrightError
from playwright_stealth import Stealth

from src.adapters.browser.retry import session_recovery
from src.config import Settings
from src.core.exceptions import SessionError

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-blink-features=AutomationControlled",
]


def build_blocklist(hosts: list[str]) -> Optional[re.Pattern[str]]:
    """
    Compile la liste des hotes bloques en une regex d'URL.

    Un hote bloque couvre aussi ses sous-domaines.
    """
    if not hosts:
        return None
    alternatives = "|".join(re.escape(host) for host in hosts)
    return re.compile(rf"^https?://([^/]+\.)?({alternatives})(:\d+)?/")


async def _abort_request(route: Route) -> None:
    await route.abort()


class BrowserSessionManager:
    """
    Proprietaire unique du processus navigateur.

    Attributes:
        generation: Compteur incremente a chaque demarrage; permet d'eviter
                    plusieurs redemarrages pour une meme panne observee par
                    des extractions concurrentes.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._lock = asyncio.Lock()
        self._blocklist = (
            build_blocklist(settings.blocked_hosts) if settings.block_trackers else None
        )
        self.generation = 0

    @property
    def is_running(self) -> bool:
        """Vrai si un navigateur est lance et toujours connecte."""
        return self._browser is not None and self._browser.is_connected()

    async def start(self) -> None:
        """Lance le navigateur headless (sans effet s'il tourne deja)."""
        async with self._lock:
            await self._start()

    async def stop(self) -> None:
        """Ferme le navigateur; sans effet s'il n'a jamais ete lance."""
        async with self._lock:
            await self._stop()

    async def restart(self, generation: Optional[int] = None) -> None:
        """
        Arrete puis relance le navigateur.

        Args:
            generation: Generation observee au moment de la panne. Si un autre
                        appelant a deja redemarre depuis, rien n'est fait.
        """
        async with self._lock:
            if generation is not None and generation != self.generation:
                logger.debug(
                    "Navigateur deja redemarre",
                    observed=generation,
                    current=self.generation,
                )
                return
            await self._stop()
            await self._start()

    async def _start(self) -> None:
        if self.is_running:
            return
        started = time.perf_counter()
        logger.info("Demarrage du navigateur...")
        self._playwright = await async_playwright().start()
        try:
            self._browser = await self._playwright.chromium.launch(
                headless=self._settings.headless,
                args=LAUNCH_ARGS,
            )
        except PlaywrightError as e:
            await self._playwright.stop()
            self._playwright = None
            raise SessionError(f"Cannot launch the browser: {e}") from e
        self.generation += 1
        logger.info(
            "Navigateur demarre",
            generation=self.generation,
            elapsed=round(time.perf_counter() - started, 3),
        )

    async def _stop(self) -> None:
        if self._browser is None and self._playwright is None:
            return
        started = time.perf_counter()
        logger.info("Arret du navigateur...")
        try:
            if self._browser is not None:
                await self._browser.close()
        except PlaywrightError as e:
            logger.debug("Fermeture du navigateur: {}", e)
        finally:
            self._browser = None
            if self._playwright is not None:
                await self._playwright.stop()
                self._playwright = None
        logger.info("Navigateur arrete", elapsed=round(time.perf_counter() - started, 3))

    async def open_page(self, locale: str) -> Page:
        """
        Ouvre une page dans un nouveau contexte isole, localise.

        Si le navigateur est mort, il est redemarre une fois et l'ouverture
        est retentee; un second echec est propage a l'appelant.

        Args:
            locale: Code langue envoye dans Accept-Language et expose par
                    navigator.language(s)

        Raises:
            SessionError: Si la page ne peut pas etre ouverte apres reprise
        """
        failed_generation = self.generation

        async def _restart() -> None:
            await self.restart(generation=failed_generation)

        page = None
        async for attempt in session_recovery(on_retry=_restart):
            with attempt:
                page = await self._new_page(locale)
        return page

    async def _new_page(self, locale: str) -> Page:
        browser = self._browser
        if browser is None or not browser.is_connected():
            raise SessionError("Browser is not running")
        try:
            context = await browser.new_context(
                viewport=self._settings.viewport,
                locale=locale,
                extra_http_headers={"Accept-Language": locale},
            )
        except PlaywrightError as e:
            raise SessionError(f"Cannot open a browser context: {e}") from e

        try:
            await Stealth(navigator_languages_override=(locale, locale)).apply_stealth_async(
                context
            )
            if self._blocklist is not None:
                await context.route(self._blocklist, _abort_request)
            page = await context.new_page()
            page.set_default_navigation_timeout(self._settings.navigation_timeout_ms)
        except PlaywrightError as e:
            await self._close_context(context)
            raise SessionError(f"Cannot open a page: {e}") from e
        except BaseException:
            # Echeance ou annulation de l'appelant : le contexte ne survit pas a l'appel
            await self._close_context(context)
            raise
        return page

    async def close_page(self, page: Page) -> None:
        """Ferme la page et son contexte; tolere un navigateur deja mort."""
        await self._close_context(page.context)

    @staticmethod
    async def _close_context(context) -> None:
        try:
            await context.close()
        except PlaywrightError as e:
            logger.debug("Fermeture du contexte (deja ferme ?): {}", e)

    @asynccontextmanager
    async def page(self, locale: str) -> AsyncIterator[Page]:
        """Ouvre une page et garantit sa fermeture sur tous les chemins de sortie."""
        page = await self.open_page(locale)
        try:
            yield page
        finally:
            await self.close_page(page)
