"""
Fixtures pytest partagees pour les tests imdb-scraper.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test (sans fichier .env ni variables d'environnement)
- Gestionnaire de session et navigateur simules (aucun Chromium lance)
"""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.adapters.browser.navigator import Navigator
from src.adapters.browser.session_manager import BrowserSessionManager
from src.config import Settings
from tests.fixtures.browser import make_page


@pytest.fixture
def test_settings() -> Settings:
    """Settings de test, isolees de l'environnement local."""
    return Settings(
        _env_file=None,
        base_url="https://www.imdb.com",
        default_language="en",
        api_key=None,
    )


@pytest.fixture
def mock_session_manager() -> MagicMock:
    """
    Mock de BrowserSessionManager.

    page(locale) est un context manager async qui fournit
    mock_session_manager.current_page et compte les fermetures dans
    mock_session_manager.closed_pages.
    """
    manager = MagicMock(spec=BrowserSessionManager)
    manager.current_page = make_page()
    manager.closed_pages = []
    manager.restart = AsyncMock()

    @asynccontextmanager
    async def page(locale: str):
        current = manager.current_page
        try:
            yield current
        finally:
            manager.closed_pages.append(current)

    manager.page = page
    return manager


@pytest.fixture
def mock_navigator() -> MagicMock:
    """Mock de Navigator : navigations toujours reussies."""
    navigator = MagicMock(spec=Navigator)
    navigator.navigate = AsyncMock()
    navigator.follow = AsyncMock()
    return navigator
