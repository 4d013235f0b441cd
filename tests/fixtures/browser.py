"""
Faux objets Playwright pour les tests des extracteurs.

Une fausse page repond a eval_on_selector a partir d'un dictionnaire
selecteur -> valeur; un selecteur absent leve l'erreur Playwright,
comme un element introuvable sur une vraie page.
"""

from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

from playwright.async_api import Error as PlaywrightError


def make_page(
    dom: Optional[dict[str, Any]] = None,
    title: str = "",
    url: str = "https://www.imdb.com/title/tt0000000",
) -> MagicMock:
    """
    Construit une fausse page Playwright.

    Args:
        dom: Valeurs retournees par eval_on_selector, indexees par selecteur
        title: Valeur de page.title()
        url: Valeur de page.url
    """
    dom = dom or {}
    page = MagicMock()
    page.url = url
    page.title = AsyncMock(return_value=title)
    page.goto = AsyncMock()
    page.wait_for_url = AsyncMock()
    page.wait_for_selector = AsyncMock()
    page.query_selector_all = AsyncMock(return_value=[])
    page.eval_on_selector_all = AsyncMock(return_value=[])
    page.context = AsyncMock()

    async def eval_on_selector(selector: str, script: str) -> Any:
        if selector not in dom:
            raise PlaywrightError(f"No element matches {selector}")
        return dom[selector]

    page.eval_on_selector = AsyncMock(side_effect=eval_on_selector)
    return page


def make_tab(label: str) -> MagicMock:
    """Onglet de saison (ElementHandle) dont le texte est label."""
    tab = MagicMock()
    tab.inner_text = AsyncMock(return_value=label)
    tab.click = AsyncMock()
    return tab
