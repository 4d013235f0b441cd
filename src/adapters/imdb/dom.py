"""Lecture tolerante du DOM d'une page Playwright."""

from typing import Any, Optional

from playwright.async_api import Page
from playwright.async_api import Error as PlaywrightError


async def read_optional(page: Page, selector: str, script: str) -> Optional[Any]:
    """Evalue un script sur le premier element du selecteur; None si absent."""
    try:
        return await page.eval_on_selector(selector, script)
    except PlaywrightError:
        return None
