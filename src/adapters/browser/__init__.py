"""
Pilotage du navigateur headless (Playwright).

- BrowserSessionManager : cycle de vie du navigateur unique, pages isolees
- Navigator : navigation avec attente reseau et redemarrage en cas d'echec
- session_recovery : reprise tenacity sur SessionError
"""

from src.adapters.browser.navigator import Navigator
from src.adapters.browser.retry import session_recovery
from src.adapters.browser.session_manager import BrowserSessionManager

__all__ = [
    "BrowserSessionManager",
    "Navigator",
    "session_recovery",
]
