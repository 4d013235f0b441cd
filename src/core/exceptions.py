"""
Hierarchie des erreurs de l'extraction IMDb.

- SessionError : navigateur indisponible (recupere par un redemarrage)
- NavigationError : page non chargee (redemarrage puis propagation)
- ExtractionError : donnee obligatoire absente (resultat absent)
- ParseError : champ mal forme (valeur absente pour ce champ)
"""

from typing import Optional


class ScraperError(Exception):
    """Erreur de base de l'extraction."""


class SessionError(ScraperError):
    """Le processus navigateur est absent, arrete ou injoignable."""


class NavigationError(ScraperError):
    """
    Une page n'a pas pu etre chargee ou stabilisee.

    Attributes:
        url: URL cible de la navigation
    """

    def __init__(self, url: str, reason: Optional[str] = None) -> None:
        self.url = url
        message = f"Navigation failed: {url}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ExtractionError(ScraperError):
    """Donnee structuree, champ obligatoire ou ancre DOM introuvable."""


class ParseError(ScraperError):
    """Texte de champ mal forme (duree, date, note)."""
