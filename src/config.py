"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe IMDBSCRAPER_,
et peut optionnellement être fournie via un fichier .env.

La clé API est optionnelle - l'API HTTP est ouverte si elle n'est pas fournie.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

# Hotes de pistage/publicite bloques dans chaque contexte de page
DEFAULT_BLOCKED_HOSTS = [
    "doubleclick.net",
    "googlesyndication.com",
    "google-analytics.com",
    "googletagmanager.com",
    "googletagservices.com",
    "amazon-adsystem.com",
    "adsrvr.org",
    "scorecardresearch.com",
    "criteo.com",
    "facebook.net",
]


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe IMDBSCRAPER_.
    Exemple : IMDBSCRAPER_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="IMDBSCRAPER_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Site cible
    base_url: str = Field(default="https://www.imdb.com")
    default_language: str = Field(default="en")

    # Navigateur
    headless: bool = Field(default=True)
    viewport_width: int = Field(default=1920, ge=320)
    viewport_height: int = Field(default=1080, ge=240)
    block_trackers: bool = Field(default=True)
    blocked_hosts: list[str] = Field(default_factory=lambda: list(DEFAULT_BLOCKED_HOSTS))

    # Delais (millisecondes pour Playwright, secondes pour l'echeance globale)
    navigation_timeout_ms: int = Field(default=30_000, ge=1000)
    search_results_timeout_ms: int = Field(default=5_000, ge=100)
    season_tabs_timeout_ms: int = Field(default=3_000, ge=100)
    request_timeout: Optional[float] = Field(default=None, gt=0)

    # API HTTP (OPTIONNELLE - API ouverte si non definie)
    api_key: Optional[str] = Field(default=None)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080, ge=1, le=65535)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/imdb-scraper.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Retire le slash final pour simplifier la construction des URLs."""
        return v.rstrip("/")

    @property
    def auth_enabled(self) -> bool:
        """Vérifie si l'authentification par clé API est active."""
        return bool(self.api_key)

    @property
    def viewport(self) -> dict[str, int]:
        """Viewport fixe passe a chaque contexte de navigateur."""
        return {"width": self.viewport_width, "height": self.viewport_height}
