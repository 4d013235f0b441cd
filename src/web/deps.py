"""
Dépendances partagées de l'application web.

Fournit l'accès au Container DI (monté dans app.state par le lifespan),
à la facade d'extraction et la vérification de la clé API.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, Query, Request, status

from ..config import Settings
from ..container import Container
from ..core.ports.scraper import IMediaScraper


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_settings(container: Annotated[Container, Depends(get_container)]) -> Settings:
    return container.config()


def get_scraper(container: Annotated[Container, Depends(get_container)]) -> IMediaScraper:
    return container.imdb_scraper()


def verify_api_key(
    settings: Annotated[Settings, Depends(get_settings)],
    x_api_key: Annotated[Optional[str], Header(alias="X-API-KEY")] = None,
    apikey: Annotated[Optional[str], Query()] = None,
) -> None:
    """Refuse la requête si la clé (en-tête X-API-KEY ou ?apikey=) ne correspond pas."""
    if not settings.auth_enabled:
        return
    provided = x_api_key or apikey
    if provided != settings.api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API Key")
