"""
Routes de l'API IMDb.

- GET /imdb/title/{imdb_id} : titre (404 si l'extraction n'aboutit pas)
- GET /imdb/search : résultats de recherche (liste vide si échec)
"""

from typing import Annotated, Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...config import Settings
from ...core.ports.scraper import IMediaScraper
from ...core.value_objects.content_type import ContentType
from ..deps import get_scraper, get_settings, verify_api_key

router = APIRouter(prefix="/imdb", tags=["IMDb"], dependencies=[Depends(verify_api_key)])


@router.get("/title/{imdb_id}")
async def find_title(
    imdb_id: str,
    scraper: Annotated[IMediaScraper, Depends(get_scraper)],
    settings: Annotated[Settings, Depends(get_settings)],
    language: Optional[str] = None,
    episodes: bool = False,
) -> dict[str, Any]:
    """Extrait un titre, avec ses épisodes si demandé (séries)."""
    item = await scraper.find_title(imdb_id, language or settings.default_language, episodes)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return item.to_dict()


@router.get("/search")
async def search(
    title: str,
    scraper: Annotated[IMediaScraper, Depends(get_scraper)],
    settings: Annotated[Settings, Depends(get_settings)],
    language: Optional[str] = None,
    content_type: Annotated[Optional[ContentType], Query(alias="type")] = None,
    year: Optional[int] = None,
) -> list[dict[str, Any]]:
    """Recherche des titres, filtrés par type et année."""
    results = await scraper.search(
        title, language or settings.default_language, content_type, year
    )
    return [result.to_dict() for result in results]
