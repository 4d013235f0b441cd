"""
Construction des URLs IMDb localisees.

L'anglais est servi sans prefixe; les autres langues sous /<langue>/.
"""

from typing import Optional
from urllib.parse import urlencode

from src.core.value_objects.content_type import ContentType

DEFAULT_LANGUAGE = "en"

# Codes "title_type" de la recherche avancee IMDb
SEARCH_TITLE_TYPES: dict[ContentType, tuple[str, ...]] = {
    ContentType.MOVIE: ("feature", "tv_movie", "short", "tv_short"),
    ContentType.TV_SERIES: ("tv_miniseries", "tv_special", "tv_series"),
    ContentType.TV_EPISODE: ("tv_episode",),
}


def localized_root(base_url: str, language: str) -> str:
    """Racine du site pour une langue (sans slash final)."""
    if language and language != DEFAULT_LANGUAGE:
        return f"{base_url}/{language}"
    return base_url


def title_url(base_url: str, imdb_id: str, language: str) -> str:
    return f"{localized_root(base_url, language)}/title/{imdb_id}"


def episodes_url(base_url: str, imdb_id: str, language: str, season: int = 1) -> str:
    return f"{localized_root(base_url, language)}/title/{imdb_id}/episodes?season={season}&ref_=ttep"


def search_params(
    query: str,
    content_type: Optional[ContentType] = None,
    year: Optional[int] = None,
) -> dict[str, str]:
    """
    Parametres de la recherche avancee.

    Le type est converti en codes de categories du site; l'annee en
    intervalle de dates ferme [annee-01-01, annee-12-31].
    """
    params = {"title": query}
    title_types = SEARCH_TITLE_TYPES.get(content_type) if content_type else None
    if title_types:
        params["title_type"] = ",".join(title_types)
    if year:
        params["release_date"] = f"{year}-01-01,{year}-12-31"
    return params


def search_url(
    base_url: str,
    query: str,
    language: str,
    content_type: Optional[ContentType] = None,
    year: Optional[int] = None,
) -> str:
    query_string = urlencode(search_params(query, content_type, year))
    return f"{localized_root(base_url, language)}/search/title/?{query_string}"
