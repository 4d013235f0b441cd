"""
Type de contenu IMDb et conversion depuis les libelles du site.

Les libelles proviennent soit du champ "@type" du JSON-LD ("Movie",
"TVSeries"...), soit des badges des resultats de recherche ("TV Mini Series",
"TV Episode"...).
"""

from enum import Enum
from typing import Optional


class ContentType(Enum):
    """Type de contenu d'un titre IMDb.

    Valeurs:
        MOVIE: Film (y compris telefilm, special et court TV)
        TV_SERIES: Serie ou mini-serie TV
        TV_EPISODE: Episode de serie
        UNKNOWN: Type non determine
    """

    MOVIE = "movie"
    TV_SERIES = "tvSeries"
    TV_EPISODE = "tvEpisode"
    UNKNOWN = "unknown"


_LABELS: dict[str, ContentType] = {
    "Movie": ContentType.MOVIE,
    "TV Movie": ContentType.MOVIE,
    "TV Special": ContentType.MOVIE,
    "TV Short": ContentType.MOVIE,
    "TVSeries": ContentType.TV_SERIES,
    "TV Series": ContentType.TV_SERIES,
    "TV Mini Series": ContentType.TV_SERIES,
    "TVEpisode": ContentType.TV_EPISODE,
    "TV Episode": ContentType.TV_EPISODE,
}


def classify(raw_label: Optional[str]) -> ContentType:
    """
    Convertit un libelle IMDb en ContentType.

    La correspondance est sensible a la casse. Tout libelle inconnu
    (ou absent) donne ContentType.UNKNOWN.
    """
    if not isinstance(raw_label, str):
        return ContentType.UNKNOWN
    return _LABELS.get(raw_label, ContentType.UNKNOWN)
