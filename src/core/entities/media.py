"""
Media metadata entities.

Records produced by the IMDb extraction: a title (movie, series or
standalone episode), the episodes of a series and the lightweight search
results. They are created fresh per call and never mutated afterwards.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from src.core.value_objects.content_type import ContentType


@dataclass(frozen=True)
class EpisodeRecord:
    """
    One episode of a TV series.

    Attributes:
        imdb_id: IMDb episode ID (ex: "tt0519761")
        series_imdb_id: IMDb ID of the parent series (weak reference)
        title: Episode title
        series_title: Parent series title
        season: Season number (1-indexed)
        number: Episode number within season (1-indexed)
        synopsis: Episode description
        rating: Rating on a 0-10 scale
        poster_url: Poster image URL
        release: Original air date
        year: Release year, derived from release
    """

    imdb_id: str
    series_imdb_id: str
    title: str
    series_title: str
    season: int
    number: Optional[int] = None
    synopsis: Optional[str] = None
    rating: Optional[float] = None
    poster_url: Optional[str] = None
    release: Optional[date] = None
    year: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "imdbId": self.imdb_id,
            "seriesImdbId": self.series_imdb_id,
            "title": self.title,
            "seriesTitle": self.series_title,
            "season": self.season,
            "number": self.number,
            "synopsis": self.synopsis,
            "rating": self.rating,
            "posterUrl": self.poster_url,
            "release": self.release.isoformat() if self.release else None,
            "year": self.year,
        }


@dataclass(frozen=True)
class TitleRecord:
    """
    One IMDb title: movie, series or standalone episode.

    The release year is mandatory: a title page whose year cannot be
    resolved is an extraction failure, never a record with year 0.

    Attributes:
        imdb_id: IMDb ID (ex: "tt0111161")
        title: Localized title (alternateName when present)
        original_title: Original title
        content_type: Content type
        year: Release year
        synopsis: Plot summary
        rating: Aggregate rating on a 0-10 scale
        genres: Genre names, in page order
        keywords: Keywords, in page order without duplicates
        poster_url: Poster image URL
        runtime: Runtime in seconds
        seasons: Number of seasons (series only)
        episodes: Episodes (series only, when requested)
    """

    imdb_id: str
    title: str
    original_title: str
    content_type: ContentType
    year: int
    synopsis: Optional[str] = None
    rating: Optional[float] = None
    genres: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    poster_url: Optional[str] = None
    runtime: Optional[int] = None
    seasons: Optional[int] = None
    episodes: Optional[tuple[EpisodeRecord, ...]] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "imdbId": self.imdb_id,
            "title": self.title,
            "originalTitle": self.original_title,
            "type": self.content_type.value,
            "synopsis": self.synopsis,
            "rating": self.rating,
            "genres": list(self.genres),
            "keywords": list(self.keywords),
            "posterUrl": self.poster_url,
            "runtime": self.runtime,
            "year": self.year,
            "seasons": self.seasons,
            "episodes": (
                [episode.to_dict() for episode in self.episodes]
                if self.episodes is not None
                else None
            ),
        }


@dataclass(frozen=True)
class SearchResultRecord:
    """
    Lightweight projection of a title, as listed by the IMDb search page.

    Attributes:
        imdb_id: IMDb ID
        title: Title, without the result rank prefix
        content_type: Content type (from the result badge)
        poster_url: Poster image URL
        rating: Rating on a 0-10 scale
        year: Release year (first year of a range)
    """

    imdb_id: str
    title: str
    content_type: ContentType
    poster_url: Optional[str] = None
    rating: Optional[float] = None
    year: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "imdbId": self.imdb_id,
            "title": self.title,
            "posterUrl": self.poster_url,
            "type": self.content_type.value,
            "rating": self.rating,
            "year": self.year,
        }
