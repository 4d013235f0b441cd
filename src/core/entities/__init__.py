"""
Business entities representing core domain concepts.

Exports:
- TitleRecord: One IMDb title (movie, series, episode)
- EpisodeRecord: One episode of a series
- SearchResultRecord: One entry of a search result list
"""

from src.core.entities.media import EpisodeRecord, SearchResultRecord, TitleRecord

__all__ = [
    "TitleRecord",
    "EpisodeRecord",
    "SearchResultRecord",
]
