"""
Adaptateurs d'extraction des pages IMDb.

Ce module fournit:
- TitleExtractor: Pages titre (/title/<id>) -> TitleRecord
- SeasonCrawler: Pages episodes, saison par saison -> EpisodeRecord
- SearchExtractor: Recherche avancee -> SearchResultRecord
- IMDbScraper: Facade implementant IMediaScraper (politique d'echec, echeance)
"""

from .scraper import IMDbScraper
from .search_extractor import SearchExtractor
from .season_crawler import SeasonCrawler
from .title_extractor import TitleExtractor

__all__ = ["IMDbScraper", "SearchExtractor", "SeasonCrawler", "TitleExtractor"]
