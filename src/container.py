"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Le navigateur est un Singleton : un seul processus pour toute l'application.
"""

from dependency_injector import containers, providers

from .adapters.browser.navigator import Navigator
from .adapters.browser.session_manager import BrowserSessionManager
from .adapters.imdb.scraper import IMDbScraper
from .adapters.imdb.search_extractor import SearchExtractor
from .adapters.imdb.season_crawler import SeasonCrawler
from .adapters.imdb.title_extractor import TitleExtractor
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        manager = container.browser_manager()
        await manager.start()
        scraper = container.imdb_scraper()
        item = await scraper.find_title("tt0111161", "en")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Navigateur - proprietaire unique du processus
    browser_manager = providers.Singleton(
        BrowserSessionManager,
        settings=config,
    )

    navigator = providers.Singleton(
        Navigator,
        session_manager=browser_manager,
        timeout_ms=config.provided.navigation_timeout_ms,
    )

    # Extracteurs (stateless - Singletons)
    season_crawler = providers.Singleton(
        SeasonCrawler,
        session_manager=browser_manager,
        navigator=navigator,
        base_url=config.provided.base_url,
        tabs_timeout_ms=config.provided.season_tabs_timeout_ms,
    )

    title_extractor = providers.Singleton(
        TitleExtractor,
        session_manager=browser_manager,
        navigator=navigator,
        season_crawler=season_crawler,
        base_url=config.provided.base_url,
    )

    search_extractor = providers.Singleton(
        SearchExtractor,
        session_manager=browser_manager,
        navigator=navigator,
        base_url=config.provided.base_url,
        results_timeout_ms=config.provided.search_results_timeout_ms,
    )

    # Facade consommee par l'API HTTP et la CLI
    imdb_scraper = providers.Singleton(
        IMDbScraper,
        title_extractor=title_extractor,
        season_crawler=season_crawler,
        search_extractor=search_extractor,
        default_timeout=config.provided.request_timeout,
    )
