"""
Point d'entrée CLI de imdb-scraper.

Configure le logging et fournit les commandes CLI : extractions ponctuelles
(title, episodes, search) et lancement du serveur HTTP.
"""

from typing import Annotated, Optional

import typer
from loguru import logger

from .adapters.cli.commands import imdb_episodes, imdb_search, imdb_title
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="imdb-scraper",
    help="Extraction de fiches IMDb via un navigateur headless",
)
container = Container()

# Commandes d'extraction
app.command(name="title")(imdb_title)
app.command(name="episodes")(imdb_episodes)
app.command(name="search")(imdb_search)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration imdb-scraper")
    typer.echo(f"Site : {config.base_url}")
    typer.echo(f"Langue par défaut : {config.default_language}")
    typer.echo(f"Headless : {'oui' if config.headless else 'non'}")
    typer.echo(f"Viewport : {config.viewport_width}x{config.viewport_height}")
    typer.echo(f"Timeout navigation : {config.navigation_timeout_ms} ms")
    typer.echo(f"Blocage trackers : {'activé' if config.block_trackers else 'désactivé'}")
    typer.echo(f"Clé API : {'activée' if config.auth_enabled else 'désactivée'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo("imdb-scraper v0.1.0")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur HTTP de l'API."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port
    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de imdb-scraper", version="0.1.0")

    app()


if __name__ == "__main__":
    main()
