"""
Commandes CLI d'extraction IMDb (title, episodes, search).
"""

import json
from typing import Annotated, Optional

import typer
from rich.table import Table

from src.adapters.cli.helpers import async_command, console, with_browser
from src.core.value_objects.content_type import ContentType

LanguageOption = Annotated[
    Optional[str],
    typer.Option("--language", "-l", help="Code langue (en, fr...)"),
]


@async_command
@with_browser()
async def imdb_title(
    container,
    imdb_id: Annotated[str, typer.Argument(help="ID IMDb (ex: tt0111161)")],
    language: LanguageOption = None,
    episodes: Annotated[
        bool,
        typer.Option("--episodes", "-e", help="Extraire aussi les episodes (series)"),
    ] = False,
) -> None:
    """Extrait un titre et l'affiche en JSON."""
    language = language or container.config().default_language
    item = await container.imdb_scraper().find_title(imdb_id, language, episodes)
    if item is None:
        console.print(f"[red]Titre introuvable:[/red] {imdb_id}")
        raise typer.Exit(code=1)
    console.print_json(json.dumps(item.to_dict(), ensure_ascii=False))


@async_command
@with_browser()
async def imdb_episodes(
    container,
    imdb_id: Annotated[str, typer.Argument(help="ID IMDb de la serie")],
    language: LanguageOption = None,
) -> None:
    """Liste les episodes d'une serie, saison par saison."""
    language = language or container.config().default_language
    episodes = await container.imdb_scraper().find_episodes(imdb_id, language)
    if episodes is None:
        console.print(f"[red]Episodes introuvables:[/red] {imdb_id}")
        raise typer.Exit(code=1)

    table = Table(title=episodes[0].series_title if episodes else imdb_id)
    table.add_column("S", justify="right")
    table.add_column("E", justify="right")
    table.add_column("Titre")
    table.add_column("Diffusion")
    table.add_column("Note", justify="right")
    for episode in episodes:
        table.add_row(
            str(episode.season),
            str(episode.number or "?"),
            episode.title,
            episode.release.isoformat() if episode.release else "",
            f"{episode.rating:.1f}" if episode.rating is not None else "",
        )
    console.print(table)


@async_command
@with_browser()
async def imdb_search(
    container,
    query: Annotated[str, typer.Argument(help="Titre recherche")],
    language: LanguageOption = None,
    content_type: Annotated[
        Optional[ContentType],
        typer.Option("--type", "-t", help="Filtre par type", case_sensitive=False),
    ] = None,
    year: Annotated[Optional[int], typer.Option("--year", "-y", help="Filtre par annee")] = None,
) -> None:
    """Recherche des titres et affiche les resultats."""
    language = language or container.config().default_language
    results = await container.imdb_scraper().search(query, language, content_type, year)
    if not results:
        console.print("[yellow]Aucun resultat.[/yellow]")
        return

    table = Table(title=f"Recherche : {query}")
    table.add_column("ID", style="cyan")
    table.add_column("Titre")
    table.add_column("Type")
    table.add_column("Annee", justify="right")
    table.add_column("Note", justify="right")
    for result in results:
        table.add_row(
            result.imdb_id,
            result.title,
            result.content_type.value,
            str(result.year or ""),
            f"{result.rating:.1f}" if result.rating is not None else "",
        )
    console.print(table)
