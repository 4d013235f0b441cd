"""
Utilitaires partages pour les commandes CLI.

Ce module fournit :
- console : instance Rich Console partagee
- with_browser : decorateur injectant un container dont le navigateur est demarre
- async_command : decorateur transformant une fonction async en commande sync
"""

import asyncio
import inspect
from functools import wraps

from rich.console import Console

from src.container import Container

console = Console()


def with_browser():
    """
    Decorateur qui injecte un container initialise en premier argument.

    Le navigateur est demarre avant la commande et arrete apres, y compris
    en cas d'erreur. La signature exposee omet le container injecte.

    Usage:
        @with_browser()
        async def my_command(container, ...):
            scraper = container.imdb_scraper()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            manager = container.browser_manager()
            await manager.start()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await manager.stop()
        signature = inspect.signature(func)
        wrapper.__signature__ = signature.replace(
            parameters=list(signature.parameters.values())[1:]
        )
        return wrapper
    return decorator


def async_command(func):
    """
    Transforme une fonction async en commande sync via asyncio.run().

    Preserve les annotations Typer pour que les options/arguments soient
    correctement interpretes.

    Usage:
        @async_command
        @with_browser()
        async def my_command(container, ...):
            ...
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        return asyncio.run(func(*args, **kwargs))
    # Signature publique : sans le container injecte par with_browser
    wrapper.__signature__ = inspect.signature(func)
    wrapper.__annotations__ = func.__annotations__
    return wrapper
