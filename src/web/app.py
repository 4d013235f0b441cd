"""
Application FastAPI de l'API IMDb.

Initialise l'application web avec le Container DI, démarre le navigateur
au lancement, l'arrête à la fermeture et monte les routes.
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from loguru import logger

from ..container import Container
from .routes.imdb import router as imdb_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI et le navigateur au démarrage, les ferme à l'arrêt."""
    container = Container()
    app.state.container = container
    manager = container.browser_manager()
    await manager.start()
    try:
        yield
    finally:
        await manager.stop()


app = FastAPI(title="IMDb api", version="0.1.0", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Journalise chaque requête : méthode, chemin, handler, statut."""
    started = time.perf_counter()
    response = await call_next(request)
    endpoint = request.scope.get("endpoint")
    handler = getattr(endpoint, "__name__", "-")
    logger.info(
        "{} {} -> {}()",
        request.method,
        request.url.path,
        handler,
        status=response.status_code,
        elapsed=round(time.perf_counter() - started, 3),
    )
    return response


app.include_router(imdb_router)
