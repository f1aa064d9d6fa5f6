"""
FastAPI application entry point for the Movie API.

Run with:
    uvicorn app.api.main:app --host 0.0.0.0 --port 8080
or:
    movie-api
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app import __version__
from app.api.config import (
    get_api_host,
    get_api_port,
    get_seed_data,
    get_shutdown_grace_seconds,
)
from app.api.dependencies import build_store
from app.api.errors import register_error_handlers
from app.api.routers import movies, system
from app.store import MovieStore, seed_movies
from app.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup/shutdown lifecycle.

    When no store was injected, build one from config, seed it, and close
    it on shutdown. Any failure here aborts startup.
    """
    owns_store = app.state.store is None
    if owns_store:
        configure_api_logging()
        app.state.store = build_store()
        if get_seed_data():
            seed_movies(app.state.store)
    logger.info("Movie API started (store=%s)", app.state.store.backend)
    yield
    logger.info("Movie API shutting down")
    if owns_store:
        app.state.store.close()
        app.state.store = None


def create_app(store: MovieStore | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Store to serve. If None, one is built from config at startup.
    """
    application = FastAPI(
        title="Movie API",
        description="CRUD service for movies",
        version=__version__,
        lifespan=lifespan,
    )
    application.state.store = store

    register_error_handlers(application)
    application.include_router(movies.router)
    application.include_router(system.router)
    return application


app = create_app()


def run() -> None:
    """Serve the app until SIGINT/SIGTERM, then drain in-flight requests."""
    uvicorn.run(
        "app.api.main:app",
        host=get_api_host(),
        port=get_api_port(),
        timeout_graceful_shutdown=get_shutdown_grace_seconds(),
    )


if __name__ == "__main__":
    run()
