"""
FastAPI dependency injection and store construction.
"""

import logging

from fastapi import Request

from app.api.config import get_database_path, get_store_backend
from app.database.init_db import init_database, verify_schema
from app.store import InMemoryMovieStore, MovieStore, SqlMovieStore, StoreError

logger = logging.getLogger(__name__)


def build_store(backend: str | None = None, db_path: str | None = None) -> MovieStore:
    """
    Create the store selected by configuration.

    Raises on failure to open the database or create the schema; the caller
    is expected to abort startup.
    """
    backend = backend or get_store_backend()
    if backend == "memory":
        logger.info("Using in-memory movie store")
        return InMemoryMovieStore()

    db_path = db_path or get_database_path()
    logger.info("Using SQLite movie store at %s", db_path)
    db_manager = init_database(db_path=db_path)
    if not verify_schema(db_manager):
        db_manager.close()
        raise StoreError(f"Could not create schema in {db_path}")
    return SqlMovieStore(db_manager)


def get_store(request: Request) -> MovieStore:
    """Return the store owned by the running application, for Depends()."""
    return request.app.state.store
