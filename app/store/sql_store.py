"""
SQLite-backed movie store.

Each operation runs in its own session from DatabaseManager.session_scope
and commits on its own. Operations are applied one at a time under a lock,
so concurrent requests never share a transaction or race for the SQLite
write lock. SQLAlchemy failures are logged and re-raised as StoreError.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Generator, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.models.movie import MovieResponse
from app.database import crud
from app.database.connection import DatabaseManager
from app.store.base import MovieStore, StoreError

logger = logging.getLogger(__name__)


class SqlMovieStore(MovieStore):
    """Movie store persisted in the ``movies`` table."""

    backend = "sqlite"

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager
        self._lock = threading.Lock()

    @contextmanager
    def _session(self, action: str) -> Generator[Session, None, None]:
        try:
            with self._lock, self.db_manager.session_scope() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error("Database error while trying to %s: %s", action, e)
            raise StoreError(f"Could not {action}") from e

    def list_movies(self) -> List[MovieResponse]:
        with self._session("list movies") as session:
            return [MovieResponse.model_validate(m) for m in crud.get_movies(session)]

    def get_movie(self, movie_id: int) -> Optional[MovieResponse]:
        with self._session("get movie") as session:
            movie = crud.get_movie(session, movie_id)
            return MovieResponse.model_validate(movie) if movie else None

    def create_movie(self, name: str, year: int, point: int) -> MovieResponse:
        with self._session("create movie") as session:
            movie = crud.create_movie(session, name=name, year=year, point=point)
            return MovieResponse.model_validate(movie)

    def update_movie(
        self, movie_id: int, name: str, year: int, point: int
    ) -> Optional[MovieResponse]:
        with self._session("update movie") as session:
            movie = crud.update_movie(session, movie_id, name=name, year=year, point=point)
            return MovieResponse.model_validate(movie) if movie else None

    def delete_movie(self, movie_id: int) -> bool:
        with self._session("delete movie") as session:
            return crud.delete_movie(session, movie_id)

    def count(self) -> int:
        with self._session("count movies") as session:
            return crud.get_movie_count(session)

    def close(self) -> None:
        self.db_manager.close()
