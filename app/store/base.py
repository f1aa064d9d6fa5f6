"""
Store abstraction shared by the persistent and in-memory movie stores.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.api.models.movie import MovieResponse


class StoreError(Exception):
    """Raised when the underlying storage fails (unreachable, write error)."""


class MovieStore(ABC):
    """
    Owner of the authoritative movie collection.

    Callers only ever receive copies of stored records. Missing ids are
    reported as None (get, update) or False (delete); storage faults raise
    StoreError.
    """

    backend: str = ""

    @abstractmethod
    def list_movies(self) -> List[MovieResponse]:
        """Return every movie ordered by id."""

    @abstractmethod
    def get_movie(self, movie_id: int) -> Optional[MovieResponse]:
        """Return the movie with this id, or None."""

    @abstractmethod
    def create_movie(self, name: str, year: int, point: int) -> MovieResponse:
        """Store a new movie under a fresh id and return it."""

    @abstractmethod
    def update_movie(
        self, movie_id: int, name: str, year: int, point: int
    ) -> Optional[MovieResponse]:
        """Overwrite all mutable fields of a movie. None if it does not exist."""

    @abstractmethod
    def delete_movie(self, movie_id: int) -> bool:
        """Remove a movie. False if it does not exist."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored movies."""

    def close(self) -> None:
        """Release any resources held by the store."""
