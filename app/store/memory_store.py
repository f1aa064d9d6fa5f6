"""
Process-memory movie store.

Records live in an ordered list for the lifetime of the process. A single
lock guards both the list and the id counter, so concurrent requests are
applied one at a time.
"""

import threading
from typing import List, Optional

from app.api.models.movie import MovieResponse
from app.store.base import MovieStore


class InMemoryMovieStore(MovieStore):
    """Ordered list of movies with a monotonically increasing id counter."""

    backend = "memory"

    def __init__(self):
        self._movies: List[MovieResponse] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def _find_index(self, movie_id: int) -> Optional[int]:
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return index
        return None

    def list_movies(self) -> List[MovieResponse]:
        with self._lock:
            return [movie.model_copy() for movie in self._movies]

    def get_movie(self, movie_id: int) -> Optional[MovieResponse]:
        with self._lock:
            index = self._find_index(movie_id)
            if index is None:
                return None
            return self._movies[index].model_copy()

    def create_movie(self, name: str, year: int, point: int) -> MovieResponse:
        with self._lock:
            # ids are never reused, even after a delete
            self._last_id += 1
            movie = MovieResponse(id=self._last_id, name=name, year=year, point=point)
            self._movies.append(movie)
            return movie.model_copy()

    def update_movie(
        self, movie_id: int, name: str, year: int, point: int
    ) -> Optional[MovieResponse]:
        with self._lock:
            index = self._find_index(movie_id)
            if index is None:
                return None
            movie = MovieResponse(id=movie_id, name=name, year=year, point=point)
            self._movies[index] = movie
            return movie.model_copy()

    def delete_movie(self, movie_id: int) -> bool:
        with self._lock:
            index = self._find_index(movie_id)
            if index is None:
                return False
            del self._movies[index]
            return True

    def count(self) -> int:
        with self._lock:
            return len(self._movies)
