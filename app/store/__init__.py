"""
Movie stores.

Two interchangeable backends implement MovieStore: a SQLite table accessed
through SQLAlchemy, and an ordered in-process list.
"""

from app.store.base import MovieStore, StoreError
from app.store.memory_store import InMemoryMovieStore
from app.store.sql_store import SqlMovieStore
from app.store.seed import SEED_MOVIES, seed_movies

__all__ = [
    'MovieStore',
    'StoreError',
    'InMemoryMovieStore',
    'SqlMovieStore',
    'SEED_MOVIES',
    'seed_movies',
]
