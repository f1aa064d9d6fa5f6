"""
Initial movies inserted into an empty store.
"""

import logging
from typing import List, Tuple

from app.store.base import MovieStore, StoreError

logger = logging.getLogger(__name__)

# (name, year, point)
SEED_MOVIES: List[Tuple[str, int, int]] = [
    ("Inception", 2010, 87),
    ("The Matrix", 1999, 88),
    ("Interstellar", 2014, 86),
    ("The Godfather", 1972, 98),
    ("The Dark Knight", 2008, 94),
    ("Pulp Fiction", 1994, 92),
    ("Fight Club", 1999, 88),
    ("Forrest Gump", 1994, 89),
    ("The Shawshank Redemption", 1994, 99),
    ("Gladiator", 2000, 85),
]


def seed_movies(store: MovieStore) -> int:
    """
    Insert the seed movies when the store holds no movies yet.

    A row that fails to insert is logged and skipped.

    Args:
        store: Store to populate

    Returns:
        Number of movies inserted (0 if the store was not empty)
    """
    if store.count() > 0:
        logger.info("Store already has movies, skipping seed data")
        return 0

    inserted = 0
    for name, year, point in SEED_MOVIES:
        try:
            store.create_movie(name=name, year=year, point=point)
            inserted += 1
        except StoreError as e:
            logger.warning("Could not insert seed movie %r: %s", name, e)

    logger.info("Inserted %d seed movies", inserted)
    return inserted
