#!/usr/bin/env python
"""
Database initialization script for the Movie API.

Creates the movies table and inserts the seed movies if the table is empty.
The API does the same on startup; this script is for preparing a database
file ahead of time or resetting it.

Usage:
    # Create schema and seed (keeps existing rows)
    python scripts/init_database.py

    # Drop everything and start from the seed movies
    python scripts/init_database.py --reset

    # Schema only
    python scripts/init_database.py --no-seed
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.api.config import get_database_path
from app.database import init_database, verify_schema
from app.store import SqlMovieStore, seed_movies


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def main():
    parser = argparse.ArgumentParser(description="Initialize the movie database")
    parser.add_argument("--db-path", default=None, help="SQLite file (default: from DATABASE_URL)")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate the movies table")
    parser.add_argument("--no-seed", action="store_true", help="Do not insert seed movies")
    args = parser.parse_args()
    
    db_path = args.db_path or get_database_path()
    print_section("Movie Database Initialization")
    print(f"Database: {db_path}")
    
    db_manager = init_database(db_path=db_path, reset=args.reset)
    store = SqlMovieStore(db_manager)
    try:
        if not verify_schema(db_manager):
            print("[ERROR] Schema verification failed")
            sys.exit(1)
        
        if not args.no_seed:
            inserted = seed_movies(store)
            print(f"Seed movies inserted: {inserted}")
        
        print_section("Summary")
        print(f"Movies in database: {store.count()}")
        for movie in store.list_movies():
            print(f"  {movie.id:>4}  {movie.name} ({movie.year}) - {movie.point}")
    finally:
        store.close()


if __name__ == "__main__":
    main()
