"""
Database connection management using SQLAlchemy.

This module handles SQLite engine creation and session management for the
persistent movie store.
"""

import os
from contextlib import contextmanager
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.database.models import Base


# Default database path
DEFAULT_DB_PATH = "data/movies.db"

# Special path selecting a private in-memory database
MEMORY_DB_PATH = ":memory:"


def get_database_url(db_path: str = DEFAULT_DB_PATH) -> str:
    """
    Get SQLite database URL.
    
    Args:
        db_path: Path to SQLite database file, or ":memory:"
        
    Returns:
        SQLAlchemy database URL
    """
    if db_path == MEMORY_DB_PATH:
        return "sqlite://"
    
    # Ensure directory exists
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)
    
    # SQLite URL format: sqlite:///path/to/database.db
    return f"sqlite:///{os.path.abspath(db_path)}"


class DatabaseManager:
    """
    Database connection manager.
    
    Owns the engine and the session factory. One instance is created per
    store; there is no process-wide singleton.
    """
    
    def __init__(self, db_path: str = DEFAULT_DB_PATH, echo: bool = False):
        """
        Initialize database manager.
        
        Args:
            db_path: Path to SQLite database file, or ":memory:"
            echo: If True, log all SQL statements (useful for debugging)
        """
        self.db_path = db_path
        self.database_url = get_database_url(db_path)
        
        engine_options = {"connect_args": {"check_same_thread": False}}
        if db_path == MEMORY_DB_PATH:
            # one shared connection, or every session would see its own empty database
            engine_options["poolclass"] = StaticPool
        
        self.engine = create_engine(self.database_url, echo=echo, **engine_options)
        
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )
    
    def create_tables(self):
        """
        Create all tables defined in the models.
        
        Existing tables are not modified.
        """
        Base.metadata.create_all(bind=self.engine)
    
    def drop_tables(self):
        """
        Drop all tables defined in the models.
        
        WARNING: This will delete all data in the database!
        """
        Base.metadata.drop_all(bind=self.engine)
    
    def reset_database(self):
        """Drop and recreate all tables."""
        self.drop_tables()
        self.create_tables()
    
    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.
        
        Automatically commits on success and rolls back on failure.
        
        Usage:
            with db_manager.session_scope() as session:
                crud.create_movie(session, name="Dune", year=2021, point=83)
        
        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
    
    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()
