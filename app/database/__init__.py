"""
Database module for the movie service.

This module provides the ORM model, connection management, and CRUD operations
for the SQLite database using SQLAlchemy ORM.
"""

from app.database.models import Base, Movie
from app.database.connection import DatabaseManager, get_database_url
from app.database.init_db import init_database, verify_schema
from app.database import crud

__all__ = [
    # Models
    'Base',
    'Movie',
    # Connection
    'DatabaseManager',
    'get_database_url',
    # Initialization
    'init_database',
    'verify_schema',
    # CRUD module
    'crud',
]
