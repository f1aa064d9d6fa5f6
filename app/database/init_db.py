"""
Database initialization and schema creation.
"""

import logging

from sqlalchemy import inspect

from app.database.connection import DatabaseManager, DEFAULT_DB_PATH

logger = logging.getLogger(__name__)


def init_database(db_path: str = DEFAULT_DB_PATH, reset: bool = False) -> DatabaseManager:
    """
    Initialize the database and create all tables.
    
    Args:
        db_path: Path to SQLite database file
        reset: If True, drop existing tables before creating new ones
        
    Returns:
        DatabaseManager instance
    """
    db_manager = DatabaseManager(db_path=db_path)
    
    if reset:
        logger.info("Resetting database at %s (dropping all tables)", db_path)
        db_manager.reset_database()
    else:
        logger.info("Creating database tables at %s", db_path)
        db_manager.create_tables()
    
    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.
    
    Args:
        db_manager: DatabaseManager instance
        
    Returns:
        True if all tables exist, False otherwise
    """
    existing_tables = set(inspect(db_manager.engine).get_table_names())
    missing_tables = {'movies'} - existing_tables
    
    if missing_tables:
        logger.error("Missing tables: %s", missing_tables)
        return False
    
    return True
