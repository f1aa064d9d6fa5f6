"""
Movie API application package.

This package contains the HTTP API, the movie stores (SQLite and in-memory),
database operations, and utilities.
"""

__version__ = "1.0.0"
