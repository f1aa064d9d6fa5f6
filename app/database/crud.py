"""
CRUD operations for the Movie model.

This module provides Create, Read, Update, Delete operations against the
movies table. Every function takes an open session and commits its own write.
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.database.models import Movie


def _check_point(point: int) -> None:
    if not (0 <= point <= 100):
        raise ValueError("Point must be between 0 and 100")


def create_movie(
    session: Session,
    name: str,
    year: int,
    point: int = 0
) -> Movie:
    """
    Create a new movie. The id is assigned by the database.
    
    Args:
        session: Database session
        name: Movie name
        year: Release year
        point: Score between 0 and 100
        
    Returns:
        Created Movie object
        
    Raises:
        ValueError: If point is not between 0 and 100
    """
    _check_point(point)
    
    movie = Movie(name=name, year=year, point=point)
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def get_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Get a movie by ID.
    
    Args:
        session: Database session
        movie_id: Movie ID
        
    Returns:
        Movie object or None if not found
    """
    return session.query(Movie).filter(Movie.id == movie_id).first()


def get_movies(session: Session) -> List[Movie]:
    """
    Get every movie, ordered by ID.
    
    Args:
        session: Database session
        
    Returns:
        List of Movie objects
    """
    return session.query(Movie).order_by(Movie.id).all()


def get_movie_count(session: Session) -> int:
    """Get total count of movies."""
    return session.query(func.count(Movie.id)).scalar()


def update_movie(
    session: Session,
    movie_id: int,
    name: str,
    year: int,
    point: int
) -> Optional[Movie]:
    """
    Replace the name, year and point of a movie.
    
    All three fields are overwritten; nothing is merged with the stored row.
    
    Args:
        session: Database session
        movie_id: Movie ID
        name: New name
        year: New release year
        point: New score
        
    Returns:
        Updated Movie object or None if not found
        
    Raises:
        ValueError: If point is not between 0 and 100
    """
    _check_point(point)
    
    movie = get_movie(session, movie_id)
    if movie:
        movie.name = name
        movie.year = year
        movie.point = point
        session.commit()
        session.refresh(movie)
    return movie


def delete_movie(session: Session, movie_id: int) -> bool:
    """
    Delete a movie.
    
    Args:
        session: Database session
        movie_id: Movie ID
        
    Returns:
        True if movie was deleted, False if not found
    """
    movie = get_movie(session, movie_id)
    if movie:
        session.delete(movie)
        session.commit()
        return True
    return False
