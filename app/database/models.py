"""
SQLAlchemy ORM models for the movie database.

This module defines the single Movie table used by the persistent store.
"""

from sqlalchemy import Integer, String, CheckConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table.
    
    Attributes:
        id: Primary key, auto-incremented
        name: Movie name (required, up to 100 characters)
        year: Release year (required, non-zero)
        point: Score between 0 and 100
    """
    __tablename__ = 'movies'
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    point: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    
    # Constraints
    __table_args__ = (
        CheckConstraint("point >= 0 AND point <= 100", name='check_point_range'),
        CheckConstraint("year <> 0", name='check_year_nonzero'),
        # ids are never handed out twice, even after a delete
        {'sqlite_autoincrement': True},
    )
    
    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, name='{self.name}', year={self.year}, point={self.point})>"
