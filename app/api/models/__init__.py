"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.movie import MovieIn, MovieResponse, MessageResponse

__all__ = [
    "MovieIn",
    "MovieResponse",
    "MessageResponse",
]
