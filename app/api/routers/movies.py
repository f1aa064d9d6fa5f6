"""
Movie API endpoints.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from app.api.dependencies import get_store
from app.api.models.movie import (
    SQL_INT_MAX,
    SQL_INT_MIN,
    MessageResponse,
    MovieIn,
    MovieResponse,
)
from app.store.base import MovieStore

router = APIRouter(tags=["movies"])

MOVIE_NOT_FOUND = "Movie not found"

MovieId = Annotated[int, Path(ge=SQL_INT_MIN, le=SQL_INT_MAX)]


@router.get("/movies", response_model=List[MovieResponse])
def list_movies(store: MovieStore = Depends(get_store)):
    """List every movie."""
    return store.list_movies()


@router.get("/movie/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: MovieId, store: MovieStore = Depends(get_store)):
    """Get movie details by ID."""
    movie = store.get_movie(movie_id)
    if not movie:
        raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
    return movie


@router.post("/movie", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
def create_movie(movie_in: MovieIn, store: MovieStore = Depends(get_store)):
    """Create a movie. Any id in the body is ignored."""
    return store.create_movie(name=movie_in.name, year=movie_in.year, point=movie_in.point)


@router.delete("/movie/{movie_id}", response_model=MessageResponse)
def delete_movie(movie_id: MovieId, store: MovieStore = Depends(get_store)):
    """Delete a movie by ID."""
    if not store.delete_movie(movie_id):
        raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
    return MessageResponse(message="Movie deleted")


@router.patch("/movie/{movie_id}", response_model=MovieResponse)
def update_movie(movie_id: MovieId, movie_in: MovieIn, store: MovieStore = Depends(get_store)):
    """Replace name, year and point of a movie. Omitted fields become zero values."""
    movie = store.update_movie(
        movie_id, name=movie_in.name, year=movie_in.year, point=movie_in.point
    )
    if not movie:
        raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
    return movie
