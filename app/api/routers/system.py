"""
System API endpoints (root, health).
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_store
from app.store.base import MovieStore, StoreError

router = APIRouter(tags=["system"])


@router.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie API",
        "docs": "/docs",
        "health": "/health",
    }


@router.get("/health")
def health_check(store: MovieStore = Depends(get_store)):
    """Health check: store reachable and movie count."""
    try:
        movie_count = store.count()
    except StoreError as e:
        return {"status": "unhealthy", "store": store.backend, "error": str(e)}
    return {
        "status": "healthy",
        "store": store.backend,
        "movies": movie_count,
    }
