"""
Global exception handlers.

Every error is returned as JSON:
    - RequestValidationError -> 400, {"detail": ..., "errors": {field: reason}}
    - StoreError -> 500, generic message
    - HTTPException (404) is left to FastAPI's default handler
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.store.base import StoreError

logger = logging.getLogger(__name__)

_LOCATION_ROOTS = ("body", "path", "query")


def _field_name(loc) -> str:
    """Last named part of a pydantic error location, e.g. ('body', 'name') -> 'name'."""
    names = [part for part in loc if isinstance(part, str) and part not in _LOCATION_ROOTS]
    if names:
        return names[-1]
    return str(loc[0]) if loc else "body"


def validation_errors_to_fields(errors) -> dict[str, str]:
    """Collapse pydantic error entries into a field -> reason mapping."""
    fields: dict[str, str] = {}
    for error in errors:
        # first failure per field wins
        fields.setdefault(_field_name(error.get("loc", ())), error.get("msg", "invalid"))
    return fields


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        fields = validation_errors_to_fields(exc.errors())
        logger.warning("Validation error on %s %s: %s", request.method, request.url.path, fields)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Validation failed", "errors": fields},
        )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error("Store error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Database error"},
        )
