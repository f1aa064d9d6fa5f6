"""
Pydantic schemas for Movie API.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# SQLite stores integers as signed 64-bit
SQL_INT_MIN = -(2**63)
SQL_INT_MAX = 2**63 - 1


class MovieIn(BaseModel):
    """
    Request body for creating or replacing a movie.

    Omitted fields take their zero value, so a replacement never keeps
    a previous value. Unknown keys such as ``id`` are ignored.
    """

    model_config = ConfigDict(validate_default=True)

    name: str = Field("", min_length=1, max_length=100)
    year: int = Field(0, ge=SQL_INT_MIN, le=SQL_INT_MAX)
    point: int = Field(0, ge=0, le=100)

    @field_validator("year")
    @classmethod
    def year_not_zero(cls, value: int) -> int:
        if value == 0:
            raise ValueError("year must be non-zero")
        return value


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    year: int
    point: int


class MessageResponse(BaseModel):
    """Confirmation payload."""

    message: str
