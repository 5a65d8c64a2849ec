"""Pydantic schemas."""

from app.schemas.common import BaseSchema, ErrorResponse, TimestampSchema
from app.schemas.horse import (
    HorseCreate,
    HorseFamilyResponse,
    HorseResponse,
    HorseSearch,
    HorseUpdate,
)
from app.schemas.owner import OwnerCreate, OwnerResponse

__all__ = [
    # Common
    "BaseSchema",
    "TimestampSchema",
    "ErrorResponse",
    # Horse
    "HorseCreate",
    "HorseUpdate",
    "HorseSearch",
    "HorseResponse",
    "HorseFamilyResponse",
    # Owner
    "OwnerCreate",
    "OwnerResponse",
]
