"""Horse schemas."""

from __future__ import annotations

from datetime import date

from pydantic import Field

from app.models import Sex
from app.schemas.common import BaseSchema, TimestampSchema
from app.schemas.owner import OwnerResponse


class HorseCreate(BaseSchema):
    """Schema for creating a horse.

    Every field is optional at this level so that HorseValidator can report
    all missing or invalid values at once.
    """

    name: str | None = None
    description: str | None = None
    date_of_birth: date | None = None
    sex: Sex | None = None
    owner_id: int | None = None
    image_id: int | None = None
    mother_id: int | None = None
    father_id: int | None = None


class HorseUpdate(BaseSchema):
    """Schema for a full-row horse update."""

    name: str
    description: str | None = None
    date_of_birth: date
    sex: Sex
    owner_id: int | None = None
    image_id: int | None = None
    mother_id: int | None = None
    father_id: int | None = None


class HorseSearch(BaseSchema):
    """Query parameters for the horse search."""

    name: str | None = None
    description: str | None = None
    sex: Sex | None = None
    born_before: date | None = None
    owner_name: str | None = None
    limit: int | None = Field(None, ge=1)


class HorseResponse(TimestampSchema):
    """Horse response schema with its owner resolved."""

    id: int
    name: str
    description: str | None = None
    date_of_birth: date
    sex: Sex
    owner: OwnerResponse | None = None
    image_id: int | None = None
    mother_id: int | None = None
    father_id: int | None = None


class HorseFamilyResponse(BaseSchema):
    """One node of a family tree; parents nest recursively."""

    id: int
    name: str
    date_of_birth: date
    mother: HorseFamilyResponse | None = None
    father: HorseFamilyResponse | None = None
