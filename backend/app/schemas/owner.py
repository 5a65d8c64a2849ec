"""Owner schemas."""

from pydantic import Field

from app.schemas.common import BaseSchema, TimestampSchema


class OwnerBase(BaseSchema):
    """Base owner schema."""

    first_name: str | None = Field(None, description="First name")
    last_name: str | None = Field(None, description="Last name")
    description: str | None = Field(None, description="Free text")


class OwnerCreate(OwnerBase):
    """Schema for creating an owner. Constraints are checked by OwnerService."""

    pass


class OwnerResponse(TimestampSchema):
    """Owner response schema."""

    id: int
    first_name: str
    last_name: str
    description: str | None = None
