"""Property management schemas."""

from datetime import datetime
from typing import Annotated, Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from .models import AreaType, AssetCondition, PropertyType

MAX_ROOM_COUNT = 10
MAX_COUNTED_AREA_TYPES = 20

AreaTag = Annotated[str, Field(min_length=1, max_length=32)]
RoomCount = Annotated[int, Field(ge=0, le=MAX_ROOM_COUNT)]
AreaCounts = Annotated[
    dict[AreaTag, RoomCount], Field(max_length=MAX_COUNTED_AREA_TYPES)
]

# ----- Area Schemas -----


class PropertyData(BaseModel):
    """Room counts and type a landlord declares for a property."""

    bedrooms: int = Field(default=0, ge=0, le=MAX_ROOM_COUNT)
    bathrooms: float = Field(
        default=0, ge=0, le=MAX_ROOM_COUNT, allow_inf_nan=False
    )
    type: PropertyType = PropertyType.HOUSE

    @field_validator("bathrooms")
    @classmethod
    def round_bathrooms(cls, v: float) -> float:
        """Keep one decimal, the precision the count is stored with."""
        return round(v, 1)


class PropertyArea(BaseModel):
    """One physical room or zone of a property."""

    id: str
    name: str
    type: AreaType
    icon: str
    is_default: bool
    condition: AssetCondition = AssetCondition.GOOD
    photos: list[str] = Field(default_factory=list)
    inventory_complete: bool = False
    assets: list[dict[str, Any]] = Field(default_factory=list)


class AreaCountsRequest(BaseModel):
    """Input for count-driven area generation."""

    property_data: PropertyData | None = None
    counts: AreaCounts = Field(default_factory=dict)


class StoredAreaResponse(BaseModel):
    """Schema for a persisted area."""

    id: UUID
    area_key: str
    name: str
    area_type: AreaType
    icon_name: str
    is_default: bool
    condition: AssetCondition
    photos: list[str] = []
    inventory_complete: bool

    class Config:
        from_attributes = True


# ----- Property Schemas -----


class PropertyCreate(PropertyData):
    """Schema for creating a property.

    When ``area_counts`` is given the areas come from count-driven
    generation instead of the full profile.
    """

    name: str = Field(..., min_length=1, max_length=255)
    area_counts: AreaCounts | None = None


class PropertyResponse(BaseModel):
    """Schema for property response."""

    id: UUID
    landlord_id: UUID
    name: str
    property_type: PropertyType
    bedrooms: int
    bathrooms: float
    created_at: datetime

    class Config:
        from_attributes = True


class PropertyWithAreasResponse(PropertyResponse):
    """Property response with its areas and shareable invite link."""

    areas: list[StoredAreaResponse] = []
    invite_url: str | None = None


class InviteLinkResponse(BaseModel):
    """Invite link for a property."""

    property_id: UUID
    invite_url: str
