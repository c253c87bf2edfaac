"""Tenant management schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from ..property_management.models import PropertyType
from .workflow import InviteOutcome


class InviteAcceptRequest(BaseModel):
    """Schema for accepting an invite."""

    invite_url: str = Field(..., min_length=1)


class InviteAcceptResponse(BaseModel):
    """Result of an invite acceptance."""

    outcome: InviteOutcome
    profile_id: UUID
    property_id: UUID
    property_name: str


class InvitePreviewResponse(BaseModel):
    """What a tenant sees before accepting an invite."""

    property_id: UUID
    property_name: str
    property_type: PropertyType
    landlord_name: str | None = None


class LinkedPropertyResponse(BaseModel):
    """A property the tenant is actively linked to."""

    property_id: UUID
    property_name: str
    property_type: PropertyType
    accepted_at: datetime | None = None
