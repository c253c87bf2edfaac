"""Property management API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...database import get_db
from ..auth.dependencies import CurrentCaller
from ..commons import BaseResponse
from ..tenant_management.invite_links import build_invite_url
from . import services
from .area_generation import generate_from_counts, generate_from_profile
from .schemas import (
    AreaCountsRequest,
    InviteLinkResponse,
    PropertyArea,
    PropertyCreate,
    PropertyData,
    PropertyResponse,
    PropertyWithAreasResponse,
    StoredAreaResponse,
)

router = APIRouter(prefix="/properties", tags=["Properties"])
areas_router = APIRouter(prefix="/property-areas", tags=["Property Areas"])


# ----- Area generation (no persistence) -----


@areas_router.post("/generate", response_model=BaseResponse[list[PropertyArea]])
async def preview_areas(data: PropertyData, caller: CurrentCaller):
    """Areas a property with these counts would get."""
    return BaseResponse(success=True, data=generate_from_profile(data))


@areas_router.post(
    "/generate-from-counts", response_model=BaseResponse[list[PropertyArea]]
)
async def preview_areas_from_counts(data: AreaCountsRequest, caller: CurrentCaller):
    """Areas for a custom room selection."""
    return BaseResponse(
        success=True, data=generate_from_counts(data.property_data, data.counts)
    )


# ----- Properties -----


@router.post("", response_model=BaseResponse[PropertyWithAreasResponse], status_code=201)
async def create_property(
    data: PropertyCreate,
    caller: CurrentCaller,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Register a property for the calling landlord, with its areas."""
    prop, records = await services.create_property_with_areas(db, caller, data)

    response = PropertyWithAreasResponse(
        **PropertyResponse.model_validate(prop).model_dump(),
        areas=[StoredAreaResponse.model_validate(r) for r in records],
        invite_url=build_invite_url(prop.id),
    )
    return BaseResponse(
        success=True, message="Property created successfully", data=response
    )


@router.get(
    "/{property_id}/areas", response_model=BaseResponse[list[StoredAreaResponse]]
)
async def list_property_areas(
    property_id: str,
    caller: CurrentCaller,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Stored areas of a property."""
    records = await services.get_property_areas(db, caller, property_id)
    return BaseResponse(
        success=True, data=[StoredAreaResponse.model_validate(r) for r in records]
    )


@router.get("/{property_id}/invite-link", response_model=BaseResponse[InviteLinkResponse])
async def get_invite_link(
    property_id: str,
    caller: CurrentCaller,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Shareable invite link; only the owning landlord may ask for it."""
    prop = await services.get_property_for_owner(db, caller, property_id)
    return BaseResponse(
        success=True,
        data=InviteLinkResponse(property_id=prop.id, invite_url=build_invite_url(prop.id)),
    )
