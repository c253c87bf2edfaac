"""Tenant management API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ...database import get_db
from ..auth.dependencies import CurrentCaller
from ..commons import BaseResponse
from . import services
from .schemas import (
    InviteAcceptRequest,
    InviteAcceptResponse,
    InvitePreviewResponse,
    LinkedPropertyResponse,
)
from .workflow import InviteOutcome

invites_router = APIRouter(prefix="/invites", tags=["Invites"])
router = APIRouter(prefix="/tenants", tags=["Tenants"])


# ----- Invites -----


@invites_router.get("/preview", response_model=BaseResponse[InvitePreviewResponse])
async def preview_invite(
    caller: CurrentCaller,
    db: Annotated[AsyncSession, Depends(get_db)],
    url: str = Query(..., min_length=1),
):
    """Show which property an invite link points at."""
    preview = await services.preview_invite(db, url)
    return BaseResponse(success=True, data=preview)


@invites_router.post("/accept", response_model=BaseResponse[InviteAcceptResponse])
async def accept_invite(
    data: InviteAcceptRequest,
    caller: CurrentCaller,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Accept an invite link and join the property as a tenant."""
    result = await services.accept_invite(db, caller, data.invite_url)
    message = (
        "Connected to property"
        if result.outcome is InviteOutcome.CREATED
        else "Already connected to property"
    )
    return BaseResponse(success=True, message=message, data=result)


# ----- Tenant views -----


@router.get("/me/properties", response_model=BaseResponse[list[LinkedPropertyResponse]])
async def list_my_properties(
    caller: CurrentCaller,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Properties the caller is linked to as a tenant."""
    properties = await services.list_linked_properties(db, caller)
    return BaseResponse(success=True, data=properties)
