"""Profile API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...database import get_db
from ..commons import BaseResponse
from .dependencies import CurrentCaller
from .schemas import ProfileResponse
from .services import ensure_profile

router = APIRouter(prefix="/profiles", tags=["Profiles"])


@router.get("/me", response_model=BaseResponse[ProfileResponse])
async def get_my_profile(
    caller: CurrentCaller,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Return the caller's profile, creating it if this is the first visit."""
    profile = await ensure_profile(db, caller)
    return BaseResponse(success=True, data=ProfileResponse.model_validate(profile))
