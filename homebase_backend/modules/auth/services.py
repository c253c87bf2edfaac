"""Profile services."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.exceptions import ProfileUnavailableError
from ...core.logging import get_logger
from . import crud
from .models import Profile, UserRole
from .schemas import CallerIdentity

logger = get_logger(__name__)


async def ensure_profile(
    db: AsyncSession,
    caller: CallerIdentity,
    role: UserRole | None = None,
) -> Profile:
    """Return the caller's profile, creating it on first use.

    When ``role`` is given it is assigned to profiles that have no role yet.
    """
    try:
        profile = await crud.get_profile_by_external_id(db, caller.external_id)
        if profile is None:
            logger.info(
                "Creating profile on first use",
                extra={"external_id": caller.external_id},
            )
            return await crud.create_profile(db, caller, role=role)
        if role is not None:
            profile = await crud.set_role_if_missing(db, profile, role)
        return profile
    except SQLAlchemyError as e:
        logger.error(
            "Profile lookup or creation failed",
            extra={"external_id": caller.external_id},
            exc_info=True,
        )
        raise ProfileUnavailableError(caller.external_id, str(e)) from e
