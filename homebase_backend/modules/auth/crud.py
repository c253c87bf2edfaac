"""CRUD operations for profiles."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.logging import get_logger
from .models import Profile, UserRole
from .schemas import CallerIdentity

logger = get_logger(__name__)


async def get_profile_by_external_id(
    db: AsyncSession, external_id: str
) -> Profile | None:
    """Get a profile by the identity provider's subject."""
    result = await db.execute(select(Profile).where(Profile.external_id == external_id))
    return result.scalar_one_or_none()


async def create_profile(
    db: AsyncSession,
    caller: CallerIdentity,
    role: UserRole | None = None,
) -> Profile:
    """Create and commit a profile for the caller.

    A concurrent request may create the same profile first; the unique
    external_id then makes this insert fail and the existing row is returned.
    """
    profile = Profile(
        external_id=caller.external_id,
        email=caller.email,
        name=caller.display_name,
        role=role,
    )
    db.add(profile)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        existing = await get_profile_by_external_id(db, caller.external_id)
        if existing is None:
            raise
        logger.warning(
            "Profile created concurrently, reusing existing row",
            extra={"external_id": caller.external_id},
        )
        return existing

    await db.refresh(profile)
    return profile


async def set_role_if_missing(
    db: AsyncSession, profile: Profile, role: UserRole
) -> Profile:
    """Give a role to a profile that has none yet; never overwrites."""
    if profile.role is None:
        profile.role = role
        await db.commit()
        await db.refresh(profile)
    return profile
