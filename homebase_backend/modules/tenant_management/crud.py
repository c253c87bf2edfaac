"""CRUD operations for tenant management module."""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.exceptions import DatabaseError
from ..auth import crud as profile_crud
from ..auth.models import Profile, UserRole
from ..auth.schemas import CallerIdentity
from ..property_management.crud import parse_property_id
from ..property_management.models import Property
from .models import TenantPropertyLink
from .workflow import LinkAlreadyExists, LinkCreated, LinkInsertFailed

# ----- Link CRUD -----


async def get_link(
    db: AsyncSession, tenant_id: uuid.UUID, property_id: uuid.UUID
) -> TenantPropertyLink | None:
    """Get the link row for a tenant/property pair, active or not."""
    result = await db.execute(
        select(TenantPropertyLink).where(
            TenantPropertyLink.tenant_id == tenant_id,
            TenantPropertyLink.property_id == property_id,
        )
    )
    return result.scalar_one_or_none()


async def has_active_link(
    db: AsyncSession, tenant_id: uuid.UUID, property_id: uuid.UUID
) -> bool:
    link = await get_link(db, tenant_id, property_id)
    return link is not None and link.is_active


async def get_active_properties_for_tenant(
    db: AsyncSession, tenant_id: uuid.UUID
) -> list[tuple[Property, TenantPropertyLink]]:
    """Properties the tenant is actively linked to, newest link first."""
    result = await db.execute(
        select(Property, TenantPropertyLink)
        .join(TenantPropertyLink, TenantPropertyLink.property_id == Property.id)
        .where(
            TenantPropertyLink.tenant_id == tenant_id,
            TenantPropertyLink.is_active.is_(True),
        )
        .order_by(TenantPropertyLink.created_at.desc())
    )
    return [(row[0], row[1]) for row in result.all()]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SqlInviteStore:
    """Invite workflow persistence on one request's AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_profile_by_external_id(self, external_id: str) -> Profile | None:
        try:
            return await profile_crud.get_profile_by_external_id(self.db, external_id)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Profile lookup failed: {e}") from e

    async def create_profile(self, caller: CallerIdentity) -> Profile:
        try:
            return await profile_crud.create_profile(
                self.db, caller, role=UserRole.TENANT
            )
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseError(f"Profile creation failed: {e}") from e

    async def find_active_link(self, profile_id: Any, property_id: str) -> bool:
        property_uuid = parse_property_id(property_id)
        if property_uuid is None:
            return False
        try:
            return await has_active_link(self.db, profile_id, property_uuid)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Link lookup failed: {e}") from e

    async def insert_link(
        self, profile_id: Any, property_id: str
    ) -> LinkCreated | LinkAlreadyExists | LinkInsertFailed:
        property_uuid = parse_property_id(property_id)
        if property_uuid is None:
            return LinkInsertFailed(f"'{property_id}' is not a valid property id")

        link = TenantPropertyLink(
            tenant_id=profile_id,
            property_id=property_uuid,
            is_active=True,
            accepted_at=_utcnow(),
        )
        self.db.add(link)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            return await self._resolve_conflict(profile_id, property_uuid, e)
        except SQLAlchemyError as e:
            await self.db.rollback()
            return LinkInsertFailed(str(e))

        return LinkCreated(link.id)

    async def _resolve_conflict(
        self, profile_id: Any, property_uuid: uuid.UUID, error: IntegrityError
    ) -> LinkCreated | LinkAlreadyExists | LinkInsertFailed:
        """Classify a failed insert.

        A row for the pair means the uniqueness constraint fired; anything
        else (a foreign key, say) is a real failure. An inactive row is
        switched back on.
        """
        try:
            existing = await get_link(self.db, profile_id, property_uuid)
            if existing is None:
                return LinkInsertFailed(str(error.orig))
            if existing.is_active:
                return LinkAlreadyExists(existing.id)

            existing.is_active = True
            existing.accepted_at = _utcnow()
            await self.db.commit()
            return LinkCreated(existing.id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            return LinkInsertFailed(str(e))
