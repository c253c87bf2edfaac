"""Tenant management business logic services."""

from sqlalchemy.ext.asyncio import AsyncSession

from ...core.exceptions import ResourceNotFoundError
from ...core.logging import get_logger
from ..auth import crud as profile_crud
from ..auth.models import Profile, UserRole
from ..auth.schemas import CallerIdentity
from ..auth.services import ensure_profile
from ..property_management import crud as property_crud
from ..property_management.models import Property
from . import crud
from .invite_links import parse_invite_url
from .schemas import InviteAcceptResponse, InvitePreviewResponse, LinkedPropertyResponse
from .workflow import InviteAcceptanceWorkflow

logger = get_logger(__name__)


async def _resolve_invited_property(db: AsyncSession, invite_url: str) -> Property:
    property_ref = parse_invite_url(invite_url)
    prop = await property_crud.get_property_by_id(db, property_ref)
    if not prop:
        raise ResourceNotFoundError("Property", property_ref)
    return prop


async def preview_invite(db: AsyncSession, invite_url: str) -> InvitePreviewResponse:
    """Property summary shown before the tenant accepts."""
    prop = await _resolve_invited_property(db, invite_url)
    landlord = await db.get(Profile, prop.landlord_id)
    return InvitePreviewResponse(
        property_id=prop.id,
        property_name=prop.name,
        property_type=prop.property_type,
        landlord_name=landlord.name if landlord else None,
    )


async def accept_invite(
    db: AsyncSession,
    caller: CallerIdentity,
    invite_url: str,
) -> InviteAcceptResponse:
    """Link the caller to the property named by the invite URL."""
    prop = await _resolve_invited_property(db, invite_url)
    property_id, property_name = prop.id, prop.name

    workflow = InviteAcceptanceWorkflow(crud.SqlInviteStore(db))
    acceptance = await workflow.accept(caller, str(property_id))

    # Profiles that existed without a role become tenants here
    profile = await profile_crud.get_profile_by_external_id(db, caller.external_id)
    if profile is not None:
        await profile_crud.set_role_if_missing(db, profile, UserRole.TENANT)

    return InviteAcceptResponse(
        outcome=acceptance.outcome,
        profile_id=acceptance.profile_id,
        property_id=property_id,
        property_name=property_name,
    )


async def list_linked_properties(
    db: AsyncSession, caller: CallerIdentity
) -> list[LinkedPropertyResponse]:
    """Properties the caller is actively linked to."""
    profile = await ensure_profile(db, caller)
    rows = await crud.get_active_properties_for_tenant(db, profile.id)
    return [
        LinkedPropertyResponse(
            property_id=prop.id,
            property_name=prop.name,
            property_type=prop.property_type,
            accepted_at=link.accepted_at,
        )
        for prop, link in rows
    ]
