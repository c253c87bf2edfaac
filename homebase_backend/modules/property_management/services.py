"""Property management business logic services."""

from collections import Counter

from sqlalchemy.ext.asyncio import AsyncSession

from ...core.exceptions import PermissionError, ResourceNotFoundError, ValidationError
from ...core.logging import get_logger
from ..auth.models import Profile, UserRole
from ..auth.schemas import CallerIdentity
from ..auth.services import ensure_profile
from ..tenant_management import crud as link_crud
from . import crud
from .area_generation import generate_from_counts, generate_from_profile
from .models import Property, PropertyAreaRecord
from .schemas import PropertyArea, PropertyCreate, PropertyData

logger = get_logger(__name__)


def build_areas(data: PropertyCreate) -> list[PropertyArea]:
    """Areas for a new property.

    Custom counts switch to count-driven generation; ids must stay unique
    because they key the stored rows.
    """
    if data.area_counts is None:
        return generate_from_profile(data)

    areas = generate_from_counts(
        PropertyData(bedrooms=data.bedrooms, bathrooms=data.bathrooms, type=data.type),
        data.area_counts,
    )
    duplicates = sorted(
        area_id for area_id, n in Counter(a.id for a in areas).items() if n > 1
    )
    if duplicates:
        raise ValidationError(
            f"Area counts produce duplicate areas: {', '.join(duplicates)}",
            field="area_counts",
            value=data.area_counts,
        )
    return areas


async def create_property_with_areas(
    db: AsyncSession,
    caller: CallerIdentity,
    data: PropertyCreate,
) -> tuple[Property, list[PropertyAreaRecord]]:
    """Register a property for the calling landlord and store its areas."""
    areas = build_areas(data)
    landlord = await ensure_profile(db, caller, role=UserRole.LANDLORD)

    prop = await crud.create_property(
        db,
        landlord_id=landlord.id,
        name=data.name,
        property_type=data.type,
        bedrooms=data.bedrooms,
        bathrooms=data.bathrooms,
    )
    records = await crud.replace_areas(db, prop.id, areas)
    await db.commit()
    await db.refresh(prop)

    logger.info(
        "Property created",
        extra={"property_id": str(prop.id), "area_count": len(records)},
    )
    return prop, records


async def _load_property_and_caller(
    db: AsyncSession, caller: CallerIdentity, property_id: str
) -> tuple[Property, Profile]:
    prop = await crud.get_property_by_id(db, property_id)
    if not prop:
        raise ResourceNotFoundError("Property", property_id)

    profile = await ensure_profile(db, caller)
    return prop, profile


async def get_property_areas(
    db: AsyncSession, caller: CallerIdentity, property_id: str
) -> list[PropertyAreaRecord]:
    """Stored areas, visible to the owner and to actively linked tenants."""
    prop, profile = await _load_property_and_caller(db, caller, property_id)
    if prop.landlord_id != profile.id and not await link_crud.has_active_link(
        db, profile.id, prop.id
    ):
        raise PermissionError("view areas of", "property")

    return await crud.get_areas_for_property(db, prop.id)


async def get_property_for_owner(
    db: AsyncSession, caller: CallerIdentity, property_id: str
) -> Property:
    """The property, if the caller is the landlord who owns it."""
    prop, profile = await _load_property_and_caller(db, caller, property_id)
    if prop.landlord_id != profile.id:
        raise PermissionError("share invite link for", "property")
    return prop
