"""CRUD operations for property management module."""

import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Property, PropertyAreaRecord, PropertyType
from .schemas import PropertyArea


def parse_property_id(value: object) -> uuid.UUID | None:
    """Property ids are UUIDs; anything else cannot name a property."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


# ----- Property CRUD -----


async def get_property_by_id(db: AsyncSession, property_id: object) -> Property | None:
    """Get a property by ID; malformed ids simply find nothing."""
    property_uuid = parse_property_id(property_id)
    if property_uuid is None:
        return None

    result = await db.execute(select(Property).where(Property.id == property_uuid))
    return result.scalar_one_or_none()


async def create_property(
    db: AsyncSession,
    landlord_id: uuid.UUID,
    name: str,
    property_type: PropertyType,
    bedrooms: int,
    bathrooms: float,
) -> Property:
    """Create a new property."""
    prop = Property(
        landlord_id=landlord_id,
        name=name,
        property_type=property_type,
        bedrooms=bedrooms,
        bathrooms=bathrooms,
    )
    db.add(prop)
    await db.flush()
    return prop


# ----- Area CRUD -----


async def replace_areas(
    db: AsyncSession,
    property_id: uuid.UUID,
    areas: list[PropertyArea],
) -> list[PropertyAreaRecord]:
    """Swap the property's stored areas for ``areas``, keeping their order."""
    await db.execute(
        delete(PropertyAreaRecord).where(PropertyAreaRecord.property_id == property_id)
    )

    records = [
        PropertyAreaRecord(
            property_id=property_id,
            area_key=area.id,
            position=position,
            name=area.name,
            area_type=area.type,
            icon_name=area.icon,
            is_default=area.is_default,
            condition=area.condition,
            photos=list(area.photos),
            inventory_complete=area.inventory_complete,
        )
        for position, area in enumerate(areas)
    ]
    db.add_all(records)
    await db.flush()
    return records


async def get_areas_for_property(
    db: AsyncSession, property_id: uuid.UUID
) -> list[PropertyAreaRecord]:
    """Stored areas in generation order."""
    result = await db.execute(
        select(PropertyAreaRecord)
        .where(PropertyAreaRecord.property_id == property_id)
        .order_by(PropertyAreaRecord.position)
    )
    return list(result.scalars().all())
