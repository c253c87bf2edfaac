"""Property management models.

- Properties owned by a landlord profile
- Areas (rooms/zones) generated for a property during onboarding
"""

import enum
import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ...core.database_types import UUID as UUID_DB
from ...database import Base, TimestampMixin, UUIDPrimaryKey


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


class PropertyType(str, enum.Enum):
    """Kinds of property a landlord can register."""

    HOUSE = "house"
    APARTMENT = "apartment"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    OTHER = "other"


class AreaType(str, enum.Enum):
    """Closed set of area (room/zone) types."""

    KITCHEN = "kitchen"
    LIVING_ROOM = "living_room"
    BEDROOM = "bedroom"
    BATHROOM = "bathroom"
    GARAGE = "garage"
    OUTDOOR = "outdoor"
    LAUNDRY = "laundry"
    OTHER = "other"


class AssetCondition(str, enum.Enum):
    """Condition grades for areas and assets."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    NEEDS_REPLACEMENT = "needs_replacement"


class Property(UUIDPrimaryKey, TimestampMixin, Base):
    """A property registered by a landlord."""

    __tablename__ = "properties"

    landlord_id: Mapped[uuid.UUID] = mapped_column(
        UUID_DB(), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    property_type: Mapped[PropertyType] = mapped_column(
        Enum(PropertyType, values_callable=_enum_values),
        nullable=False,
        default=PropertyType.HOUSE,
    )
    bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    bathrooms: Mapped[float] = mapped_column(
        Numeric(4, 1, asdecimal=False), nullable=False, default=0
    )

    # Relationships
    areas: Mapped[list["PropertyAreaRecord"]] = relationship(
        "PropertyAreaRecord",
        back_populates="property",
        cascade="all, delete-orphan",
        order_by="PropertyAreaRecord.position",
    )

    __table_args__ = (Index("ix_properties_landlord", "landlord_id"),)

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, name={self.name})>"


class PropertyAreaRecord(UUIDPrimaryKey, TimestampMixin, Base):
    """Persisted area of a property.

    ``area_key`` is the generated identifier (``kitchen``, ``bedroom2``,
    ``half-bathroom``...), unique within the property.
    """

    __tablename__ = "property_areas"

    property_id: Mapped[uuid.UUID] = mapped_column(
        UUID_DB(), ForeignKey("properties.id", ondelete="CASCADE"), nullable=False
    )
    area_key: Mapped[str] = mapped_column(String(64), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    area_type: Mapped[AreaType] = mapped_column(
        Enum(AreaType, values_callable=_enum_values), nullable=False
    )
    icon_name: Mapped[str] = mapped_column(String(64), nullable=False)
    is_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    condition: Mapped[AssetCondition] = mapped_column(
        Enum(AssetCondition, values_callable=_enum_values),
        nullable=False,
        default=AssetCondition.GOOD,
    )
    photos: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    inventory_complete: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )

    property: Mapped["Property"] = relationship("Property", back_populates="areas")

    __table_args__ = (
        Index("ix_property_areas_key", "property_id", "area_key", unique=True),
    )

    def __repr__(self) -> str:
        return f"<PropertyAreaRecord(key={self.area_key}, name={self.name})>"
