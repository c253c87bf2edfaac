"""Property management module.

Properties, their generated areas, and the area generation rules.
Routers live in ``routers`` and are mounted by the application.
"""

from .area_generation import (
    generate_from_counts,
    generate_from_profile,
    get_area_type_label,
    get_icon_for_area_type,
)
from .models import (
    AreaType,
    AssetCondition,
    Property,
    PropertyAreaRecord,
    PropertyType,
)
from .schemas import PropertyArea, PropertyData

__all__ = [
    # Models
    "Property",
    "PropertyAreaRecord",
    # Enums
    "AreaType",
    "AssetCondition",
    "PropertyType",
    # Schemas
    "PropertyArea",
    "PropertyData",
    # Area generation
    "generate_from_profile",
    "generate_from_counts",
    "get_icon_for_area_type",
    "get_area_type_label",
]
