"""Area generation for property onboarding.

Expands a property's declared bedroom/bathroom counts and type into the
ordered list of areas the landlord walks through. Everything here is pure:
same input, same output, no I/O.
"""

import math
from collections.abc import Mapping

from .models import AreaType, AssetCondition, PropertyType
from .schemas import PropertyArea, PropertyData

DEFAULT_ICON = "home"
DEFAULT_LABEL = "Other"
DEFAULT_ROOM_NAME = "Room"

AREA_ICONS: dict[AreaType, str] = {
    AreaType.KITCHEN: "restaurant",
    AreaType.LIVING_ROOM: "tv",
    AreaType.BEDROOM: "bed",
    AreaType.BATHROOM: "water",
    AreaType.GARAGE: "car",
    AreaType.OUTDOOR: "leaf",
    AreaType.LAUNDRY: "shirt",
    AreaType.OTHER: "home",
}

AREA_LABELS: dict[AreaType, str] = {
    AreaType.BEDROOM: "Bedroom",
    AreaType.BATHROOM: "Bathroom",
    AreaType.LIVING_ROOM: "Living Room",
    AreaType.KITCHEN: "Kitchen",
    AreaType.LAUNDRY: "Laundry/Utility",
    AreaType.GARAGE: "Garage/Storage",
    AreaType.OUTDOOR: "Outdoor",
    AreaType.OTHER: "Other",
}

# Names for count-driven rooms; unlisted types fall back to "Room"
COUNTED_ROOM_NAMES: dict[AreaType, str] = {
    AreaType.KITCHEN: "Kitchen",
    AreaType.LIVING_ROOM: "Living Room",
    AreaType.GARAGE: "Garage",
    AreaType.OUTDOOR: "Yard",
    AreaType.LAUNDRY: "Laundry Room",
}

COMPACT_PROPERTY_TYPES = frozenset({PropertyType.APARTMENT, PropertyType.CONDO})


def _coerce_area_type(area_type: AreaType | str) -> AreaType | None:
    if isinstance(area_type, AreaType):
        return area_type
    try:
        return AreaType(area_type)
    except ValueError:
        return None


def get_icon_for_area_type(area_type: AreaType | str) -> str:
    """Icon tag for an area type; unknown types get the generic home icon."""
    known = _coerce_area_type(area_type)
    if known is None:
        return DEFAULT_ICON
    return AREA_ICONS.get(known, DEFAULT_ICON)


def get_area_type_label(area_type: AreaType | str) -> str:
    """Human readable label for an area type; unknown types read "Other"."""
    known = _coerce_area_type(area_type)
    if known is None:
        return DEFAULT_LABEL
    return AREA_LABELS.get(known, DEFAULT_LABEL)


def _create_area(
    area_id: str,
    name: str,
    area_type: AreaType,
    icon: str,
    is_default: bool,
) -> PropertyArea:
    return PropertyArea(
        id=area_id,
        name=name,
        type=area_type,
        icon=icon,
        is_default=is_default,
        condition=AssetCondition.GOOD,
        photos=[],
        inventory_complete=False,
        assets=[],
    )


def _ranked_name(label: str, total: int, ordinal: int) -> str:
    """Bare label when alone, else "Master <label>", "<label> 2", ..."""
    if total == 1:
        return label
    if ordinal == 1:
        return f"Master {label}"
    return f"{label} {ordinal}"


def _bedroom_areas(bedrooms: int) -> list[PropertyArea]:
    return [
        _create_area(
            f"bedroom{i}",
            _ranked_name("Bedroom", bedrooms, i),
            AreaType.BEDROOM,
            AREA_ICONS[AreaType.BEDROOM],
            True,
        )
        for i in range(1, bedrooms + 1)
    ]


def _bathroom_areas(bathrooms: float) -> list[PropertyArea]:
    full_bathrooms = math.floor(bathrooms)
    areas = [
        _create_area(
            f"bathroom{i}",
            _ranked_name("Bathroom", full_bathrooms, i),
            AreaType.BATHROOM,
            AREA_ICONS[AreaType.BATHROOM],
            True,
        )
        for i in range(1, full_bathrooms + 1)
    ]
    # Any fractional part means exactly one half bath
    if bathrooms % 1 != 0:
        areas.append(
            _create_area(
                "half-bathroom",
                "Half Bathroom",
                AreaType.BATHROOM,
                AREA_ICONS[AreaType.BATHROOM],
                True,
            )
        )
    return areas


def _optional_areas(property_type: PropertyType) -> list[PropertyArea]:
    if property_type in COMPACT_PROPERTY_TYPES:
        return [
            _create_area("balcony", "Balcony/Patio", AreaType.OUTDOOR, "flower", False),
            _create_area("laundry", "Laundry Room", AreaType.LAUNDRY, "shirt", False),
            _create_area("storage", "Storage Closet", AreaType.OTHER, "archive", False),
        ]
    return [
        _create_area("garage", "Garage", AreaType.GARAGE, "car", False),
        _create_area("yard", "Yard", AreaType.OUTDOOR, "leaf", False),
        _create_area("basement", "Basement", AreaType.OTHER, "layers", False),
        _create_area("laundry", "Laundry Room", AreaType.LAUNDRY, "shirt", False),
    ]


def generate_from_profile(property_data: PropertyData) -> list[PropertyArea]:
    """Full area set for a property profile.

    Order: kitchen and living room, bedrooms, full bathrooms, the half
    bathroom if any, then the optional areas for the property type.
    """
    essential_areas = [
        _create_area("kitchen", "Kitchen", AreaType.KITCHEN, "restaurant", True),
        _create_area("living", "Living Room", AreaType.LIVING_ROOM, "tv", True),
    ]
    return [
        *essential_areas,
        *_bedroom_areas(property_data.bedrooms),
        *_bathroom_areas(property_data.bathrooms),
        *_optional_areas(property_data.type),
    ]


def _counted_room_name(area_type: AreaType | None, count: int, index: int) -> str:
    base_name = COUNTED_ROOM_NAMES.get(area_type, DEFAULT_ROOM_NAME)
    if count == 1:
        return base_name
    if index == 0:
        return f"Main {base_name}"
    return f"{base_name} {index + 1}"


def generate_from_counts(
    property_data: PropertyData | None,
    counts: Mapping[str, int],
) -> list[PropertyArea]:
    """Areas for the custom, count-driven room selection flow.

    Bedrooms and bathrooms still come from ``property_data`` (missing means
    none). Each ``counts`` entry then adds that many areas of its type, in
    the mapping's order. Kitchen and living room are not added implicitly;
    callers that want them pass them in ``counts``.
    """
    bedrooms = property_data.bedrooms if property_data else 0
    bathrooms = property_data.bathrooms if property_data else 0

    areas = [*_bedroom_areas(bedrooms), *_bathroom_areas(bathrooms)]

    for type_tag, count in counts.items():
        area_type = _coerce_area_type(type_tag)
        for index in range(count):
            areas.append(
                _create_area(
                    f"{type_tag}{index + 1}",
                    _counted_room_name(area_type, count, index),
                    area_type or AreaType.OTHER,
                    get_icon_for_area_type(type_tag),
                    False,
                )
            )

    return areas
