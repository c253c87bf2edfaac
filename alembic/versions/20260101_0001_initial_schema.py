"""Initial schema for Homebase

Revision ID: 0001
Revises:
Create Date: 2026-01-01

Creates all tables for:
- Auth (profiles)
- Property Management (properties, property_areas)
- Tenant Management (tenant_property_links)
"""
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PROPERTY_TYPES = ("house", "apartment", "condo", "townhouse", "other")
AREA_TYPES = (
    "kitchen",
    "living_room",
    "bedroom",
    "bathroom",
    "garage",
    "outdoor",
    "laundry",
    "other",
)
CONDITIONS = ("excellent", "good", "fair", "poor", "needs_replacement")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now(), onupdate=sa.func.now()),
    ]


def upgrade() -> None:
    """Create all tables."""

    # profiles - internal users keyed by the identity provider subject
    op.create_table(
        "profiles",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("external_id", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("role", sa.Enum("tenant", "landlord", name="userrole"), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_profiles_external_id", "profiles", ["external_id"], unique=True)

    # properties - owned by a landlord profile
    op.create_table(
        "properties",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("landlord_id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("property_type", sa.Enum(*PROPERTY_TYPES, name="propertytype"), nullable=False),
        sa.Column("bedrooms", sa.Integer(), nullable=False),
        sa.Column("bathrooms", sa.Numeric(4, 1), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["landlord_id"], ["profiles.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_properties_landlord", "properties", ["landlord_id"])

    # property_areas - rooms and zones generated at onboarding
    op.create_table(
        "property_areas",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("property_id", sa.String(36), nullable=False),
        sa.Column("area_key", sa.String(64), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("area_type", sa.Enum(*AREA_TYPES, name="areatype"), nullable=False),
        sa.Column("icon_name", sa.String(64), nullable=False),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default="0"),
        sa.Column("condition", sa.Enum(*CONDITIONS, name="assetcondition"), nullable=False),
        sa.Column("photos", sa.JSON(), nullable=False),
        sa.Column("inventory_complete", sa.Boolean(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_property_areas_key", "property_areas", ["property_id", "area_key"], unique=True)

    # tenant_property_links - one row per tenant/property pair
    op.create_table(
        "tenant_property_links",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("tenant_id", sa.String(36), nullable=False),
        sa.Column("property_id", sa.String(36), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="1"),
        sa.Column("accepted_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["tenant_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("tenant_id", "property_id", name="uq_tenant_property_links_pair"),
    )
    op.create_index("ix_tenant_property_links_property", "tenant_property_links", ["property_id"])
    op.create_index("ix_tenant_property_links_active", "tenant_property_links", ["tenant_id", "is_active"])


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("tenant_property_links")
    op.drop_table("property_areas")
    op.drop_table("properties")
    op.drop_table("profiles")
