"""Tenant management models.

Tenants join properties through invite links.
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ...core.database_types import UUID as UUID_DB
from ...database import Base, TimestampMixin, UUIDPrimaryKey


class TenantPropertyLink(UUIDPrimaryKey, TimestampMixin, Base):
    """Association between a tenant profile and a property.

    The unique (tenant_id, property_id) constraint is what keeps concurrent
    invite acceptances down to a single row.
    """

    __tablename__ = "tenant_property_links"

    tenant_id: Mapped[uuid.UUID] = mapped_column(
        UUID_DB(), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    )
    property_id: Mapped[uuid.UUID] = mapped_column(
        UUID_DB(), ForeignKey("properties.id", ondelete="CASCADE"), nullable=False
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    accepted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        UniqueConstraint(
            "tenant_id", "property_id", name="uq_tenant_property_links_pair"
        ),
        Index("ix_tenant_property_links_property", "property_id"),
        Index("ix_tenant_property_links_active", "tenant_id", "is_active"),
    )

    def __repr__(self) -> str:
        return (
            f"<TenantPropertyLink(tenant_id={self.tenant_id}, "
            f"property_id={self.property_id}, active={self.is_active})>"
        )
