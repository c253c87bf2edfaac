"""Profile model.

A profile is the internal user record keyed by the identity provider's
subject. It is created on demand the first time a caller needs one.
"""

import enum

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from ...database import Base, TimestampMixin, UUIDPrimaryKey


class UserRole(str, enum.Enum):
    """Roles a profile can take in the app."""

    TENANT = "tenant"
    LANDLORD = "landlord"


class Profile(UUIDPrimaryKey, TimestampMixin, Base):
    """Internal user record linked to an external identity."""

    __tablename__ = "profiles"

    external_id: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True
    )
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[UserRole | None] = mapped_column(
        Enum(UserRole, values_callable=lambda e: [m.value for m in e]),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, external_id={self.external_id})>"
