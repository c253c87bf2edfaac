"""Authentication schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from .models import UserRole


class CallerIdentity(BaseModel):
    """Verified identity of the caller, taken from the identity token.

    Passed explicitly into every operation that acts on behalf of a user.
    """

    external_id: str = Field(..., min_length=1)
    email: str | None = None
    name: str | None = None

    @property
    def display_name(self) -> str:
        """Name used when a profile has to be created for this caller."""
        if self.name:
            return self.name
        if self.email and "@" in self.email:
            return self.email.split("@", 1)[0]
        return "User"


class ProfileResponse(BaseModel):
    """Schema for profile response."""

    id: UUID
    external_id: str
    email: str | None = None
    name: str | None = None
    role: UserRole | None = None
    created_at: datetime

    class Config:
        from_attributes = True
