"""Authentication module.

Identity-token verification and the profiles that mirror external users.
"""

from .dependencies import CurrentCaller, get_caller_identity
from .models import Profile, UserRole
from .routers import router
from .schemas import CallerIdentity, ProfileResponse

__all__ = [
    # Models
    "Profile",
    "UserRole",
    # Schemas
    "CallerIdentity",
    "ProfileResponse",
    # Dependencies
    "CurrentCaller",
    "get_caller_identity",
    # Routers
    "router",
]
