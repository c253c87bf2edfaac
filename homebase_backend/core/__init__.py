"""Core infrastructure for the Homebase backend."""

from .database_types import UUID
from .exceptions import (
    AuthenticationError,
    DatabaseError,
    HomebaseException,
    InvalidInviteError,
    LinkPersistenceError,
    PermissionError,
    ProfileUnavailableError,
    ResourceNotFoundError,
    ValidationError,
)

__all__ = [
    "UUID",
    "HomebaseException",
    "ResourceNotFoundError",
    "ValidationError",
    "PermissionError",
    "AuthenticationError",
    "DatabaseError",
    "InvalidInviteError",
    "ProfileUnavailableError",
    "LinkPersistenceError",
]
