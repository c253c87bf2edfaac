"""
Custom exception classes for consistent error handling across all modules.

Each exception carries the HTTP status the API layer renders it with.
"""

from typing import Any


class HomebaseException(Exception):
    """Base exception for all Homebase related errors."""

    status_code: int = 400

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ResourceNotFoundError(HomebaseException):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(
        self,
        resource_type: str,
        identifier: Any,
        details: dict[str, Any] | None = None,
    ):
        message = f"{resource_type} with identifier '{identifier}' not found"
        super().__init__(message, details)
        self.resource_type = resource_type
        self.identifier = identifier


class ValidationError(HomebaseException):
    """Raised when data validation fails."""

    status_code = 422

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ):
        if field:
            full_message = f"Validation error for field '{field}': {message}"
        else:
            full_message = message
        super().__init__(full_message, details)
        self.field = field
        self.value = value


class PermissionError(HomebaseException):
    """Raised when user lacks permission to perform an action."""

    status_code = 403

    def __init__(
        self, action: str, resource_type: str, details: dict[str, Any] | None = None
    ):
        message = f"Permission denied: cannot {action} {resource_type}"
        super().__init__(message, details)
        self.action = action
        self.resource_type = resource_type


class AuthenticationError(HomebaseException):
    """Raised when the caller's identity token cannot be verified."""

    status_code = 401

    def __init__(
        self,
        message: str = "Authentication failed",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)


class DatabaseError(HomebaseException):
    """Raised when database operations fail."""

    status_code = 500


# ----- Invite errors -----


class InvalidInviteError(HomebaseException):
    """Invite URL is malformed or carries no property reference.

    User-correctable; the client shows the message as is.
    """

    def __init__(
        self,
        message: str = "Invalid invite link",
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.url = url


class ProfileUnavailableError(HomebaseException):
    """The caller's profile could neither be found nor created."""

    status_code = 503

    def __init__(
        self,
        external_id: str,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        message = f"Profile for user '{external_id}' is unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, details)
        self.external_id = external_id
        self.reason = reason


class LinkPersistenceError(HomebaseException):
    """Tenant-property link insert failed for a reason other than a duplicate."""

    status_code = 500

    def __init__(
        self,
        property_id: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ):
        message = f"Could not link tenant to property '{property_id}'"
        super().__init__(message, details)
        self.property_id = property_id
        self.reason = reason
