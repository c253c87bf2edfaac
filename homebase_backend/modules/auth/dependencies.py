"""Authentication dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ...core.exceptions import AuthenticationError
from .jwt_service import decode_identity_token
from .schemas import CallerIdentity

security = HTTPBearer(auto_error=False)


async def get_caller_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CallerIdentity:
    """Extract and verify the caller from the bearer token.

    No database call is made here; profile resolution belongs to the
    operation that needs it.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return decode_identity_token(credentials.credentials)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


# Type alias for dependency injection
CurrentCaller = Annotated[CallerIdentity, Depends(get_caller_identity)]
