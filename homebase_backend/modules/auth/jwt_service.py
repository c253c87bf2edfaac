"""Verification of identity-provider tokens.

Tokens are issued by the external identity provider and signed with the
shared project secret; this service never issues them.
"""

import jwt

from ...config import settings
from ...core.exceptions import AuthenticationError
from .schemas import CallerIdentity


def decode_identity_token(token: str) -> CallerIdentity:
    """Verify a bearer token and return the caller it identifies.

    Raises:
        AuthenticationError: If the token is expired, badly signed, issued
            for another audience or carries no subject.
    """
    options = {"require": ["sub", "exp"]}
    if not settings.identity_jwt_audience:
        options["verify_aud"] = False

    try:
        payload = jwt.decode(
            token,
            settings.identity_jwt_secret,
            algorithms=[settings.identity_jwt_algorithm],
            audience=settings.identity_jwt_audience,
            options=options,
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Identity token has expired")
    except jwt.InvalidTokenError as e:
        raise AuthenticationError(f"Invalid identity token: {e}")

    metadata = payload.get("user_metadata") or {}
    return CallerIdentity(
        external_id=str(payload["sub"]),
        email=payload.get("email"),
        name=metadata.get("name") or payload.get("name"),
    )
