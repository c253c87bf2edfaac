"""Invite links.

A landlord shares ``https://<host>/invite?property=<id>`` (or the app's
custom-scheme equivalent); the tenant side extracts the property reference
from it. Neither direction touches the database.
"""

from urllib.parse import parse_qs, urlencode, urlsplit

from ...config import settings
from ...core.exceptions import InvalidInviteError

INVITE_PARAMETER = "property"


def parse_invite_url(url: str) -> str:
    """Return the property reference carried by an invite URL.

    The value is returned as is; whether it names an existing property is
    for the caller to find out.

    Raises:
        InvalidInviteError: If the URL is not well formed or has no
            non-empty ``property`` query parameter.
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidInviteError("Invite link is empty", url=url)

    candidate = url.strip()
    if any(ch.isspace() for ch in candidate):
        raise InvalidInviteError("Invite link is not a valid URL", url=url)

    try:
        parts = urlsplit(candidate)
    except ValueError:
        raise InvalidInviteError("Invite link is not a valid URL", url=url)

    if not parts.scheme or not (parts.netloc or parts.path):
        raise InvalidInviteError("Invite link is not a valid URL", url=url)

    values = parse_qs(parts.query, keep_blank_values=True).get(INVITE_PARAMETER)
    if not values or not values[0].strip():
        raise InvalidInviteError(
            "Invite link is missing the property reference", url=url
        )

    return values[0]


def build_invite_url(
    property_id: object,
    base_url: str | None = None,
    path: str | None = None,
) -> str:
    """Shareable invite URL for a property."""
    base = (base_url or settings.invite_base_url).rstrip("/")
    invite_path = path if path is not None else settings.invite_path
    if invite_path and not invite_path.startswith("/"):
        invite_path = f"/{invite_path}"
    query = urlencode({INVITE_PARAMETER: str(property_id)})
    return f"{base}{invite_path}?{query}"
