"""Tenant management module.

Invite links and the workflow that turns an accepted invite into a
tenant-property link. Routers live in ``routers`` and are mounted by the
application.
"""

from .invite_links import INVITE_PARAMETER, build_invite_url, parse_invite_url
from .models import TenantPropertyLink
from .workflow import (
    InsertLinkResult,
    InviteAcceptance,
    InviteAcceptanceWorkflow,
    InviteOutcome,
    InviteStore,
    LinkAlreadyExists,
    LinkCreated,
    LinkInsertFailed,
)

__all__ = [
    # Models
    "TenantPropertyLink",
    # Invite links
    "INVITE_PARAMETER",
    "build_invite_url",
    "parse_invite_url",
    # Workflow
    "InviteAcceptance",
    "InviteAcceptanceWorkflow",
    "InviteOutcome",
    "InviteStore",
    "InsertLinkResult",
    "LinkCreated",
    "LinkAlreadyExists",
    "LinkInsertFailed",
]
