"""Invite acceptance workflow.

Turns an invite's property reference plus the caller's verified identity
into an active tenant-property link:

    ResolveProfile -> CheckExistingLink -> InsertLink -> Done

Two callers accepting the same invite at the same moment both end in Done;
the store's uniqueness constraint lets only one row through and the loser
sees ``LinkAlreadyExists``. Nothing is retried.
"""

import enum
from dataclasses import dataclass
from typing import Any, Protocol

from ...core.exceptions import (
    DatabaseError,
    LinkPersistenceError,
    ProfileUnavailableError,
)
from ...core.logging import get_logger
from ..auth.schemas import CallerIdentity

logger = get_logger(__name__)


class InviteOutcome(str, enum.Enum):
    """How a successful acceptance ended."""

    CREATED = "created"
    ALREADY_LINKED = "already_linked"


# ----- Link insert results -----


@dataclass(frozen=True)
class LinkCreated:
    link_id: Any = None


@dataclass(frozen=True)
class LinkAlreadyExists:
    link_id: Any = None


@dataclass(frozen=True)
class LinkInsertFailed:
    reason: str


InsertLinkResult = LinkCreated | LinkAlreadyExists | LinkInsertFailed


class ProfileRecord(Protocol):
    id: Any


class InviteStore(Protocol):
    """Persistence the workflow runs against.

    Lookups and ``create_profile`` raise ``DatabaseError`` when the backend
    fails. ``insert_link`` never raises for data problems; it reports them
    through its result.
    """

    async def find_profile_by_external_id(
        self, external_id: str
    ) -> ProfileRecord | None: ...

    async def create_profile(self, caller: CallerIdentity) -> ProfileRecord: ...

    async def find_active_link(self, profile_id: Any, property_id: str) -> bool: ...

    async def insert_link(self, profile_id: Any, property_id: str) -> InsertLinkResult: ...


@dataclass(frozen=True)
class InviteAcceptance:
    outcome: InviteOutcome
    profile_id: Any
    property_id: str

    @property
    def created(self) -> bool:
        return self.outcome is InviteOutcome.CREATED


class InviteAcceptanceWorkflow:
    """Links the calling tenant to the invited property."""

    def __init__(self, store: InviteStore):
        self.store = store

    async def accept(self, caller: CallerIdentity, property_id: str) -> InviteAcceptance:
        """Run the workflow for one caller and one property reference.

        Raises:
            ProfileUnavailableError: The profile could not be found or created.
            LinkPersistenceError: The link could not be stored.
        """
        # Stores may roll back and expire the record; keep the key itself
        profile_id = (await self._resolve_profile(caller)).id

        if await self._has_active_link(profile_id, property_id):
            logger.info(
                "Tenant already linked to property",
                extra={"profile_id": str(profile_id), "property_id": property_id},
            )
            return InviteAcceptance(InviteOutcome.ALREADY_LINKED, profile_id, property_id)

        result = await self.store.insert_link(profile_id, property_id)

        if isinstance(result, LinkCreated):
            logger.info(
                "Tenant linked to property",
                extra={"profile_id": str(profile_id), "property_id": property_id},
            )
            return InviteAcceptance(InviteOutcome.CREATED, profile_id, property_id)

        if isinstance(result, LinkAlreadyExists):
            logger.warning(
                "Link was created concurrently, treating as already linked",
                extra={"profile_id": str(profile_id), "property_id": property_id},
            )
            return InviteAcceptance(InviteOutcome.ALREADY_LINKED, profile_id, property_id)

        logger.error(
            "Failed to link tenant to property",
            extra={
                "profile_id": str(profile_id),
                "property_id": property_id,
                "reason": result.reason,
            },
        )
        raise LinkPersistenceError(property_id, result.reason)

    async def _resolve_profile(self, caller: CallerIdentity) -> ProfileRecord:
        try:
            profile = await self.store.find_profile_by_external_id(caller.external_id)
            if profile is not None:
                return profile
            logger.info(
                "No profile for caller, creating one",
                extra={"external_id": caller.external_id},
            )
            profile = await self.store.create_profile(caller)
        except DatabaseError as e:
            raise ProfileUnavailableError(caller.external_id, e.message) from e

        if profile is None:
            raise ProfileUnavailableError(caller.external_id, "profile was not created")
        return profile

    async def _has_active_link(self, profile_id: Any, property_id: str) -> bool:
        try:
            return await self.store.find_active_link(profile_id, property_id)
        except DatabaseError as e:
            raise LinkPersistenceError(property_id, e.message) from e
