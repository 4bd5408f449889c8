"""Capability checks against registry lookup tables. No role hierarchy, no FastAPI."""

from typing import Protocol

from ecostay.domain.exceptions import NotAuthorizedError


class CapabilityDirectory(Protocol):
    """Lookup predicates the registry exposes. Total: missing records answer False."""

    async def is_owner(self, accommodation_id: int, principal: str) -> bool:
        ...

    async def is_authorized_auditor(self, principal: str) -> bool:
        ...


class CapabilityGuard:
    """Raise NotAuthorizedError unless the principal holds the capability for the action."""

    def __init__(self, directory: CapabilityDirectory) -> None:
        self._directory = directory

    async def require_auditor(self, principal: str, action: str) -> None:
        if not await self._directory.is_authorized_auditor(principal):
            raise NotAuthorizedError(
                f"Principal '{principal}' is not an authorized auditor for action '{action}'"
            )

    async def require_owner_or_auditor(
        self, accommodation_id: int, principal: str, action: str
    ) -> None:
        if await self._directory.is_owner(accommodation_id, principal):
            return
        if await self._directory.is_authorized_auditor(principal):
            return
        raise NotAuthorizedError(
            f"Principal '{principal}' is neither owner of accommodation {accommodation_id} "
            f"nor an authorized auditor for action '{action}'"
        )
