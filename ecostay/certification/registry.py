"""Registry: accommodation records, the auditor allow-list and the capability predicates. No FastAPI."""

from dataclasses import replace
from typing import Optional

from ecostay.certification.state import LedgerState, RecordMap, Sequence
from ecostay.core.context import CallContext
from ecostay.domain.exceptions import (
    AccommodationNotFoundError,
    InvalidInputError,
    NotAuthorizedError,
)
from ecostay.domain.models.accommodation import Accommodation, AuditorAuthorization
from ecostay.domain.validators.metrics_validator import (
    validate_capacity,
    validate_non_empty,
)


class Registry:
    """
    Leaf component. Owns Accommodation and AuditorAuthorization records.
    The registry owner is fixed at construction and is the only principal
    allowed to manage the auditor allow-list.
    """

    def __init__(self, state: LedgerState, registry_owner: str) -> None:
        if not registry_owner:
            raise ValueError("registry_owner must be set")
        self._registry_owner = registry_owner
        self._accommodations = RecordMap(state, "accommodation", Accommodation)
        self._auditors = RecordMap(state, "auditor", AuditorAuthorization)
        self._accommodation_ids = Sequence(state, "accommodation")

    @property
    def registry_owner(self) -> str:
        return self._registry_owner

    def _require_registry_owner(self, ctx: CallContext, action: str) -> None:
        if ctx.principal != self._registry_owner:
            raise NotAuthorizedError(
                f"Only the registry owner may perform '{action}'"
            )

    async def register(
        self,
        ctx: CallContext,
        *,
        name: str,
        location: str,
        category: str,
        capacity: int,
    ) -> Accommodation:
        """Register a new accommodation owned by the caller. Standards seeding is the caller's job in the same unit of work."""
        validate_non_empty(name, "name")
        validate_capacity(capacity)
        accommodation_id = await self._accommodation_ids.allocate()
        accommodation = Accommodation(
            accommodation_id=accommodation_id,
            name=name,
            location=location,
            category=category,
            capacity=capacity,
            owner=ctx.principal,
            is_active=True,
            registered_at=ctx.height,
        )
        self._accommodations.put(accommodation_id, accommodation)
        return accommodation

    async def authorize_auditor(
        self,
        ctx: CallContext,
        *,
        principal: str,
        specialization: str,
    ) -> AuditorAuthorization:
        """Upsert an auditor. Re-authorizing resets the certification counter."""
        self._require_registry_owner(ctx, "authorize_auditor")
        validate_non_empty(principal, "principal")
        validate_non_empty(specialization, "specialization")
        authorization = AuditorAuthorization(
            principal=principal,
            is_authorized=True,
            specialization=specialization,
            certification_count=0,
            authorized_at=ctx.height,
        )
        self._auditors.put(principal, authorization)
        return authorization

    async def revoke_auditor(self, ctx: CallContext, *, principal: str) -> AuditorAuthorization:
        self._require_registry_owner(ctx, "revoke_auditor")
        existing = await self._auditors.get(principal)
        if existing is None:
            raise InvalidInputError(f"Principal '{principal}' was never authorized")
        revoked = replace(existing, is_authorized=False)
        self._auditors.put(principal, revoked)
        return revoked

    async def set_accommodation_active(
        self,
        ctx: CallContext,
        *,
        accommodation_id: int,
        is_active: bool,
    ) -> Accommodation:
        """Suspension hook for the external moderation collaborator."""
        self._require_registry_owner(ctx, "set_accommodation_active")
        accommodation = await self.require_accommodation(accommodation_id)
        updated = replace(accommodation, is_active=is_active)
        self._accommodations.put(accommodation_id, updated)
        return updated

    async def record_certification_action(self, principal: str) -> None:
        """Bump the auditor's cumulative action counter. Called by the audit log."""
        authorization = await self._auditors.get(principal)
        if authorization is None:
            raise InvalidInputError(f"Principal '{principal}' has no auditor record")
        self._auditors.put(
            principal,
            replace(authorization, certification_count=authorization.certification_count + 1),
        )

    async def get_accommodation(self, accommodation_id: int) -> Optional[Accommodation]:
        return await self._accommodations.get(accommodation_id)

    async def require_accommodation(self, accommodation_id: int) -> Accommodation:
        accommodation = await self._accommodations.get(accommodation_id)
        if accommodation is None:
            raise AccommodationNotFoundError(
                f"Accommodation not found: {accommodation_id}"
            )
        return accommodation

    async def get_auditor(self, principal: str) -> Optional[AuditorAuthorization]:
        return await self._auditors.get(principal)

    async def next_accommodation_id(self) -> int:
        return await self._accommodation_ids.peek()

    async def is_owner(self, accommodation_id: int, principal: str) -> bool:
        accommodation = await self._accommodations.get(accommodation_id)
        return accommodation is not None and accommodation.owner == principal

    async def is_authorized_auditor(self, principal: str) -> bool:
        authorization = await self._auditors.get(principal)
        return authorization is not None and authorization.is_authorized
