"""Certification application service: the single entry point and transaction boundary for every operation."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from ecostay.application.exceptions import StateStoreError
from ecostay.certification.audit_log import AuditLog
from ecostay.certification.certification_engine import CertificationEngine
from ecostay.certification.registry import Registry
from ecostay.certification.standards_ledger import StandardsLedger
from ecostay.certification.state import LedgerState, StateStore
from ecostay.core.context import CallContext
from ecostay.core.height import HeightSource
from ecostay.domain.exceptions import CertificationError
from ecostay.domain.models.accommodation import Accommodation, AuditorAuthorization
from ecostay.domain.models.audit import AuditOutcome, AuditRecord
from ecostay.domain.models.certification import (
    Certification,
    CertificationLevel,
    CertificationOutcome,
)
from ecostay.domain.models.standards import EnvironmentalStandards
from ecostay.security.capabilities import CapabilityGuard

T = TypeVar("T")


class CertificationService:
    """
    Application-layer orchestration only. No HTTP, no FastAPI.
    Operations are admitted one at a time; each write runs in a unit of work that
    commits every write or none. Height and principal are fixed once per operation.
    """

    def __init__(
        self,
        store: StateStore,
        height_source: HeightSource,
        registry_owner: str,
        validity_blocks: int,
        logger: logging.Logger,
    ) -> None:
        self._store = store
        self._state = LedgerState(store)
        self._height_source = height_source
        self._logger = logger
        self._lock = asyncio.Lock()

        self._registry = Registry(self._state, registry_owner)
        guard = CapabilityGuard(self._registry)
        self._standards = StandardsLedger(self._state, self._registry, guard)
        self._audits = AuditLog(self._state, self._registry, guard)
        self._certifications = CertificationEngine(
            self._state,
            self._registry,
            self._standards,
            self._audits,
            guard,
            validity_blocks,
        )

    async def _write(
        self,
        operation: str,
        principal: str,
        action: Callable[[CallContext], Awaitable[T]],
    ) -> T:
        async with self._lock:
            ctx = CallContext(
                principal=principal, height=self._height_source.current_height()
            )
            try:
                async with self._state.transaction():
                    return await action(ctx)
            except CertificationError as e:
                self._logger.warning(
                    "operation_rejected",
                    extra={
                        "operation": operation,
                        "principal": principal,
                        "height": ctx.height,
                        "code": e.code,
                        "error": e.message,
                    },
                )
                raise
            except StateStoreError as e:
                self._logger.error(
                    "operation_failed",
                    extra={"operation": operation, "principal": principal, "error": e.message},
                )
                raise

    async def _read(self, action: Callable[[int], Awaitable[T]]) -> T:
        async with self._lock:
            return await action(self._height_source.current_height())

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    async def register(
        self,
        principal: str,
        *,
        name: str,
        location: str,
        category: str,
        capacity: int,
    ) -> int:
        """Register an accommodation owned by principal and seed its standards record. Returns the new ID."""

        async def action(ctx: CallContext) -> Accommodation:
            accommodation = await self._registry.register(
                ctx, name=name, location=location, category=category, capacity=capacity
            )
            await self._standards.seed(accommodation.accommodation_id, ctx.height)
            return accommodation

        accommodation = await self._write("register", principal, action)
        self._logger.info(
            "accommodation_registered",
            extra={
                "accommodation_id": accommodation.accommodation_id,
                "owner": accommodation.owner,
                "height": accommodation.registered_at,
            },
        )
        return accommodation.accommodation_id

    async def authorize_auditor(
        self, principal: str, *, auditor: str, specialization: str
    ) -> AuditorAuthorization:
        authorization = await self._write(
            "authorize_auditor",
            principal,
            lambda ctx: self._registry.authorize_auditor(
                ctx, principal=auditor, specialization=specialization
            ),
        )
        self._logger.info(
            "auditor_authorized",
            extra={"auditor": auditor, "specialization": specialization},
        )
        return authorization

    async def revoke_auditor(self, principal: str, *, auditor: str) -> AuditorAuthorization:
        authorization = await self._write(
            "revoke_auditor",
            principal,
            lambda ctx: self._registry.revoke_auditor(ctx, principal=auditor),
        )
        self._logger.info("auditor_revoked", extra={"auditor": auditor})
        return authorization

    async def set_accommodation_active(
        self, principal: str, *, accommodation_id: int, is_active: bool
    ) -> Accommodation:
        accommodation = await self._write(
            "set_accommodation_active",
            principal,
            lambda ctx: self._registry.set_accommodation_active(
                ctx, accommodation_id=accommodation_id, is_active=is_active
            ),
        )
        self._logger.info(
            "accommodation_status_changed",
            extra={"accommodation_id": accommodation_id, "is_active": is_active},
        )
        return accommodation

    # ------------------------------------------------------------------
    # Standards ledger
    # ------------------------------------------------------------------

    async def update_standards(
        self,
        principal: str,
        *,
        accommodation_id: int,
        energy_efficiency: int,
        water_conservation: int,
        waste_management: int,
        renewable_energy_percent: int,
        carbon_footprint: int,
        local_sourcing_percent: int,
    ) -> int:
        """Replace all six metrics and return the recomputed aggregate score."""
        standards = await self._write(
            "update_standards",
            principal,
            lambda ctx: self._standards.update_standards(
                ctx,
                accommodation_id=accommodation_id,
                energy_efficiency=energy_efficiency,
                water_conservation=water_conservation,
                waste_management=waste_management,
                renewable_energy_percent=renewable_energy_percent,
                carbon_footprint=carbon_footprint,
                local_sourcing_percent=local_sourcing_percent,
            ),
        )
        self._logger.info(
            "standards_updated",
            extra={
                "accommodation_id": accommodation_id,
                "score": standards.overall_sustainability_score,
            },
        )
        return standards.overall_sustainability_score

    # ------------------------------------------------------------------
    # Audit log
    # ------------------------------------------------------------------

    async def conduct_audit(
        self,
        principal: str,
        *,
        accommodation_id: int,
        audit_type: str,
        energy_score: int,
        water_score: int,
        waste_score: int,
        compliance_issues: int,
        recommendations: str,
    ) -> AuditOutcome:
        outcome = await self._write(
            "conduct_audit",
            principal,
            lambda ctx: self._audits.conduct_audit(
                ctx,
                accommodation_id=accommodation_id,
                audit_type=audit_type,
                energy_score=energy_score,
                water_score=water_score,
                waste_score=waste_score,
                compliance_issues=compliance_issues,
                recommendations=recommendations,
            ),
        )
        self._logger.info(
            "audit_conducted",
            extra={
                "audit_id": outcome.audit_id,
                "accommodation_id": accommodation_id,
                "passed": outcome.passed,
                "score": outcome.score,
            },
        )
        return outcome

    # ------------------------------------------------------------------
    # Certification engine
    # ------------------------------------------------------------------

    async def issue_certification(
        self, principal: str, *, accommodation_id: int, audit_id: int
    ) -> CertificationOutcome:
        outcome = await self._write(
            "issue_certification",
            principal,
            lambda ctx: self._certifications.issue_certification(
                ctx, accommodation_id=accommodation_id, audit_id=audit_id
            ),
        )
        self._logger.info(
            "certification_issued",
            extra={
                "accommodation_id": accommodation_id,
                "audit_id": audit_id,
                "level": outcome.level.value,
                "score": outcome.score,
                "expires_at": outcome.expires_at,
            },
        )
        return outcome

    async def renew_certification(
        self, principal: str, *, accommodation_id: int, audit_id: int
    ) -> CertificationOutcome:
        outcome = await self._write(
            "renew_certification",
            principal,
            lambda ctx: self._certifications.renew_certification(
                ctx, accommodation_id=accommodation_id, audit_id=audit_id
            ),
        )
        self._logger.info(
            "certification_renewed",
            extra={
                "accommodation_id": accommodation_id,
                "audit_id": audit_id,
                "level": outcome.level.value,
                "score": outcome.score,
                "expires_at": outcome.expires_at,
            },
        )
        return outcome

    # ------------------------------------------------------------------
    # Read accessors: return None for missing records, never raise domain errors
    # ------------------------------------------------------------------

    async def get_accommodation(self, accommodation_id: int) -> Optional[Accommodation]:
        return await self._read(lambda _: self._registry.get_accommodation(accommodation_id))

    async def get_standards(self, accommodation_id: int) -> Optional[EnvironmentalStandards]:
        return await self._read(lambda _: self._standards.get_standards(accommodation_id))

    async def get_certification(self, accommodation_id: int) -> Optional[Certification]:
        return await self._read(
            lambda _: self._certifications.get_certification(accommodation_id)
        )

    async def get_audit_record(self, audit_id: int) -> Optional[AuditRecord]:
        return await self._read(lambda _: self._audits.get_audit(audit_id))

    async def get_auditor_info(self, auditor: str) -> Optional[AuditorAuthorization]:
        return await self._read(lambda _: self._registry.get_auditor(auditor))

    async def is_certification_valid(self, accommodation_id: int) -> bool:
        return await self._read(
            lambda height: self._certifications.is_certification_valid(
                accommodation_id, height
            )
        )

    async def get_certification_level(
        self, accommodation_id: int
    ) -> Optional[CertificationLevel]:
        return await self._read(
            lambda height: self._certifications.get_certification_level(
                accommodation_id, height
            )
        )

    async def get_next_accommodation_id(self) -> int:
        return await self._read(lambda _: self._registry.next_accommodation_id())

    async def get_next_audit_id(self) -> int:
        return await self._read(lambda _: self._audits.next_audit_id())

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def registry_owner(self) -> str:
        return self._registry.registry_owner

    async def store_reachable(self) -> bool:
        return await self._store.ping()

    async def close(self) -> None:
        """Release the store's connections. Waits for the operation in flight, if any."""
        async with self._lock:
            await self._store.close()
        self._logger.info("certification_service_closed")
