"""Audit log: append-only audit records submitted by authorized auditors. No FastAPI."""

from typing import Optional

from ecostay.certification.registry import Registry
from ecostay.certification.state import LedgerState, RecordMap, Sequence
from ecostay.core.context import CallContext
from ecostay.domain.models.audit import AuditOutcome, AuditRecord
from ecostay.domain.scoring import audit_passed, audit_score
from ecostay.domain.validators.metrics_validator import (
    validate_active,
    validate_audit_scores,
)
from ecostay.security.capabilities import CapabilityGuard


class AuditLog:
    """
    Owns AuditRecord. Records are written once and never updated; the pass/fail
    outcome is frozen at submission time.
    """

    def __init__(self, state: LedgerState, registry: Registry, guard: CapabilityGuard) -> None:
        self._audits = RecordMap(state, "audit", AuditRecord)
        self._audit_ids = Sequence(state, "audit")
        self._registry = registry
        self._guard = guard

    async def conduct_audit(
        self,
        ctx: CallContext,
        *,
        accommodation_id: int,
        audit_type: str,
        energy_score: int,
        water_score: int,
        waste_score: int,
        compliance_issues: int,
        recommendations: str,
    ) -> AuditOutcome:
        await self._guard.require_auditor(ctx.principal, "conduct_audit")
        accommodation = await self._registry.require_accommodation(accommodation_id)
        validate_active(accommodation)
        validate_audit_scores(energy_score, water_score, waste_score, compliance_issues)

        audit_id = await self._audit_ids.allocate()
        passed = audit_passed(energy_score, water_score, waste_score, compliance_issues)
        record = AuditRecord(
            audit_id=audit_id,
            accommodation_id=accommodation_id,
            auditor=ctx.principal,
            audit_type=audit_type,
            energy_score=energy_score,
            water_score=water_score,
            waste_score=waste_score,
            compliance_issues=compliance_issues,
            recommendations=recommendations,
            audited_at=ctx.height,
            is_passed=passed,
        )
        self._audits.put(audit_id, record)
        await self._registry.record_certification_action(ctx.principal)
        return AuditOutcome(
            audit_id=audit_id,
            passed=passed,
            score=audit_score(energy_score, water_score, waste_score),
        )

    async def get_audit(self, audit_id: int) -> Optional[AuditRecord]:
        return await self._audits.get(audit_id)

    async def next_audit_id(self) -> int:
        return await self._audit_ids.peek()
