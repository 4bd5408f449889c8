"""Certification engine: issuance, renewal and lazy expiry of certifications. No FastAPI."""

from dataclasses import replace
from typing import Optional

from ecostay.certification.audit_log import AuditLog
from ecostay.certification.registry import Registry
from ecostay.certification.standards_ledger import StandardsLedger
from ecostay.certification.state import LedgerState, RecordMap
from ecostay.core.context import CallContext
from ecostay.domain.exceptions import AccommodationNotFoundError, InvalidInputError
from ecostay.domain.models.audit import AuditRecord
from ecostay.domain.models.certification import (
    Certification,
    CertificationLevel,
    CertificationOutcome,
)
from ecostay.domain.scoring import audit_score, level_for_score
from ecostay.domain.validators.metrics_validator import validate_active
from ecostay.security.capabilities import CapabilityGuard


class CertificationEngine:
    """
    Owns Certification. Issuance levels from the accommodation's current aggregate
    standards score; renewal levels from the renewing audit's own sub-scores.
    Expiry is never written: readers compare expires_at against the current height.
    """

    def __init__(
        self,
        state: LedgerState,
        registry: Registry,
        standards: StandardsLedger,
        audits: AuditLog,
        guard: CapabilityGuard,
        validity_blocks: int,
    ) -> None:
        if validity_blocks <= 0:
            raise ValueError("validity_blocks must be positive")
        self._certifications = RecordMap(state, "certification", Certification)
        self._registry = registry
        self._standards = standards
        self._audits = audits
        self._guard = guard
        self._validity_blocks = validity_blocks

    async def _require_passing_audit(self, audit_id: int, accommodation_id: int) -> AuditRecord:
        audit = await self._audits.get_audit(audit_id)
        if audit is None:
            raise InvalidInputError(f"Audit not found: {audit_id}")
        if audit.accommodation_id != accommodation_id:
            raise InvalidInputError(
                f"Audit {audit_id} belongs to accommodation {audit.accommodation_id}, "
                f"not {accommodation_id}"
            )
        if not audit.is_passed:
            raise InvalidInputError(f"Audit {audit_id} did not pass")
        return audit

    async def issue_certification(
        self,
        ctx: CallContext,
        *,
        accommodation_id: int,
        audit_id: int,
    ) -> CertificationOutcome:
        """Create or overwrite the certification from a passing audit and the current standards score."""
        await self._guard.require_auditor(ctx.principal, "issue_certification")
        accommodation = await self._registry.require_accommodation(accommodation_id)
        standards = await self._standards.get_standards(accommodation_id)
        if standards is None:
            raise AccommodationNotFoundError(
                f"Standards not found for accommodation: {accommodation_id}"
            )
        await self._require_passing_audit(audit_id, accommodation_id)
        validate_active(accommodation)

        score = standards.overall_sustainability_score
        # Re-issuing replaces any existing certification.
        certification = Certification(
            accommodation_id=accommodation_id,
            level=level_for_score(score),
            score=score,
            issued_at=ctx.height,
            expires_at=ctx.height + self._validity_blocks,
            is_valid=True,
            certified_by=ctx.principal,
        )
        self._certifications.put(accommodation_id, certification)
        return CertificationOutcome(
            level=certification.level,
            score=certification.score,
            expires_at=certification.expires_at,
        )

    async def renew_certification(
        self,
        ctx: CallContext,
        *,
        accommodation_id: int,
        audit_id: int,
    ) -> CertificationOutcome:
        """Extend from now using the renewing audit's sub-score mean. is_valid and certified_by carry over."""
        await self._guard.require_auditor(ctx.principal, "renew_certification")
        existing = await self._certifications.get(accommodation_id)
        if existing is None:
            raise AccommodationNotFoundError(
                f"Certification not found for accommodation: {accommodation_id}"
            )
        audit = await self._require_passing_audit(audit_id, accommodation_id)
        if not existing.is_valid:
            raise InvalidInputError(
                f"Certification for accommodation {accommodation_id} is not valid"
            )

        score = audit_score(audit.energy_score, audit.water_score, audit.waste_score)
        renewed = replace(
            existing,
            level=level_for_score(score),
            score=score,
            issued_at=ctx.height,
            expires_at=ctx.height + self._validity_blocks,
        )
        self._certifications.put(accommodation_id, renewed)
        return CertificationOutcome(
            level=renewed.level,
            score=renewed.score,
            expires_at=renewed.expires_at,
        )

    async def get_certification(self, accommodation_id: int) -> Optional[Certification]:
        return await self._certifications.get(accommodation_id)

    async def current_certification(
        self, accommodation_id: int, height: int
    ) -> Optional[Certification]:
        """The certification only while it is valid and unexpired at height."""
        certification = await self._certifications.get(accommodation_id)
        if certification is None or not certification.is_current(height):
            return None
        return certification

    async def is_certification_valid(self, accommodation_id: int, height: int) -> bool:
        return await self.current_certification(accommodation_id, height) is not None

    async def get_certification_level(
        self, accommodation_id: int, height: int
    ) -> Optional[CertificationLevel]:
        certification = await self.current_certification(accommodation_id, height)
        return certification.level if certification is not None else None
