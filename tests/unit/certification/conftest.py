"""Fixtures wiring the four components over one LedgerState, without the service lock."""

from dataclasses import dataclass

import pytest

from ecostay.certification import (
    AuditLog,
    CertificationEngine,
    LedgerState,
    Registry,
    StandardsLedger,
)
from ecostay.core.context import CallContext
from ecostay.security.capabilities import CapabilityGuard

REGISTRY_OWNER = "registry-owner"
OWNER = "hotel-owner"
AUDITOR = "auditor-1"
STRANGER = "stranger"
VALIDITY_BLOCKS = 1000


@dataclass
class Ledger:
    state: LedgerState
    registry: Registry
    standards: StandardsLedger
    audits: AuditLog
    engine: CertificationEngine

    async def register(self, owner: str = OWNER, height: int = 10) -> int:
        async with self.state.transaction():
            accommodation = await self.registry.register(
                CallContext(owner, height),
                name="Eco Lodge",
                location="Lisbon",
                category="hotel",
                capacity=10,
            )
            await self.standards.seed(accommodation.accommodation_id, height)
        return accommodation.accommodation_id

    async def authorize(self, auditor: str = AUDITOR, height: int = 10) -> None:
        async with self.state.transaction():
            await self.registry.authorize_auditor(
                CallContext(REGISTRY_OWNER, height),
                principal=auditor,
                specialization="energy",
            )

    async def suspend(self, accommodation_id: int) -> None:
        async with self.state.transaction():
            await self.registry.set_accommodation_active(
                CallContext(REGISTRY_OWNER, 10),
                accommodation_id=accommodation_id,
                is_active=False,
            )

    async def update(self, accommodation_id: int, *metrics: int, principal: str = OWNER, height: int = 20) -> int:
        async with self.state.transaction():
            standards = await self.standards.update_standards(
                CallContext(principal, height),
                accommodation_id=accommodation_id,
                energy_efficiency=metrics[0],
                water_conservation=metrics[1],
                waste_management=metrics[2],
                renewable_energy_percent=metrics[3],
                carbon_footprint=metrics[4],
                local_sourcing_percent=metrics[5],
            )
        return standards.overall_sustainability_score

    async def audit(
        self,
        accommodation_id: int,
        energy: int = 70,
        water: int = 70,
        waste: int = 70,
        issues: int = 1,
        auditor: str = AUDITOR,
        height: int = 30,
    ):
        async with self.state.transaction():
            return await self.audits.conduct_audit(
                CallContext(auditor, height),
                accommodation_id=accommodation_id,
                audit_type="annual",
                energy_score=energy,
                water_score=water,
                waste_score=waste,
                compliance_issues=issues,
                recommendations="ok",
            )

    async def issue(self, accommodation_id: int, audit_id: int, auditor: str = AUDITOR, height: int = 40):
        async with self.state.transaction():
            return await self.engine.issue_certification(
                CallContext(auditor, height),
                accommodation_id=accommodation_id,
                audit_id=audit_id,
            )

    async def renew(self, accommodation_id: int, audit_id: int, auditor: str = AUDITOR, height: int = 50):
        async with self.state.transaction():
            return await self.engine.renew_certification(
                CallContext(auditor, height),
                accommodation_id=accommodation_id,
                audit_id=audit_id,
            )


@pytest.fixture
def ledger(store):
    state = LedgerState(store)
    registry = Registry(state, REGISTRY_OWNER)
    guard = CapabilityGuard(registry)
    standards = StandardsLedger(state, registry, guard)
    audits = AuditLog(state, registry, guard)
    engine = CertificationEngine(state, registry, standards, audits, guard, VALIDITY_BLOCKS)
    return Ledger(state, registry, standards, audits, engine)
