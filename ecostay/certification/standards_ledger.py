"""Standards ledger: environmental metrics per accommodation and the aggregate sustainability score."""

from typing import Optional

from ecostay.certification.registry import Registry
from ecostay.certification.state import LedgerState, RecordMap
from ecostay.core.context import CallContext
from ecostay.domain.models.standards import EnvironmentalStandards
from ecostay.domain.scoring import sustainability_score
from ecostay.domain.validators.metrics_validator import (
    CARBON_MAX,
    validate_active,
    validate_standards_metrics,
)
from ecostay.security.capabilities import CapabilityGuard


class StandardsLedger:
    """Owns EnvironmentalStandards. Records are replaced whole; callers resupply every metric."""

    def __init__(self, state: LedgerState, registry: Registry, guard: CapabilityGuard) -> None:
        self._standards = RecordMap(state, "standards", EnvironmentalStandards)
        self._registry = registry
        self._guard = guard

    async def seed(self, accommodation_id: int, height: int) -> EnvironmentalStandards:
        """Zeroed record written at registration; carbon starts at the worst rating."""
        seeded = EnvironmentalStandards(
            accommodation_id=accommodation_id,
            energy_efficiency=0,
            water_conservation=0,
            waste_management=0,
            renewable_energy_percent=0,
            carbon_footprint=CARBON_MAX,
            local_sourcing_percent=0,
            overall_sustainability_score=sustainability_score(0, 0, 0, 0, CARBON_MAX, 0),
            last_updated=height,
        )
        self._standards.put(accommodation_id, seeded)
        return seeded

    async def update_standards(
        self,
        ctx: CallContext,
        *,
        accommodation_id: int,
        energy_efficiency: int,
        water_conservation: int,
        waste_management: int,
        renewable_energy_percent: int,
        carbon_footprint: int,
        local_sourcing_percent: int,
    ) -> EnvironmentalStandards:
        """Owner or authorized auditor replaces all six metrics; the score is recomputed."""
        accommodation = await self._registry.require_accommodation(accommodation_id)
        await self._guard.require_owner_or_auditor(
            accommodation_id, ctx.principal, "update_standards"
        )
        validate_active(accommodation)
        validate_standards_metrics(
            energy_efficiency,
            water_conservation,
            waste_management,
            renewable_energy_percent,
            carbon_footprint,
            local_sourcing_percent,
        )
        standards = EnvironmentalStandards(
            accommodation_id=accommodation_id,
            energy_efficiency=energy_efficiency,
            water_conservation=water_conservation,
            waste_management=waste_management,
            renewable_energy_percent=renewable_energy_percent,
            carbon_footprint=carbon_footprint,
            local_sourcing_percent=local_sourcing_percent,
            overall_sustainability_score=sustainability_score(
                energy_efficiency,
                water_conservation,
                waste_management,
                renewable_energy_percent,
                carbon_footprint,
                local_sourcing_percent,
            ),
            last_updated=ctx.height,
        )
        self._standards.put(accommodation_id, standards)
        return standards

    async def get_standards(self, accommodation_id: int) -> Optional[EnvironmentalStandards]:
        return await self._standards.get(accommodation_id)
