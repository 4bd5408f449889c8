"""Per-accommodation environmental metrics and their derived aggregate score."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnvironmentalStandards:
    """Full snapshot of the six raw metrics plus the derived score. Replaced whole on every update."""

    accommodation_id: int
    energy_efficiency: int
    water_conservation: int
    waste_management: int
    renewable_energy_percent: int
    carbon_footprint: int
    local_sourcing_percent: int
    overall_sustainability_score: int
    last_updated: int
