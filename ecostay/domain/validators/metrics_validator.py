"""Validators for registry, standards and audit inputs. Pure functions, no storage access."""

from ecostay.domain.exceptions import InvalidInputError
from ecostay.domain.models.accommodation import Accommodation

# Bounds (domain constants; avoid magic numbers)
PERCENT_MIN = 0
PERCENT_MAX = 100
CARBON_MIN = 0
CARBON_MAX = 10


def validate_non_empty(value: str, field: str) -> None:
    """Raises InvalidInputError if value is empty or whitespace."""
    if not value or not value.strip():
        raise InvalidInputError(f"{field} must not be empty")


def validate_capacity(capacity: int) -> None:
    if capacity <= 0:
        raise InvalidInputError(f"capacity must be positive, got {capacity}")


def validate_range(value: int, field: str, low: int, high: int) -> None:
    """Enforce low <= value <= high. Raises InvalidInputError if outside."""
    if not (low <= value <= high):
        raise InvalidInputError(
            f"{field} must be between {low} and {high}, got {value}"
        )


def validate_percent(value: int, field: str) -> None:
    validate_range(value, field, PERCENT_MIN, PERCENT_MAX)


def validate_standards_metrics(
    energy_efficiency: int,
    water_conservation: int,
    waste_management: int,
    renewable_energy_percent: int,
    carbon_footprint: int,
    local_sourcing_percent: int,
) -> None:
    """Every metric is range-checked before any of them is accepted."""
    validate_percent(energy_efficiency, "energy_efficiency")
    validate_percent(water_conservation, "water_conservation")
    validate_percent(waste_management, "waste_management")
    validate_percent(renewable_energy_percent, "renewable_energy_percent")
    validate_range(carbon_footprint, "carbon_footprint", CARBON_MIN, CARBON_MAX)
    validate_percent(local_sourcing_percent, "local_sourcing_percent")


def validate_audit_scores(
    energy_score: int, water_score: int, waste_score: int, compliance_issues: int
) -> None:
    validate_percent(energy_score, "energy_score")
    validate_percent(water_score, "water_score")
    validate_percent(waste_score, "waste_score")
    if compliance_issues < 0:
        raise InvalidInputError(
            f"compliance_issues must not be negative, got {compliance_issues}"
        )


def validate_active(accommodation: Accommodation) -> None:
    """Inactive (suspended) accommodations reject state changes."""
    if not accommodation.is_active:
        raise InvalidInputError(
            f"Accommodation {accommodation.accommodation_id} is inactive"
        )
