"""Scoring rules: aggregate sustainability score, audit pass gate, level ladder. Pure functions."""

from ecostay.domain.models.certification import CertificationLevel

# Audit pass gate
AUDIT_PASS_THRESHOLD = 60
MAX_COMPLIANCE_ISSUES = 3

# Level ladder, checked highest first
PLATINUM_THRESHOLD = 90
GOLD_THRESHOLD = 80
SILVER_THRESHOLD = 70

# Carbon rating is 0 (best) .. 10 (worst); scaled so it contributes like the other 0-100 terms
CARBON_SCALE = 10


def carbon_term(carbon_footprint: int) -> int:
    """Invert the carbon rating onto the 0-100 scale: 0 -> 100, 10 -> 0."""
    return 100 - carbon_footprint * CARBON_SCALE


def truncated_mean(*values: int) -> int:
    """Arithmetic mean truncated toward zero. Integer arithmetic only."""
    if not values:
        return 0
    total = sum(values)
    quotient = abs(total) // len(values)
    return quotient if total >= 0 else -quotient


def sustainability_score(
    energy_efficiency: int,
    water_conservation: int,
    waste_management: int,
    renewable_energy_percent: int,
    carbon_footprint: int,
    local_sourcing_percent: int,
) -> int:
    """Aggregate score: truncated mean of the five 0-100 metrics and the inverted carbon rating."""
    return truncated_mean(
        energy_efficiency,
        water_conservation,
        waste_management,
        renewable_energy_percent,
        carbon_term(carbon_footprint),
        local_sourcing_percent,
    )


def audit_score(energy_score: int, water_score: int, waste_score: int) -> int:
    return truncated_mean(energy_score, water_score, waste_score)


def audit_passed(
    energy_score: int, water_score: int, waste_score: int, compliance_issues: int
) -> bool:
    """Passed iff the sub-score mean reaches the threshold and issues stay within the limit."""
    return (
        audit_score(energy_score, water_score, waste_score) >= AUDIT_PASS_THRESHOLD
        and compliance_issues <= MAX_COMPLIANCE_ISSUES
    )


def level_for_score(score: int) -> CertificationLevel:
    if score >= PLATINUM_THRESHOLD:
        return CertificationLevel.PLATINUM
    if score >= GOLD_THRESHOLD:
        return CertificationLevel.GOLD
    if score >= SILVER_THRESHOLD:
        return CertificationLevel.SILVER
    return CertificationLevel.BRONZE
