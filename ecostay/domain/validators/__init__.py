"""Domain validators. Pure validation functions."""

from ecostay.domain.validators.metrics_validator import (
    validate_active,
    validate_audit_scores,
    validate_capacity,
    validate_non_empty,
    validate_percent,
    validate_range,
    validate_standards_metrics,
)

__all__ = [
    "validate_active",
    "validate_audit_scores",
    "validate_capacity",
    "validate_non_empty",
    "validate_percent",
    "validate_range",
    "validate_standards_metrics",
]
