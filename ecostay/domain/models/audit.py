"""Audit records and the outcome returned to the submitting auditor."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuditRecord:
    """
    Immutable audit outcome. is_passed is decided once at submission and
    never re-evaluated, even if pass thresholds change later.
    """

    audit_id: int
    accommodation_id: int
    auditor: str
    audit_type: str
    energy_score: int
    water_score: int
    waste_score: int
    compliance_issues: int
    recommendations: str
    audited_at: int
    is_passed: bool


@dataclass(frozen=True)
class AuditOutcome:
    audit_id: int
    passed: bool
    score: int
