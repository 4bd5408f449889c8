"""Domain layer: models, scoring rules, schemas, validators, exceptions. Pure business logic only."""

from ecostay.domain.exceptions import (
    AccommodationNotFoundError,
    CertificationError,
    CertificationExpiredError,
    InvalidInputError,
    NotAuthorizedError,
)
from ecostay.domain.models import (
    Accommodation,
    AuditOutcome,
    AuditorAuthorization,
    AuditRecord,
    Certification,
    CertificationLevel,
    CertificationOutcome,
    EnvironmentalStandards,
)
from ecostay.domain.scoring import (
    audit_passed,
    audit_score,
    level_for_score,
    sustainability_score,
)

__all__ = [
    "Accommodation",
    "AccommodationNotFoundError",
    "AuditOutcome",
    "AuditorAuthorization",
    "AuditRecord",
    "Certification",
    "CertificationError",
    "CertificationExpiredError",
    "CertificationLevel",
    "CertificationOutcome",
    "EnvironmentalStandards",
    "InvalidInputError",
    "NotAuthorizedError",
    "audit_passed",
    "audit_score",
    "level_for_score",
    "sustainability_score",
]
