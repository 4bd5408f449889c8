"""Domain models. Frozen records; no ORM or infrastructure."""

from ecostay.domain.models.accommodation import Accommodation, AuditorAuthorization
from ecostay.domain.models.audit import AuditOutcome, AuditRecord
from ecostay.domain.models.certification import (
    Certification,
    CertificationLevel,
    CertificationOutcome,
)
from ecostay.domain.models.standards import EnvironmentalStandards

__all__ = [
    "Accommodation",
    "AuditorAuthorization",
    "AuditOutcome",
    "AuditRecord",
    "Certification",
    "CertificationLevel",
    "CertificationOutcome",
    "EnvironmentalStandards",
]
