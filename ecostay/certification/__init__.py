"""Certification core: registry, standards ledger, audit log, certification engine. No FastAPI."""

from ecostay.certification.audit_log import AuditLog
from ecostay.certification.certification_engine import CertificationEngine
from ecostay.certification.registry import Registry
from ecostay.certification.standards_ledger import StandardsLedger
from ecostay.certification.state import LedgerState, RecordMap, Sequence, StateStore

__all__ = [
    "AuditLog",
    "CertificationEngine",
    "LedgerState",
    "RecordMap",
    "Registry",
    "Sequence",
    "StandardsLedger",
    "StateStore",
]
