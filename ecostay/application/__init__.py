"""Application layer: certification service and application exceptions."""

from ecostay.application.certification_service import CertificationService
from ecostay.application.exceptions import ApplicationError, StateStoreError

__all__ = [
    "ApplicationError",
    "CertificationService",
    "StateStoreError",
]
