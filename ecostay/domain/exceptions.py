"""Certification-domain exceptions. Typed, no HTTP."""


class CertificationError(Exception):
    """Base for all certification-domain errors. `code` is stable for API consumers."""

    code = "CERTIFICATION_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotAuthorizedError(CertificationError):
    """Raised when the caller lacks the owner, auditor or registry-owner capability."""

    code = "NOT_AUTHORIZED"


class InvalidInputError(CertificationError):
    """Raised when a value violates a range, non-emptiness or state precondition (including inactive accommodation)."""

    code = "INVALID_INPUT"


class AccommodationNotFoundError(CertificationError):
    """Raised when a referenced accommodation, standards or certification record does not exist."""

    code = "ACCOMMODATION_NOT_FOUND"


class CertificationExpiredError(CertificationError):
    """Reserved for the expiry condition. Expiry is surfaced through the read path, not raised by writes."""

    code = "CERTIFICATION_EXPIRED"
