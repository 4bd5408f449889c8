"""Pydantic schemas for API request/response. No storage or infrastructure."""

from ecostay.domain.schemas.certification import (
    AccommodationRegisterRequest,
    AccommodationResponse,
    AccommodationStatusRequest,
    AuditOutcomeResponse,
    AuditRecordResponse,
    AuditSubmitRequest,
    AuditorAuthorizeRequest,
    AuditorResponse,
    CertificationIssueRequest,
    CertificationLevelResponse,
    CertificationOutcomeResponse,
    CertificationRenewRequest,
    CertificationResponse,
    CertificationValidityResponse,
    NextIdResponse,
    RegistrationResponse,
    ScoreResponse,
    StandardsResponse,
    StandardsUpdateRequest,
)

__all__ = [
    "AccommodationRegisterRequest",
    "AccommodationResponse",
    "AccommodationStatusRequest",
    "AuditOutcomeResponse",
    "AuditRecordResponse",
    "AuditSubmitRequest",
    "AuditorAuthorizeRequest",
    "AuditorResponse",
    "CertificationIssueRequest",
    "CertificationLevelResponse",
    "CertificationOutcomeResponse",
    "CertificationRenewRequest",
    "CertificationResponse",
    "CertificationValidityResponse",
    "NextIdResponse",
    "RegistrationResponse",
    "ScoreResponse",
    "StandardsResponse",
    "StandardsUpdateRequest",
]
