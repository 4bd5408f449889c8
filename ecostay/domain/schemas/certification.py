"""Pydantic schemas for the certification API. Shape and length only; value rules live in the domain validators so authorization is checked first."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ecostay.domain.models.certification import CertificationLevel


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class AccommodationRegisterRequest(BaseModel):
    """Request schema for registering an accommodation. Owner is the calling principal."""

    name: str = Field(..., max_length=100)
    location: str = Field(..., max_length=200)
    category: str = Field(..., max_length=50)
    capacity: int = Field(..., description="Guest capacity; must be positive")


class AccommodationStatusRequest(BaseModel):
    """Suspension hook: set or clear the active flag."""

    is_active: bool


class StandardsUpdateRequest(BaseModel):
    """All six metrics are required on every update; partial updates are not supported."""

    energy_efficiency: int
    water_conservation: int
    waste_management: int
    renewable_energy_percent: int
    carbon_footprint: int = Field(..., description="0 best, 10 worst")
    local_sourcing_percent: int


class AuditorAuthorizeRequest(BaseModel):
    specialization: str = Field(..., max_length=100)


class AuditSubmitRequest(BaseModel):
    """Request schema for conducting an audit. Auditor is the calling principal."""

    accommodation_id: int
    audit_type: str = Field(..., max_length=50)
    energy_score: int
    water_score: int
    waste_score: int
    compliance_issues: int
    recommendations: str = Field("", max_length=500)


class CertificationIssueRequest(BaseModel):
    audit_id: int


class CertificationRenewRequest(BaseModel):
    audit_id: int = Field(..., description="A newer passing audit of the same accommodation")


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class AccommodationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    accommodation_id: int
    name: str
    location: str
    category: str
    capacity: int
    owner: str
    is_active: bool
    registered_at: int


class RegistrationResponse(BaseModel):
    accommodation_id: int


class StandardsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    accommodation_id: int
    energy_efficiency: int
    water_conservation: int
    waste_management: int
    renewable_energy_percent: int
    carbon_footprint: int
    local_sourcing_percent: int
    overall_sustainability_score: int
    last_updated: int


class ScoreResponse(BaseModel):
    accommodation_id: int
    score: int


class AuditorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    principal: str
    is_authorized: bool
    specialization: str
    certification_count: int
    authorized_at: int


class AuditRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

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


class AuditOutcomeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    audit_id: int
    passed: bool
    score: int


class CertificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    accommodation_id: int
    level: CertificationLevel
    score: int
    issued_at: int
    expires_at: int
    is_valid: bool
    certified_by: str


class CertificationOutcomeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    level: CertificationLevel
    score: int
    expires_at: int


class CertificationValidityResponse(BaseModel):
    accommodation_id: int
    is_valid: bool


class CertificationLevelResponse(BaseModel):
    """level is null unless the certification is valid and unexpired."""

    accommodation_id: int
    level: Optional[CertificationLevel] = None


class NextIdResponse(BaseModel):
    next_id: int
