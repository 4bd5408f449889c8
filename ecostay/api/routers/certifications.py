"""Certifications API router: issuance, renewal and lazy-expiry reads."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from ecostay.api.dependencies import get_certification_service, get_principal
from ecostay.application.certification_service import CertificationService
from ecostay.domain.schemas.certification import (
    CertificationIssueRequest,
    CertificationLevelResponse,
    CertificationOutcomeResponse,
    CertificationRenewRequest,
    CertificationResponse,
    CertificationValidityResponse,
)

router = APIRouter()

Service = Annotated[CertificationService, Depends(get_certification_service)]
Principal = Annotated[str, Depends(get_principal)]


@router.post("/{accommodation_id}", response_model=CertificationOutcomeResponse)
async def issue_certification(
    accommodation_id: int,
    body: CertificationIssueRequest,
    principal: Principal,
    service: Service,
):
    """Issue (or silently re-issue) a certification from a passing audit."""
    outcome = await service.issue_certification(
        principal, accommodation_id=accommodation_id, audit_id=body.audit_id
    )
    return CertificationOutcomeResponse.model_validate(outcome)


@router.post("/{accommodation_id}/renewal", response_model=CertificationOutcomeResponse)
async def renew_certification(
    accommodation_id: int,
    body: CertificationRenewRequest,
    principal: Principal,
    service: Service,
):
    outcome = await service.renew_certification(
        principal, accommodation_id=accommodation_id, audit_id=body.audit_id
    )
    return CertificationOutcomeResponse.model_validate(outcome)


@router.get("/{accommodation_id}", response_model=CertificationResponse)
async def get_certification(accommodation_id: int, service: Service):
    """Stored record, expired or not. Use /validity for the derived state."""
    certification = await service.get_certification(accommodation_id)
    if certification is None:
        raise HTTPException(
            status_code=404, detail=f"Certification not found: {accommodation_id}"
        )
    return CertificationResponse.model_validate(certification)


@router.get("/{accommodation_id}/validity", response_model=CertificationValidityResponse)
async def certification_validity(accommodation_id: int, service: Service):
    return CertificationValidityResponse(
        accommodation_id=accommodation_id,
        is_valid=await service.is_certification_valid(accommodation_id),
    )


@router.get("/{accommodation_id}/level", response_model=CertificationLevelResponse)
async def certification_level(accommodation_id: int, service: Service):
    return CertificationLevelResponse(
        accommodation_id=accommodation_id,
        level=await service.get_certification_level(accommodation_id),
    )
