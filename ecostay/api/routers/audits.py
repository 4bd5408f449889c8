"""Audits API router: POST /audits (authorized auditors), audit record reads."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from ecostay.api.dependencies import get_certification_service, get_principal
from ecostay.application.certification_service import CertificationService
from ecostay.domain.schemas.certification import (
    AuditOutcomeResponse,
    AuditRecordResponse,
    AuditSubmitRequest,
    NextIdResponse,
)

router = APIRouter()

Service = Annotated[CertificationService, Depends(get_certification_service)]
Principal = Annotated[str, Depends(get_principal)]


@router.post("/", response_model=AuditOutcomeResponse, status_code=status.HTTP_201_CREATED)
async def conduct_audit(body: AuditSubmitRequest, principal: Principal, service: Service):
    outcome = await service.conduct_audit(
        principal,
        accommodation_id=body.accommodation_id,
        audit_type=body.audit_type,
        energy_score=body.energy_score,
        water_score=body.water_score,
        waste_score=body.waste_score,
        compliance_issues=body.compliance_issues,
        recommendations=body.recommendations,
    )
    return AuditOutcomeResponse.model_validate(outcome)


@router.get("/next-id", response_model=NextIdResponse)
async def next_audit_id(service: Service):
    return NextIdResponse(next_id=await service.get_next_audit_id())


@router.get("/{audit_id}", response_model=AuditRecordResponse)
async def get_audit(audit_id: int, service: Service):
    record = await service.get_audit_record(audit_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Audit not found: {audit_id}")
    return AuditRecordResponse.model_validate(record)
