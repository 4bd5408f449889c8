"""Auditors API router: allow-list management by the registry owner."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from ecostay.api.dependencies import get_certification_service, get_principal
from ecostay.application.certification_service import CertificationService
from ecostay.domain.schemas.certification import AuditorAuthorizeRequest, AuditorResponse

router = APIRouter()

Service = Annotated[CertificationService, Depends(get_certification_service)]
Principal = Annotated[str, Depends(get_principal)]


@router.put("/{auditor}", response_model=AuditorResponse)
async def authorize_auditor(
    auditor: str, body: AuditorAuthorizeRequest, principal: Principal, service: Service
):
    """Authorize (or re-authorize, resetting the counter) an auditor."""
    authorization = await service.authorize_auditor(
        principal, auditor=auditor, specialization=body.specialization
    )
    return AuditorResponse.model_validate(authorization)


@router.delete("/{auditor}", response_model=AuditorResponse)
async def revoke_auditor(auditor: str, principal: Principal, service: Service):
    authorization = await service.revoke_auditor(principal, auditor=auditor)
    return AuditorResponse.model_validate(authorization)


@router.get("/{auditor}", response_model=AuditorResponse)
async def get_auditor(auditor: str, service: Service):
    authorization = await service.get_auditor_info(auditor)
    if authorization is None:
        raise HTTPException(status_code=404, detail=f"Auditor not found: {auditor}")
    return AuditorResponse.model_validate(authorization)
