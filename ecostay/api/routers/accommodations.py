"""Accommodations API router: registration, suspension hook, environmental standards."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from ecostay.api.dependencies import get_certification_service, get_principal
from ecostay.application.certification_service import CertificationService
from ecostay.domain.schemas.certification import (
    AccommodationRegisterRequest,
    AccommodationResponse,
    AccommodationStatusRequest,
    NextIdResponse,
    RegistrationResponse,
    ScoreResponse,
    StandardsResponse,
    StandardsUpdateRequest,
)

router = APIRouter()

Service = Annotated[CertificationService, Depends(get_certification_service)]
Principal = Annotated[str, Depends(get_principal)]


@router.post("/", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
async def register_accommodation(
    body: AccommodationRegisterRequest, principal: Principal, service: Service
):
    """Register an accommodation owned by the calling principal."""
    accommodation_id = await service.register(
        principal,
        name=body.name,
        location=body.location,
        category=body.category,
        capacity=body.capacity,
    )
    return RegistrationResponse(accommodation_id=accommodation_id)


@router.get("/next-id", response_model=NextIdResponse)
async def next_accommodation_id(service: Service):
    return NextIdResponse(next_id=await service.get_next_accommodation_id())


@router.get("/{accommodation_id}", response_model=AccommodationResponse)
async def get_accommodation(accommodation_id: int, service: Service):
    accommodation = await service.get_accommodation(accommodation_id)
    if accommodation is None:
        raise HTTPException(status_code=404, detail=f"Accommodation not found: {accommodation_id}")
    return AccommodationResponse.model_validate(accommodation)


@router.put("/{accommodation_id}/status", response_model=AccommodationResponse)
async def set_accommodation_status(
    accommodation_id: int,
    body: AccommodationStatusRequest,
    principal: Principal,
    service: Service,
):
    """Suspend or reinstate an accommodation. Registry owner only."""
    accommodation = await service.set_accommodation_active(
        principal, accommodation_id=accommodation_id, is_active=body.is_active
    )
    return AccommodationResponse.model_validate(accommodation)


@router.put("/{accommodation_id}/standards", response_model=ScoreResponse)
async def update_standards(
    accommodation_id: int,
    body: StandardsUpdateRequest,
    principal: Principal,
    service: Service,
):
    """Replace all six metrics; owner or authorized auditor. Returns the recomputed score."""
    score = await service.update_standards(
        principal,
        accommodation_id=accommodation_id,
        energy_efficiency=body.energy_efficiency,
        water_conservation=body.water_conservation,
        waste_management=body.waste_management,
        renewable_energy_percent=body.renewable_energy_percent,
        carbon_footprint=body.carbon_footprint,
        local_sourcing_percent=body.local_sourcing_percent,
    )
    return ScoreResponse(accommodation_id=accommodation_id, score=score)


@router.get("/{accommodation_id}/standards", response_model=StandardsResponse)
async def get_standards(accommodation_id: int, service: Service):
    standards = await service.get_standards(accommodation_id)
    if standards is None:
        raise HTTPException(status_code=404, detail=f"Standards not found: {accommodation_id}")
    return StandardsResponse.model_validate(standards)
