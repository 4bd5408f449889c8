# ecostay/api/routers/health.py

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from ecostay.api.dependencies import get_certification_service
from ecostay.application.certification_service import CertificationService
from ecostay.config.settings import get_settings

router = APIRouter()


@router.get("/health")
async def health(
    request: Request,
    service: Annotated[CertificationService, Depends(get_certification_service)],
):
    """Liveness plus store reachability. Degraded when the configured backend does not answer."""
    settings = get_settings()
    store_reachable = await service.store_reachable()
    return {
        "status": "ok" if store_reachable else "degraded",
        "store_reachable": store_reachable,
        "storage_backend": settings.storage_backend,
        "registry_owner": service.registry_owner,
        "principal": request.state.principal,
        "correlation_id": request.state.correlation_id,
        "environment": settings.environment,
        "version": settings.version,
    }
