"""FastAPI dependency injection: height source, CertificationService, principal."""

import asyncio
import logging

from fastapi import Request

from ecostay.application.certification_service import CertificationService
from ecostay.config.settings import get_settings
from ecostay.core.height import HeightSource, WallClockHeightSource
from ecostay.infrastructure.state_store_factory import create_state_store

_height_source: HeightSource | None = None
_certification_service: CertificationService | None = None
_service_lock = asyncio.Lock()


def get_height_source() -> HeightSource:
    """Return singleton wall-clock height source."""
    global _height_source
    if _height_source is None:
        settings = get_settings()
        _height_source = WallClockHeightSource(
            genesis_timestamp=settings.genesis_timestamp,
            block_interval_seconds=settings.block_interval_seconds,
        )
    return _height_source


async def get_certification_service() -> CertificationService:
    """Return singleton CertificationService over the configured store. Built once even under concurrent first calls."""
    global _certification_service
    if _certification_service is not None:
        return _certification_service
    async with _service_lock:
        if _certification_service is None:
            settings = get_settings()
            store = await create_state_store(settings)
            _certification_service = CertificationService(
                store=store,
                height_source=get_height_source(),
                registry_owner=settings.registry_owner,
                validity_blocks=settings.certification_validity_blocks,
                logger=logging.getLogger("ecostay.application"),
            )
    return _certification_service


async def close_certification_service() -> None:
    """Close the singleton's store on shutdown. The next call to get_certification_service builds a fresh one."""
    global _certification_service
    async with _service_lock:
        service, _certification_service = _certification_service, None
    if service is not None:
        await service.close()


def get_principal(request: Request) -> str:
    """Extract principal from request.state (set by middleware). Only mutating routes depend on it."""
    return request.state.principal
