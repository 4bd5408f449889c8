# ecostay/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from ecostay.api.dependencies import close_certification_service
from ecostay.api.middleware import (
    AuditTriggerMiddleware,
    CorrelationIdMiddleware,
    PrincipalContextMiddleware,
)
from ecostay.api.routers import accommodations, auditors, audits, certifications, health
from ecostay.application.exceptions import ApplicationError, StateStoreError
from ecostay.config.logging import configure_logging
from ecostay.config.settings import get_settings
from ecostay.domain.exceptions import (
    AccommodationNotFoundError,
    CertificationError,
    CertificationExpiredError,
    InvalidInputError,
    NotAuthorizedError,
)

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_certification_service()
    logger.info("app_shutdown")


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
    lifespan=lifespan,
)

# Middleware order: last added runs first (outermost). Request flow: CorrelationId -> PrincipalContext -> AuditTrigger.
app.add_middleware(AuditTriggerMiddleware)
app.add_middleware(PrincipalContextMiddleware)
app.add_middleware(CorrelationIdMiddleware)

_ERROR_STATUS: dict[type[CertificationError], int] = {
    NotAuthorizedError: 403,
    InvalidInputError: 422,
    AccommodationNotFoundError: 404,
    CertificationExpiredError: 410,
}


@app.exception_handler(CertificationError)
async def certification_error_handler(request, exc: CertificationError):
    return JSONResponse(
        status_code=_ERROR_STATUS.get(type(exc), 400),
        content={"detail": exc.message, "code": exc.code},
    )


@app.exception_handler(StateStoreError)
async def state_store_error_handler(request, exc: StateStoreError):
    return JSONResponse(status_code=503, content={"detail": exc.message})


@app.exception_handler(ApplicationError)
async def application_error_handler(request, exc: ApplicationError):
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request, exc: Exception):
    logger.exception("unhandled_error", extra={"path": request.url.path})
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Routers: /health, /accommodations, /auditors, /audits, /certifications
app.include_router(health.router)
app.include_router(accommodations.router, prefix="/accommodations")
app.include_router(auditors.router, prefix="/auditors")
app.include_router(audits.router, prefix="/audits")
app.include_router(certifications.router, prefix="/certifications")
