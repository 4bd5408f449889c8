"""API middleware: correlation ID, calling principal, request audit."""

import json
import logging
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from ecostay.core.context import correlation_id_ctx, principal_ctx

logger = logging.getLogger(__name__)

PRINCIPAL_HEADER = "X-Principal"
CORRELATION_HEADER = "X-Correlation-ID"
MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Generate or preserve correlation ID; attach to request.state, response header, and logging context."""

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id
        correlation_id_ctx.set(correlation_id)

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class PrincipalContextMiddleware(BaseHTTPMiddleware):
    """
    Read the authenticated principal set by the identity proxy. Mutating requests
    without one get 401; reads may be anonymous.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        raw = request.headers.get(PRINCIPAL_HEADER)
        principal = raw.strip() if raw and raw.strip() else None
        if principal is None and request.method in MUTATING_METHODS:
            return JSONResponse(
                status_code=401,
                content={"detail": f"{PRINCIPAL_HEADER} header is required"},
            )
        request.state.principal = principal
        principal_ctx.set(principal)
        return await call_next(request)


class AuditTriggerMiddleware(BaseHTTPMiddleware):
    """After response: log structured audit event (correlation_id, principal, path, method, status_code)."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        audit_event = {
            "event": "request_audit",
            "correlation_id": getattr(request.state, "correlation_id", None),
            "principal": getattr(request.state, "principal", None),
            "path": request.url.path,
            "method": request.method,
            "status_code": response.status_code,
        }
        logger.info(json.dumps(audit_event))
        return response
