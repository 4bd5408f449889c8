# ecostay/core/context.py

import contextvars
from dataclasses import dataclass

correlation_id_ctx = contextvars.ContextVar("correlation_id", default=None)
principal_ctx = contextvars.ContextVar("principal", default=None)


@dataclass(frozen=True)
class CallContext:
    """Environment-supplied facts for one operation: who is calling, and at what height."""

    principal: str
    height: int
