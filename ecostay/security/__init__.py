"""Security: capability checks against the registry's lookup tables. No FastAPI."""

from ecostay.security.capabilities import CapabilityDirectory, CapabilityGuard

__all__ = ["CapabilityDirectory", "CapabilityGuard"]
