"""Certification record and level ladder."""

from dataclasses import dataclass
from enum import Enum


class CertificationLevel(str, Enum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"


@dataclass(frozen=True)
class Certification:
    """
    Current certification of one accommodation. Expiry is lazy: is_valid is never
    flipped when expires_at passes, so every read goes through is_current().
    """

    accommodation_id: int
    level: CertificationLevel
    score: int
    issued_at: int
    expires_at: int
    is_valid: bool
    certified_by: str

    def is_current(self, height: int) -> bool:
        """Valid and not yet expired at the given height."""
        return self.is_valid and self.expires_at > height


@dataclass(frozen=True)
class CertificationOutcome:
    level: CertificationLevel
    score: int
    expires_at: int
