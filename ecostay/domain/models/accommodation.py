"""Registry-owned records: accommodations and auditor authorizations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Accommodation:
    """
    A registered lodging establishment. Descriptive fields never change after registration;
    is_active is toggled only by the suspension hook.
    """

    accommodation_id: int
    name: str
    location: str
    category: str
    capacity: int
    owner: str
    is_active: bool
    registered_at: int


@dataclass(frozen=True)
class AuditorAuthorization:
    """Allow-list entry for one auditor principal."""

    principal: str
    is_authorized: bool
    specialization: str
    certification_count: int
    authorized_at: int
