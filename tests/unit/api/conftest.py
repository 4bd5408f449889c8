"""Fixtures for API unit tests: in-memory service with manual height, AsyncClient."""

import pytest
from httpx import ASGITransport, AsyncClient

from ecostay.main import app

REGISTRY_OWNER = "registry-owner"
OWNER = "hotel-owner"
AUDITOR = "auditor-1"


@pytest.fixture
def app_with_overrides(service):
    """App with the certification service overridden for testing."""
    from ecostay.api import dependencies

    async def _service():
        return service

    app.dependency_overrides[dependencies.get_certification_service] = _service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app_with_overrides):
    transport = ASGITransport(app=app_with_overrides)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def as_principal(principal: str) -> dict[str, str]:
    return {"X-Principal": principal}


@pytest.fixture
def owner_headers():
    return as_principal(OWNER)


@pytest.fixture
def registry_owner_headers():
    return as_principal(REGISTRY_OWNER)


@pytest.fixture
async def registered(client, owner_headers, registry_owner_headers):
    """Accommodation 1 registered by OWNER, AUDITOR authorized."""
    r = await client.post(
        "/accommodations/",
        json={"name": "Eco Lodge", "location": "Lisbon", "category": "hotel", "capacity": 10},
        headers=owner_headers,
    )
    assert r.status_code == 201
    r = await client.put(
        f"/auditors/{AUDITOR}",
        json={"specialization": "energy"},
        headers=registry_owner_headers,
    )
    assert r.status_code == 200
    return r.json()
