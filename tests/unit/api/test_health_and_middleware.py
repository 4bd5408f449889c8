"""Health endpoint and middleware: correlation ID echo, principal requirement on writes."""

from unittest.mock import AsyncMock

from httpx import AsyncClient


async def test_health_ok_without_principal(client: AsyncClient):
    r = await client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["principal"] is None
    assert data["storage_backend"] == "memory"
    assert data["store_reachable"] is True
    assert data["registry_owner"] == "registry-owner"
    assert "X-Correlation-ID" in r.headers


async def test_correlation_id_preserved(client: AsyncClient):
    r = await client.get("/health", headers={"X-Correlation-ID": "corr-123"})
    assert r.headers["X-Correlation-ID"] == "corr-123"
    assert r.json()["correlation_id"] == "corr-123"


async def test_principal_echoed(client: AsyncClient):
    r = await client.get("/health", headers={"X-Principal": "  alice "})
    assert r.json()["principal"] == "alice"


async def test_mutation_without_principal_returns_401(client: AsyncClient):
    body = {"name": "Eco Lodge", "location": "Lisbon", "category": "hotel", "capacity": 10}
    r = await client.post("/accommodations/", json=body)
    assert r.status_code == 401
    r = await client.post("/accommodations/", json=body, headers={"X-Principal": "   "})
    assert r.status_code == 401


async def test_health_degraded_when_store_unreachable(client: AsyncClient, store, monkeypatch):
    monkeypatch.setattr(store, "ping", AsyncMock(return_value=False))
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "degraded"
    assert r.json()["store_reachable"] is False
