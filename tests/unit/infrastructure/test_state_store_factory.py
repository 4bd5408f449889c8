"""State store factory: backend selection and required URLs."""

import pytest

from ecostay.config.settings import AppSettings
from ecostay.infrastructure.cache.state_store_redis import RedisStateStore
from ecostay.infrastructure.database.state_store_db import DbStateStore
from ecostay.infrastructure.memory.state_store import InMemoryStateStore
from ecostay.infrastructure.state_store_factory import create_state_store


def _settings(**overrides) -> AppSettings:
    return AppSettings(registry_owner="registry-owner", **overrides)


async def test_memory_backend_is_default():
    assert isinstance(await create_state_store(_settings()), InMemoryStateStore)


async def test_redis_backend_requires_url():
    with pytest.raises(ValueError):
        await create_state_store(_settings(storage_backend="redis"))


async def test_redis_backend_built_without_connecting():
    store = await create_state_store(
        _settings(storage_backend="redis", redis_url="redis://localhost:6379/0")
    )
    assert isinstance(store, RedisStateStore)


async def test_database_backend_requires_url():
    with pytest.raises(ValueError):
        await create_state_store(_settings(storage_backend="database"))


async def test_database_backend_creates_schema(tmp_path):
    store = await create_state_store(
        _settings(
            storage_backend="database",
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'state.db'}",
        )
    )
    assert isinstance(store, DbStateStore)
    await store.set_many({"k": "v"})
    assert await store.get("k") == "v"
    await store.close()
