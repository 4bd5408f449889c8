"""Build the configured StateStore backend."""

import logging

from ecostay.certification.state import StateStore
from ecostay.config.settings import AppSettings
from ecostay.infrastructure.memory.state_store import InMemoryStateStore

logger = logging.getLogger(__name__)


async def create_state_store(settings: AppSettings) -> StateStore:
    """Return a ready-to-use store. The database backend creates its table on first use."""
    backend = settings.storage_backend
    if backend == "memory":
        store: StateStore = InMemoryStateStore()
    elif backend == "redis":
        if not settings.redis_url:
            raise ValueError("redis_url must be set when storage_backend is 'redis'")
        from ecostay.infrastructure.cache.redis_client import RedisClient
        from ecostay.infrastructure.cache.state_store_redis import RedisStateStore

        store = RedisStateStore(
            RedisClient(settings.redis_url), key_prefix=settings.redis_key_prefix
        )
    elif backend == "database":
        if not settings.database_url:
            raise ValueError("database_url must be set when storage_backend is 'database'")
        from ecostay.infrastructure.database.session import create_engine, create_schema
        from ecostay.infrastructure.database.state_store_db import DbStateStore

        engine = create_engine(settings.database_url)
        await create_schema(engine)
        store = DbStateStore(engine)
    else:
        raise ValueError(f"Unknown storage backend: {backend}")
    logger.info("state_store_ready", extra={"storage_backend": backend})
    return store
