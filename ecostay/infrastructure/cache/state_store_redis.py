"""Redis-backed state store. Keys are namespaced with a configurable prefix."""

import logging
from typing import Mapping, Optional, Protocol

from redis.exceptions import RedisError

from ecostay.application.exceptions import StateStoreError

logger = logging.getLogger(__name__)


class RedisStateBackend(Protocol):
    """Minimal Redis operations the store needs. RedisClient implements it."""

    async def get(self, key: str) -> Optional[str]: ...
    async def set_many(self, entries: Mapping[str, str]) -> None: ...
    async def ping(self) -> bool: ...
    async def close(self) -> None: ...


class RedisStateStore:
    """StateStore over Redis. Commits go through a transactional pipeline."""

    def __init__(self, backend: RedisStateBackend, key_prefix: str = "ecostay:") -> None:
        self._backend = backend
        self._prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self._backend.get(self._key(key))
        except RedisError as e:
            logger.error("state_read_failed", extra={"key": key, "error": str(e)})
            raise StateStoreError(f"Redis read failed for {key}: {e}") from e

    async def set_many(self, entries: Mapping[str, str]) -> None:
        prefixed = {self._key(key): value for key, value in entries.items()}
        try:
            await self._backend.set_many(prefixed)
        except RedisError as e:
            logger.error(
                "state_commit_failed",
                extra={"keys": sorted(entries), "error": str(e)},
            )
            raise StateStoreError(f"Redis commit failed: {e}") from e

    async def ping(self) -> bool:
        try:
            return await self._backend.ping()
        except RedisError as e:
            logger.warning("state_ping_failed", extra={"error": str(e)})
            return False

    async def close(self) -> None:
        await self._backend.close()
