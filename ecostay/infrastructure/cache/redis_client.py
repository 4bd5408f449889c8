# ecostay/infrastructure/cache/redis_client.py

from typing import Mapping

import redis.asyncio as redis


class RedisClient:
    def __init__(self, url: str):
        self.client = redis.from_url(
            url,
            decode_responses=True,
        )

    async def get(self, key: str) -> str | None:
        """Get value for key. Returns None if key does not exist."""
        return await self.client.get(key)

    async def set_many(self, entries: Mapping[str, str]) -> None:
        """Write all entries in one MULTI/EXEC block."""
        async with self.client.pipeline(transaction=True) as pipe:
            for key, value in entries.items():
                pipe.set(key, value)
            await pipe.execute()

    async def ping(self) -> bool:
        return bool(await self.client.ping())

    async def close(self) -> None:
        await self.client.aclose()
