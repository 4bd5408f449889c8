"""SQL-backed state store. One row per key in the ledger_state table."""

import logging
from typing import Mapping, Optional

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from ecostay.application.exceptions import StateStoreError
from ecostay.infrastructure.database.models import StateEntry
from ecostay.infrastructure.database.session import create_session_factory

logger = logging.getLogger(__name__)


class DbStateStore:
    """StateStore over SQLAlchemy. set_many upserts every entry inside one transaction."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._session_factory = create_session_factory(engine)

    async def get(self, key: str) -> Optional[str]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(StateEntry.value).where(StateEntry.key == key)
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("state_read_failed", extra={"key": key, "error": str(e)})
            raise StateStoreError(f"Database read failed for {key}: {e}") from e

    async def set_many(self, entries: Mapping[str, str]) -> None:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    for key, value in entries.items():
                        await session.merge(StateEntry(key=key, value=value))
        except SQLAlchemyError as e:
            logger.error(
                "state_commit_failed",
                extra={"keys": sorted(entries), "error": str(e)},
            )
            raise StateStoreError(f"Database commit failed: {e}") from e

    async def ping(self) -> bool:
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning("state_ping_failed", extra={"error": str(e)})
            return False

    async def close(self) -> None:
        await self._engine.dispose()
