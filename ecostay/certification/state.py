"""
Transactional view over the key-value state store.

Every write operation runs inside LedgerState.transaction(): reads see the
operation's own pending writes, and the whole write set is committed with one
atomic set_many() or dropped if the operation raises.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Generic, Mapping, Optional, Protocol, Type, TypeVar, Union

from pydantic import TypeAdapter

T = TypeVar("T")


class StateStore(Protocol):
    """Atomic key-value storage. Infrastructure implements it."""

    async def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key was never written."""
        ...

    async def set_many(self, entries: Mapping[str, str]) -> None:
        """Write all entries atomically: either every entry is visible afterwards or none is."""
        ...

    async def ping(self) -> bool:
        """True if the backing storage answers. Never raises for an unreachable backend."""
        ...

    async def close(self) -> None:
        """Release connections held by the store."""
        ...


class LedgerState:
    """Unit of work shared by all components. Not re-entrant; the service serializes callers."""

    def __init__(self, store: StateStore) -> None:
        self._store = store
        self._pending: Optional[Dict[str, str]] = None

    @property
    def in_transaction(self) -> bool:
        return self._pending is not None

    async def read(self, key: str) -> Optional[str]:
        if self._pending is not None and key in self._pending:
            return self._pending[key]
        return await self._store.get(key)

    def write(self, key: str, value: str) -> None:
        if self._pending is None:
            raise RuntimeError(f"write outside of a transaction: {key}")
        self._pending[key] = value

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Buffer writes; commit on clean exit, discard on exception."""
        if self._pending is not None:
            raise RuntimeError("transaction already open")
        self._pending = {}
        try:
            yield
            if self._pending:
                await self._store.set_many(dict(self._pending))
        finally:
            self._pending = None


class RecordMap(Generic[T]):
    """Typed records under one key namespace. put() replaces the whole record."""

    def __init__(self, state: LedgerState, namespace: str, record_type: Type[T]) -> None:
        self._state = state
        self._namespace = namespace
        self._adapter = TypeAdapter(record_type)

    def _key(self, ident: Union[int, str]) -> str:
        return f"{self._namespace}:{ident}"

    async def get(self, ident: Union[int, str]) -> Optional[T]:
        raw = await self._state.read(self._key(ident))
        if raw is None:
            return None
        return self._adapter.validate_json(raw)

    def put(self, ident: Union[int, str], record: T) -> None:
        self._state.write(self._key(ident), self._adapter.dump_json(record).decode("utf-8"))


class Sequence:
    """Monotonic ID counter stored alongside the records it numbers."""

    def __init__(self, state: LedgerState, name: str, start: int = 1) -> None:
        self._state = state
        self._key = f"sequence:{name}"
        self._start = start

    async def peek(self) -> int:
        """Next ID that allocate() would hand out."""
        raw = await self._state.read(self._key)
        return int(raw) if raw is not None else self._start

    async def allocate(self) -> int:
        value = await self.peek()
        self._state.write(self._key, str(value + 1))
        return value
