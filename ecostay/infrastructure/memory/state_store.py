"""In-process state store. Default backend for development and tests."""

from typing import Dict, Mapping, Optional


class InMemoryStateStore:
    """Dict-backed StateStore. set_many is a single dict update, so a commit is all-or-nothing."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set_many(self, entries: Mapping[str, str]) -> None:
        self._data.update(entries)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        pass

    def snapshot(self) -> Dict[str, str]:
        """Copy of the raw contents. For inspection only."""
        return dict(self._data)
