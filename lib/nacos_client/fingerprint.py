from __future__ import annotations

import asyncio
import hashlib


def fingerprint(content: bytes) -> str:
    return hashlib.md5(content).hexdigest()


class FingerprintCache:
    """Data id -> md5 of the content last seen for it.

    Entries are added on first fetch, overwritten on every change and never
    removed. The lock is only held around the dict access itself.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._entries: dict[str, str] = {}

    async def get(self, data_id: str) -> str | None:
        async with self._lock:
            return self._entries.get(data_id)

    async def set(self, data_id: str, value: str) -> None:
        async with self._lock:
            self._entries[data_id] = value
