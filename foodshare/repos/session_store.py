# foodshare/repos/session_store.py
"""
Key-value byte stores that keep the current session across restarts.

All three bindings share the same async surface (``get``/``set``/``delete``/
``close``) so the session manager never knows which one it was given.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Optional, Protocol

import anyio


class SessionStore(Protocol):
    async def get(self, key: str) -> Optional[bytes]: ...
    async def set(self, key: str, value: bytes) -> None: ...
    async def delete(self, key: str) -> None: ...
    async def close(self) -> None: ...


class MemorySessionStore:
    def __init__(self):
        self.data: Dict[str, bytes] = {}

    async def get(self, key: str) -> Optional[bytes]:
        return self.data.get(key)

    async def set(self, key: str, value: bytes) -> None:
        self.data[key] = bytes(value)

    async def delete(self, key: str) -> None:
        self.data.pop(key, None)

    async def close(self) -> None:
        pass


_SAFE_KEY = re.compile(r"[^A-Za-z0-9_.-]")

class FileSessionStore:
    """One file per key under `directory`."""

    def __init__(self, directory: str | Path):
        self.directory = anyio.Path(directory)

    def _path(self, key: str) -> anyio.Path:
        return self.directory / _SAFE_KEY.sub("_", key)

    async def get(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        if not await path.exists():
            return None
        return await path.read_bytes()

    async def set(self, key: str, value: bytes) -> None:
        await self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_name(path.name + ".tmp")
        await tmp.write_bytes(value)
        await tmp.replace(path)

    async def delete(self, key: str) -> None:
        await self._path(key).unlink(missing_ok=True)

    async def close(self) -> None:
        pass


class MongoSessionStore:
    """Stores values in a `sessions` collection as {_id: key, value: bytes}."""

    def __init__(self, uri: str, db_name: str, collection: str = "sessions"):
        from motor.motor_asyncio import AsyncIOMotorClient
        self._client = AsyncIOMotorClient(uri, uuidRepresentation="standard")
        self._col = self._client[db_name][collection]

    async def get(self, key: str) -> Optional[bytes]:
        doc = await self._col.find_one({"_id": key})
        return bytes(doc["value"]) if doc else None

    async def set(self, key: str, value: bytes) -> None:
        await self._col.update_one({"_id": key}, {"$set": {"value": bytes(value)}}, upsert=True)

    async def delete(self, key: str) -> None:
        await self._col.delete_one({"_id": key})

    async def close(self) -> None:
        self._client.close()


def build_session_store(cfg) -> SessionStore:
    if cfg.session_backend == "file":
        return FileSessionStore(cfg.session_dir)
    if cfg.session_backend == "mongo":
        return MongoSessionStore(cfg.mongo_uri, cfg.mongo_db)
    return MemorySessionStore()
