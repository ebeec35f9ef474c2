"""Document stores for memory documents.

A document store keeps JSON objects under string keys. Three backends share
one async interface: a directory of JSON files for local use, Redis, and
MongoDB through Beanie.
"""

import os
import json
import asyncio
import fnmatch
import logging
from abc import ABC, abstractmethod
from datetime import datetime, UTC
from pathlib import Path
from typing import Any, Dict, List, Optional

from beanie import Document
from pydantic import Field
from redis.asyncio import Redis

logger = logging.getLogger(__name__)


class DocumentStore(ABC):
    """Key-value store of JSON documents"""

    @abstractmethod
    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Return the document, or None when the key is absent"""

    @abstractmethod
    async def set(self, key: str, value: Dict[str, Any]) -> None:
        """Store the document, replacing any previous value"""

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check whether the key holds a document"""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove the key; a missing key is not an error"""

    @abstractmethod
    async def keys(self, pattern: str = "*") -> List[str]:
        """List keys matching a glob-style pattern"""


class FileSystemDocumentStore(DocumentStore):
    """One pretty-printed JSON file per key inside a directory"""

    def __init__(self, directory: str | os.PathLike):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    async def _run(self, func, *args):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func, *args)

    def _read(self, key: str) -> Optional[Dict[str, Any]]:
        path = self._path(key)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _write(self, key: str, value: Dict[str, Any]) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        with open(self._path(key), "w", encoding="utf-8") as f:
            json.dump(value, f, indent=2)
        logger.debug("Wrote memory document %s to %s", key, self.directory)

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        return await self._run(self._read, key)

    async def set(self, key: str, value: Dict[str, Any]) -> None:
        await self._run(self._write, key, value)

    def _list(self, pattern: str) -> List[str]:
        if not self.directory.is_dir():
            return []
        return sorted(
            path.stem
            for path in self.directory.glob("*.json")
            if fnmatch.fnmatchcase(path.stem, pattern)
        )

    async def exists(self, key: str) -> bool:
        return await self._run(self._path(key).exists)

    async def delete(self, key: str) -> None:
        await self._run(self._path(key).unlink, True)

    async def keys(self, pattern: str = "*") -> List[str]:
        return await self._run(self._list, pattern)


class RedisDocumentStore(DocumentStore):
    """Documents stored as JSON strings in Redis"""

    def __init__(self, redis_client: Redis):
        self.redis_client = redis_client

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        result = await self.redis_client.get(key)
        if result is None:
            return None
        return json.loads(result)

    async def set(self, key: str, value: Dict[str, Any]) -> None:
        await self.redis_client.set(key, json.dumps(value))

    async def exists(self, key: str) -> bool:
        return await self.redis_client.exists(key) == 1

    async def delete(self, key: str) -> None:
        await self.redis_client.delete(key)

    async def keys(self, pattern: str = "*") -> List[str]:
        keys = await self.redis_client.keys(pattern)
        return [key.decode() if isinstance(key, bytes) else key for key in keys]


class MemoryRecord(Document):
    """A memory document persisted in MongoDB"""

    key: str
    data: Dict[str, Any] = Field(default_factory=dict)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    class Settings:
        name = "memory"
        indexes = ["key"]


class MongoDocumentStore(DocumentStore):
    """Documents stored in MongoDB; requires init_beanie with MemoryRecord"""

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        record = await MemoryRecord.find_one({"key": key})
        if not record:
            return None
        return record.data

    async def set(self, key: str, value: Dict[str, Any]) -> None:
        record = await MemoryRecord.find_one({"key": key})
        if not record:
            await MemoryRecord(key=key, data=value).insert()
            return
        record.data = value
        record.updated_at = datetime.now(UTC)
        await record.save()

    async def exists(self, key: str) -> bool:
        return await MemoryRecord.find_one({"key": key}) is not None

    async def delete(self, key: str) -> None:
        await MemoryRecord.find({"key": key}).delete()

    async def keys(self, pattern: str = "*") -> List[str]:
        regex = fnmatch.translate(pattern)
        records = await MemoryRecord.find({"key": {"$regex": regex}}).to_list()
        return sorted(record.key for record in records)
