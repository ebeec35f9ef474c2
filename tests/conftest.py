"""Test fixtures for the brand identity engine."""

import fnmatch
from pathlib import Path
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from brand_identity.routes import memory as memory_routes
from brand_identity.routes import retention as retention_routes
from brand_identity.routes import video_analyses as video_analyses_routes
from brand_identity.services.document_store import (
    FileSystemDocumentStore,
    RedisDocumentStore,
)
from brand_identity.services.memory_service import MemoryService
from brand_identity.services.video_analysis_service import VideoAnalysisService


class FakeRedis:
    """In-memory stand-in for the redis.asyncio client used by the store."""

    def __init__(self):
        self.data = {}

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value):
        self.data[key] = value

    async def exists(self, key):
        return 1 if key in self.data else 0

    async def delete(self, key):
        self.data.pop(key, None)

    async def keys(self, pattern="*"):
        return [key for key in self.data if fnmatch.fnmatchcase(key, pattern)]


@pytest.fixture
def memory_dir(tmp_path: Path) -> Path:
    """Directory for filesystem memory documents (not created up front)."""
    return tmp_path / "memory"


@pytest.fixture
def fs_store(memory_dir: Path) -> FileSystemDocumentStore:
    return FileSystemDocumentStore(memory_dir)


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def redis_store(fake_redis: FakeRedis) -> RedisDocumentStore:
    return RedisDocumentStore(fake_redis)


@pytest.fixture
def memory_service(fs_store: FileSystemDocumentStore) -> MemoryService:
    return MemoryService(fs_store)


@pytest.fixture
def video_analysis_service(memory_service: MemoryService) -> VideoAnalysisService:
    return VideoAnalysisService(memory_service)


@pytest.fixture
def scenario_chapters() -> list:
    """Hook, tutorial and recap chapters of a short video."""
    return [
        {"start": 0, "end": 20, "title": "Hook", "summary": "surprising reveal"},
        {"start": 20, "end": 200, "title": "Tutorial", "summary": "step by step guide"},
        {"start": 200, "end": 210, "title": "Recap", "summary": "summary and conclusion"},
    ]


@pytest.fixture
def test_client(
    memory_service: MemoryService, monkeypatch: pytest.MonkeyPatch
) -> Generator[TestClient, None, None]:
    """Create a test client with routes wired to a temporary memory store."""
    # Recorded so the module globals are restored after the test
    monkeypatch.setattr(memory_routes, "memory_service", None)
    monkeypatch.setattr(video_analyses_routes, "video_analysis_service", None)

    app = FastAPI(title="Brand Identity Engine - Test")
    app.include_router(retention_routes.init_routes())
    app.include_router(memory_routes.init_routes(memory_service))
    app.include_router(video_analyses_routes.init_routes(memory_service))

    with TestClient(app) as client:
        yield client


@pytest.fixture
def uninitialized_client(
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[TestClient, None, None]:
    """Test client whose memory-backed routes have no service yet."""
    monkeypatch.setattr(memory_routes, "memory_service", None)
    monkeypatch.setattr(video_analyses_routes, "video_analysis_service", None)

    app = FastAPI(title="Brand Identity Engine - Uninitialized")
    app.include_router(memory_routes.router)
    app.include_router(video_analyses_routes.router)

    with TestClient(app) as client:
        yield client
