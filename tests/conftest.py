"""Shared pytest fixtures — async test client, session registry, fake Redis."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from agriquant.config import Settings
from agriquant.dependencies import get_registry
from agriquant.main import app
from agriquant.services.session_service import SessionRegistry


class FakeRedis:
	"""Minimal in-memory stand-in for the redis.asyncio string commands used by the logbook."""

	def __init__(self, initial: dict[str, str] | None = None) -> None:
		self.store: dict[str, str] = dict(initial or {})
		self.set_calls = 0
		self.closed = False

	async def get(self, key: str) -> str | None:
		return self.store.get(key)

	async def set(self, key: str, value: str) -> bool:
		self.set_calls += 1
		self.store[key] = value
		return True

	async def ping(self) -> bool:
		return True

	async def aclose(self) -> None:
		self.closed = True


@pytest.fixture
def settings() -> Settings:
	"""Settings with the chat delay removed so replies fire on the next loop turn."""
	return Settings(
		chat_reply_delay_seconds=0.0,
		logbook_persistence_enabled=True,
		logbook_storage_key="agriquant:test:logbook",
	)


@pytest.fixture
def fake_redis() -> FakeRedis:
	return FakeRedis()


@pytest.fixture
def registry(fake_redis: FakeRedis, settings: Settings) -> SessionRegistry:
	return SessionRegistry(fake_redis, settings)  # type: ignore[arg-type]


@pytest.fixture
async def client(registry: SessionRegistry) -> AsyncGenerator[AsyncClient, None]:
	"""HTTPX async client with lifespan disabled and the session registry injected."""
	app.dependency_overrides[get_registry] = lambda: registry
	original_lifespan = app.router.lifespan_context

	@asynccontextmanager
	async def noop_lifespan(_: Any) -> AsyncGenerator[None, None]:
		yield

	app.router.lifespan_context = noop_lifespan

	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://test") as test_client:
		yield test_client

	registry.close_all()
	app.router.lifespan_context = original_lifespan
	app.dependency_overrides.clear()


@pytest.fixture
def now_utc() -> datetime:
	return datetime(2026, 10, 18, 7, 30, tzinfo=UTC)
