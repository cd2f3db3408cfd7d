"""
tests/conftest.py -- Shared fixtures for the session and configuration tests.

This module provides:
  - FakeClock: a settable epoch-ms clock so expiry is deterministic
  - api_state / transport: the in-process fake directory API (see fake_api.py)
  - storage / store: a fresh MemoryStorage and SessionStore per test
  - session: a SessionManager pointed at the fake API, closed after the test
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from fake_api import API_ROOT, FakeAPIState, create_transport
from fringe_client.application.services.session_manager import SessionManager
from fringe_client.infra.persistence.session_store import SessionStore
from fringe_client.infra.persistence.storage_memory import MemoryStorage

NOW_MS = 1_700_000_000_000


class FakeClock:
    def __init__(self, now: int = NOW_MS) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def api_state() -> FakeAPIState:
    return FakeAPIState()


@pytest.fixture
def transport(api_state: FakeAPIState) -> httpx.AsyncBaseTransport:
    return create_transport(api_state)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage: MemoryStorage, clock: FakeClock) -> SessionStore:
    return SessionStore(storage, clock=clock)


@pytest_asyncio.fixture
async def session(store: SessionStore, transport: httpx.AsyncBaseTransport, clock: FakeClock) -> AsyncIterator[SessionManager]:
    manager = SessionManager(store, API_ROOT, transport=transport, clock=clock)
    yield manager
    await manager.aclose()
