"""Shared fixtures for the test-suite."""

from __future__ import annotations

import asyncio
import os
from dataclasses import replace
from pathlib import Path
from typing import Any

import pytest

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["REALTIME_REQUIRE_AUTH"] = "true"
os.environ["MESSAGE_DEDUP_WINDOW_SECONDS"] = "30"

pytest.importorskip("fastapi")

from realmhub.domain.entities import Message, Notification
from realmhub.infrastructure.realtime import PersistenceError, RealtimeGateway
from realmhub.utils import utc_now


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class FakeWebSocket:
    """Minimal stand-in for a Starlette websocket."""

    def __init__(self, *, fail_on_send: bool = False) -> None:
        self.accepted = False
        self.closed_code: int | None = None
        self.fail_on_send = fail_on_send
        self.sent: list[dict[str, Any]] = []
        self._incoming: asyncio.Queue[dict[str, Any]] = asyncio.Queue()

    async def accept(self) -> None:
        self.accepted = True

    async def send_json(self, data: dict[str, Any]) -> None:
        if self.fail_on_send:
            raise RuntimeError("socket is gone")
        self.sent.append(data)

    async def receive(self) -> dict[str, Any]:
        return await self._incoming.get()

    async def close(self, code: int = 1000) -> None:
        self.closed_code = code

    def feed(self, frame: str | None) -> None:
        """Queue an inbound frame; ``None`` simulates the client leaving."""

        if frame is None:
            self._incoming.put_nowait({"type": "websocket.disconnect", "code": 1000})
        else:
            self._incoming.put_nowait({"type": "websocket.receive", "text": frame})

    def feed_bytes(self, data: bytes) -> None:
        self._incoming.put_nowait({"type": "websocket.receive", "bytes": data})

    def events(self, event_type: str) -> list[Any]:
        return [frame["data"] for frame in self.sent if frame["type"] == event_type]


class InMemoryRealtimeStore:
    """Realtime store keeping rows in lists.

    ``gate`` holds inserts until it is set; ``fail`` makes inserts raise.
    """

    def __init__(self) -> None:
        self.messages: list[Message] = []
        self.notifications: list[Notification] = []
        self.fail = False
        self.gate: asyncio.Event | None = None

    async def insert_message(self, message: Message) -> Message:
        await self._before_insert()
        saved = replace(message, id=len(self.messages) + 1, created_at=utc_now())
        self.messages.append(saved)
        return saved

    async def insert_notification(self, notification: Notification) -> Notification:
        await self._before_insert()
        saved = replace(notification, id=len(self.notifications) + 1, created_at=utc_now())
        self.notifications.append(saved)
        return saved

    async def _before_insert(self) -> None:
        if self.gate is not None:
            await self.gate.wait()
        if self.fail:
            raise PersistenceError("database unavailable")


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def store() -> InMemoryRealtimeStore:
    return InMemoryRealtimeStore()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def gateway(store: InMemoryRealtimeStore, clock: FakeClock) -> RealtimeGateway:
    return RealtimeGateway(store, require_auth=True, dedup_window_seconds=30.0, clock=clock)


@pytest.fixture
def open_gateway(store: InMemoryRealtimeStore, clock: FakeClock) -> RealtimeGateway:
    """Gateway trusting the user ids supplied by clients."""

    return RealtimeGateway(store, require_auth=False, dedup_window_seconds=30.0, clock=clock)


@pytest.fixture
def fake_websocket():
    """Return a factory creating :class:`FakeWebSocket` objects."""

    return FakeWebSocket


@pytest.fixture
def reset_database():
    """Drop and recreate every table of the test database."""

    from realmhub.infrastructure import database

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.initialize_database()
    yield database
    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)


@pytest.fixture
def db_session(reset_database):
    session = reset_database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


def pytest_sessionfinish(session, exitstatus) -> None:
    from realmhub.infrastructure import database

    database.engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()
