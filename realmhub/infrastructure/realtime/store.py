"""Persistence boundary used by the realtime gateway."""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar

from anyio import CapacityLimiter, to_thread
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from realmhub.domain.entities import Message, Notification
from realmhub.infrastructure.repositories import MessageRepository, NotificationRepository


_T = TypeVar("_T")


class PersistenceError(RuntimeError):
    """Raised when a message or notification could not be stored."""


class RealtimeStore(Protocol):
    """Durable storage for rows the gateway fans out."""

    async def insert_message(self, message: Message) -> Message:
        """Persist ``message`` and return it with its id and timestamp."""

    async def insert_notification(self, notification: Notification) -> Notification:
        """Persist ``notification`` and return it with its id and timestamp."""


class SqlAlchemyRealtimeStore:
    """:class:`RealtimeStore` backed by the synchronous repositories.

    Each insert runs in a worker thread with its own session so a slow database
    only suspends the event that is waiting on it. Inserts draw from a
    dedicated thread limiter, never from the default one held by sync routes
    waiting on a notification.
    """

    def __init__(
        self, session_factory: Callable[[], Session], *, max_threads: int = 8
    ) -> None:
        self._session_factory = session_factory
        self._max_threads = max_threads
        self._limiter: CapacityLimiter | None = None

    async def insert_message(self, message: Message) -> Message:
        return await self._run(self._insert_message, message)

    async def insert_notification(self, notification: Notification) -> Notification:
        return await self._run(self._insert_notification, notification)

    def _insert_message(self, message: Message) -> Message:
        with self._session_factory() as session:
            return MessageRepository(session).create(message)

    def _insert_notification(self, notification: Notification) -> Notification:
        with self._session_factory() as session:
            return NotificationRepository(session).create(notification)

    def _get_limiter(self) -> CapacityLimiter:
        # created lazily so it binds to the running event loop
        if self._limiter is None:
            self._limiter = CapacityLimiter(self._max_threads)
        return self._limiter

    async def _run(self, func: Callable[[_T], _T], row: _T) -> _T:
        try:
            return await to_thread.run_sync(func, row, limiter=self._get_limiter())
        except (SQLAlchemyError, ValueError) as exc:
            raise PersistenceError(str(exc)) from exc


__all__ = ["PersistenceError", "RealtimeStore", "SqlAlchemyRealtimeStore"]
