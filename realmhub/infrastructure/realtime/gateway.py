"""Realtime gateway: channel binding, persistence and fan-out."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any, Awaitable, Callable, Coroutine

from fastapi import WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from realmhub.config import Settings
from realmhub.domain.entities import Message, Notification

from . import events
from .connection import ConnectionSession
from .events import InboundEventError, SendMessagePayload
from .registry import ChannelRegistry
from .serializers import serialize_message, serialize_notification
from .store import PersistenceError, RealtimeStore

logger = logging.getLogger(__name__)

_EventHandler = Callable[[ConnectionSession, Any], Awaitable[None]]


class RealtimeGateway:
    """Accept realtime sessions and deliver messages and notifications to them.

    Rows are always written through ``store`` before anything is published, so
    a client never observes an event that is not durable. Delivery itself is
    best-effort: nobody listening on a channel is not an error.
    """

    def __init__(
        self,
        store: RealtimeStore,
        *,
        registry: ChannelRegistry | None = None,
        require_auth: bool = True,
        notification_channel_prefix: str = "notifications_",
        dedup_window_seconds: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.store = store
        self.registry = registry or ChannelRegistry()
        self.require_auth = require_auth
        self.notification_channel_prefix = notification_channel_prefix
        self.dedup_window_seconds = dedup_window_seconds
        self._clock = clock
        self._sessions: dict[str, ConnectionSession] = {}
        self._recent_client_ids: dict[tuple[int, str], float] = {}
        self._pending_deliveries: set[asyncio.Task[int]] = set()
        self._handlers: dict[str, _EventHandler] = {
            events.JOIN_ROOM: self.join_delivery_channel,
            events.SUBSCRIBE_TO_NOTIFICATIONS: self.join_notification_channel,
            events.SEND_MESSAGE: self._handle_send_message,
            events.PING: self._handle_ping,
        }

    @classmethod
    def from_settings(cls, settings: Settings, store: RealtimeStore) -> "RealtimeGateway":
        return cls(
            store,
            require_auth=settings.realtime_require_auth,
            notification_channel_prefix=settings.notification_channel_prefix,
            dedup_window_seconds=settings.message_dedup_window_seconds,
        )

    # ------------------------------------------------------------------ channels

    def delivery_channel(self, user_id: int) -> str:
        """Name of the channel carrying direct messages addressed to ``user_id``."""

        return str(user_id)

    def notification_channel(self, user_id: int) -> str:
        """Name of the channel carrying notifications for ``user_id``."""

        return f"{self.notification_channel_prefix}{user_id}"

    # ----------------------------------------------------------------- lifecycle

    @property
    def sessions(self) -> list[ConnectionSession]:
        return list(self._sessions.values())

    async def connect(self, websocket: WebSocket, *, user_id: int | None = None) -> ConnectionSession:
        """Accept ``websocket`` and register it as a new session."""

        session = ConnectionSession(websocket, user_id=user_id)
        await session.accept()
        self._sessions[session.id] = session
        logger.info("Realtime session %s connected (user=%s)", session.id, user_id)
        return session

    def disconnect(self, session: ConnectionSession) -> None:
        """Forget ``session`` and every channel membership it held."""

        channels = self.registry.leave_all(session)
        session.mark_closed()
        if self._sessions.pop(session.id, None) is not None:
            logger.info(
                "Realtime session %s disconnected (left %d channel(s))", session.id, len(channels)
            )

    async def serve(self, session: ConnectionSession) -> None:
        """Process inbound frames of ``session`` in order until the client leaves."""

        try:
            while True:
                raw = await session.receive_frame()
                if raw is None:
                    await self._send_error(session, "Malformed event: expected text")
                    continue
                try:
                    await self.handle_frame(session, raw)
                except WebSocketDisconnect:
                    raise
                except Exception:
                    logger.exception("Unexpected error handling a frame from session %s", session.id)
                    await self._send_error(session, "Internal error")
        except WebSocketDisconnect:
            pass
        finally:
            self.disconnect(session)

    async def shutdown(self) -> None:
        """Flush scheduled deliveries and close every open session."""

        await self.wait_for_deliveries()
        for session in self.sessions:
            try:
                await session.close(code=1001)
            except RuntimeError:
                logger.debug("Session %s was already closed", session.id)
            self.disconnect(session)

    # ------------------------------------------------------------------ dispatch

    async def handle_frame(self, session: ConnectionSession, raw: str) -> None:
        """Decode one ``{"type", "data"}`` frame and dispatch it."""

        try:
            frame = json.loads(raw)
        except ValueError:
            await self._send_error(session, "Malformed event: expected JSON")
            return
        if not isinstance(frame, dict) or not isinstance(frame.get("type"), str):
            await self._send_error(session, "Malformed event: missing type")
            return
        await self.handle_event(session, frame["type"], frame.get("data"))

    async def handle_event(self, session: ConnectionSession, event_type: str, data: Any) -> None:
        handler = self._handlers.get(event_type)
        if handler is None:
            await self._send_error(session, f"Unknown event type '{event_type}'")
            return
        try:
            await handler(session, data)
        except InboundEventError as exc:
            logger.info("Rejected %s from session %s: %s", event_type, session.id, exc)
            await self._send_error(session, str(exc))

    async def join_delivery_channel(self, session: ConnectionSession, user_id: Any) -> None:
        """Subscribe ``session`` to direct messages addressed to ``user_id``."""

        resolved = self._resolve_identity(session, user_id)
        channel = self.delivery_channel(resolved)
        if self.registry.join(session, channel):
            logger.info("User %s joined room %s (session %s)", resolved, channel, session.id)

    async def join_notification_channel(self, session: ConnectionSession, user_id: Any) -> None:
        """Subscribe ``session`` to notifications of ``user_id``."""

        resolved = self._resolve_identity(session, user_id)
        channel = self.notification_channel(resolved)
        if self.registry.join(session, channel):
            logger.info("User %s subscribed to notifications (session %s)", resolved, session.id)

    async def _handle_ping(self, session: ConnectionSession, data: Any) -> None:
        await session.send_event(events.PONG)

    async def _handle_send_message(self, session: ConnectionSession, data: Any) -> None:
        await self.send_message(session, data)

    # ------------------------------------------------------------------ messages

    async def send_message(self, session: ConnectionSession, data: Any) -> Message | None:
        """Persist a direct message and publish it to the receiver's channel.

        Returns the stored message, or ``None`` when nothing was stored (the
        payload was rejected, the store failed, or the send repeats a recent
        ``clientMessageId``). Rejections raise :class:`InboundEventError`; store
        failures are reported to ``session`` only.
        """

        payload = self._parse_send_message(data)
        self._resolve_identity(session, payload.sender_id)

        message = Message(
            id=None,
            sender_id=payload.sender_id,
            receiver_id=payload.receiver_id,
            content=payload.content or None,
            image_url=payload.image_url or None,
        )
        if message.is_empty():
            raise InboundEventError("Message must include content or an image")

        dedup_key = None
        if payload.client_message_id:
            dedup_key = (payload.sender_id, payload.client_message_id)
            if not self._claim_client_message_id(dedup_key):
                logger.debug(
                    "Ignoring repeated clientMessageId %s from user %s", dedup_key[1], dedup_key[0]
                )
                return None

        try:
            saved = await self.store.insert_message(message)
        except PersistenceError:
            logger.error(
                "Error saving message from %s to %s",
                message.sender_id,
                message.receiver_id,
                exc_info=True,
            )
            if dedup_key is not None:
                self._recent_client_ids.pop(dedup_key, None)
            await self._send_error(session, "Failed to send message")
            return None
        except Exception:
            if dedup_key is not None:
                self._recent_client_ids.pop(dedup_key, None)
            raise

        await self.registry.publish(
            self.delivery_channel(saved.receiver_id),
            events.RECEIVE_MESSAGE,
            serialize_message(saved),
        )
        return saved

    def _parse_send_message(self, data: Any) -> SendMessagePayload:
        if not isinstance(data, dict):
            raise InboundEventError("Invalid message payload")
        if data.get("senderId") in (None, "") or data.get("receiverId") in (None, ""):
            raise InboundEventError("senderId and receiverId are required")
        try:
            return SendMessagePayload.model_validate(data)
        except ValidationError as exc:
            raise InboundEventError("Invalid message payload") from exc

    def _claim_client_message_id(self, key: tuple[int, str]) -> bool:
        if self.dedup_window_seconds <= 0:
            return True
        now = self._clock()
        expired = [item for item, expires_at in self._recent_client_ids.items() if expires_at <= now]
        for item in expired:
            del self._recent_client_ids[item]
        if key in self._recent_client_ids:
            return False
        self._recent_client_ids[key] = now + self.dedup_window_seconds
        return True

    # ------------------------------------------------------------- notifications

    async def create_notification(self, notification: Notification) -> Notification:
        """Persist ``notification`` and schedule its fan-out.

        Persistence errors propagate to the caller. Delivery runs as a
        background task so the caller never waits on, or fails because of, the
        recipient's connections.
        """

        notification.validate_references()
        saved = await self.store.insert_notification(notification)
        self._schedule(self.publish_notification(saved))
        return saved

    async def publish_notification(self, notification: Notification) -> int:
        return await self.registry.publish(
            self.notification_channel(notification.recipient_id),
            events.RECEIVE_NOTIFICATION,
            serialize_notification(notification),
        )

    async def wait_for_deliveries(self) -> None:
        """Wait until every scheduled notification delivery has finished."""

        while self._pending_deliveries:
            await asyncio.gather(*list(self._pending_deliveries), return_exceptions=True)

    def _schedule(self, coroutine: Coroutine[Any, Any, int]) -> None:
        task = asyncio.get_running_loop().create_task(coroutine)
        self._pending_deliveries.add(task)
        task.add_done_callback(self._pending_deliveries.discard)

    # ------------------------------------------------------------------- helpers

    def _resolve_identity(self, session: ConnectionSession, claimed: Any) -> int:
        """Return the user id ``session`` may act as for ``claimed``.

        Authenticated sessions are bound to their own user. Anonymous sessions
        are only allowed when authentication is not required, in which case the
        client supplied identity is trusted.
        """

        if claimed is None or claimed == "":
            if session.user_id is None:
                raise InboundEventError("A user id is required")
            return session.user_id

        if isinstance(claimed, bool) or (isinstance(claimed, float) and not claimed.is_integer()):
            raise InboundEventError("Invalid user id")
        try:
            user_id = int(claimed)
        except (TypeError, ValueError) as exc:
            raise InboundEventError("Invalid user id") from exc

        if session.user_id is None:
            if self.require_auth:
                raise InboundEventError("Authentication required")
            return user_id
        if user_id != session.user_id:
            raise InboundEventError("Cannot act on behalf of another user")
        return user_id

    async def _send_error(self, session: ConnectionSession, reason: str) -> None:
        await session.send_event(events.ERROR, reason)


__all__ = ["RealtimeGateway"]
