"""Connection session wrapper around a websocket."""

from __future__ import annotations

from enum import Enum
from typing import Any
from uuid import uuid4

from fastapi import WebSocket, WebSocketDisconnect


class SessionState(str, Enum):
    """Lifecycle of a realtime connection."""

    CONNECTING = "connecting"
    CONNECTED = "connected"
    CLOSED = "closed"


class ConnectionSession:
    """One physical websocket connection from one client.

    A session may be bound to the user that authenticated the handshake. The
    same user can hold several sessions at once (tabs, devices); each one joins
    channels independently.
    """

    def __init__(self, websocket: WebSocket, *, user_id: int | None = None) -> None:
        self.id = uuid4().hex
        self.websocket = websocket
        self.user_id = user_id
        self.state = SessionState.CONNECTING

    def __repr__(self) -> str:
        return f"ConnectionSession(id={self.id!r}, user_id={self.user_id!r}, state={self.state.value})"

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def is_open(self) -> bool:
        return self.state is SessionState.CONNECTED

    async def accept(self) -> None:
        """Complete the websocket handshake."""

        await self.websocket.accept()
        self.state = SessionState.CONNECTED

    async def receive_frame(self) -> str | None:
        """Return the next text frame, or ``None`` when the client sent binary data.

        Raises :class:`WebSocketDisconnect` once the client has gone away.
        """

        message = await self.websocket.receive()
        if message["type"] == "websocket.disconnect":
            raise WebSocketDisconnect(message.get("code", 1000), message.get("reason"))
        return message.get("text")

    async def send_event(self, event_type: str, data: Any = None) -> None:
        """Send a ``{"type", "data"}`` frame to the client."""

        if not self.is_open:
            msg = f"Session {self.id} is {self.state.value}"
            raise RuntimeError(msg)
        await self.websocket.send_json({"type": event_type, "data": data})

    async def close(self, code: int = 1000) -> None:
        if self.is_open:
            self.state = SessionState.CLOSED
            await self.websocket.close(code=code)

    def mark_closed(self) -> None:
        self.state = SessionState.CLOSED


__all__ = ["ConnectionSession", "SessionState"]
