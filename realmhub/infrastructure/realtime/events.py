"""Wire-level event names and inbound payload schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# inbound
JOIN_ROOM = "joinRoom"
SUBSCRIBE_TO_NOTIFICATIONS = "subscribeToNotifications"
SEND_MESSAGE = "sendMessage"
PING = "ping"

# outbound
PONG = "pong"
RECEIVE_MESSAGE = "receiveMessage"
RECEIVE_NOTIFICATION = "receiveNotification"
ERROR = "error"


class InboundEventError(ValueError):
    """An inbound event was rejected; ``str(exc)`` is sent back to the client."""


class SendMessagePayload(BaseModel):
    """Body of a ``sendMessage`` event."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    sender_id: int = Field(alias="senderId", gt=0)
    receiver_id: int = Field(alias="receiverId", gt=0)
    content: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl", max_length=500)
    client_message_id: str | None = Field(default=None, alias="clientMessageId", max_length=128)


__all__ = [
    "JOIN_ROOM",
    "SUBSCRIBE_TO_NOTIFICATIONS",
    "SEND_MESSAGE",
    "PING",
    "PONG",
    "RECEIVE_MESSAGE",
    "RECEIVE_NOTIFICATION",
    "ERROR",
    "InboundEventError",
    "SendMessagePayload",
]
