"""Realtime delivery of direct messages and notifications."""

from .connection import ConnectionSession, SessionState
from .events import InboundEventError, SendMessagePayload
from .gateway import RealtimeGateway
from .registry import ChannelRegistry
from .serializers import serialize_message, serialize_notification
from .store import PersistenceError, RealtimeStore, SqlAlchemyRealtimeStore

__all__ = [
    "ChannelRegistry",
    "ConnectionSession",
    "InboundEventError",
    "PersistenceError",
    "RealtimeGateway",
    "RealtimeStore",
    "SendMessagePayload",
    "SessionState",
    "SqlAlchemyRealtimeStore",
    "serialize_message",
    "serialize_notification",
]
