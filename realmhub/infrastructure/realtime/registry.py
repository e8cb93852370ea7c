"""In-process registry mapping channel names to live connections."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, DefaultDict

from .connection import ConnectionSession

logger = logging.getLogger(__name__)


class ChannelRegistry:
    """Track which sessions belong to which named channel.

    Members are kept in registration order. All mutation happens on the event
    loop thread, so no locking is needed.
    """

    def __init__(self) -> None:
        # dict keys double as an ordered set
        self._channels: dict[str, dict[ConnectionSession, None]] = {}
        self._memberships: DefaultDict[ConnectionSession, set[str]] = defaultdict(set)

    def join(self, connection: ConnectionSession, channel: str) -> bool:
        """Add ``connection`` to ``channel``; return ``False`` if it was already a member."""

        members = self._channels.setdefault(channel, {})
        if connection in members:
            return False
        members[connection] = None
        self._memberships[connection].add(channel)
        return True

    def leave_all(self, connection: ConnectionSession) -> set[str]:
        """Remove ``connection`` from every channel and return the channels it left."""

        channels = self._memberships.pop(connection, set())
        for channel in channels:
            members = self._channels.get(channel)
            if members is None:
                continue
            members.pop(connection, None)
            if not members:
                self._channels.pop(channel, None)
        return channels

    def members(self, channel: str) -> list[ConnectionSession]:
        return list(self._channels.get(channel, {}))

    def channels_of(self, connection: ConnectionSession) -> frozenset[str]:
        return frozenset(self._memberships.get(connection, ()))

    def channel_names(self) -> list[str]:
        return list(self._channels)

    async def publish(self, channel: str, event_type: str, payload: Any) -> int:
        """Deliver ``payload`` to every member of ``channel``.

        Returns the number of sessions that received the event. A channel without
        members is not an error. Members whose send fails are evicted from every
        channel and the remaining members are still served.
        """

        members = self.members(channel)
        if not members:
            logger.debug("No live members on channel %s; %s dropped", channel, event_type)
            return 0

        delivered = 0
        for connection in members:
            # membership may change while an earlier send is awaited
            if connection not in self._channels.get(channel, {}):
                continue
            try:
                await connection.send_event(event_type, payload)
            except Exception:
                logger.warning(
                    "Dropping session %s after failed %s delivery on %s",
                    connection.id,
                    event_type,
                    channel,
                    exc_info=True,
                )
                self.leave_all(connection)
                connection.mark_closed()
                continue
            delivered += 1
        return delivered


__all__ = ["ChannelRegistry"]
