"""Typed notification creation for business actions."""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Awaitable, Callable

from anyio import from_thread

from realmhub.domain.entities import Notification, NotificationType
from realmhub.infrastructure.realtime import PersistenceError, RealtimeGateway

logger = logging.getLogger(__name__)


class NotificationProducer:
    """Persist and fan out notifications through an injected gateway.

    Each ``create_*`` coroutine is a thin wrapper choosing the notification type
    and the reference that type requires.
    """

    def __init__(self, gateway: RealtimeGateway) -> None:
        self._gateway = gateway

    async def create_user_follow_notification(
        self, recipient_id: int, actor_id: int
    ) -> Notification:
        return await self._create(
            NotificationType.FOLLOW, recipient_id=recipient_id, actor_id=actor_id
        )

    async def create_post_like_notification(
        self, recipient_id: int, actor_id: int, post_id: int
    ) -> Notification:
        return await self._create(
            NotificationType.POST_LIKE,
            recipient_id=recipient_id,
            actor_id=actor_id,
            post_id=post_id,
        )

    async def create_post_comment_notification(
        self, recipient_id: int, actor_id: int, post_id: int
    ) -> Notification:
        return await self._create(
            NotificationType.POST_COMMENT,
            recipient_id=recipient_id,
            actor_id=actor_id,
            post_id=post_id,
        )

    async def create_comment_like_notification(
        self, recipient_id: int, actor_id: int, comment_id: int
    ) -> Notification:
        return await self._create(
            NotificationType.COMMENT_LIKE,
            recipient_id=recipient_id,
            actor_id=actor_id,
            comment_id=comment_id,
        )

    async def create_comment_reply_notification(
        self, recipient_id: int, actor_id: int, comment_id: int
    ) -> Notification:
        return await self._create(
            NotificationType.COMMENT_REPLY,
            recipient_id=recipient_id,
            actor_id=actor_id,
            comment_id=comment_id,
        )

    async def create_realm_join_notification(
        self, recipient_id: int, actor_id: int, realm_id: int
    ) -> Notification:
        return await self._create(
            NotificationType.REALM_JOIN,
            recipient_id=recipient_id,
            actor_id=actor_id,
            realm_id=realm_id,
        )

    async def _create(self, notification_type: NotificationType, **fields: Any) -> Notification:
        notification = Notification.build(notification_type, **fields)
        return await self._gateway.create_notification(notification)


def notify_from_thread(
    create: Callable[..., Awaitable[Notification]], **kwargs: Any
) -> Notification | None:
    """Run a producer coroutine on the event loop from a worker thread.

    A failed notification never undoes the action that triggered it: store
    errors are logged and ``None`` is returned.
    """

    try:
        return from_thread.run(partial(create, **kwargs))
    except PersistenceError:
        logger.warning(
            "Could not create notification via %s (%s)",
            getattr(create, "__name__", create),
            kwargs,
            exc_info=True,
        )
        return None


__all__ = ["NotificationProducer", "notify_from_thread"]
