"""Serialize persisted rows into realtime event payloads."""

from __future__ import annotations

from typing import Any

from realmhub.domain.entities import Message, Notification
from realmhub.utils import isoformat_or_none


def serialize_message(message: Message) -> dict[str, Any]:
    """Return the ``receiveMessage`` payload representation for ``message``."""

    return {
        "id": message.id,
        "content": message.content,
        "imageUrl": message.image_url,
        "senderId": message.sender_id,
        "receiverId": message.receiver_id,
        "createdAt": isoformat_or_none(message.created_at),
    }


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the ``receiveNotification`` payload representation for ``notification``."""

    return {
        "id": notification.id,
        "userId": notification.recipient_id,
        "actorId": notification.actor_id,
        "type": notification.type.value,
        "sourceType": notification.source_type.value,
        "postId": notification.post_id,
        "commentId": notification.comment_id,
        "realmId": notification.realm_id,
        "isRead": notification.is_read,
        "createdAt": isoformat_or_none(notification.created_at),
    }


__all__ = ["serialize_message", "serialize_notification"]
