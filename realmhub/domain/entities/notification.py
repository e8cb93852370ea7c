"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotificationType(str, Enum):
    """Kinds of actions that notify a user."""

    FOLLOW = "follow"
    POST_LIKE = "post_like"
    POST_COMMENT = "post_comment"
    COMMENT_LIKE = "comment_like"
    COMMENT_REPLY = "comment_reply"
    REALM_JOIN = "realm_join"


class SourceType(str, Enum):
    """Entity kind a notification points at."""

    USER = "USER"
    POST = "POST"
    COMMENT = "COMMENT"
    REALM = "REALM"


SOURCE_TYPE_BY_NOTIFICATION_TYPE: dict[NotificationType, SourceType] = {
    NotificationType.FOLLOW: SourceType.USER,
    NotificationType.POST_LIKE: SourceType.POST,
    NotificationType.POST_COMMENT: SourceType.POST,
    NotificationType.COMMENT_LIKE: SourceType.COMMENT,
    NotificationType.COMMENT_REPLY: SourceType.COMMENT,
    NotificationType.REALM_JOIN: SourceType.REALM,
}

_REFERENCE_FIELD_BY_SOURCE_TYPE: dict[SourceType, str | None] = {
    SourceType.USER: None,
    SourceType.POST: "post_id",
    SourceType.COMMENT: "comment_id",
    SourceType.REALM: "realm_id",
}


@dataclass
class Notification:
    """Event telling ``recipient_id`` that ``actor_id`` acted on one of their resources."""

    id: int | None
    recipient_id: int
    actor_id: int
    type: NotificationType
    source_type: SourceType
    post_id: int | None = None
    comment_id: int | None = None
    realm_id: int | None = None
    is_read: bool = False
    created_at: datetime | None = None

    @classmethod
    def build(
        cls,
        notification_type: NotificationType,
        *,
        recipient_id: int,
        actor_id: int,
        post_id: int | None = None,
        comment_id: int | None = None,
        realm_id: int | None = None,
    ) -> "Notification":
        """Return an unsaved notification whose source kind follows ``notification_type``."""

        notification = cls(
            id=None,
            recipient_id=recipient_id,
            actor_id=actor_id,
            type=notification_type,
            source_type=SOURCE_TYPE_BY_NOTIFICATION_TYPE[notification_type],
            post_id=post_id,
            comment_id=comment_id,
            realm_id=realm_id,
        )
        notification.validate_references()
        return notification

    @property
    def reference_id(self) -> int | None:
        """Identifier of the referenced post, comment or realm, if any."""

        field_name = _REFERENCE_FIELD_BY_SOURCE_TYPE[self.source_type]
        return getattr(self, field_name) if field_name else None

    def validate_references(self) -> None:
        """Ensure ``source_type`` matches ``type`` and exactly its reference is populated."""

        required_source = SOURCE_TYPE_BY_NOTIFICATION_TYPE[self.type]
        if self.source_type is not required_source:
            msg = f"{self.type.value} notifications must have source type {required_source.value}"
            raise ValueError(msg)

        expected = _REFERENCE_FIELD_BY_SOURCE_TYPE[self.source_type]
        for field_name in ("post_id", "comment_id", "realm_id"):
            value = getattr(self, field_name)
            if field_name == expected and value is None:
                msg = f"{self.type.value} notifications require {field_name}"
                raise ValueError(msg)
            if field_name != expected and value is not None:
                msg = f"{self.type.value} notifications must not set {field_name}"
                raise ValueError(msg)


__all__ = [
    "Notification",
    "NotificationType",
    "SourceType",
    "SOURCE_TYPE_BY_NOTIFICATION_TYPE",
]
