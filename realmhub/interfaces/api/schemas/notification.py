"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from realmhub.domain.entities import NotificationType, SourceType


class NotificationMarkReadRequest(BaseModel):
    """Payload used to mark a batch of notifications as read."""

    ids: list[int] = Field(..., min_length=1, description="Identificadores de notificaciones")

    def unique_ids(self) -> list[int]:
        """Return the list of identifiers without duplicates preserving order."""

        return list(dict.fromkeys(self.ids))


class NotificationMarkReadResponse(BaseModel):
    updated: int


class UnreadCount(BaseModel):
    unread: int


class NotificationRead(BaseModel):
    """Representation of a stored notification."""

    id: int
    recipient_id: int
    actor_id: int
    type: NotificationType
    source_type: SourceType
    post_id: int | None = None
    comment_id: int | None = None
    realm_id: int | None = None
    is_read: bool
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "NotificationMarkReadRequest",
    "NotificationMarkReadResponse",
    "NotificationRead",
    "UnreadCount",
]
