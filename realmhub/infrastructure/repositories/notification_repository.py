"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from sqlalchemy.orm import Session

from realmhub.domain.entities import Notification, NotificationType, SourceType
from realmhub.infrastructure.models import NotificationModel
from realmhub.utils import ensure_utc, utc_now

from .user_repository import UserRepository


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: int,
        *,
        skip: int = 0,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
            .offset(skip)
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_unread(self, user_id: int) -> int:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_read.is_(False))
            .count()
        )

    def create(self, notification: Notification) -> Notification:
        notification.validate_references()
        participants = {notification.recipient_id, notification.actor_id}
        missing = participants - UserRepository(self.session).existing_ids(participants)
        if missing:
            msg = f"Unknown user id(s): {sorted(missing)}"
            raise ValueError(msg)

        model = NotificationModel(
            user_id=notification.recipient_id,
            actor_id=notification.actor_id,
            type=notification.type.value,
            source_type=notification.source_type.value,
            post_id=notification.post_id,
            comment_id=notification.comment_id,
            realm_id=notification.realm_id,
            is_read=notification.is_read,
            created_at=notification.created_at or utc_now(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_ids: Iterable[int], *, user_id: int) -> int:
        """Flag the given notifications of ``user_id`` as read and return how many changed."""

        ids = [notification_id for notification_id in notification_ids if notification_id is not None]
        if not ids:
            return 0
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(ids),
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.user_id,
            actor_id=model.actor_id,
            type=NotificationType(model.type),
            source_type=SourceType(model.source_type),
            post_id=model.post_id,
            comment_id=model.comment_id,
            realm_id=model.realm_id,
            is_read=model.is_read,
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["NotificationRepository"]
