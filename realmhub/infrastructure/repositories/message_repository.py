"""Persistence helpers for direct messages."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from realmhub.domain.entities import Message
from realmhub.infrastructure.models import MessageModel
from realmhub.utils import ensure_utc, utc_now

from .user_repository import UserRepository


class MessageRepository:
    """Store and read :class:`Message` rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, message: Message) -> Message:
        participants = {message.sender_id, message.receiver_id}
        missing = participants - UserRepository(self.session).existing_ids(participants)
        if missing:
            msg = f"Unknown user id(s): {sorted(missing)}"
            raise ValueError(msg)

        model = MessageModel(
            content=message.content,
            image_url=message.image_url,
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
            created_at=message.created_at or utc_now(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_conversation(
        self,
        user_id: int,
        other_user_id: int,
        *,
        skip: int = 0,
        limit: int = 50,
    ) -> Sequence[Message]:
        """Return messages exchanged between both users, newest first."""

        query = (
            self.session.query(MessageModel)
            .filter(
                or_(
                    and_(
                        MessageModel.sender_id == user_id,
                        MessageModel.receiver_id == other_user_id,
                    ),
                    and_(
                        MessageModel.sender_id == other_user_id,
                        MessageModel.receiver_id == user_id,
                    ),
                )
            )
            .order_by(MessageModel.created_at.desc(), MessageModel.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            sender_id=model.sender_id,
            receiver_id=model.receiver_id,
            content=model.content,
            image_url=model.image_url,
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["MessageRepository"]
