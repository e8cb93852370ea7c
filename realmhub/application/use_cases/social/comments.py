"""Use cases for interacting with comments."""

from sqlalchemy.orm import Session

from realmhub.application.use_cases.notifications import (
    NotificationProducer,
    notify_from_thread,
)
from realmhub.infrastructure.repositories import CommentRepository

from .errors import DuplicateActionError, ResourceNotFoundError


def like_comment(
    session: Session,
    *,
    comment_id: int,
    user_id: int,
    producer: NotificationProducer | None = None,
) -> None:
    """Record a like on ``comment_id`` and notify its author."""

    repository = CommentRepository(session)
    comment = repository.get(comment_id)
    if comment is None:
        raise ResourceNotFoundError("Comentario no encontrado")
    if repository.has_like(comment_id, user_id):
        raise DuplicateActionError("Ya te gusta este comentario")
    repository.add_like(comment_id, user_id)

    if producer is not None and comment.author_id != user_id:
        notify_from_thread(
            producer.create_comment_like_notification,
            recipient_id=comment.author_id,
            actor_id=user_id,
            comment_id=comment.id,
        )
