"""Use cases for interacting with posts."""

from sqlalchemy.orm import Session

from realmhub.application.use_cases.notifications import (
    NotificationProducer,
    notify_from_thread,
)
from realmhub.domain.entities import Comment
from realmhub.infrastructure.repositories import CommentRepository, PostRepository

from .errors import DuplicateActionError, InvalidActionError, ResourceNotFoundError


def like_post(
    session: Session,
    *,
    post_id: int,
    user_id: int,
    producer: NotificationProducer | None = None,
) -> None:
    """Record a like on ``post_id`` and notify its author."""

    repository = PostRepository(session)
    post = repository.get(post_id)
    if post is None:
        raise ResourceNotFoundError("Publicación no encontrada")
    if repository.has_like(post_id, user_id):
        raise DuplicateActionError("Ya te gusta esta publicación")
    repository.add_like(post_id, user_id)

    if producer is not None and post.author_id != user_id:
        notify_from_thread(
            producer.create_post_like_notification,
            recipient_id=post.author_id,
            actor_id=user_id,
            post_id=post.id,
        )


def comment_on_post(
    session: Session,
    *,
    post_id: int,
    author_id: int,
    content: str,
    parent_id: int | None = None,
    producer: NotificationProducer | None = None,
) -> Comment:
    """Create a comment, or a reply when ``parent_id`` is given.

    A top level comment notifies the post author; a reply notifies the author
    of the parent comment and references that parent.
    """

    post = PostRepository(session).get(post_id)
    if post is None:
        raise ResourceNotFoundError("Publicación no encontrada")

    comments = CommentRepository(session)
    parent = None
    if parent_id is not None:
        parent = comments.get(parent_id)
        if parent is None:
            raise ResourceNotFoundError("Comentario no encontrado")
        if parent.post_id != post_id:
            raise InvalidActionError("El comentario no pertenece a esta publicación")

    comment = comments.create(
        Comment(
            id=None,
            post_id=post_id,
            author_id=author_id,
            content=content,
            parent_id=parent_id,
        )
    )

    if producer is None:
        return comment
    if parent is not None:
        if parent.author_id != author_id:
            notify_from_thread(
                producer.create_comment_reply_notification,
                recipient_id=parent.author_id,
                actor_id=author_id,
                comment_id=parent.id,
            )
    elif post.author_id != author_id:
        notify_from_thread(
            producer.create_post_comment_notification,
            recipient_id=post.author_id,
            actor_id=author_id,
            post_id=post.id,
        )
    return comment
