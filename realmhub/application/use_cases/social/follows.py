"""Use cases for following and unfollowing users."""

from sqlalchemy.orm import Session

from realmhub.application.use_cases.notifications import (
    NotificationProducer,
    notify_from_thread,
)
from realmhub.infrastructure.repositories import FollowRepository, UserRepository

from .errors import DuplicateActionError, InvalidActionError, ResourceNotFoundError


def follow_user(
    session: Session,
    *,
    follower_id: int,
    following_id: int,
    producer: NotificationProducer | None = None,
) -> None:
    """Make ``follower_id`` follow ``following_id`` and notify the followed user."""

    if follower_id == following_id:
        raise InvalidActionError("No puedes seguirte a ti mismo")
    if UserRepository(session).get(following_id) is None:
        raise ResourceNotFoundError("Usuario no encontrado")

    repository = FollowRepository(session)
    if repository.exists(follower_id, following_id):
        raise DuplicateActionError("Ya sigues a este usuario")
    repository.add(follower_id, following_id)

    if producer is not None:
        notify_from_thread(
            producer.create_user_follow_notification,
            recipient_id=following_id,
            actor_id=follower_id,
        )


def unfollow_user(session: Session, *, follower_id: int, following_id: int) -> None:
    if not FollowRepository(session).remove(follower_id, following_id):
        raise ResourceNotFoundError("No sigues a este usuario")
