"""Use cases for realm membership."""

from sqlalchemy.orm import Session

from realmhub.application.use_cases.notifications import (
    NotificationProducer,
    notify_from_thread,
)
from realmhub.infrastructure.repositories import RealmRepository

from .errors import DuplicateActionError, ResourceNotFoundError


def join_realm(
    session: Session,
    *,
    realm_id: int,
    user_id: int,
    producer: NotificationProducer | None = None,
) -> None:
    """Add ``user_id`` to the realm and notify the realm creator."""

    repository = RealmRepository(session)
    realm = repository.get(realm_id)
    if realm is None:
        raise ResourceNotFoundError("Reino no encontrado")
    if repository.is_member(realm_id, user_id):
        raise DuplicateActionError("Ya eres miembro de este reino")
    repository.add_member(realm_id, user_id)

    if producer is not None and realm.creator_id != user_id:
        notify_from_thread(
            producer.create_realm_join_notification,
            recipient_id=realm.creator_id,
            actor_id=user_id,
            realm_id=realm.id,
        )
