"""Persistence helpers for realms and memberships."""

from __future__ import annotations

from sqlalchemy.orm import Session

from realmhub.domain.entities import Realm
from realmhub.infrastructure.models import RealmMemberModel, RealmModel
from realmhub.utils import ensure_utc


class RealmRepository:
    """Read realms and manage their members."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, realm_id: int) -> Realm | None:
        model = self.session.get(RealmModel, realm_id)
        return self._to_entity(model) if model else None

    def create(self, realm: Realm) -> Realm:
        model = RealmModel(
            name=realm.name,
            description=realm.description,
            creator_id=realm.creator_id,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def is_member(self, realm_id: int, user_id: int) -> bool:
        query = self.session.query(RealmMemberModel.id).filter(
            RealmMemberModel.realm_id == realm_id, RealmMemberModel.user_id == user_id
        )
        return query.first() is not None

    def add_member(self, realm_id: int, user_id: int) -> None:
        self.session.add(RealmMemberModel(realm_id=realm_id, user_id=user_id))
        self.session.commit()

    @staticmethod
    def _to_entity(model: RealmModel) -> Realm:
        return Realm(
            id=model.id,
            name=model.name,
            creator_id=model.creator_id,
            description=model.description,
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["RealmRepository"]
