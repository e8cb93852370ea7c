"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import or_
from sqlalchemy.orm import Session

from realmhub.domain.entities import User
from realmhub.infrastructure.models import UserModel
from realmhub.utils import ensure_utc


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_username(self, username: str) -> User | None:
        model = self.session.query(UserModel).filter(UserModel.username == username).first()
        return self._to_entity(model) if model else None

    def get_by_login(self, login: str) -> User | None:
        """Return the user whose username or email equals ``login``."""

        model = (
            self.session.query(UserModel)
            .filter(or_(UserModel.username == login, UserModel.email == login))
            .first()
        )
        return self._to_entity(model) if model else None

    def existing_ids(self, user_ids: Iterable[int]) -> set[int]:
        unique_ids = {int(user_id) for user_id in user_ids}
        if not unique_ids:
            return set()
        query = self.session.query(UserModel.id).filter(UserModel.id.in_(unique_ids))
        return {user_id for (user_id,) in query.all()}

    def is_taken(self, *, username: str, email: str) -> bool:
        query = self.session.query(UserModel.id).filter(
            or_(UserModel.username == username, UserModel.email == email)
        )
        return query.first() is not None

    def create(self, user: User) -> User:
        model = UserModel(
            username=user.username,
            email=user.email,
            password=user.password,
            bio=user.bio,
            is_active=user.is_active,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            email=model.email,
            password=model.password,
            bio=model.bio,
            is_active=model.is_active,
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["UserRepository"]
