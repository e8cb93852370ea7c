"""Persistence helpers for follow relationships."""

from __future__ import annotations

from sqlalchemy.orm import Session

from realmhub.infrastructure.models import FollowModel


class FollowRepository:
    """Create and remove follow edges between users."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, follower_id: int, following_id: int) -> bool:
        return self._get_model(follower_id, following_id) is not None

    def add(self, follower_id: int, following_id: int) -> None:
        self.session.add(FollowModel(follower_id=follower_id, following_id=following_id))
        self.session.commit()

    def remove(self, follower_id: int, following_id: int) -> bool:
        model = self._get_model(follower_id, following_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    def _get_model(self, follower_id: int, following_id: int) -> FollowModel | None:
        return (
            self.session.query(FollowModel)
            .filter(FollowModel.follower_id == follower_id)
            .filter(FollowModel.following_id == following_id)
            .first()
        )


__all__ = ["FollowRepository"]
