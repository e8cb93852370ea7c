"""Persistence helpers for comments and comment likes."""

from __future__ import annotations

from sqlalchemy.orm import Session

from realmhub.domain.entities import Comment
from realmhub.infrastructure.models import CommentLikeModel, CommentModel
from realmhub.utils import ensure_utc


class CommentRepository:
    """Create comments and record likes on them."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, comment_id: int) -> Comment | None:
        model = self.session.get(CommentModel, comment_id)
        return self._to_entity(model) if model else None

    def create(self, comment: Comment) -> Comment:
        model = CommentModel(
            post_id=comment.post_id,
            author_id=comment.author_id,
            parent_id=comment.parent_id,
            content=comment.content,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def has_like(self, comment_id: int, user_id: int) -> bool:
        query = self.session.query(CommentLikeModel.id).filter(
            CommentLikeModel.comment_id == comment_id, CommentLikeModel.user_id == user_id
        )
        return query.first() is not None

    def add_like(self, comment_id: int, user_id: int) -> None:
        self.session.add(CommentLikeModel(comment_id=comment_id, user_id=user_id))
        self.session.commit()

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            post_id=model.post_id,
            author_id=model.author_id,
            content=model.content,
            parent_id=model.parent_id,
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["CommentRepository"]
