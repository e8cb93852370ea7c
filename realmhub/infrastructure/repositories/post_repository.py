"""Persistence helpers for posts and post likes."""

from __future__ import annotations

from sqlalchemy.orm import Session

from realmhub.domain.entities import Post
from realmhub.infrastructure.models import PostLikeModel, PostModel
from realmhub.utils import ensure_utc


class PostRepository:
    """Read posts and record likes on them."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, post_id: int) -> Post | None:
        model = self.session.get(PostModel, post_id)
        return self._to_entity(model) if model else None

    def create(self, post: Post) -> Post:
        model = PostModel(author_id=post.author_id, title=post.title, content=post.content)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def has_like(self, post_id: int, user_id: int) -> bool:
        query = self.session.query(PostLikeModel.id).filter(
            PostLikeModel.post_id == post_id, PostLikeModel.user_id == user_id
        )
        return query.first() is not None

    def add_like(self, post_id: int, user_id: int) -> None:
        self.session.add(PostLikeModel(post_id=post_id, user_id=user_id))
        self.session.commit()

    @staticmethod
    def _to_entity(model: PostModel) -> Post:
        return Post(
            id=model.id,
            author_id=model.author_id,
            title=model.title,
            content=model.content,
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["PostRepository"]
