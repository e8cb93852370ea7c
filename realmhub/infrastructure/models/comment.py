"""SQLAlchemy models for comments and their likes."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text, UniqueConstraint

from realmhub.infrastructure.database import Base
from realmhub.utils import utc_now


class CommentModel(Base):
    """Database representation of a comment, possibly replying to another one."""

    __tablename__ = "comment"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("post.id", ondelete="CASCADE"), nullable=False, index=True)
    author_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    parent_id = Column(Integer, ForeignKey("comment.id", ondelete="CASCADE"), nullable=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)


class CommentLikeModel(Base):
    """A user liking a comment."""

    __tablename__ = "comment_like"
    __table_args__ = (
        UniqueConstraint("user_id", "comment_id", name="uq_comment_like_user_comment"),
    )

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    comment_id = Column(
        Integer, ForeignKey("comment.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)


__all__ = ["CommentModel", "CommentLikeModel"]
