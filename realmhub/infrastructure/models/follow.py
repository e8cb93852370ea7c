"""SQLAlchemy model for follow relationships."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint

from realmhub.infrastructure.database import Base
from realmhub.utils import utc_now


class FollowModel(Base):
    """``follower_id`` follows ``following_id``."""

    __tablename__ = "follow"
    __table_args__ = (
        UniqueConstraint("follower_id", "following_id", name="uq_follow_follower_following"),
    )

    id = Column(Integer, primary_key=True)
    follower_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    following_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)


__all__ = ["FollowModel"]
