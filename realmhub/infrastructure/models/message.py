"""SQLAlchemy model for persisted direct messages."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text

from realmhub.infrastructure.database import Base
from realmhub.utils import utc_now


class MessageModel(Base):
    """Database representation for direct messages."""

    __tablename__ = "message"
    __table_args__ = (Index("ix_message_sender_receiver", "sender_id", "receiver_id"),)

    id = Column(Integer, primary_key=True, index=True)
    content = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    sender_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    receiver_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)


__all__ = ["MessageModel"]
