"""SQLAlchemy models for realms and their memberships."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint

from realmhub.infrastructure.database import Base
from realmhub.utils import utc_now


class RealmModel(Base):
    """Database representation of a realm."""

    __tablename__ = "realm"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    creator_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)


class RealmMemberModel(Base):
    """Membership of a user in a realm."""

    __tablename__ = "realm_member"
    __table_args__ = (UniqueConstraint("user_id", "realm_id", name="uq_realm_member_user_realm"),)

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    realm_id = Column(Integer, ForeignKey("realm.id", ondelete="CASCADE"), nullable=False, index=True)
    joined_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)


__all__ = ["RealmModel", "RealmMemberModel"]
