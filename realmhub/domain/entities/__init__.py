"""Domain entities exposed by the application."""

from .comment import Comment
from .message import Message
from .notification import (
    SOURCE_TYPE_BY_NOTIFICATION_TYPE,
    Notification,
    NotificationType,
    SourceType,
)
from .post import Post
from .realm import Realm
from .user import User

__all__ = [
    "Comment",
    "Message",
    "Notification",
    "NotificationType",
    "SourceType",
    "SOURCE_TYPE_BY_NOTIFICATION_TYPE",
    "Post",
    "Realm",
    "User",
]
