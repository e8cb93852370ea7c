"""Repository implementations for infrastructure layer."""

from .comment_repository import CommentRepository
from .follow_repository import FollowRepository
from .message_repository import MessageRepository
from .notification_repository import NotificationRepository
from .post_repository import PostRepository
from .realm_repository import RealmRepository
from .user_repository import UserRepository

__all__ = [
    "CommentRepository",
    "FollowRepository",
    "MessageRepository",
    "NotificationRepository",
    "PostRepository",
    "RealmRepository",
    "UserRepository",
]
