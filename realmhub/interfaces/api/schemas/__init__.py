from .auth import Token
from .comment import CommentCreate, CommentRead
from .message import MessageRead
from .notification import (
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
    NotificationRead,
    UnreadCount,
)
from .user import UserCreate, UserRead

__all__ = [
    "CommentCreate",
    "CommentRead",
    "MessageRead",
    "NotificationMarkReadRequest",
    "NotificationMarkReadResponse",
    "NotificationRead",
    "Token",
    "UnreadCount",
    "UserCreate",
    "UserRead",
]
