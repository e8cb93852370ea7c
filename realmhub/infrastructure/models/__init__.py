"""ORM models used by the application infrastructure."""

from .comment import CommentLikeModel, CommentModel
from .follow import FollowModel
from .message import MessageModel
from .notification import NotificationModel
from .post import PostLikeModel, PostModel
from .realm import RealmMemberModel, RealmModel
from .user import UserModel

__all__ = [
    "CommentLikeModel",
    "CommentModel",
    "FollowModel",
    "MessageModel",
    "NotificationModel",
    "PostLikeModel",
    "PostModel",
    "RealmMemberModel",
    "RealmModel",
    "UserModel",
]
