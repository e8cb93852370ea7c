"""Social interactions that emit notifications."""

from .comments import like_comment
from .errors import DuplicateActionError, InvalidActionError, ResourceNotFoundError
from .follows import follow_user, unfollow_user
from .posts import comment_on_post, like_post
from .realms import join_realm

__all__ = [
    "DuplicateActionError",
    "InvalidActionError",
    "ResourceNotFoundError",
    "comment_on_post",
    "follow_user",
    "join_realm",
    "like_comment",
    "like_post",
    "unfollow_user",
]
