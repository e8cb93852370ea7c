"""Aggregate application use cases."""

from .social import (
    comment_on_post,
    follow_user,
    join_realm,
    like_comment,
    like_post,
    unfollow_user,
)
from .users import authenticate_user, create_user

__all__ = [
    "authenticate_user",
    "comment_on_post",
    "create_user",
    "follow_user",
    "join_realm",
    "like_comment",
    "like_post",
    "unfollow_user",
]
