"""Domain entity representing a post."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Post:
    """Content published by a user."""

    id: int | None
    author_id: int
    title: str
    content: str
    created_at: datetime | None = None
