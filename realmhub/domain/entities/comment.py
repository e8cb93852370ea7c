"""Domain entity representing a comment on a post."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Comment:
    """A comment left on a post, optionally replying to another comment."""

    id: int | None
    post_id: int
    author_id: int
    content: str
    parent_id: int | None = None
    created_at: datetime | None = None

    def is_reply(self) -> bool:
        """Return ``True`` when the comment answers another comment."""

        return self.parent_id is not None
