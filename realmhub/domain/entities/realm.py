"""Domain entity representing a realm (community)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Realm:
    """A community users can join."""

    id: int | None
    name: str
    creator_id: int
    description: str | None = None
    created_at: datetime | None = None
