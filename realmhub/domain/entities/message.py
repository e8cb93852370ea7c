"""Domain entity representing a direct message."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Message:
    """Direct message sent from one user to another.

    Messages are append-only: they are created once by the realtime gateway and
    never updated afterwards.
    """

    id: int | None
    sender_id: int
    receiver_id: int
    content: str | None = None
    image_url: str | None = None
    created_at: datetime | None = None

    def is_empty(self) -> bool:
        """Return ``True`` when neither text nor an image is attached."""

        return not (self.content and self.content.strip()) and not self.image_url


__all__ = ["Message"]
