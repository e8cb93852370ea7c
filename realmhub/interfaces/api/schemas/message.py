"""Direct message schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class MessageRead(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    content: str | None = None
    image_url: str | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
