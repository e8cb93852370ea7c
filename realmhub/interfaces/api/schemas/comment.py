"""Comment schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)
    parent_id: int | None = Field(default=None, ge=1)


class CommentRead(BaseModel):
    id: int
    post_id: int
    author_id: int
    content: str
    parent_id: int | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
