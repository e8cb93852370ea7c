"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=8)
    bio: str | None = Field(default=None, max_length=500)


class UserRead(BaseModel):
    id: int
    username: str
    email: EmailStr
    bio: str | None
    is_active: bool
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
