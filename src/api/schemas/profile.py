"""Pydantic schemas for Profile API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class ProfileOwner(BaseModel):
    """The profile owner's display fields."""

    id: UUID
    name: str
    avatar: str


class ProfileResponse(BaseModel):
    """Schema for Profile response, populated with its owner."""

    id: UUID
    user: ProfileOwner
    status: str
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    skills: list[str]
    created_at: datetime
