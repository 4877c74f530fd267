"""Pydantic schemas for Post API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.validation import require_non_empty

TEXT_REQUIRED = "Text is required"


class PostCreate(BaseModel):
    """Schema for creating a Post."""

    text: str | None = Field(None, validate_default=True)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str | None) -> str:
        return require_non_empty(v, TEXT_REQUIRED)


class CommentCreate(BaseModel):
    """Schema for commenting on a Post."""

    text: str | None = Field(None, validate_default=True)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str | None) -> str:
        return require_non_empty(v, TEXT_REQUIRED)


class LikeResponse(BaseModel):
    """Schema for a like."""

    model_config = ConfigDict(from_attributes=True)

    user_id: UUID


class CommentResponse(BaseModel):
    """Schema for a comment."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    text: str
    name: str
    avatar: str
    created_at: datetime


class PostResponse(BaseModel):
    """Schema for Post response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "456e4567-e89b-12d3-a456-426614174000",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "text": "hi",
                "name": "Ann",
                "avatar": "//www.gravatar.com/avatar/0c6e...?s=200&r=pg&d=mm",
                "likes": [],
                "comments": [],
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    user_id: UUID
    text: str
    name: str
    avatar: str
    likes: list[LikeResponse]
    comments: list[CommentResponse]
    created_at: datetime
