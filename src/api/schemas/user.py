"""Pydantic schemas for User and Auth API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.validation import (
    require_email,
    require_max_length,
    require_min_length,
    require_no_null_bytes,
    require_non_empty,
    require_present,
)

INVALID_EMAIL = "Please include a valid email"

# Matches the width of users.name and posts.name
NAME_MAX_LENGTH = 100


class RegisterRequest(BaseModel):
    """Schema for registering a user."""

    name: str | None = Field(None, validate_default=True)
    email: str | None = Field(None, validate_default=True)
    password: str | None = Field(None, validate_default=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str:
        name = require_non_empty(v, "Name is required").strip()
        return require_max_length(
            name, NAME_MAX_LENGTH, f"Name must be {NAME_MAX_LENGTH} characters or fewer"
        )

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str:
        return require_email(v, INVALID_EMAIL)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str | None) -> str:
        password = require_min_length(v, 6, "Please enter a password with 6 or more characters")
        return require_no_null_bytes(password, "Password cannot contain null characters")


class LoginRequest(BaseModel):
    """Schema for logging in."""

    email: str | None = Field(None, validate_default=True)
    password: str | None = Field(None, validate_default=True)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str:
        return require_email(v, INVALID_EMAIL)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str | None) -> str:
        return str(require_present(v, "Password is required"))


class EmailUpdate(BaseModel):
    """Schema for changing a user's email."""

    email: str | None = Field(None, validate_default=True)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str:
        return require_email(v, INVALID_EMAIL)


class TokenResponse(BaseModel):
    """Signed token issued on registration or login."""

    token: str


class UserResponse(BaseModel):
    """Schema for User response. The password hash is never exposed."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Ann",
                "email": "a@x.com",
                "avatar": "//www.gravatar.com/avatar/0c6e...?s=200&r=pg&d=mm",
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    name: str
    email: str
    avatar: str
    created_at: datetime
