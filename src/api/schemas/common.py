"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error_code: str
    msg: str
    details: Any | None = None


class FieldError(BaseModel):
    """One failed validation rule."""

    field: str
    msg: str


class ValidationErrorResponse(BaseModel):
    """Error response for payloads that failed validation."""

    error_code: str
    msg: str
    errors: list[FieldError]


class MessageResponse(BaseModel):
    """Simple message response."""

    msg: str
