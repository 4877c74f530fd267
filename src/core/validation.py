"""Declarative field rules for inbound payloads.

Request schemas attach these rules through Pydantic field validators. Each
rule raises a ``PydanticCustomError`` whose message is the exact text shown
to API clients, so a failed payload maps straight onto an ordered list of
``(field, message)`` violations.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """A single failed rule on a payload field."""

    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "msg": self.message}


def _rule_error(rule: str, message: str) -> PydanticCustomError:
    return PydanticCustomError(rule, message)


def require_non_empty(value: str | None, message: str) -> str:
    """Reject missing or blank strings."""
    if value is None or not value.strip():
        raise _rule_error("required", message)
    return value


def require_present(value: Any, message: str) -> Any:
    """Reject a missing value; empty strings are allowed."""
    if value is None:
        raise _rule_error("required", message)
    return value


def require_min_length(value: str | None, length: int, message: str) -> str:
    if value is None or len(value) < length:
        raise _rule_error("min_length", message)
    return value


def require_max_length(value: str, length: int, message: str) -> str:
    if len(value) > length:
        raise _rule_error("max_length", message)
    return value


def require_no_null_bytes(value: str, message: str) -> str:
    """Reject strings containing NUL, which bcrypt cannot hash."""
    if "\x00" in value:
        raise _rule_error("null_byte", message)
    return value


def require_email(value: str | None, message: str) -> str:
    """Reject values that are not email-shaped and return the normalized address."""
    if not value:
        raise _rule_error("email", message)
    try:
        result = validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise _rule_error("email", message) from None
    return result.normalized


def _field_name(loc: Sequence[int | str]) -> str:
    # Request errors are located as ("body", "<field>", ...)
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or "body"


def violations_from_errors(errors: Sequence[Mapping[str, Any]]) -> list[FieldViolation]:
    """Convert Pydantic error dicts into ordered field violations."""
    return [
        FieldViolation(field=_field_name(error.get("loc", ())), message=error["msg"])
        for error in errors
    ]


def collect_violations(
    schema: type[BaseModel], payload: Mapping[str, Any]
) -> list[FieldViolation]:
    """Run a schema's rules against a payload without raising.

    Returns an empty list when the payload is valid.
    """
    try:
        schema.model_validate(payload)
    except ValidationError as exc:
        return violations_from_errors(exc.errors())
    return []
