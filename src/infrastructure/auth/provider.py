"""Authentication provider protocols."""

from dataclasses import dataclass
from typing import Optional, Protocol
from uuid import UUID


@dataclass
class TokenUser:
    """Represents a user extracted from an auth token."""

    id: UUID


class IAuthProvider(Protocol):
    """Protocol for token issuing/validating providers."""

    def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate an authentication token.

        Args:
            token: The bearer token to validate

        Returns:
            TokenUser if valid, None if invalid
        """
        ...

    def create_token(self, user_id: UUID) -> str:
        """
        Create an authentication token for a user.

        Args:
            user_id: The user the token identifies

        Returns:
            The generated token string
        """
        ...


class IPasswordHasher(Protocol):
    """Protocol for one-way password hashing."""

    def hash(self, password: str) -> str:
        """Hash a plain-text password."""
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plain-text password against a stored hash."""
        ...
