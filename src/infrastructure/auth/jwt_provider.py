"""JWT authentication provider implementation.

Tokens are HS256-signed and carry only the user identifier:
    {
        "user": { "id": "user-uuid" },
        "exp": 1234567890
    }
"""

import logging
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)


class JWTAuthProvider:
    """JWT-based authentication provider."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT token and extract the user identity.

        Args:
            token: The JWT to validate

        Returns:
            TokenUser if valid, None if tampered, expired or malformed
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as exc:
            logger.debug("Rejected token: %s", exc)
            return None

        user = payload.get("user")
        if not isinstance(user, dict) or not user.get("id"):
            return None

        try:
            return TokenUser(id=UUID(str(user["id"])))
        except ValueError:
            return None

    def create_token(self, user_id: UUID) -> str:
        """
        Create a signed JWT for a user.

        Args:
            user_id: The user the token identifies

        Returns:
            The generated JWT string
        """
        expire = datetime.utcnow() + timedelta(minutes=self._expire_minutes)

        payload: dict = {
            "user": {"id": str(user_id)},
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
