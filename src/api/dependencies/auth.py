"""Authentication dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer

from core.exceptions import AuthenticationError, ErrorCode
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser

TOKEN_HEADER = "x-auth-token"

# Security schemes for OpenAPI docs
token_header = APIKeyHeader(name=TOKEN_HEADER, auto_error=False)
bearer = HTTPBearer(auto_error=False)

# Singleton auth provider
_auth_provider: JWTAuthProvider | None = None


def get_auth_provider() -> JWTAuthProvider:
    """Get or create the auth provider singleton."""
    global _auth_provider
    if _auth_provider is None:
        _auth_provider = JWTAuthProvider()
    return _auth_provider


def extract_token(
    header_token: Annotated[str | None, Depends(token_header)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer)],
) -> str | None:
    """Read the token from ``x-auth-token``, falling back to ``Authorization: Bearer``."""
    if header_token:
        return header_token
    if credentials:
        return credentials.credentials
    return None


async def get_current_user(
    token: Annotated[str | None, Depends(extract_token)],
    auth_provider: JWTAuthProvider = Depends(get_auth_provider),
) -> TokenUser:
    """
    Dependency to get the current authenticated user.

    Raises:
        AuthenticationError: If no token provided or token is invalid
    """
    if not token:
        raise AuthenticationError(
            message="No token, authorization denied",
            error_code=ErrorCode.UNAUTHORIZED,
        )

    user = auth_provider.validate_token(token)

    if not user:
        raise AuthenticationError(
            message="Token is not valid",
            error_code=ErrorCode.INVALID_TOKEN,
        )

    return user


# Type alias for convenience in route handlers
CurrentUser = Annotated[TokenUser, Depends(get_current_user)]
