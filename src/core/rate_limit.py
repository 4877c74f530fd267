"""Rate limiting with slowapi, keyed by client address."""

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from core.config import settings
from core.exceptions import ErrorCode

# Per-route budgets
READ_LIMIT = "30/minute"
WRITE_LIMIT = "10/minute"
CREDENTIALS_LIMIT = "5/minute"

RETRY_AFTER_SECONDS = 60

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
)


async def rate_limit_exceeded_handler(request: Request, exc: Exception) -> JSONResponse:
    """Reject the request in the shared error shape and tell the client when to retry."""
    limit = exc.detail if isinstance(exc, RateLimitExceeded) else str(exc)
    return JSONResponse(
        status_code=429,
        content={
            "error_code": ErrorCode.RATE_LIMIT_EXCEEDED.value,
            "msg": "Too many requests, please try again later",
            "details": {"limit": str(limit)},
        },
        headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
    )
