"""Authentication API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_user_service
from api.schemas.user import LoginRequest, TokenResponse, UserResponse
from core.rate_limit import CREDENTIALS_LIMIT, READ_LIMIT, limiter
from domain.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "",
    response_model=UserResponse,
    summary="Get the authenticated user",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_me(
    request: Request,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Return the user the token belongs to."""
    current = await service.get_by_id(user.id)
    return UserResponse.model_validate(current)


@router.post(
    "",
    response_model=TokenResponse,
    summary="Log in",
    responses={
        200: {"description": "Credentials accepted, token issued"},
        400: {"description": "Invalid credentials"},
    },
)
@limiter.limit(CREDENTIALS_LIMIT)  # type: ignore[untyped-decorator]
async def login(
    request: Request,
    body: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Exchange email and password for a token."""
    token = await service.authenticate(email=str(body.email), password=str(body.password))
    return TokenResponse(token=token)
