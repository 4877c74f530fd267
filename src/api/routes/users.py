"""User API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_user_service
from api.schemas.common import MessageResponse
from api.schemas.user import EmailUpdate, RegisterRequest, TokenResponse, UserResponse
from core.exceptions import UserNotFoundError
from core.rate_limit import CREDENTIALS_LIMIT, READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def _parse_user_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError:
        raise UserNotFoundError(raw) from None


@router.post(
    "",
    response_model=TokenResponse,
    summary="Register a user",
    responses={
        200: {"description": "User registered, token issued"},
        400: {"description": "Validation failed or user already exists"},
    },
)
@limiter.limit(CREDENTIALS_LIMIT)  # type: ignore[untyped-decorator]
async def register_user(
    request: Request,
    body: RegisterRequest,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Register a user. The avatar is derived from the email via Gravatar."""
    token = await service.register(
        name=str(body.name),
        email=str(body.email),
        password=str(body.password),
    )
    return TokenResponse(token=token)


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List all users",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_users(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """Get every registered user."""
    users = await service.get_all()
    return [UserResponse.model_validate(user) for user in users]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get a user",
    responses={404: {"description": "User not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_user(
    request: Request,
    user_id: str,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Get a user by ID."""
    found = await service.get_by_id(_parse_user_id(user_id))
    return UserResponse.model_validate(found)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update a user's email",
    responses={
        200: {"description": "Email updated"},
        401: {"description": "Not your account"},
        404: {"description": "User not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_user_email(
    request: Request,
    user_id: str,
    body: EmailUpdate,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Change the caller's own email address."""
    updated = await service.update_email(
        user_id=_parse_user_id(user_id),
        caller_id=user.id,
        email=str(body.email),
    )
    return UserResponse.model_validate(updated)


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete own account",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_user(
    request: Request,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete the authenticated user's record."""
    await service.delete(user.id)
    return MessageResponse(msg="User deleted")
