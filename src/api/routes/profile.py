"""Profile API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_profile_service
from api.schemas.profile import ProfileOwner, ProfileResponse
from core.rate_limit import READ_LIMIT, limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get own profile",
    responses={
        200: {"description": "Profile found"},
        400: {"description": "The user has no profile"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_my_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Get the authenticated user's profile with their name and avatar."""
    item = await service.get_for_user(user.id)
    profile = item.profile
    return ProfileResponse(
        id=profile.id,
        user=ProfileOwner(id=profile.user_id, name=item.name, avatar=item.avatar),
        status=profile.status,
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        github_username=profile.github_username,
        skills=profile.skills,
        created_at=profile.created_at,
    )
