"""API router configuration."""

from fastapi import APIRouter

from api.routes.auth import router as auth_router
from api.routes.posts import router as posts_router
from api.routes.profile import router as profile_router
from api.routes.users import router as users_router
from api.schemas.common import ErrorResponse, ValidationErrorResponse

# Documented on every route; routes add their own 400/404 descriptions
router = APIRouter(
    responses={
        400: {"model": ValidationErrorResponse, "description": "Validation failed"},
        401: {"model": ErrorResponse, "description": "Missing, invalid or foreign token"},
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    }
)
router.include_router(users_router)
router.include_router(auth_router)
router.include_router(profile_router)
router.include_router(posts_router)
