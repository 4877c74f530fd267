"""Post API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_post_service
from api.schemas.common import MessageResponse
from api.schemas.post import (
    CommentCreate,
    CommentResponse,
    LikeResponse,
    PostCreate,
    PostResponse,
)
from core.exceptions import CommentNotFoundError, PostNotFoundError
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.post_service import PostService

router = APIRouter(prefix="/post", tags=["posts"])


def _parse_post_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError:
        raise PostNotFoundError(raw) from None


def _parse_comment_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError:
        raise CommentNotFoundError(raw) from None


@router.post(
    "",
    response_model=PostResponse,
    summary="Create a post",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_post(
    request: Request,
    body: PostCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Create a post. The author's name and avatar are copied onto it."""
    post = await service.create(user_id=user.id, text=str(body.text))
    return PostResponse.model_validate(post)


@router.get(
    "",
    response_model=list[PostResponse],
    summary="List all posts",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_posts(
    request: Request,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    """Get all posts, newest first."""
    posts = await service.get_all()
    return [PostResponse.model_validate(post) for post in posts]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get a post",
    responses={404: {"description": "Post not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Get a post by ID."""
    post = await service.get_by_id(_parse_post_id(post_id))
    return PostResponse.model_validate(post)


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Delete a post",
    responses={
        401: {"description": "Not the author"},
        404: {"description": "Post not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    """Delete a post. Only its author may delete it."""
    await service.delete(_parse_post_id(post_id), user.id)
    return MessageResponse(msg="Post removed")


@router.put(
    "/like/{post_id}",
    response_model=list[LikeResponse],
    summary="Like a post",
    responses={400: {"description": "Post already liked"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def like_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[LikeResponse]:
    """Like a post. Each user may like a post once."""
    likes = await service.like(_parse_post_id(post_id), user.id)
    return [LikeResponse.model_validate(like) for like in likes]


@router.put(
    "/unlike/{post_id}",
    response_model=list[LikeResponse],
    summary="Unlike a post",
    responses={400: {"description": "Post has not yet been liked"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def unlike_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[LikeResponse]:
    """Withdraw the caller's like."""
    likes = await service.unlike(_parse_post_id(post_id), user.id)
    return [LikeResponse.model_validate(like) for like in likes]


@router.post(
    "/comment/{post_id}",
    response_model=list[CommentResponse],
    summary="Comment on a post",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_comment(
    request: Request,
    post_id: str,
    body: CommentCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    """Add a comment; returns the post's comments, newest first."""
    comments = await service.add_comment(_parse_post_id(post_id), user.id, str(body.text))
    return [CommentResponse.model_validate(comment) for comment in comments]


@router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=list[CommentResponse],
    summary="Delete a comment",
    responses={
        401: {"description": "Not the comment's author"},
        404: {"description": "Post or comment not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_comment(
    request: Request,
    post_id: str,
    comment_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    """Delete a comment. Only its author may delete it."""
    comments = await service.delete_comment(
        _parse_post_id(post_id), _parse_comment_id(comment_id), user.id
    )
    return [CommentResponse.model_validate(comment) for comment in comments]
