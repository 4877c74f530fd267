"""Post service layer with business logic.

Every mutation reads the post, changes its embedded likes or comments and
writes the whole post back within one unit of work. Two requests changing
the same post at once race; the later write wins.
"""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import (
    AlreadyLikedError,
    AuthorizationError,
    CommentNotFoundError,
    NotLikedError,
    PostNotFoundError,
    UserNotFoundError,
)
from domain.entities.post import Comment, Like, Post
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class PostService:
    """Service layer for Post business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(self, user_id: UUID, text: str) -> Post:
        """Create a post, copying the author's current name and avatar onto it."""
        async with self._uow_factory() as uow:
            author = await uow.users.get(user_id)
            if not author:
                raise UserNotFoundError(str(user_id))

            post = Post(
                user_id=user_id,
                text=text,
                name=author.name,
                avatar=author.avatar,
            )

            created = await uow.posts.create(post)
            await uow.commit()

        logger.info("post_created", post_id=str(created.id), user_id=str(user_id))
        return created

    async def get_all(self) -> list[Post]:
        """Get all posts, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_all()  # type: ignore[no-any-return]

    async def get_by_id(self, post_id: UUID) -> Post:
        """Get a specific post."""
        async with self._uow_factory() as uow:
            return await self._require_post(uow, post_id)

    async def delete(self, post_id: UUID, user_id: UUID) -> None:
        """Delete a post. Only its author may do this."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if post.user_id != user_id:
                raise AuthorizationError()

            await uow.posts.delete(post_id)
            await uow.commit()

        logger.info("post_deleted", post_id=str(post_id), user_id=str(user_id))

    async def like(self, post_id: UUID, user_id: UUID) -> list[Like]:
        """Like a post once; returns the updated like list."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if post.is_liked_by(user_id):
                raise AlreadyLikedError(str(post_id))

            post.add_like(user_id)
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.likes

    async def unlike(self, post_id: UUID, user_id: UUID) -> list[Like]:
        """Withdraw the caller's like; returns the updated like list."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if not post.is_liked_by(user_id):
                raise NotLikedError(str(post_id))

            post.remove_like(user_id)
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.likes

    async def add_comment(self, post_id: UUID, user_id: UUID, text: str) -> list[Comment]:
        """Add a comment to the front of a post's comments."""
        async with self._uow_factory() as uow:
            author = await uow.users.get(user_id)
            if not author:
                raise UserNotFoundError(str(user_id))

            post = await self._require_post(uow, post_id)
            post.add_comment(
                Comment(
                    user_id=user_id,
                    text=text,
                    name=author.name,
                    avatar=author.avatar,
                )
            )
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.comments

    async def delete_comment(
        self, post_id: UUID, comment_id: UUID, user_id: UUID
    ) -> list[Comment]:
        """Remove a comment. Only its author may do this."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)

            comment = post.find_comment(comment_id)
            if not comment:
                raise CommentNotFoundError(str(comment_id))
            if comment.user_id != user_id:
                raise AuthorizationError()

            post.remove_comment(comment_id)
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.comments

    async def _require_post(self, uow: IUnitOfWork, post_id: UUID) -> Post:
        post = await uow.posts.get(post_id)
        if not post:
            raise PostNotFoundError(str(post_id))
        return post
