"""SQLAlchemy implementation of Post repository."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.post import Comment, Like, Post
from infrastructure.database.models import PostModel


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Post | None:
        """Get a post by ID."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Post]:
        """Get all posts, newest first."""
        stmt = select(PostModel).order_by(PostModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        model = PostModel(
            id=post.id,
            user_id=post.user_id,
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            likes=[self._like_to_dict(like) for like in post.likes],
            comments=[self._comment_to_dict(c) for c in post.comments],
            created_at=post.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, post: Post) -> Post:
        """Write back the whole post document."""
        model = await self._get_model(post.id)

        if not model:
            raise ValueError(f"Post {post.id} not found")

        # Assign fresh lists so the JSON columns are flagged dirty
        model.text = post.text
        model.likes = [self._like_to_dict(like) for like in post.likes]
        model.comments = [self._comment_to_dict(c) for c in post.comments]

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a post."""
        model = await self._get_model(id)

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model(self, id: UUID) -> PostModel | None:
        stmt = select(PostModel).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _like_to_dict(like: Like) -> dict[str, Any]:
        return {"user_id": str(like.user_id)}

    @staticmethod
    def _comment_to_dict(comment: Comment) -> dict[str, Any]:
        return {
            "id": str(comment.id),
            "user_id": str(comment.user_id),
            "text": comment.text,
            "name": comment.name,
            "avatar": comment.avatar,
            "created_at": comment.created_at.isoformat(),
        }

    @staticmethod
    def _comment_from_dict(data: dict[str, Any]) -> Comment:
        return Comment(
            id=UUID(data["id"]),
            user_id=UUID(data["user_id"]),
            text=data["text"],
            name=data["name"],
            avatar=data.get("avatar", ""),
            created_at=datetime.fromisoformat(data["created_at"]),
        )

    def _to_entity(self, model: PostModel) -> Post:
        """Convert ORM model to domain entity."""
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            likes=[Like(user_id=UUID(item["user_id"])) for item in model.likes or []],
            comments=[self._comment_from_dict(item) for item in model.comments or []],
            created_at=model.created_at,
        )
