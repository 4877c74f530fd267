"""Post domain entities.

Likes and comments live inside their post and share its lifecycle. Author
name and avatar are copied onto posts and comments when they are written
and are not refreshed if the user changes them later.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, slots=True)
class Like:
    """A user's like on a post."""

    user_id: UUID


@dataclass
class Comment:
    """A comment embedded in a post."""

    user_id: UUID
    text: str
    name: str
    avatar: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Post:
    """Domain entity for a Post."""

    user_id: UUID
    text: str
    name: str
    avatar: str
    id: UUID = field(default_factory=uuid4)
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def is_liked_by(self, user_id: UUID) -> bool:
        return any(like.user_id == user_id for like in self.likes)

    def add_like(self, user_id: UUID) -> None:
        """Put a like at the front of the list."""
        self.likes.insert(0, Like(user_id=user_id))

    def remove_like(self, user_id: UUID) -> None:
        """Drop the user's like, keyed by user id."""
        self.likes = [like for like in self.likes if like.user_id != user_id]

    def add_comment(self, comment: Comment) -> None:
        """Put a comment at the front of the list."""
        self.comments.insert(0, comment)

    def find_comment(self, comment_id: UUID) -> Comment | None:
        return next((c for c in self.comments if c.id == comment_id), None)

    def remove_comment(self, comment_id: UUID) -> None:
        """Drop a comment, keyed by comment id."""
        self.comments = [c for c in self.comments if c.id != comment_id]
