"""Profile service layer."""

from collections.abc import Callable
from uuid import UUID

from core.exceptions import ProfileNotFoundError, UserNotFoundError
from domain.entities.profile import ProfileWithOwner
from domain.repositories.unit_of_work import IUnitOfWork


class ProfileService:
    """Service layer for Profile lookups."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_for_user(self, user_id: UUID) -> ProfileWithOwner:
        """Get a user's profile together with the owner's name and avatar."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_for_user(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id))

            owner = await uow.users.get(user_id)
            if not owner:
                raise UserNotFoundError(str(user_id))

            return ProfileWithOwner(profile=profile, name=owner.name, avatar=owner.avatar)
