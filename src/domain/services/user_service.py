"""User service layer: registration, login and account management."""

import asyncio
from collections.abc import Callable
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    AuthorizationError,
    DuplicateEmailError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from domain.entities.user import User, gravatar_url
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.auth.provider import IAuthProvider, IPasswordHasher

logger = structlog.get_logger()


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = str(exc.orig).lower() if exc.orig else ""
    return "unique" in orig or "duplicate" in orig


class UserService:
    """Service layer for User business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        auth_provider: IAuthProvider,
        password_hasher: IPasswordHasher,
    ) -> None:
        self._uow_factory = uow_factory
        self._auth = auth_provider
        self._hasher = password_hasher

    async def register(self, name: str, email: str, password: str) -> str:
        """Create a user and return a signed token for it.

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(email):
                raise DuplicateEmailError(email)

            # bcrypt is CPU-bound; keep it off the event loop
            password_hash = await asyncio.to_thread(self._hasher.hash, password)
            user = User(
                name=name,
                email=email,
                password_hash=password_hash,
                avatar=gravatar_url(email),
            )

            try:
                created = await uow.users.create(user)
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                # Concurrent registration with the same email
                if _is_unique_violation(exc):
                    raise DuplicateEmailError(email) from exc
                raise

        logger.info("user_registered", user_id=str(created.id))
        return self._auth.create_token(created.id)

    async def authenticate(self, email: str, password: str) -> str:
        """Check credentials and return a signed token.

        Unknown emails and wrong passwords fail the same way.
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email)

        if not user:
            raise InvalidCredentialsError()

        matches = await asyncio.to_thread(self._hasher.verify, password, user.password_hash)
        if not matches:
            logger.info("login_failed", user_id=str(user.id))
            raise InvalidCredentialsError()

        return self._auth.create_token(user.id)

    async def get_by_id(self, user_id: UUID) -> User:
        """Get a specific user."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))
            return user

    async def get_all(self) -> list[User]:
        """Get every registered user."""
        async with self._uow_factory() as uow:
            return await uow.users.get_all()  # type: ignore[no-any-return]

    async def update_email(self, user_id: UUID, caller_id: UUID, email: str) -> User:
        """Change a user's email. Only the user themself may do this."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))

            if user.id != caller_id:
                raise AuthorizationError()

            if email != user.email:
                existing = await uow.users.get_by_email(email)
                if existing and existing.id != user.id:
                    raise DuplicateEmailError(email)
                user.email = email

            try:
                updated = await uow.users.update(user)
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                # Another account claimed the address since the check above
                if _is_unique_violation(exc):
                    raise DuplicateEmailError(email) from exc
                raise
            return updated

    async def delete(self, user_id: UUID) -> None:
        """Delete the caller's own user record."""
        async with self._uow_factory() as uow:
            deleted = await uow.users.delete(user_id)
            if not deleted:
                raise UserNotFoundError(str(user_id))
            await uow.commit()

        logger.info("user_deleted", user_id=str(user_id))
