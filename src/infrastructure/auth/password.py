"""Password hashing using passlib."""

from passlib.context import CryptContext

from core.config import settings


class BcryptPasswordHasher:
    """Salted bcrypt hashing; hashes are never reversible."""

    def __init__(self, rounds: int = settings.bcrypt_rounds) -> None:
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return str(self._context.hash(password))

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password; malformed stored hashes count as a mismatch."""
        try:
            return bool(self._context.verify(password, password_hash))
        except ValueError:
            return False
