"""Password hashing strategies."""

from __future__ import annotations

import bcrypt

from groupfund.domain.users.repositories import PasswordHasher
from groupfund.shared.logging import logger

# bcrypt ignores everything past the first 72 bytes and newer releases refuse
# longer input outright.
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt digests with a tunable work factor."""

    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> tuple[str, str]:
        """Return ``(hash, salt)``; the salt is also embedded in the hash."""
        if not password:
            raise ValueError("Password cannot be empty")

        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(_encode(password), salt)
        return hashed.decode("utf-8"), salt.decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        if not password or not hashed:
            return False

        try:
            return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
        except ValueError as exc:
            logger.warning(f"Password verification error: {exc}")
            return False
