# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
import uuid
from datetime import UTC, datetime

from groupfund.domain.users.entities import User
from groupfund.domain.users.exceptions import (
    InvalidEmailError,
    InvalidPasswordFormatError,
    InvalidUsernameError,
)
from groupfund.domain.users.repositories import PasswordHasher, UserRepository
from groupfund.shared.errors.base import ValidationError
from groupfund.shared.logging import logger

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 32
USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 32
# bcrypt only reads the first 72 bytes of the encoded password
PASSWORD_MAX_BYTES = 72
# matches users.email
EMAIL_MAX_LENGTH = 255

_USERNAME_RE = re.compile(r"^[a-zA-Z0-9]+$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str | None, email: str | None, password: str | None) -> User:
        """Validate and store a new account.

        Rules are checked in a fixed order and the first failure wins, so a
        client always sees the same error for the same input. Duplicate
        usernames or emails are reported by the store.
        """
        if not username or not email or not password:
            raise ValidationError()

        if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
            raise InvalidPasswordFormatError()

        if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise InvalidPasswordFormatError("Password must be at most 72 bytes long")

        if not _USERNAME_RE.fullmatch(username):
            raise InvalidUsernameError()

        if len(email) > EMAIL_MAX_LENGTH or not _EMAIL_RE.fullmatch(email):
            raise InvalidEmailError()

        if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
            raise InvalidUsernameError("Username must be between 4 and 32 characters long")

        hashed, salt = self._password_hasher.hash(password)
        user = User(
            id=str(uuid.uuid4()),
            username=username,
            email=email,
            password_hash=hashed,
            salt=salt,
            created_at=datetime.now(UTC),
        )
        persisted = self._users.add(user)
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return persisted
