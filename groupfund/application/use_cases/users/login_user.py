# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from groupfund.domain.users.entities import SessionToken
from groupfund.domain.users.exceptions import InvalidCredentialsError, UserNotFoundError
from groupfund.domain.users.repositories import (
    PasswordHasher,
    SessionTokenService,
    UserRepository,
)
from groupfund.shared.errors.base import ValidationError
from groupfund.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str | None, password: str | None) -> SessionToken:
        if not username or not password:
            raise ValidationError()

        user = self._users.find_by_username(username)
        if user is None:
            logger.warning("auth.login: unknown username")
            raise UserNotFoundError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.warning(f"auth.login: bad password user_id={user.id}")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id, user.username)
        logger.info(f"auth.login: ok user_id={user.id}")
        return token
