# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import SessionIdentity, SessionToken, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def find_by_id(self, user_id: str) -> User | None: ...
    def add(self, user: User) -> User: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> tuple[str, str]: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class SessionTokenService(Protocol):
    def issue(self, user_id: str, username: str) -> SessionToken: ...
    def verify(self, token: str) -> SessionIdentity: ...
