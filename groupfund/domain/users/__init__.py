# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import SessionIdentity, SessionToken, User
from .repositories import PasswordHasher, SessionTokenService, UserRepository

__all__ = [
    "PasswordHasher",
    "SessionIdentity",
    "SessionToken",
    "SessionTokenService",
    "User",
    "UserRepository",
]
