# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation, InvariantViolationError
from .groups import Group, GroupRepository, Member
from .users import (
    PasswordHasher,
    SessionIdentity,
    SessionToken,
    SessionTokenService,
    User,
    UserRepository,
)

__all__ = [
    "Group",
    "GroupRepository",
    "InvariantViolation",
    "InvariantViolationError",
    "Member",
    "PasswordHasher",
    "SessionIdentity",
    "SessionToken",
    "SessionTokenService",
    "User",
    "UserRepository",
]
