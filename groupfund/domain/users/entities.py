# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: str
    username: str
    email: str
    password_hash: str
    salt: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class SessionToken:

    user_id: str
    token: str
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class SessionIdentity:
    """Verified claims of a session token."""

    user_id: str
    username: str
    issued_at: datetime
    expires_at: datetime

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.user_id,
            "username": self.username,
            "iat": int(self.issued_at.timestamp()),
            "exp": int(self.expires_at.timestamp()),
        }
