# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from groupfund.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class Group:
    """A budgeted group with exactly one owner, who is always a member."""

    id: str
    name: str
    budget: float
    owner_id: str
    created_at: datetime

    def __post_init__(self) -> None:
        if self.budget < 0:
            raise InvariantViolation("budget must be non-negative", field="budget")

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "budget": self.budget,
            "owner_id": self.owner_id,
        }


@dataclass(slots=True, frozen=True)
class Member:

    user_id: str
    username: str

    def to_dict(self) -> dict[str, object]:
        return {"id": self.user_id, "username": self.username}
