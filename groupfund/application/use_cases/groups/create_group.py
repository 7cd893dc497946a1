# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from groupfund.domain.groups.entities import Group
from groupfund.domain.groups.exceptions import (
    InvalidBudgetError,
    InvalidGroupNameError,
    OwnerLimitReachedError,
)
from groupfund.domain.groups.repositories import GroupRepository
from groupfund.domain.users.exceptions import UserNotFoundError
from groupfund.domain.users.repositories import UserRepository
from groupfund.shared.errors.base import ValidationError
from groupfund.shared.logging import logger

NAME_MIN_LENGTH = 4
NAME_MAX_LENGTH = 32
DEFAULT_MAX_OWNED_GROUPS = 5


class CreateGroupUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        groups: GroupRepository,
        max_owned_groups: int = DEFAULT_MAX_OWNED_GROUPS,
    ) -> None:
        self._users = users
        self._groups = groups
        self._max_owned_groups = max_owned_groups

    def execute(self, owner_id: str, name: str | None, budget: float = 0.0) -> Group:
        if not name:
            raise ValidationError()

        owner = self._users.find_by_id(owner_id)
        if owner is None:
            raise UserNotFoundError()

        if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
            raise InvalidGroupNameError()

        if budget < 0:
            raise InvalidBudgetError()

        if self._groups.count_owned_by(owner.id) >= self._max_owned_groups:
            logger.info(f"groups.create: limit reached owner={owner.id}")
            raise OwnerLimitReachedError()

        group = Group(
            id=str(uuid.uuid4()),
            name=name,
            budget=float(budget),
            owner_id=owner.id,
            created_at=datetime.now(UTC),
        )
        # The count above is advisory; the store re-checks the limit atomically.
        persisted = self._groups.add_with_owner(group, max_owned=self._max_owned_groups)
        logger.info(f"groups.create: ok group_id={persisted.id} owner={owner.id}")
        return persisted
