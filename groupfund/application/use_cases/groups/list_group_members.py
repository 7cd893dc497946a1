# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from groupfund.domain.groups.entities import Member
from groupfund.domain.groups.exceptions import GroupNotFoundError
from groupfund.domain.groups.repositories import GroupRepository


class ListGroupMembersUseCase:
    def __init__(self, *, groups: GroupRepository) -> None:
        self._groups = groups

    def execute(self, group_id: str) -> list[Member]:
        if self._groups.find_by_id(group_id) is None:
            raise GroupNotFoundError()
        return list(self._groups.list_members(group_id))
