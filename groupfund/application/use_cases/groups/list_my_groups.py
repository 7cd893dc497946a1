# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from groupfund.domain.groups.entities import Group
from groupfund.domain.groups.repositories import GroupRepository


class ListMyGroupsUseCase:
    """Groups the caller belongs to, owned or joined."""

    def __init__(self, *, groups: GroupRepository) -> None:
        self._groups = groups

    def execute(self, user_id: str) -> list[Group]:
        return list(self._groups.list_for_member(user_id))
