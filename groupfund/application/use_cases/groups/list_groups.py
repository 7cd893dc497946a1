# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from groupfund.domain.groups.repositories import GroupRepository


class ListGroupsUseCase:
    """Public listing: names only, no budgets, owners or members."""

    def __init__(self, *, groups: GroupRepository) -> None:
        self._groups = groups

    def execute(self) -> list[str]:
        return list(self._groups.list_names())
