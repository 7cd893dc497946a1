# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Group, Member


class GroupRepository(Protocol):
    def list_names(self) -> Sequence[str]: ...
    def find_by_id(self, group_id: str) -> Group | None: ...
    def list_members(self, group_id: str) -> Sequence[Member]: ...
    def list_for_member(self, user_id: str) -> Sequence[Group]: ...
    def count_owned_by(self, owner_id: str) -> int: ...

    def add_with_owner(self, group: Group, *, max_owned: int) -> Group:
        """Persist ``group``, enroll its owner and bump the owner's counter.

        Runs in one transaction. Raises ``OwnerLimitReachedError`` when the
        owner already holds ``max_owned`` groups and ``GroupNameTakenError``
        on a duplicate name.
        """
        ...
