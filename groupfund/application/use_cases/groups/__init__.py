# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .create_group import CreateGroupUseCase
from .list_group_members import ListGroupMembersUseCase
from .list_groups import ListGroupsUseCase
from .list_my_groups import ListMyGroupsUseCase

__all__ = [
    "CreateGroupUseCase",
    "ListGroupMembersUseCase",
    "ListGroupsUseCase",
    "ListMyGroupsUseCase",
]
