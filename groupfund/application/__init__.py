# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.groups import (
    CreateGroupUseCase,
    ListGroupMembersUseCase,
    ListGroupsUseCase,
    ListMyGroupsUseCase,
)
from .use_cases.users import LoginUserUseCase, RegisterUserUseCase

__all__ = [
    "CreateGroupUseCase",
    "ListGroupMembersUseCase",
    "ListGroupsUseCase",
    "ListMyGroupsUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
]
