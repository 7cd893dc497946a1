# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Group, Member
from .repositories import GroupRepository

__all__ = ["Group", "GroupRepository", "Member"]
