# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .groups import SqlAlchemyGroupRepository
from .users import SqlAlchemyUserRepository

__all__ = ["SqlAlchemyGroupRepository", "SqlAlchemyUserRepository"]
