# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from groupfund.shared.errors.base import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)


class InvalidGroupNameError(ValidationError):
    code = "invalid_name"
    message = "Name must be between 4 and 32 characters long"


class InvalidBudgetError(ValidationError):
    code = "invalid_budget"
    message = "Budget must be a non-negative number"


class OwnerLimitReachedError(DomainError):
    code = "owner_limit_reached"
    message = "You have reached the limit of groups"


class GroupNameTakenError(ConflictError):
    code = "group_exists"
    message = "Group name already taken"


class GroupNotFoundError(NotFoundError):
    code = "group_not_found"
    message = "Group not found"
