# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from groupfund.shared.errors.base import (
    AuthError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class InvalidPasswordFormatError(ValidationError):
    code = "invalid_password"
    message = "Password must be 8-32 characters long"


class InvalidUsernameError(ValidationError):
    code = "invalid_username"
    message = "Username must contain only letters and numbers"


class InvalidEmailError(ValidationError):
    code = "invalid_email"
    message = "Invalid email address"


class UserAlreadyExistsError(ConflictError):
    code = "user_exists"
    message = "User already exists"


class UserNotFoundError(NotFoundError):
    code = "user_not_found"
    message = "User not found"


class InvalidCredentialsError(AuthError):
    code = "invalid_password"
    message = "Invalid password"


class TokenRequiredError(AuthError):
    code = "token_required"
    message = "Token is required"


class InvalidTokenError(AuthError):
    code = "invalid_token"
    message = "Invalid token"
