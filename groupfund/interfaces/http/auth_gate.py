# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token guard for views that need a verified identity."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from groupfund.domain.users.entities import SessionIdentity
from groupfund.domain.users.exceptions import InvalidTokenError, TokenRequiredError
from groupfund.domain.users.repositories import SessionTokenService
from groupfund.shared.logging import logger

_BEARER_PREFIX = "Bearer "


def _bearer_token() -> str:
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith(_BEARER_PREFIX):
        return ""
    return auth_header[len(_BEARER_PREFIX):].strip()


def current_identity() -> SessionIdentity:
    """Identity attached by :class:`AuthGate`; only valid inside guarded views."""
    identity = getattr(g, "identity", None)
    if identity is None:
        raise RuntimeError("current_identity() used outside an AuthGate-protected view")
    return identity


class AuthGate:
    def __init__(self, tokens: SessionTokenService) -> None:
        self._tokens = tokens

    def __call__(self, func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            token = _bearer_token()
            if not token:
                logger.warning(f"No bearer token on {request.method} {request.path}")
                raise TokenRequiredError()

            try:
                identity = self._tokens.verify(token)
            except InvalidTokenError:
                logger.warning(f"Auth failed (token invalid/expired) on {request.method} {request.path}")
                raise

            g.identity = identity
            g.user_id = identity.user_id
            logger.debug(f"Auth OK: user={identity.user_id} {request.method} {request.path}")
            return func(*args, **kwargs)

        return wrapper


__all__ = ["AuthGate", "current_identity"]
