# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from groupfund.shared.config import load_config
from groupfund.shared.logging import logger

from .base import AppError, InfrastructureError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def handle_http_exception(exc: HTTPException) -> Response:
    """Render routing and protocol errors (404, 405, ...) with the JSON error body."""
    code = re.sub(r"[^a-z0-9]+", "_", (exc.name or "http_error").lower()).strip("_")
    response = jsonify({"error": code, "message": exc.name})
    response.status_code = exc.code or HTTPStatus.INTERNAL_SERVER_ERROR
    for key, value in exc.get_headers():
        # keeps Allow on 405
        if key.lower() != "content-type":
            response.headers[key] = value
    return response


def register_error_handler(app: Flask) -> None:
    config = load_config()
    debug_mode = config.debug_logging
    expose_details = config.security.expose_error_details

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        logger.info(
            f"Handled application error {exc.code} ({exc.status.value}) "
            f"on {request.method} {request.path}"
        )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return handle_http_exception(exc)

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        user_id = getattr(g, "user_id", None)

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"user={user_id}, body_size={len(request.data)}"
            )
        else:
            logger.error(
                f"Error: {type(exc).__name__} on {request.method} {request.path}: {exc}"
            )

        error = InfrastructureError(message=str(exc) if expose_details else None)
        return handle_app_error(error)


__all__ = ["handle_app_error", "handle_http_exception", "register_error_handler"]
