# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from groupfund.application.use_cases.users.login_user import LoginUserUseCase
from groupfund.application.use_cases.users.register_user import RegisterUserUseCase
from groupfund.interfaces.http.auth_gate import AuthGate, current_identity
from groupfund.interfaces.http.dto.auth import (
    LoginRequestDTO,
    LoginSuccessDTO,
    ProtectedDTO,
    RegisterRequestDTO,
    RegisterSuccessDTO,
)
from groupfund.shared.errors.validation import raise_validation_error


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        auth_gate: AuthGate,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._auth_gate = auth_gate

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        self._register_use_case.execute(dto.username, dto.email, dto.password)

        return jsonify(RegisterSuccessDTO().model_dump()), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        token = self._login_use_case.execute(dto.username, dto.password)

        return jsonify(LoginSuccessDTO(token=token.token).model_dump()), HTTPStatus.OK

    def protected(self) -> tuple[Response, int]:
        payload = ProtectedDTO.for_identity(current_identity())
        return jsonify(payload.model_dump()), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule(
            "/protected", view_func=self._auth_gate(self.protected), methods=["GET"]
        )
        return bp
