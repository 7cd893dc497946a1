# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from groupfund.application.use_cases.groups.create_group import CreateGroupUseCase
from groupfund.application.use_cases.groups.list_group_members import (
    ListGroupMembersUseCase,
)
from groupfund.application.use_cases.groups.list_groups import ListGroupsUseCase
from groupfund.application.use_cases.groups.list_my_groups import ListMyGroupsUseCase
from groupfund.interfaces.http.auth_gate import AuthGate, current_identity
from groupfund.interfaces.http.dto.groups import CreateGroupRequestDTO, GroupDTO, MemberDTO
from groupfund.shared.errors.validation import raise_validation_error


class GroupsController:
    def __init__(
        self,
        *,
        create_group: CreateGroupUseCase,
        list_groups: ListGroupsUseCase,
        list_group_members: ListGroupMembersUseCase,
        list_my_groups: ListMyGroupsUseCase,
        auth_gate: AuthGate,
    ) -> None:
        self._create_group = create_group
        self._list_groups = list_groups
        self._list_group_members = list_group_members
        self._list_my_groups = list_my_groups
        self._auth_gate = auth_gate

    def list_all(self) -> tuple[Response, int]:
        return jsonify(self._list_groups.execute()), HTTPStatus.OK

    def create(self) -> tuple[Response, int]:
        try:
            dto = CreateGroupRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        group = self._create_group.execute(current_identity().user_id, dto.name, dto.budget)

        return jsonify(GroupDTO.from_domain(group).model_dump()), HTTPStatus.CREATED

    def members(self, group_id: str) -> tuple[Response, int]:
        members = self._list_group_members.execute(group_id)
        return jsonify([MemberDTO.from_domain(m).model_dump() for m in members]), HTTPStatus.OK

    def mine(self) -> tuple[Response, int]:
        groups = self._list_my_groups.execute(current_identity().user_id)
        return jsonify([GroupDTO.from_domain(g).model_dump() for g in groups]), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("groups", __name__)
        bp.add_url_rule("/groups", view_func=self.list_all, methods=["GET"])
        bp.add_url_rule("/groups", view_func=self._auth_gate(self.create), methods=["POST"])
        bp.add_url_rule(
            "/groups/<string:group_id>/users", view_func=self.members, methods=["GET"]
        )
        bp.add_url_rule("/me/groups", view_func=self._auth_gate(self.mine), methods=["GET"])
        return bp
