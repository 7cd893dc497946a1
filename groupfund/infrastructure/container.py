# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from groupfund.application.services.password_hashing import BcryptPasswordHasher
from groupfund.application.services.session_tokens import JwtSessionTokenService
from groupfund.application.use_cases.groups.create_group import CreateGroupUseCase
from groupfund.application.use_cases.groups.list_group_members import (
    ListGroupMembersUseCase,
)
from groupfund.application.use_cases.groups.list_groups import ListGroupsUseCase
from groupfund.application.use_cases.groups.list_my_groups import ListMyGroupsUseCase
from groupfund.application.use_cases.users.login_user import LoginUserUseCase
from groupfund.application.use_cases.users.register_user import RegisterUserUseCase
from groupfund.infrastructure.repositories.groups.sqlalchemy_group_repository import (
    SqlAlchemyGroupRepository,
)
from groupfund.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from groupfund.interfaces.http.auth_gate import AuthGate
from groupfund.interfaces.http.controllers.auth_controller import AuthController
from groupfund.interfaces.http.controllers.groups_controller import GroupsController
from groupfund.interfaces.http.controllers.misc_controller import MiscController
from groupfund.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=self._config.auth.bcrypt_rounds)

    @cached_property
    def session_tokens(self) -> JwtSessionTokenService:
        return JwtSessionTokenService(
            secret=self._config.auth.jwt_secret,
            ttl=timedelta(seconds=self._config.auth.token_ttl_seconds),
        )

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(self.session_tokens)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def group_repository(self) -> SqlAlchemyGroupRepository:
        return SqlAlchemyGroupRepository()

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.session_tokens,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def create_group_use_case(self) -> CreateGroupUseCase:
        return CreateGroupUseCase(
            users=self.user_repository,
            groups=self.group_repository,
            max_owned_groups=self._config.auth.max_owned_groups,
        )

    @cached_property
    def list_groups_use_case(self) -> ListGroupsUseCase:
        return ListGroupsUseCase(groups=self.group_repository)

    @cached_property
    def list_group_members_use_case(self) -> ListGroupMembersUseCase:
        return ListGroupMembersUseCase(groups=self.group_repository)

    @cached_property
    def list_my_groups_use_case(self) -> ListMyGroupsUseCase:
        return ListMyGroupsUseCase(groups=self.group_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            auth_gate=self.auth_gate,
        )

    @cached_property
    def groups_controller(self) -> GroupsController:
        return GroupsController(
            create_group=self.create_group_use_case,
            list_groups=self.list_groups_use_case,
            list_group_members=self.list_group_members_use_case,
            list_my_groups=self.list_my_groups_use_case,
            auth_gate=self.auth_gate,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
