"""In-memory stand-ins for the repository protocols."""

from __future__ import annotations

from collections.abc import Sequence

from groupfund.domain.groups.entities import Group, Member
from groupfund.domain.groups.exceptions import GroupNameTakenError, OwnerLimitReachedError
from groupfund.domain.groups.repositories import GroupRepository
from groupfund.domain.users.entities import User
from groupfund.domain.users.exceptions import UserAlreadyExistsError
from groupfund.domain.users.repositories import PasswordHasher, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def find_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        for existing in self._users.values():
            if existing.username == user.username or existing.email == user.email:
                raise UserAlreadyExistsError()
        self._users[user.id] = user
        return user


class InMemoryGroupRepository(GroupRepository):
    def __init__(self, users: InMemoryUserRepository) -> None:
        self._users = users
        self._groups: dict[str, Group] = {}
        self._members: list[tuple[str, str]] = []

    def list_names(self) -> Sequence[str]:
        return [g.name for g in self._groups.values()]

    def find_by_id(self, group_id: str) -> Group | None:
        return self._groups.get(group_id)

    def list_members(self, group_id: str) -> Sequence[Member]:
        members = []
        for user_id, gid in self._members:
            user = self._users.find_by_id(user_id)
            if gid == group_id and user is not None:
                members.append(Member(user_id=user.id, username=user.username))
        return members

    def list_for_member(self, user_id: str) -> Sequence[Group]:
        return [self._groups[gid] for uid, gid in self._members if uid == user_id]

    def count_owned_by(self, owner_id: str) -> int:
        return sum(1 for g in self._groups.values() if g.owner_id == owner_id)

    def add_with_owner(self, group: Group, *, max_owned: int) -> Group:
        if self.count_owned_by(group.owner_id) >= max_owned:
            raise OwnerLimitReachedError()
        if any(g.name == group.name for g in self._groups.values()):
            raise GroupNameTakenError()
        self._groups[group.id] = group
        self._members.append((group.owner_id, group.id))
        return group

    def join(self, user_id: str, group_id: str) -> None:
        self._members.append((user_id, group_id))


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> tuple[str, str]:
        return f"hashed:{password}", "salt"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"
