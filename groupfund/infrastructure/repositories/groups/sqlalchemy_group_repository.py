# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError

from groupfund.domain.groups.entities import Group as DomainGroup
from groupfund.domain.groups.entities import Member
from groupfund.domain.groups.exceptions import GroupNameTakenError, OwnerLimitReachedError
from groupfund.domain.groups.repositories import GroupRepository
from groupfund.infrastructure.db.models import Group, Membership, User
from groupfund.infrastructure.db.session import session_scope
from groupfund.shared.logging import logger


def _to_domain(row: Group) -> DomainGroup:
    return DomainGroup(
        id=row.id,
        name=row.name,
        budget=float(row.budget),
        owner_id=row.owner_id,
        created_at=row.created_at,
    )


class SqlAlchemyGroupRepository(GroupRepository):
    def list_names(self) -> Sequence[str]:
        with session_scope() as session:
            rows = session.query(Group.name).order_by(Group.created_at.asc()).all()
        return [name for (name,) in rows]

    def find_by_id(self, group_id: str) -> DomainGroup | None:
        with session_scope() as session:
            row = session.get(Group, group_id)
            return _to_domain(row) if row else None

    def list_members(self, group_id: str) -> Sequence[Member]:
        with session_scope() as session:
            rows = (
                session.query(User.id, User.username)
                .join(Membership, Membership.user_id == User.id)
                .filter(Membership.group_id == group_id)
                .order_by(Membership.joined_at.asc(), Membership.id.asc())
                .all()
            )
        return [Member(user_id=user_id, username=username) for user_id, username in rows]

    def list_for_member(self, user_id: str) -> Sequence[DomainGroup]:
        with session_scope() as session:
            rows = (
                session.query(Group)
                .join(Membership, Membership.group_id == Group.id)
                .filter(Membership.user_id == user_id)
                .order_by(Group.created_at.asc())
                .all()
            )
            return [_to_domain(row) for row in rows]

    def count_owned_by(self, owner_id: str) -> int:
        with session_scope() as session:
            return session.query(Group).filter(Group.owner_id == owner_id).count()

    def add_with_owner(self, group: DomainGroup, *, max_owned: int) -> DomainGroup:
        try:
            with session_scope() as session:
                # Compare-and-set on the owner's counter; concurrent creators
                # serialize on this row and only ``max_owned`` of them succeed.
                claimed = session.execute(
                    update(User)
                    .where(User.id == group.owner_id)
                    .where(User.owned_groups_count < max_owned)
                    .values(owned_groups_count=User.owned_groups_count + 1)
                    .execution_options(synchronize_session=False)
                ).rowcount
                if not claimed:
                    logger.info(f"groups.add: owner limit hit owner={group.owner_id}")
                    raise OwnerLimitReachedError()

                row = Group(
                    id=group.id,
                    name=group.name,
                    budget=group.budget,
                    owner_id=group.owner_id,
                    created_at=group.created_at,
                )
                session.add(row)
                session.add(Membership(user_id=group.owner_id, group_id=group.id))
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            logger.info(f"groups.add: name taken name={group.name!r}")
            raise GroupNameTakenError() from exc
