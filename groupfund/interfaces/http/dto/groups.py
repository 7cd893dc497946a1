from __future__ import annotations

from pydantic import BaseModel, Field

from groupfund.domain.groups.entities import Group, Member


class CreateGroupRequestDTO(BaseModel):
    name: str | None = None
    # Numbers only; booleans and numeric strings are rejected.
    budget: float = Field(0.0, strict=True, allow_inf_nan=False)


class GroupDTO(BaseModel):
    id: str
    name: str
    budget: float
    owner_id: str

    @classmethod
    def from_domain(cls, group: Group) -> GroupDTO:
        return cls.model_validate(group.to_dict())


class MemberDTO(BaseModel):
    id: str
    username: str

    @classmethod
    def from_domain(cls, member: Member) -> MemberDTO:
        return cls.model_validate(member.to_dict())
