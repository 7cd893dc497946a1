from __future__ import annotations

from pydantic import BaseModel

from groupfund.domain.users.entities import SessionIdentity


class RegisterRequestDTO(BaseModel):
    # Presence and content rules are enforced in order by the use case;
    # the DTO only rejects values of the wrong JSON type.
    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequestDTO(BaseModel):
    username: str | None = None
    password: str | None = None


class RegisterSuccessDTO(BaseModel):
    ok: bool = True
    message: str = "User created successfully"


class LoginSuccessDTO(BaseModel):
    token: str


class IdentityDTO(BaseModel):
    id: str
    username: str
    iat: int
    exp: int


class ProtectedDTO(BaseModel):
    message: str
    user: IdentityDTO

    @classmethod
    def for_identity(cls, identity: SessionIdentity) -> ProtectedDTO:
        return cls(
            message=f"Welcome, {identity.username}!",
            user=IdentityDTO.model_validate(identity.to_dict()),
        )
