"""Authentication schemas for principals and token handling."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from lowcode.core.permissions.roles import Role


class Principal(BaseModel):
    """The authenticated actor issuing a request.

    Created from a verified token and never mutated for the rest of the
    request.

    Attributes:
        id: Opaque user identifier
        role: The user's role
    """

    model_config = ConfigDict(frozen=True)

    id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class TokenData(BaseModel):
    """Data extracted from a JWT token.

    Attributes:
        user_id: The user's id
        role: The user's role at the time the token was issued
        exp: Token expiration time
        type: Token type
    """

    user_id: str
    role: Role
    exp: datetime
    type: str = "access"

    def to_principal(self) -> Principal:
        return Principal(id=self.user_id, role=self.role)


class TokenResponse(BaseModel):
    """Access token returned by the login endpoint."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int
