"""Principal and token factories for tests."""

from uuid import uuid4

from polyfactory.factories.pydantic_factory import ModelFactory

from lowcode.core.auth.backend import create_access_token
from lowcode.core.auth.schemas import Principal
from lowcode.modules.users.models import User


class PrincipalFactory(ModelFactory[Principal]):
    """Factory for creating Principal instances."""

    __model__ = Principal

    @classmethod
    def id(cls) -> str:
        return str(uuid4())


def headers_for(user: User | Principal) -> dict[str, str]:
    """Authorization headers carrying a valid token for ``user``."""
    token = create_access_token(Principal(id=user.id, role=user.role))
    return {"Authorization": f"Bearer {token}"}
