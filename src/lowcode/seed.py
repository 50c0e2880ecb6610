"""Demo data: one user per role and a ``Product`` model.

Seeding is idempotent. Existing users and models are left untouched.
"""

from dataclasses import dataclass, field
from typing import TypedDict

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from lowcode.api.hooks import build_change_hooks
from lowcode.core.auth.schemas import Principal
from lowcode.core.permissions.models import PermissionRule
from lowcode.core.permissions.roles import Role
from lowcode.core.validation.schemas import ModelField
from lowcode.modules.models.repos import ModelDefinitionRepository
from lowcode.modules.models.schemas import ModelDefinitionCreate
from lowcode.modules.models.services import ModelDefinitionService
from lowcode.modules.users.models import User
from lowcode.modules.users.repos import UserRepository
from lowcode.modules.users.schemas import UserCreate
from lowcode.modules.users.services import UserService


log = structlog.get_logger()


class UserData(TypedDict):
    email: str
    name: str
    password: str
    role: Role


DEMO_USERS: list[UserData] = [
    {"email": "admin@example.com", "name": "Admin User", "password": "admin123", "role": Role.ADMIN},
    {"email": "manager@example.com", "name": "Manager User", "password": "manager123", "role": Role.MANAGER},
    {"email": "viewer@example.com", "name": "Viewer User", "password": "viewer123", "role": Role.VIEWER},
]


def product_model() -> ModelDefinitionCreate:
    """Sample model: Managers create and edit their own products."""
    return ModelDefinitionCreate(
        name="Product",
        fields=[
            ModelField.model_validate(
                {"name": "name", "type": "string", "label": "Name", "validation": {"required": True, "maxLength": 200}}
            ),
            ModelField.model_validate(
                {"name": "price", "type": "number", "label": "Price", "validation": {"required": True, "min": 0}}
            ),
            ModelField.model_validate({"name": "description", "type": "string", "label": "Description"}),
            ModelField.model_validate({"name": "isActive", "type": "boolean", "label": "Active"}),
            ModelField.model_validate({"name": "ownerId", "type": "string", "label": "Owner"}),
        ],
        owner_field="ownerId",
        permissions=PermissionRule(
            create=[Role.ADMIN, Role.MANAGER],
            read=[Role.ADMIN, Role.MANAGER, Role.VIEWER],
            update=[Role.ADMIN, Role.MANAGER],
            delete=[Role.ADMIN],
        ),
    )


@dataclass
class SeedResult:
    created_users: list[str] = field(default_factory=list)
    skipped_users: list[str] = field(default_factory=list)
    created_models: list[str] = field(default_factory=list)


async def seed(session: AsyncSession) -> SeedResult:
    """Create the demo users and model that don't exist yet.

    The caller owns the transaction and must commit.
    """
    result = SeedResult()
    user_repo = UserRepository(session)
    users = UserService(user_repo)

    admin: User | None = None
    for data in DEMO_USERS:
        user = await user_repo.get_by_email(data["email"])
        if user:
            result.skipped_users.append(data["email"])
        else:
            user = await users.create_user(UserCreate(**data))
            result.created_users.append(data["email"])
        if data["role"] == Role.ADMIN:
            admin = user

    model_repo = ModelDefinitionRepository(session)
    model = product_model()
    if admin is not None and await model_repo.get(model.name) is None:
        service = ModelDefinitionService(model_repo, build_change_hooks(session))
        await service.save_model(Principal(id=admin.id, role=Role.ADMIN), model)
        result.created_models.append(model.name)

    log.info(
        "seed_completed",
        created_users=len(result.created_users),
        created_models=result.created_models,
    )
    return result
