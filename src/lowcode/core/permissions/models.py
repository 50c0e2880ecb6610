"""Per-model permission rules.

A PermissionRule is embedded in every model definition and lists, for
each CRUD action, the roles allowed to perform it. Entries are optional;
a missing or empty entry means "Admin only".
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from lowcode.core.permissions.roles import Role


class Action(StrEnum):
    """CRUD actions that can be granted on a model."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class PermissionRule(BaseModel):
    """Allow-lists of roles per action for a single model."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    create: list[Role] | None = None
    read: list[Role] | None = None
    update: list[Role] | None = None
    delete: list[Role] | None = None

    def allowed_roles(self, action: Action | str) -> list[Role] | None:
        """Return the declared roles for an action, or None if undeclared."""
        return getattr(self, Action(action).value)


def default_permission_rule() -> PermissionRule:
    """Rule given to new models that declare no permissions.

    Everyone may read, only Admin may write.
    """
    return PermissionRule(
        create=[Role.ADMIN],
        read=[Role.ADMIN, Role.MANAGER, Role.VIEWER],
        update=[Role.ADMIN],
        delete=[Role.ADMIN],
    )
