"""Role hierarchy, per-model permission rules and ownership checks."""

from lowcode.core.permissions.checker import (
    can_perform,
    check_ownership,
    filter_visible_records,
    get_owner_id,
)
from lowcode.core.permissions.models import (
    Action,
    PermissionRule,
    default_permission_rule,
)
from lowcode.core.permissions.roles import ROLE_WEIGHTS, Role, outranks


__all__ = [
    "ROLE_WEIGHTS",
    "Action",
    "PermissionRule",
    "Role",
    "can_perform",
    "check_ownership",
    "default_permission_rule",
    "filter_visible_records",
    "get_owner_id",
    "outranks",
]
