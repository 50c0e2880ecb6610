"""Permission and ownership decisions.

These functions are pure: they take request-local values (the principal's
role and id, a model's permission rule, a record's owner value) and
return booleans. Turning a False into a 403 is the caller's job.
"""

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from lowcode.core.permissions.models import Action, PermissionRule
from lowcode.core.permissions.roles import Role


if TYPE_CHECKING:
    from lowcode.core.auth.schemas import Principal


def can_perform(
    role: Role | str,
    action: Action | str,
    rule: PermissionRule | None,
) -> bool:
    """Check if a role may perform an action on a model.

    Args:
        role: The requesting principal's role
        action: The CRUD action being attempted
        rule: The model's permission rule, if any

    Returns:
        True if the action is allowed

    Note:
        An absent rule, an undeclared action or an empty role list all
        restrict the action to Admin. A declared, non-empty list is
        authoritative: Admin is excluded unless it is listed.
    """
    role = Role(role)
    allowed = rule.allowed_roles(action) if rule is not None else None

    if not allowed:
        return role == Role.ADMIN

    return role in allowed


def check_ownership(
    user_id: str,
    owner_id: str | None,
    role: Role | str,
) -> bool:
    """Check if a user may act on a specific record.

    Args:
        user_id: The requesting principal's id
        owner_id: The record's owner value; None when the model has no
            owner field or the record carries no value for it
        role: The requesting principal's role

    Returns:
        True if the record is accessible

    Note:
        Admin bypasses ownership. Records without an owner are shared.
        An empty-string owner is a real owner and only matches an
        empty-string user id.
    """
    if Role(role) == Role.ADMIN:
        return True

    if owner_id is None:
        return True

    return user_id == owner_id


def get_owner_id(record: Mapping[str, Any], owner_field: str | None) -> Any:
    """Read the owner value of a record, None when absent."""
    if not owner_field:
        return None
    return record.get(owner_field)


def filter_visible_records(
    records: Iterable[Mapping[str, Any]],
    principal: "Principal",
    owner_field: str | None,
) -> list[Mapping[str, Any]]:
    """Keep the records of a collection the principal may see.

    Args:
        records: Records of one model
        principal: The requesting principal
        owner_field: The model's owner field, if it declares one

    Returns:
        Records that pass ``check_ownership``, in their original order
    """
    records = list(records)
    if not owner_field:
        return records

    return [
        record
        for record in records
        if check_ownership(
            principal.id, get_owner_id(record, owner_field), principal.role
        )
    ]
