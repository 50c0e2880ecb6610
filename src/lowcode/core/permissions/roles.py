"""Role hierarchy.

Roles form a strict total order: Admin > Manager > Viewer. The hierarchy
is only used for coarse gating (e.g. admin-only endpoints); per-model
access goes through ``can_perform`` instead.
"""

from enum import StrEnum

from lowcode.core.constants import ADMIN_WEIGHT, MANAGER_WEIGHT, VIEWER_WEIGHT


class Role(StrEnum):
    """The closed set of roles a user account can hold."""

    ADMIN = "Admin"
    MANAGER = "Manager"
    VIEWER = "Viewer"


ROLE_WEIGHTS: dict[Role, int] = {
    Role.ADMIN: ADMIN_WEIGHT,
    Role.MANAGER: MANAGER_WEIGHT,
    Role.VIEWER: VIEWER_WEIGHT,
}


def outranks(role: Role | str, other: Role | str) -> bool:
    """Check whether ``role`` is at least as privileged as ``other``.

    Reflexive: every role outranks itself.

    Args:
        role: The role being tested
        other: The role it is compared against

    Returns:
        True if weight(role) >= weight(other)

    Raises:
        ValueError: If either value is not one of the three roles
    """
    return ROLE_WEIGHTS[Role(role)] >= ROLE_WEIGHTS[Role(other)]
