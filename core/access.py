# core/access.py

"""
Access filter: the single place that combines role and permission
checks into an allow/deny answer.

Guards, navigation and the route middleware all call into here and
act on the boolean (or AccessOutcome). Nothing here raises and nothing
here is async.
"""

from typing import Any, Iterable, Optional, Sequence

from core.permission_helpers import (
    get_user_role,
    has_all_permissions,
    has_any_permission,
    has_permission,
)
from core.roles import has_minimum_role
from models.access import AccessOutcome, AccessRequirement
from models.enums import Permission, UserRole


def _role_allowed(role: UserRole, allowed_roles: Sequence[UserRole]) -> bool:
    """
    Empty list = no restriction. Otherwise the role must match an entry
    exactly or outrank it, so [LEADER] also admits PM/OWNER/ADMIN.
    """
    if not allowed_roles:
        return True
    return any(
        role == allowed or has_minimum_role(role, allowed)
        for allowed in allowed_roles
    )


def can_access_route(
    user: Any,
    allowed_roles: Sequence[UserRole],
    required_permissions: Sequence[Permission] = (),
) -> bool:
    role = get_user_role(user)
    if role is None:
        return False

    if not _role_allowed(role, allowed_roles):
        return False

    if required_permissions:
        return has_all_permissions(user, required_permissions)

    return True


def meets_requirement(user: Any, requirement: AccessRequirement) -> bool:
    """
    Every part of the requirement that is set must pass.
    allow_guest is not consulted; see resolve_access().
    """
    role = get_user_role(user)
    if role is None:
        return False

    if not _role_allowed(role, requirement.allowed_roles):
        return False

    if requirement.minimum_role is not None and not has_minimum_role(role, requirement.minimum_role):
        return False

    if requirement.required_permissions:
        if requirement.require_all:
            return has_all_permissions(user, requirement.required_permissions)
        return has_any_permission(user, requirement.required_permissions)

    return True


def resolve_access(user: Any, requirement: AccessRequirement) -> AccessOutcome:
    """
    Three-way answer for callers that treat "log in first" differently
    from "not allowed" (redirect to login vs. 403 / default route).
    """
    if get_user_role(user) is None:
        if requirement.allow_guest:
            return AccessOutcome.ALLOWED
        return AccessOutcome.UNAUTHENTICATED

    if meets_requirement(user, requirement):
        return AccessOutcome.ALLOWED
    return AccessOutcome.FORBIDDEN


def guard_allows(
    user: Any,
    *,
    role: Optional[UserRole] = None,
    roles: Optional[Iterable[UserRole]] = None,
    minimum_role: Optional[UserRole] = None,
    permission: Optional[Permission] = None,
    permissions: Optional[Iterable[Permission]] = None,
    require_all_permissions: bool = False,
    allow_unauthenticated: bool = False,
) -> bool:
    """
    Boolean behind a conditional-render guard.

    `role` is an exact match, `roles` follows the access filter's
    "this role or higher" rule, and `permissions` defaults to OR.
    """
    user_role = get_user_role(user)
    if user_role is None:
        return allow_unauthenticated

    if role is None and roles is None and minimum_role is None and permission is None and permissions is None:
        return True

    if role is not None and user_role != role:
        return False

    if roles is not None and not _role_allowed(user_role, list(roles)):
        return False

    if minimum_role is not None and not has_minimum_role(user_role, minimum_role):
        return False

    if permission is not None and not has_permission(user, permission):
        return False

    if permissions is not None:
        permissions = list(permissions)
        if require_all_permissions:
            return has_all_permissions(user, permissions)
        return has_any_permission(user, permissions)

    return True
