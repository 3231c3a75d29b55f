from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from core.logging_config import logger
from core.permissions import get_permissions_for_role
from core.roles import has_minimum_role, normalize_role, rank
from models.enums import Permission, UserRole

T = TypeVar("T")


# -----------------------------------------------------
# Read the raw role off whatever the caller passed:
#   • CurrentUser (or any object with .role)
#   • plain dict from a decoded session
# -----------------------------------------------------
def get_raw_role(user: Any) -> Optional[str]:
    if user is None:
        return None
    if isinstance(user, Mapping):
        return user.get("role")
    return getattr(user, "role", None)


def get_user_role(user: Any) -> Optional[UserRole]:
    """Normalized role, or None for an absent / role-less user."""
    raw = get_raw_role(user)
    if not raw:
        return None
    return normalize_role(raw)


# -----------------------------------------------------
# Effective permissions (role table only)
# -----------------------------------------------------
def get_user_permissions(user: Any) -> frozenset:
    role = get_user_role(user)
    if role is None:
        return frozenset()
    return get_permissions_for_role(role)


# -----------------------------------------------------
# Permission evaluation
# -----------------------------------------------------
def has_permission(user: Any, permission: Permission) -> bool:
    return permission in get_user_permissions(user)


def has_any_permission(user: Any, permissions: Iterable[Permission]) -> bool:
    """OR semantics. An empty list is never a pass."""
    effective = get_user_permissions(user)
    return any(permission in effective for permission in permissions)


def has_all_permissions(user: Any, permissions: Iterable[Permission]) -> bool:
    """AND semantics. An empty list is trivially satisfied, even for no user."""
    effective = get_user_permissions(user)
    return all(permission in effective for permission in permissions)


def filter_by_permission(
    items: Iterable[T],
    user: Any,
    get_required_permission: Callable[[T], Permission],
) -> List[T]:
    effective = get_user_permissions(user)
    return [item for item in items if get_required_permission(item) in effective]


# ============================================================
# RBAC HELPER: convenience wrapper for one user
# ============================================================
class RBACHelper:
    """
    Bundles the checks a page or handler usually needs for a single user.

    Role properties are exact matches (is_leader is False for an ADMIN);
    use has_min_role() for "at least" checks.
    """

    def __init__(self, user: Any):
        self.user = user
        self.role = get_user_role(user)

    # Role checks
    @property
    def is_authenticated(self) -> bool:
        return self.role is not None

    @property
    def is_super_admin(self) -> bool:
        return self.role == UserRole.SUPER_ADMIN

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_owner(self) -> bool:
        return self.role == UserRole.OWNER

    @property
    def is_project_manager(self) -> bool:
        return self.role == UserRole.PROJECT_MANAGER

    @property
    def is_leader(self) -> bool:
        return self.role == UserRole.LEADER

    @property
    def is_member(self) -> bool:
        return self.role == UserRole.MEMBER

    @property
    def is_guest(self) -> bool:
        return self.role == UserRole.GUEST

    # Management capabilities
    @property
    def can_manage_workspace(self) -> bool:
        return self.can(Permission.MANAGE_WORKSPACE)

    @property
    def can_manage_users(self) -> bool:
        return self.can(Permission.MANAGE_USERS)

    @property
    def can_create_projects(self) -> bool:
        return self.can(Permission.CREATE_PROJECT)

    @property
    def can_manage_teams(self) -> bool:
        return self.can(Permission.MANAGE_TEAM)

    @property
    def can_view_reports(self) -> bool:
        return self.can(Permission.VIEW_REPORTS)

    @property
    def can_manage_billing(self) -> bool:
        return self.can(Permission.MANAGE_BILLING)

    @property
    def can_invite_users(self) -> bool:
        return self.can(Permission.INVITE_USERS)

    @property
    def can_delete_projects(self) -> bool:
        return self.can(Permission.DELETE_PROJECT)

    @property
    def can_manage_system(self) -> bool:
        return self.can(Permission.MANAGE_SYSTEM)

    # Utility methods
    def can(self, permission: Permission) -> bool:
        return has_permission(self.user, permission)

    def can_any(self, permissions: Iterable[Permission]) -> bool:
        return has_any_permission(self.user, permissions)

    def can_all(self, permissions: Iterable[Permission]) -> bool:
        return has_all_permissions(self.user, permissions)

    def has_min_role(self, minimum_role: UserRole) -> bool:
        if self.role is None:
            return False
        return has_minimum_role(self.role, minimum_role)


def create_rbac_helper(user: Any) -> RBACHelper:
    return RBACHelper(user)


# ============================================================
# DEBUGGING
# ============================================================
def describe_user_access(user: Any) -> dict:
    """
    Snapshot of what RBAC derives for a user. Empty dict for no user.
    """
    role = get_user_role(user)
    if role is None:
        return {}

    return {
        "raw_role": get_raw_role(user),
        "role": role.value,
        "rank": rank(role),
        "permissions": sorted(p.value for p in get_permissions_for_role(role)),
    }


def debug_user_permissions(user: Any) -> None:
    info = describe_user_access(user)
    if not info:
        return
    logger.debug(f"RBAC debug: {info}")
