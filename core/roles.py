# core/roles.py

"""
Role hierarchy and role-string normalization.

Session tokens carry whatever role string the backend (or an older
client) wrote. Everything downstream works on UserRole, so every
authorization check goes through normalize_role() first.
"""

from typing import Optional, Union

from core.logging_config import logger
from models.enums import UserRole


# ============================================
# ROLE HIERARCHY: higher number = more privilege
# ============================================
ROLE_HIERARCHY = {
    UserRole.SUPER_ADMIN: 100,
    UserRole.ADMIN: 90,
    UserRole.OWNER: 80,
    UserRole.PROJECT_MANAGER: 70,
    UserRole.LEADER: 50,
    UserRole.MEMBER: 30,
    UserRole.GUEST: 10,
}


# ============================================
# LEGACY ROLE LABELS → canonical role
# Keep in sync with UserRole when adding roles.
# ============================================
LEGACY_ROLE_MAPPING = {
    # Old lowercase labels
    "super_admin": UserRole.SUPER_ADMIN,
    "admin": UserRole.ADMIN,
    "owner": UserRole.OWNER,
    "project_manager": UserRole.PROJECT_MANAGER,
    "pm": UserRole.PROJECT_MANAGER,
    "leader": UserRole.LEADER,
    "member": UserRole.MEMBER,
    "guest": UserRole.GUEST,

    # Backend returns uppercase
    "SUPER_ADMIN": UserRole.SUPER_ADMIN,
    "ADMIN": UserRole.ADMIN,
    "OWNER": UserRole.OWNER,
    "PM": UserRole.PROJECT_MANAGER,
    "PROJECT_MANAGER": UserRole.PROJECT_MANAGER,
    "LEADER": UserRole.LEADER,
    "MEMBER": UserRole.MEMBER,
    "GUEST": UserRole.GUEST,
}

# Unknown or missing roles land here: lowest authenticated tier,
# never an elevated one.
DEFAULT_USER_ROLE = UserRole.MEMBER

ADMIN_ROLES = [
    UserRole.SUPER_ADMIN,
    UserRole.ADMIN,
    UserRole.OWNER,
]

MANAGEMENT_ROLES = [
    UserRole.SUPER_ADMIN,
    UserRole.ADMIN,
    UserRole.OWNER,
    UserRole.PROJECT_MANAGER,
    UserRole.LEADER,
]

_CANONICAL_VALUES = {role.value: role for role in UserRole}


def normalize_role(raw: Optional[Union[str, UserRole]]) -> UserRole:
    """
    Resolve a raw role string to its canonical UserRole.

    Order: canonical value, exact-case alias, lowercased alias,
    then DEFAULT_USER_ROLE with a warning. Never raises.
    """
    if isinstance(raw, UserRole):
        return raw

    if not raw or not isinstance(raw, str):
        logger.warning("Missing role %r, defaulting to %s", raw, DEFAULT_USER_ROLE)
        return DEFAULT_USER_ROLE

    canonical = _CANONICAL_VALUES.get(raw)
    if canonical is not None:
        return canonical

    exact_match = LEGACY_ROLE_MAPPING.get(raw)
    if exact_match is not None:
        return exact_match

    lowercase_match = LEGACY_ROLE_MAPPING.get(raw.lower())
    if lowercase_match is not None:
        return lowercase_match

    logger.warning("Unknown role %r, defaulting to %s", raw, DEFAULT_USER_ROLE)
    return DEFAULT_USER_ROLE


def rank(role: UserRole) -> int:
    # Only normalized roles reach here; anything else is a bug.
    assert role in ROLE_HIERARCHY, f"role {role!r} is not in ROLE_HIERARCHY"
    return ROLE_HIERARCHY[role]


def has_higher_role(user_role: UserRole, target_role: UserRole) -> bool:
    """True if user_role strictly outranks target_role."""
    return rank(user_role) > rank(target_role)


def has_minimum_role(user_role: UserRole, minimum_role: UserRole) -> bool:
    """True if user_role is at least as privileged as minimum_role."""
    return rank(user_role) >= rank(minimum_role)


# -----------------------------------------------------
# Landing page for a role (used after a denied page request)
# -----------------------------------------------------
def get_default_route(role: Optional[UserRole]) -> str:
    if role in (UserRole.SUPER_ADMIN, UserRole.ADMIN):
        return "/admin"
    if role == UserRole.OWNER:
        return "/owner/home"
    if role in (UserRole.PROJECT_MANAGER, UserRole.LEADER, UserRole.MEMBER):
        return "/dashboard"
    return "/"
