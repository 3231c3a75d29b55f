from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.access import can_access_route, meets_requirement
from core.config import settings
from core.errors import InvalidSessionToken, forbidden, unauthorized
from core.permission_helpers import get_user_role, has_all_permissions, has_any_permission, has_permission
from core.roles import ADMIN_ROLES, MANAGEMENT_ROLES, has_minimum_role
from core.security import decode_session_token
from models.access import AccessRequirement
from models.enums import Permission, UserRole
from models.user import CurrentUser


# Missing header is not an error here; the session cookie is the fallback
bearer_scheme = HTTPBearer(auto_error=False)


def get_session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    if credentials and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME) or None


# ============================================================
# AUTH DECODING (Bearer header or session cookie)
# ============================================================
def get_current_user(token: Optional[str] = Depends(get_session_token)) -> CurrentUser:
    try:
        user = decode_session_token(token)
    except InvalidSessionToken as e:
        raise unauthorized("Invalid or expired authentication token") from e

    if get_user_role(user) is None:
        raise unauthorized("Session has no role")

    return user


# ============================================================
# OPTIONAL AUTHENTICATION (for hybrid endpoints)
# ============================================================
def get_optional_user(token: Optional[str] = Depends(get_session_token)) -> Optional[CurrentUser]:
    """
    Returns CurrentUser if a valid session is present, None otherwise.
    Never raises.
    """
    try:
        return decode_session_token(token)
    except InvalidSessionToken:
        return None


# ============================================================
# ROLE CHECKER ("this role or higher")
# ============================================================
def requires_role(*roles: UserRole):
    """
    Usage:
        @router.get("/reports", dependencies=[Depends(requires_role(UserRole.LEADER))])

    Listing LEADER also admits PM, OWNER, ADMIN and SUPER_ADMIN.
    """

    def checker(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if not can_access_route(current_user, list(roles)):
            raise forbidden(f"Requires one of: {[r.value for r in roles]}")
        return current_user

    return checker


def requires_minimum_role(minimum_role: UserRole):
    def checker(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if not has_minimum_role(get_user_role(current_user), minimum_role):
            raise forbidden(f"Requires role {minimum_role.value} or higher")
        return current_user

    return checker


# ============================================================
# SHORTCUTS
# ============================================================
def requires_admin():
    return requires_role(*ADMIN_ROLES)


def requires_owner():
    # broadening lets ADMIN / SUPER_ADMIN through as well
    return requires_role(UserRole.OWNER)


def requires_manager():
    """Leaders and above."""
    return requires_role(*MANAGEMENT_ROLES)


# ============================================================
# PERMISSION CHECKS
# ============================================================
def requires_permission(permission: Permission):
    """
    Usage:
        @router.post("/", dependencies=[Depends(requires_permission(Permission.CREATE_TASK))])
    """

    def checker(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if not has_permission(current_user, permission):
            raise forbidden(f"Insufficient permissions: '{permission.value}' required")
        return current_user

    return checker


def requires_permissions(*permissions: Permission, require_all: bool = True):
    def checker(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if require_all:
            allowed = has_all_permissions(current_user, permissions)
        else:
            allowed = has_any_permission(current_user, permissions)

        if not allowed:
            mode = "all" if require_all else "any"
            raise forbidden(f"Insufficient permissions: {mode} of {[p.value for p in permissions]} required")
        return current_user

    return checker


# ============================================================
# FULL REQUIREMENT
# ============================================================
def requires_access(requirement: AccessRequirement):
    """
    Evaluates a whole AccessRequirement. With allow_guest the dependency
    yields None for anonymous callers instead of a 401.
    """

    def checker(current_user: Optional[CurrentUser] = Depends(get_optional_user)) -> Optional[CurrentUser]:
        if get_user_role(current_user) is None:
            if requirement.allow_guest:
                return None
            raise unauthorized()

        if not meets_requirement(current_user, requirement):
            raise forbidden()
        return current_user

    return checker
