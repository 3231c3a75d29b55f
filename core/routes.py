# core/routes.py

"""
Per-path access rules consulted by RouteGuardMiddleware.

Rules match on path prefix (segment boundaries); the longest match wins.
Paths without a rule are not guarded here.
"""

from typing import List, Optional
from urllib.parse import quote

from pydantic import BaseModel

from core.config import settings
from core.roles import ADMIN_ROLES
from models.access import AccessRequirement
from models.enums import Permission, UserRole


class RouteRule(BaseModel):
    path: str
    requirement: AccessRequirement = AccessRequirement()
    is_public: bool = False
    # Login / register: signed-in users get bounced to their home route
    requires_guest: bool = False


def _api(path: str) -> str:
    return f"{settings.API_PREFIX.rstrip('/')}{path}"


# ============================================================
# PAGE ROUTES
# ============================================================
PAGE_ROUTES = [
    RouteRule(path="/", is_public=True),
    RouteRule(path="/login", requires_guest=True),
    RouteRule(path="/register", requires_guest=True),
    RouteRule(path="/support", is_public=True),

    RouteRule(path="/home", requirement=AccessRequirement(allowed_roles=[UserRole.MEMBER])),
    RouteRule(path="/dashboard", requirement=AccessRequirement(allowed_roles=[UserRole.MEMBER])),
    RouteRule(path="/my-tasks", requirement=AccessRequirement(allowed_roles=[UserRole.MEMBER])),
    RouteRule(path="/inbox", requirement=AccessRequirement(allowed_roles=[UserRole.MEMBER])),
    RouteRule(path="/newsfeed", requirement=AccessRequirement(allowed_roles=[UserRole.MEMBER])),
    RouteRule(path="/goals", requirement=AccessRequirement(allowed_roles=[UserRole.MEMBER])),
    RouteRule(path="/profile", requirement=AccessRequirement(allowed_roles=[UserRole.MEMBER])),

    RouteRule(path="/projects", requirement=AccessRequirement(required_permissions=[Permission.VIEW_PROJECT])),
    RouteRule(path="/projects/create", requirement=AccessRequirement(required_permissions=[Permission.CREATE_PROJECT])),
    RouteRule(path="/teams", requirement=AccessRequirement(allowed_roles=[UserRole.MEMBER])),
    RouteRule(path="/teams/create", requirement=AccessRequirement(required_permissions=[Permission.CREATE_TEAM])),

    RouteRule(path="/reporting", requirement=AccessRequirement(required_permissions=[Permission.VIEW_REPORTS])),
    RouteRule(
        path="/manager",
        requirement=AccessRequirement(
            allowed_roles=[UserRole.ADMIN],
            required_permissions=[Permission.VIEW_REPORTS],
        ),
    ),
    RouteRule(path="/admin", requirement=AccessRequirement(minimum_role=UserRole.ADMIN)),
    RouteRule(path="/owner", requirement=AccessRequirement(minimum_role=UserRole.OWNER)),
]


# ============================================================
# API ROUTES: JSON 401/403 instead of redirects
# ============================================================
API_ROUTES = [
    RouteRule(
        path=_api("/tasks"),
        requirement=AccessRequirement(
            required_permissions=[Permission.VIEW_TASK, Permission.CREATE_TASK],
            require_all=False,
        ),
    ),
    RouteRule(
        path=_api("/projects"),
        requirement=AccessRequirement(
            required_permissions=[Permission.VIEW_PROJECT, Permission.CREATE_PROJECT],
            require_all=False,
        ),
    ),
    RouteRule(path=_api("/users"), requirement=AccessRequirement(required_permissions=[Permission.MANAGE_USERS])),
    RouteRule(path=_api("/teams"), requirement=AccessRequirement(required_permissions=[Permission.MANAGE_TEAM])),
    RouteRule(path=_api("/admin"), requirement=AccessRequirement(allowed_roles=list(ADMIN_ROLES))),
]

ROUTE_RULES: List[RouteRule] = PAGE_ROUTES + API_ROUTES


def _matches(rule_path: str, path: str) -> bool:
    if rule_path == "/":
        return path == "/"
    return path == rule_path or path.startswith(rule_path.rstrip("/") + "/")


def get_route_by_path(path: str, rules: Optional[List[RouteRule]] = None) -> Optional[RouteRule]:
    if rules is None:
        rules = ROUTE_RULES

    best = None
    for rule in rules:
        if _matches(rule.path, path) and (best is None or len(rule.path) > len(best.path)):
            best = rule
    return best


def is_api_path(path: str) -> bool:
    prefix = settings.API_PREFIX.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


def build_login_url(callback_path: str) -> str:
    return f"{settings.LOGIN_PATH}?callbackUrl={quote(callback_path, safe='')}"
