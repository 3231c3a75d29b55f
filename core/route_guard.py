# core/route_guard.py

"""
Server-side route protection.

Looks up the request path in core.routes, evaluates the rule through
core.access.resolve_access and turns the outcome into:

  • API paths  → 401 / 403 JSON
  • page paths → redirect to login (with callbackUrl) or to the
                 user's default route
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, RedirectResponse, Response

from core.access import resolve_access
from core.errors import FORBIDDEN_DETAIL, UNAUTHENTICATED_DETAIL
from core.logging_config import logger
from core.permission_helpers import get_user_role
from core.roles import get_default_route
from core.routes import build_login_url, get_route_by_path, is_api_path
from core.security import get_session_user
from models.access import AccessOutcome


class RouteGuardMiddleware(BaseHTTPMiddleware):
    """Gate every request against ROUTE_RULES before it reaches a handler."""

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        user = get_session_user(request)

        rule = get_route_by_path(path)
        if rule is None or rule.is_public:
            return await call_next(request)

        role = get_user_role(user)

        if rule.requires_guest:
            if role is not None:
                return RedirectResponse(get_default_route(role), status_code=302)
            return await call_next(request)

        outcome = resolve_access(user, rule.requirement)
        if outcome == AccessOutcome.ALLOWED:
            return await call_next(request)

        api = is_api_path(path)

        if outcome == AccessOutcome.UNAUTHENTICATED:
            logger.warning(f"Unauthenticated request blocked: {request.method} {path}")
            if api:
                return JSONResponse(
                    status_code=401,
                    content={"detail": UNAUTHENTICATED_DETAIL},
                    headers={"WWW-Authenticate": "Bearer"},
                )
            return RedirectResponse(build_login_url(path), status_code=302)

        logger.warning(f"Forbidden: {request.method} {path} for user {user.id} ({role})")
        if api:
            return JSONResponse(status_code=403, content={"detail": FORBIDDEN_DETAIL})
        return RedirectResponse(get_default_route(role), status_code=302)
