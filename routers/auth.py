from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel

from core.config import settings
from core.logging_config import logger
from core.permission_helpers import debug_user_permissions, get_user_permissions, get_user_role
from core.roles import get_default_route, rank
from core.security import create_session_token
from dependencies.auth import get_current_user
from models.user import CurrentUser, UserAccessRead


router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


# ============================================================
# MODELS
# ============================================================
class DevLoginRequest(BaseModel):
    user_id: str = "dev-user"
    # Raw role string, exactly as the upstream session would carry it
    role: str = "MEMBER"
    email: Optional[str] = None
    name: Optional[str] = None


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role: Optional[str] = None
    expires_in_minutes: int


# ============================================================
# DEV LOGIN: mint a session for local testing
# ============================================================
@router.post("/dev-login", response_model=TokenResponse, summary="DEV: Issue a session token")
def dev_login(payload: DevLoginRequest, response: Response):
    """
    ⚠️ DEV ONLY. Issues a signed session for any user id / role and sets
    the session cookie. Only served with ENABLE_DEV_LOGIN on in ENV=development.
    """
    if not (settings.ENABLE_DEV_LOGIN and settings.is_development):
        raise HTTPException(status_code=404, detail="Not Found")

    expires = settings.ACCESS_TOKEN_EXPIRE_MINUTES
    token = create_session_token(
        user_id=payload.user_id,
        role=payload.role,
        email=payload.email,
        name=payload.name,
        expires_minutes=expires,
    )

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=expires * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )

    logger.info(f"Dev session issued for {payload.user_id} (role={payload.role!r})")

    return TokenResponse(access_token=token, role=payload.role, expires_in_minutes=expires)


# ============================================================
# LOGOUT: drop the session cookie
# ============================================================
@router.post("/logout", summary="Clear the session cookie")
def logout(response: Response):
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"success": True}


# ============================================================
# CURRENT USER
# ============================================================
@router.get("/me", response_model=UserAccessRead, summary="Current user with derived role and permissions")
def read_me(current_user: CurrentUser = Depends(get_current_user)):
    role = get_user_role(current_user)
    debug_user_permissions(current_user)

    return UserAccessRead(
        id=current_user.id,
        email=current_user.email,
        name=current_user.name,
        raw_role=current_user.role,
        role=role,
        rank=rank(role),
        permissions=sorted(get_user_permissions(current_user), key=lambda p: p.value),
        default_route=get_default_route(role),
    )
