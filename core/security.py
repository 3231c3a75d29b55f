# core/security.py

"""
Session token helpers.

Tokens are HS256 JWTs (python-jose). Claims:
  sub  : user id
  email: optional
  name : optional
  role : raw role string, passed through untouched
  exp  : expiry
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from pydantic import ValidationError
from starlette.requests import HTTPConnection

from core.config import settings
from core.errors import InvalidSessionToken
from core.logging_config import logger
from models.user import CurrentUser


def create_session_token(
    user_id: str,
    role: Optional[str],
    email: Optional[str] = None,
    name: Optional[str] = None,
    expires_minutes: Optional[int] = None,
) -> str:
    if expires_minutes is None:
        expires_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    payload = {
        "sub": user_id,
        "role": role,
        "email": email,
        "name": name,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=expires_minutes),
    }

    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_session_token(token: Optional[str]) -> CurrentUser:
    if not token:
        raise InvalidSessionToken("Missing session token")

    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except JWTError as e:
        raise InvalidSessionToken(f"Invalid or expired session: {e}") from e

    user_id = payload.get("sub")
    if not user_id:
        raise InvalidSessionToken("Session token has no subject")

    # Claims are signed but still untrusted; a malformed claim is a bad session
    try:
        return CurrentUser(
            id=user_id,
            email=payload.get("email"),
            name=payload.get("name"),
            role=payload.get("role"),
        )
    except ValidationError as e:
        raise InvalidSessionToken(f"Malformed session claims: {e.error_count()} error(s)") from e


# ============================================================
# Token lookup: Authorization header first, then session cookie
# ============================================================
def extract_session_token(conn: HTTPConnection) -> Optional[str]:
    auth_header = conn.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        token = auth_header[len("Bearer "):].strip()
        if token:
            return token

    return conn.cookies.get(settings.SESSION_COOKIE_NAME) or None


def get_session_user(conn: HTTPConnection) -> Optional[CurrentUser]:
    """
    Current user for a request, or None. An invalid token is treated
    the same as no token.
    """
    try:
        return decode_session_token(extract_session_token(conn))
    except InvalidSessionToken as e:
        if e.reason != "Missing session token":
            logger.debug(f"Ignoring session token: {e.reason}")
        return None
