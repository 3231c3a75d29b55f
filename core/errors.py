# core/errors.py

from fastapi import HTTPException, status


class InvalidSessionToken(Exception):
    """
    Session token is missing, expired, malformed or lacks a subject.
    Raised by core.security; the HTTP layer turns it into a 401.
    """

    def __init__(self, reason: str = "Invalid or expired session"):
        super().__init__(reason)
        self.reason = reason


UNAUTHENTICATED_DETAIL = "Authentication required"
FORBIDDEN_DETAIL = "Insufficient permissions"


def unauthorized(detail: str = UNAUTHENTICATED_DETAIL) -> HTTPException:
    """
    401 for a missing / invalid session.
    Returns HTTPException (doesn't raise) so caller can customize or re-raise.
    """
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def forbidden(detail: str = FORBIDDEN_DETAIL) -> HTTPException:
    """403 for a valid session that fails the requirement."""
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=detail,
    )
