# models/user.py

from typing import List, Optional
from pydantic import BaseModel

from models.enums import Permission, UserRole


# ===============================================================
# SESSION USER
# ===============================================================

class CurrentUser(BaseModel):
    """
    Authorization-relevant projection of the session.

    `role` is the raw string from the token. It is untrusted and
    normalized by core.roles at decision time, never here.
    """
    id: str
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None


class UserAccessRead(BaseModel):
    """
    Returned by /auth/me: the session user plus what RBAC derived from it.
    """
    id: str
    email: Optional[str] = None
    name: Optional[str] = None
    raw_role: Optional[str] = None
    role: UserRole
    rank: int
    permissions: List[Permission] = []
    default_route: str


class RoleRead(BaseModel):
    role: UserRole
    rank: int
    permissions: List[Permission]
