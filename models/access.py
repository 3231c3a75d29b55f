# models/access.py

from typing import List, Optional
from pydantic import BaseModel

from models.enums import BaseStrEnum, Permission, UserRole


class AccessRequirement(BaseModel):
    """
    Declarative gate attached to a route, nav item or UI region.

    - allowed_roles: role or anything at least as privileged as one entry
    - minimum_role: hierarchical floor
    - required_permissions: AND when require_all, OR otherwise
    - allow_guest: let unauthenticated callers through (guard-level only)
    """
    allowed_roles: List[UserRole] = []
    minimum_role: Optional[UserRole] = None
    required_permissions: List[Permission] = []
    require_all: bool = True
    allow_guest: bool = False


class AccessOutcome(BaseStrEnum):
    ALLOWED = "allowed"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


class AccessCheckResponse(BaseModel):
    outcome: AccessOutcome
    allowed: bool
    role: Optional[UserRole] = None
