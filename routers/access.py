from typing import List, Optional

from fastapi import APIRouter, Depends

from core.access import resolve_access
from core.navigation import build_navigation_menu
from core.permission_helpers import get_user_role
from core.permissions import get_permissions_for_role
from core.roles import ROLE_HIERARCHY
from dependencies.auth import get_current_user, get_optional_user
from models.access import AccessCheckResponse, AccessOutcome, AccessRequirement
from models.navigation import NavigationMenu
from models.user import CurrentUser, RoleRead


router = APIRouter(
    prefix="/access",
    tags=["Access Control"],
)


# -----------------------------------------------------
# POST /access/check
# Lets a client ask "may I?" for a requirement it holds
# -----------------------------------------------------
@router.post("/check", response_model=AccessCheckResponse, summary="Evaluate an access requirement")
def check_access(
    requirement: AccessRequirement,
    current_user: Optional[CurrentUser] = Depends(get_optional_user),
):
    outcome = resolve_access(current_user, requirement)
    return AccessCheckResponse(
        outcome=outcome,
        allowed=outcome == AccessOutcome.ALLOWED,
        role=get_user_role(current_user),
    )


# -----------------------------------------------------
# GET /access/navigation
# -----------------------------------------------------
@router.get("/navigation", response_model=NavigationMenu, summary="Sidebar entries visible to the current user")
def read_navigation(current_user: CurrentUser = Depends(get_current_user)):
    return build_navigation_menu(current_user)


# -----------------------------------------------------
# GET /access/roles
# -----------------------------------------------------
@router.get("/roles", response_model=List[RoleRead], summary="Role hierarchy and permission table")
def list_roles(current_user: CurrentUser = Depends(get_current_user)):
    roles = sorted(ROLE_HIERARCHY.items(), key=lambda item: item[1], reverse=True)
    return [
        RoleRead(
            role=role,
            rank=rank_value,
            permissions=sorted(get_permissions_for_role(role), key=lambda p: p.value),
        )
        for role, rank_value in roles
    ]
