# core/navigation.py

"""
Sidebar, quick-action and footer configuration, plus the filters that
decide what a given user sees.

Visibility is always decided by core.access.can_access_route so that
role comparisons live in one place.
"""

from typing import Any, List, Optional, Sequence

from core.access import can_access_route
from core.permission_helpers import get_user_role
from models.enums import Permission, UserRole
from models.navigation import (
    FooterAction,
    NavigationBadge,
    NavigationItem,
    NavigationMenu,
    NavigationSection,
    QuickAction,
)


# ============================================================
# SIDEBAR SECTIONS
# ============================================================
NAVIGATION_SECTIONS = [
    NavigationSection(
        id="main",
        items=[
            NavigationItem(id="home", label="Home", href="/home",
                           allowed_roles=[UserRole.MEMBER]),
            NavigationItem(id="my-tasks", label="My Tasks", href="/my-tasks",
                           allowed_roles=[UserRole.MEMBER],
                           badge=NavigationBadge(count=0, color="default")),
            NavigationItem(id="newsfeed", label="NewsFeed", href="/newsfeed",
                           allowed_roles=[UserRole.MEMBER]),
            NavigationItem(id="inbox", label="Inbox", href="/inbox",
                           allowed_roles=[UserRole.MEMBER]),
        ],
        default_expanded=True,
    ),
    NavigationSection(
        id="analytics",
        title="Insights",
        items=[
            NavigationItem(id="goals", label="Goals", href="/goals",
                           allowed_roles=[UserRole.MEMBER]),
            NavigationItem(id="reports", label="Reports", href="/reporting",
                           allowed_roles=[UserRole.MEMBER]),
        ],
        collapsible=True,
    ),
    NavigationSection(
        id="projects",
        title="Projects",
        allowed_roles=[UserRole.MEMBER],
        items=[
            NavigationItem(id="projects-overview", label="All Projects", href="/projects",
                           allowed_roles=[UserRole.MEMBER]),
            NavigationItem(id="my-projects", label="My Projects", href="/projects/my-projects",
                           allowed_roles=[UserRole.MEMBER], dynamic=True),
            NavigationItem(id="project-tasks", label="Project Tasks", href="/projects/tasks",
                           allowed_roles=[UserRole.MEMBER]),
            NavigationItem(id="project-management", label="Project Management", href="/projects/manage",
                           allowed_roles=[UserRole.MEMBER],
                           required_permissions=[Permission.MANAGE_PROJECT_SETTINGS]),
        ],
        collapsible=True,
    ),
    NavigationSection(
        id="teams",
        title="Teams",
        allowed_roles=[UserRole.MEMBER],
        items=[
            NavigationItem(id="teams-overview", label="All Teams", href="/teams",
                           allowed_roles=[UserRole.MEMBER]),
            NavigationItem(id="my-teams", label="My Teams", href="/teams/my-teams",
                           allowed_roles=[UserRole.MEMBER], dynamic=True),
            NavigationItem(id="team-tasks", label="Team Tasks", href="/teams/tasks",
                           allowed_roles=[UserRole.MEMBER]),
            NavigationItem(id="team-management", label="Team Management", href="/teams/manage",
                           allowed_roles=[UserRole.MEMBER],
                           required_permissions=[Permission.MANAGE_TEAM]),
        ],
        collapsible=True,
    ),
    NavigationSection(
        id="management",
        title="Management",
        allowed_roles=[UserRole.ADMIN],
        items=[
            NavigationItem(id="management-center", label="Management Center", href="/manager",
                           allowed_roles=[UserRole.ADMIN],
                           required_permissions=[Permission.VIEW_REPORTS]),
        ],
        collapsible=True,
    ),
]


# ============================================================
# QUICK ACTIONS ("+" menu)
# ============================================================
QUICK_ACTIONS = [
    QuickAction(id="create-project", label="Create Project", href="/projects/create",
                allowed_roles=[UserRole.MEMBER], required_permissions=[Permission.CREATE_PROJECT]),
    QuickAction(id="create-team", label="Create Team", href="/teams/create",
                allowed_roles=[UserRole.MEMBER], required_permissions=[Permission.CREATE_TEAM]),
    QuickAction(id="create-task", label="Create Task", href="/tasks/create",
                allowed_roles=[UserRole.MEMBER], required_permissions=[Permission.CREATE_TASK]),
    QuickAction(id="invite-member", label="Invite Member", href="/invite",
                allowed_roles=[UserRole.MEMBER], required_permissions=[Permission.INVITE_USERS]),
]


# ============================================================
# FOOTER
# ============================================================
FOOTER_ACTIONS = [
    FooterAction(id="system-settings", label="System Settings", href="/admin/settings",
                 allowed_roles=[UserRole.ADMIN]),
    FooterAction(id="user-settings", label="User Settings", href="/settings",
                 allowed_roles=[UserRole.MEMBER]),
    FooterAction(id="support", label="Support", href="/support",
                 allowed_roles=[UserRole.MEMBER]),
]


def _is_visible(user: Any, entry) -> bool:
    return can_access_route(user, entry.allowed_roles, entry.required_permissions)


def _visible_items(user: Any, items: Sequence[NavigationItem]) -> List[NavigationItem]:
    visible = []
    for item in items:
        if not _is_visible(user, item):
            continue
        if item.dynamic:
            # populated by the client from the user's projects / teams
            item = item.model_copy(update={"child_items": []})
        visible.append(item)
    return visible


def get_visible_navigation_sections(
    user: Any,
    sections: Optional[Sequence[NavigationSection]] = None,
) -> List[NavigationSection]:
    """
    A section shows when its own requirement passes and at least one item
    survives. Sections holding a dynamic list show once their own
    requirement passes; an empty list there is a data question.
    """
    if get_user_role(user) is None:
        return []

    if sections is None:
        sections = NAVIGATION_SECTIONS

    visible = []
    for section in sections:
        if not _is_visible(user, section):
            continue

        items = _visible_items(user, section.items)
        if not items and not section.is_dynamic:
            continue

        visible.append(section.model_copy(update={"items": items}))

    return visible


def get_visible_quick_actions(user: Any) -> List[QuickAction]:
    return [action for action in QUICK_ACTIONS if _is_visible(user, action)]


def get_visible_footer_actions(user: Any) -> List[FooterAction]:
    return [action for action in FOOTER_ACTIONS if _is_visible(user, action)]


def build_navigation_menu(user: Any) -> NavigationMenu:
    return NavigationMenu(
        sections=get_visible_navigation_sections(user),
        quick_actions=get_visible_quick_actions(user),
        footer_actions=get_visible_footer_actions(user),
    )
