from models.enums import Permission, UserRole

# ============================================
# CENTRALIZED ROLE → PERMISSIONS MAP
# Authored by hand; keep it consistent with ROLE_HIERARCHY
# (a higher role should not hold fewer permissions).
# ============================================
ROLE_PERMISSIONS = {

    # =====================================================
    # SUPER ADMIN: every permission
    # =====================================================
    UserRole.SUPER_ADMIN: frozenset(Permission),

    # =====================================================
    # SYSTEM ADMIN: no system config, workspace lifecycle,
    # billing changes or integration management
    # =====================================================
    UserRole.ADMIN: frozenset([
        Permission.VIEW_ANALYTICS,
        Permission.MANAGE_WORKSPACE,

        Permission.INVITE_USERS, Permission.MANAGE_USERS,
        Permission.MANAGE_ROLES, Permission.VIEW_MEMBERS,

        Permission.CREATE_PROJECT, Permission.UPDATE_PROJECT,
        Permission.DELETE_PROJECT, Permission.VIEW_PROJECT,
        Permission.MANAGE_PROJECT_SETTINGS,

        Permission.CREATE_TEAM, Permission.MANAGE_TEAM, Permission.DELETE_TEAM,

        Permission.CREATE_TASK, Permission.ASSIGN_TASK, Permission.UPDATE_TASK,
        Permission.DELETE_TASK, Permission.VIEW_TASK, Permission.COMMENT_ON_TASK,

        Permission.UPLOAD_FILE, Permission.DELETE_FILE, Permission.VIEW_FILES,

        Permission.VIEW_REPORTS, Permission.EXPORT_DATA,
        Permission.VIEW_BILLING,
        Permission.MANAGE_NOTIFICATIONS, Permission.SEND_NOTIFICATIONS,
        Permission.VIEW_INTEGRATIONS,
        Permission.API_ACCESS,
    ]),

    # =====================================================
    # WORKSPACE OWNER: owns billing, not roles
    # =====================================================
    UserRole.OWNER: frozenset([
        Permission.MANAGE_WORKSPACE,

        Permission.INVITE_USERS, Permission.MANAGE_USERS, Permission.VIEW_MEMBERS,

        Permission.CREATE_PROJECT, Permission.UPDATE_PROJECT,
        Permission.DELETE_PROJECT, Permission.VIEW_PROJECT,
        Permission.MANAGE_PROJECT_SETTINGS,

        Permission.CREATE_TEAM, Permission.MANAGE_TEAM, Permission.DELETE_TEAM,

        Permission.CREATE_TASK, Permission.ASSIGN_TASK, Permission.UPDATE_TASK,
        Permission.DELETE_TASK, Permission.VIEW_TASK, Permission.COMMENT_ON_TASK,

        Permission.UPLOAD_FILE, Permission.DELETE_FILE, Permission.VIEW_FILES,

        Permission.VIEW_REPORTS, Permission.EXPORT_DATA,
        Permission.MANAGE_BILLING, Permission.VIEW_BILLING,
        Permission.SEND_NOTIFICATIONS,
        Permission.VIEW_INTEGRATIONS,
    ]),

    # =====================================================
    # PROJECT MANAGER: cannot delete projects or teams
    # =====================================================
    UserRole.PROJECT_MANAGER: frozenset([
        Permission.VIEW_MEMBERS,

        Permission.CREATE_PROJECT, Permission.UPDATE_PROJECT,
        Permission.VIEW_PROJECT, Permission.MANAGE_PROJECT_SETTINGS,

        Permission.CREATE_TEAM, Permission.MANAGE_TEAM,

        Permission.CREATE_TASK, Permission.ASSIGN_TASK, Permission.UPDATE_TASK,
        Permission.DELETE_TASK, Permission.VIEW_TASK, Permission.COMMENT_ON_TASK,

        Permission.UPLOAD_FILE, Permission.VIEW_FILES,

        Permission.VIEW_REPORTS,
        Permission.SEND_NOTIFICATIONS,
    ]),

    # =====================================================
    # TEAM LEADER
    # =====================================================
    UserRole.LEADER: frozenset([
        Permission.VIEW_MEMBERS,
        Permission.VIEW_PROJECT,
        Permission.MANAGE_TEAM,

        Permission.CREATE_TASK, Permission.ASSIGN_TASK, Permission.UPDATE_TASK,
        Permission.VIEW_TASK, Permission.COMMENT_ON_TASK,

        Permission.UPLOAD_FILE, Permission.VIEW_FILES,
        Permission.VIEW_REPORTS,
    ]),

    # =====================================================
    # MEMBER: default for authenticated users
    # =====================================================
    UserRole.MEMBER: frozenset([
        Permission.VIEW_MEMBERS,
        Permission.VIEW_PROJECT,

        Permission.CREATE_TASK, Permission.UPDATE_TASK,
        Permission.VIEW_TASK, Permission.COMMENT_ON_TASK,

        Permission.UPLOAD_FILE, Permission.VIEW_FILES,
    ]),

    # =====================================================
    # GUEST: read only
    # =====================================================
    UserRole.GUEST: frozenset([
        Permission.VIEW_PROJECT,
        Permission.VIEW_TASK,
        Permission.VIEW_FILES,
    ]),
}


def get_permissions_for_role(role: UserRole) -> frozenset:
    return ROLE_PERMISSIONS.get(role, frozenset())


def role_has_permission(role: UserRole, permission: Permission) -> bool:
    return permission in get_permissions_for_role(role)
