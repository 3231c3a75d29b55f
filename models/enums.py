from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# USER ROLE
# -----------------------------------------------------
class UserRole(BaseStrEnum):
    """
    Canonical privilege tiers. Values match what the backend
    puts in the session token once normalized.
    """

    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    OWNER = "OWNER"
    PROJECT_MANAGER = "PM"
    LEADER = "LEADER"
    MEMBER = "MEMBER"
    GUEST = "GUEST"


# -----------------------------------------------------
# PERMISSION
# -----------------------------------------------------
class Permission(BaseStrEnum):
    """Flat capability tokens. No hierarchy, no wildcards."""

    # System
    MANAGE_SYSTEM = "MANAGE_SYSTEM"
    VIEW_ANALYTICS = "VIEW_ANALYTICS"

    # Workspace
    CREATE_WORKSPACE = "CREATE_WORKSPACE"
    MANAGE_WORKSPACE = "MANAGE_WORKSPACE"
    DELETE_WORKSPACE = "DELETE_WORKSPACE"

    # Users & roles
    INVITE_USERS = "INVITE_USERS"
    MANAGE_USERS = "MANAGE_USERS"
    MANAGE_ROLES = "MANAGE_ROLES"
    VIEW_MEMBERS = "VIEW_MEMBERS"

    # Projects
    CREATE_PROJECT = "CREATE_PROJECT"
    UPDATE_PROJECT = "UPDATE_PROJECT"
    DELETE_PROJECT = "DELETE_PROJECT"
    VIEW_PROJECT = "VIEW_PROJECT"
    MANAGE_PROJECT_SETTINGS = "MANAGE_PROJECT_SETTINGS"

    # Teams
    CREATE_TEAM = "CREATE_TEAM"
    MANAGE_TEAM = "MANAGE_TEAM"
    DELETE_TEAM = "DELETE_TEAM"

    # Tasks
    CREATE_TASK = "CREATE_TASK"
    ASSIGN_TASK = "ASSIGN_TASK"
    UPDATE_TASK = "UPDATE_TASK"
    DELETE_TASK = "DELETE_TASK"
    VIEW_TASK = "VIEW_TASK"
    COMMENT_ON_TASK = "COMMENT_ON_TASK"

    # Files
    UPLOAD_FILE = "UPLOAD_FILE"
    DELETE_FILE = "DELETE_FILE"
    VIEW_FILES = "VIEW_FILES"

    # Reporting
    VIEW_REPORTS = "VIEW_REPORTS"
    EXPORT_DATA = "EXPORT_DATA"

    # Billing
    MANAGE_BILLING = "MANAGE_BILLING"
    VIEW_BILLING = "VIEW_BILLING"

    # Notifications
    MANAGE_NOTIFICATIONS = "MANAGE_NOTIFICATIONS"
    SEND_NOTIFICATIONS = "SEND_NOTIFICATIONS"

    # Integrations
    MANAGE_INTEGRATIONS = "MANAGE_INTEGRATIONS"
    VIEW_INTEGRATIONS = "VIEW_INTEGRATIONS"

    # API
    API_ACCESS = "API_ACCESS"
    WEBHOOK_MANAGEMENT = "WEBHOOK_MANAGEMENT"
