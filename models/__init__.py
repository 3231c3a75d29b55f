# -------------------------
# Enums
# -------------------------
from .enums import (
    Permission,
    UserRole,
)

# -------------------------
# User Models
# -------------------------
from .user import (
    CurrentUser,
    RoleRead,
    UserAccessRead,
)

# -------------------------
# Access Models
# -------------------------
from .access import (
    AccessCheckResponse,
    AccessOutcome,
    AccessRequirement,
)

# -------------------------
# Navigation Models
# -------------------------
from .navigation import (
    FooterAction,
    NavigationBadge,
    NavigationItem,
    NavigationMenu,
    NavigationSection,
    QuickAction,
)
