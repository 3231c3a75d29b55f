# models/navigation.py

from typing import List, Optional
from pydantic import BaseModel

from models.enums import Permission, UserRole


class NavigationBadge(BaseModel):
    count: int = 0
    color: str = "default"


class NavigationItem(BaseModel):
    id: str
    label: str
    href: str
    allowed_roles: List[UserRole] = []
    required_permissions: List[Permission] = []
    badge: Optional[NavigationBadge] = None

    # Children filled in at runtime (project / team lists)
    dynamic: bool = False
    child_items: List["NavigationItem"] = []


class NavigationSection(BaseModel):
    id: str
    title: Optional[str] = None
    items: List[NavigationItem] = []
    collapsible: bool = False
    default_expanded: bool = True
    allowed_roles: List[UserRole] = []
    required_permissions: List[Permission] = []

    @property
    def is_dynamic(self) -> bool:
        return any(item.dynamic for item in self.items)


class QuickAction(BaseModel):
    id: str
    label: str
    href: str
    allowed_roles: List[UserRole] = []
    required_permissions: List[Permission] = []


class FooterAction(BaseModel):
    id: str
    label: str
    href: str
    allowed_roles: List[UserRole] = []
    required_permissions: List[Permission] = []


class NavigationMenu(BaseModel):
    sections: List[NavigationSection] = []
    quick_actions: List[QuickAction] = []
    footer_actions: List[FooterAction] = []


NavigationItem.model_rebuild()
