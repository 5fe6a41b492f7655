"""Sidebar and header navigation per role."""

from typing import Dict, List, Optional

from tradiestop.models.enums import Role

SETTINGS = "Settings"
HEADER_ITEMS = 3

NAVIGATION: Dict[Role, List[str]] = {
    Role.CLIENT: ["Dashboard", "Bookings", "Messages", "Payments", "My Reviews", SETTINGS],
    Role.TRADIE: ["Dashboard", "Schedule", "Messages", "Payments", "My Reviews", SETTINGS],
    Role.ADMIN: ["Dashboard", "Bookings", "Users", "Support", SETTINGS],
}

PAGE_ALIASES = {
    "Schedule": "Bookings",
    "My Reviews": "Reviews",
}

PAGES = ("Dashboard", "Bookings", "Messages", "Payments", "Reviews", "Users", "Support", SETTINGS)


def sidebar_items(role: Role) -> List[str]:
    return list(NAVIGATION[role])


def header_items(role: Role) -> List[str]:
    return [item for item in NAVIGATION[role] if item != SETTINGS][:HEADER_ITEMS]


def resolve_page(name: Optional[str]) -> str:
    """Page a navigation item or notification link opens.

    Unknown names fall back to the dashboard.
    """
    if not name:
        return "Dashboard"
    page = PAGE_ALIASES.get(name, name)
    return page if page in PAGES else "Dashboard"
