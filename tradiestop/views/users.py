"""Users page (admin only)."""

from typing import List, Optional

from tradiestop.models.app_data import AppData
from tradiestop.models.user import User


def search_users(data: AppData, query: Optional[str] = None) -> List[User]:
    """Users whose name or id contains ``query``, ignoring case."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(data.users)
    return [
        u for u in data.users if needle in u.name.lower() or needle in u.id.lower()
    ]
