"""Messages page: the people the current user can talk to."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from tradiestop.models.app_data import AppData
from tradiestop.models.enums import Role
from tradiestop.models.user import User

CLIENT_SNIPPET = "Talk about your booking..."
TRADIE_SNIPPET = "Discussing the job..."


@dataclass
class Contact:
    id: str
    name: str
    image_url: str = ""
    snippet: str = ""


def contacts_for(data: AppData, user: Optional[User]) -> List[Contact]:
    """Contacts derived from the user's bookings, one per contact id.

    Clients see the tradies they booked, tradies the clients they worked for
    and admins every other user. The first occurrence of a contact wins.
    """
    if user is None:
        return []

    contacts: Dict[str, Contact] = {}
    if user.role == Role.CLIENT:
        for b in data.bookings:
            if b.client_id == user.id and b.tradie_id not in contacts:
                contacts[b.tradie_id] = Contact(
                    id=b.tradie_id,
                    name=b.tradie_name,
                    image_url=b.tradie_image_url,
                    snippet=CLIENT_SNIPPET,
                )
    elif user.role == Role.TRADIE:
        for b in data.bookings:
            if b.tradie_id == user.id and b.client_id not in contacts:
                contacts[b.client_id] = Contact(
                    id=b.client_id,
                    name=b.client_name,
                    image_url=b.client_image_url,
                    snippet=TRADIE_SNIPPET,
                )
    else:
        for other in data.users:
            if other.id != user.id and other.id not in contacts:
                contacts[other.id] = Contact(
                    id=other.id,
                    name=other.name,
                    image_url=other.image_url,
                    snippet=f"Role: {other.role.value}",
                )
    return list(contacts.values())
