"""Destination access rules."""

from typing import Iterable

from ..domain.models import Destination, User


class AccessPolicy:
    """Decides which users may use which destinations.

    Admins may use every destination and are the only users allowed to
    manage destinations and user access. Members may use exactly the
    destinations in their access list.
    """

    def can_use(self, user: User, destination_id: str) -> bool:
        if user.is_admin:
            return True
        return destination_id in user.accessible_destination_ids

    def can_manage(self, user: User) -> bool:
        return user.is_admin

    def visible_destinations(
        self, user: User, destinations: Iterable[Destination]
    ) -> list[Destination]:
        """Filter destinations down to those the user may use."""
        return [d for d in destinations if self.can_use(user, d.id)]
