from __future__ import annotations

from ..domain.entities import CellModel, NearbyUserItem, SectionIdentifier
from .base import SectionBase

NEARBY_USERS = (NearbyUserItem.USER_WITH_NAME_ONLY, NearbyUserItem.USER_WITH_AVATAR)


class NearbyUsersSection(SectionBase[NearbyUserItem]):
    """Two fixed users, set once on update; no periodic refresh."""

    identifier = SectionIdentifier.NEARBY_USERS

    def update(self) -> None:
        self._elements = list(NEARBY_USERS)

    def _cell_for(self, element: NearbyUserItem) -> CellModel:
        if element is NearbyUserItem.USER_WITH_AVATAR:
            return CellModel("User and its avatar")
        return CellModel("User with name only")


__all__ = ["NEARBY_USERS", "NearbyUsersSection"]
