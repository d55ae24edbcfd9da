"""Composite data source aggregating the four food-screen sections.

Call context:
    ``FoodViewModel`` owns one ``FoodDataSource``. It subscribes to
    ``reload`` and reads ``get_sections``/``get_elements`` to rebuild the
    snapshot. Sections report changes through ``did_request_action``; the data
    source folds all of them into its single ``reload`` notification.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..domain.entities import ActionKind, CellModel, IndexPath, Item, SectionAction, SectionIdentifier
from ..domain.ports import FoodSection, RepeatingScheduler, TimedSection
from ..utils.signals import CallbackSlot
from .base import DEFAULT_TICK_INTERVAL_MS
from .disclaimers import DisclaimersSection
from .favourite_food import FavouriteFoodSection
from .nearby_users import NearbyUsersSection
from .restaurants import RestaurantsSection


class FoodDataSource:
    """Flattened section/row addressing over the favourites, restaurants, users and disclaimers."""

    def __init__(
        self,
        favourite_food: TimedSection,
        restaurants: TimedSection,
        nearby_users: FoodSection,
        disclaimers: FoodSection,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self._favourite_food = favourite_food
        self._restaurants = restaurants
        self._nearby_users = nearby_users
        self._disclaimers = disclaimers
        self._sections: List[FoodSection] = []
        self.reload: CallbackSlot[None] = CallbackSlot("data_source.reload")

    @classmethod
    def create(
        cls,
        scheduler: Optional[RepeatingScheduler] = None,
        *,
        interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
    ) -> "FoodDataSource":
        """Build a data source with the default sections sharing one scheduler."""
        return cls(
            favourite_food=FavouriteFoodSection(scheduler, interval_ms=interval_ms),
            restaurants=RestaurantsSection(scheduler, interval_ms=interval_ms),
            nearby_users=NearbyUsersSection(),
            disclaimers=DisclaimersSection(),
        )

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------
    def setup(self) -> None:
        """Fix section order and subscribe to the timed sections' actions."""
        self._sections = [
            self._favourite_food,
            self._restaurants,
            self._nearby_users,
            self._disclaimers,
        ]
        self._favourite_food.did_request_action.connect(self._on_favourite_food_action)
        self._restaurants.did_request_action.connect(self._on_restaurants_action)
        self._log.info("Data source ready with sections: %s", ", ".join(map(str, self.get_sections())))

    def update(self) -> None:
        """Regenerate the dynamic sections, then force one reload for the initial render."""
        self._favourite_food.update()
        self._restaurants.update()
        self._nearby_users.update()
        self.reload.emit()

    def teardown(self) -> None:
        """Stop section timers and drop every subscription."""
        self._favourite_food.stop()
        self._restaurants.stop()
        self._favourite_food.did_request_action.disconnect()
        self._restaurants.did_request_action.disconnect()
        self.reload.disconnect()
        self._log.info("Data source torn down")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_sections(self) -> List[SectionIdentifier]:
        return [section.identifier for section in self._sections]

    def get_elements(self, section: int) -> List[Item]:
        return self._section_at(section).get_elements()

    def cell_model(self, index_path: IndexPath) -> CellModel:
        return self._section_at(index_path.section).cell_model(index_path.row)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _section_at(self, index: int) -> FoodSection:
        if index < 0 or index >= len(self._sections):
            raise IndexError(f"Section index {index} out of range ({len(self._sections)} sections).")
        return self._sections[index]

    def _on_favourite_food_action(self, action: SectionAction) -> None:
        if action.kind is ActionKind.RELOAD:
            self.reload.emit()
        elif action.kind is ActionKind.SAY_HELLO:
            self._log.info("Hello %s", action.name)

    def _on_restaurants_action(self, action: SectionAction) -> None:
        if action.kind is ActionKind.RELOAD:
            self.reload.emit()


__all__ = ["FoodDataSource"]
