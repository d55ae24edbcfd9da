"""Restaurants section: a random non-empty, never complete, subset per tick."""

from __future__ import annotations

import random
from typing import List, Optional

from ..domain.entities import CellModel, RestaurantItem, SectionIdentifier
from ..domain.ports import RepeatingScheduler
from .base import DEFAULT_TICK_INTERVAL_MS, RepeatingSectionMixin, SectionBase

ALL_RESTAURANTS = tuple(RestaurantItem)

_MESSAGES = {
    RestaurantItem.RESTAURANT_WITH_LOGO: "restaurant with logo",
    RestaurantItem.RESTAURANT_WITH_RATINGS: "restaurant with ratings",
    RestaurantItem.BIG_RESTAURANT: "big restaurant here",
    RestaurantItem.SMALL_RESTAURANT: "small restaurant here",
}


def roll_restaurants(rng: random.Random) -> List[RestaurantItem]:
    """Pick 1..N-1 distinct restaurants in random order."""
    count = rng.randint(1, len(ALL_RESTAURANTS) - 1)
    return rng.sample(ALL_RESTAURANTS, count)


class RestaurantsSection(RepeatingSectionMixin, SectionBase[RestaurantItem]):
    identifier = SectionIdentifier.RESTAURANTS

    def __init__(
        self,
        scheduler: Optional[RepeatingScheduler] = None,
        *,
        interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        rng: Optional[random.Random] = None,
    ) -> None:
        SectionBase.__init__(self)
        self._init_repeating(scheduler, interval_ms)
        self._rng = rng or random.Random()

    def update(self) -> None:
        """Roll a first selection now and restart the re-roll timer."""
        self._elements = roll_restaurants(self._rng)
        self._start_timer()

    def _on_tick(self) -> None:
        self._elements = roll_restaurants(self._rng)

    def _cell_for(self, element: RestaurantItem) -> CellModel:
        return CellModel(_MESSAGES[element])


__all__ = ["ALL_RESTAURANTS", "RestaurantsSection", "roll_restaurants"]
