"""Favourites section: four fixed dishes reshuffled on every tick."""

from __future__ import annotations

import random
from typing import Optional

from ..domain.entities import CellModel, FavouriteFoodItem, SectionAction, SectionIdentifier
from ..domain.ports import RepeatingScheduler
from .base import DEFAULT_TICK_INTERVAL_MS, RepeatingSectionMixin, SectionBase

FAVOURITE_FOOD_ITEMS = (
    FavouriteFoodItem.SQUARED_FOOD,
    FavouriteFoodItem.FOOD_WITH_IMAGE,
    FavouriteFoodItem.FOOD_DEAL,
    FavouriteFoodItem.FOOD_WITH_RATINGS,
)

_MESSAGES = {
    FavouriteFoodItem.FOOD_WITH_IMAGE: "food with image",
    FavouriteFoodItem.SQUARED_FOOD: "square food",
    FavouriteFoodItem.FOOD_WITH_RATINGS: "food with ratings",
    FavouriteFoodItem.FOOD_DEAL: "this is a food deal",
}


class FavouriteFoodSection(RepeatingSectionMixin, SectionBase[FavouriteFoodItem]):
    identifier = SectionIdentifier.FAVOURITE_FOOD

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
        """Reset to the fixed dishes and restart the shuffle timer."""
        self._elements = list(FAVOURITE_FOOD_ITEMS)
        self._start_timer()

    def greet(self, name: str) -> None:
        """Ask the data source to say hello to ``name``."""
        self.did_request_action.emit(SectionAction.say_hello(name))

    def _on_tick(self) -> None:
        self._rng.shuffle(self._elements)

    def _cell_for(self, element: FavouriteFoodItem) -> CellModel:
        return CellModel(_MESSAGES[element])


__all__ = ["FAVOURITE_FOOD_ITEMS", "FavouriteFoodSection"]
