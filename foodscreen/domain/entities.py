from __future__ import annotations

"""Domain value objects shared by sections, the data source and view models."""

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Optional, Tuple, Union


class SectionIdentifier(Enum):
    """Stable identity of one section of the food screen; used as a diff key."""

    FAVOURITE_FOOD = "favouriteFood"
    RESTAURANTS = "restaurants"
    NEARBY_USERS = "nearByUsers"
    DISCLAIMERS = "disclaimers"

    def __str__(self) -> str:
        return self.value


SECTION_ORDER: Tuple[SectionIdentifier, ...] = (
    SectionIdentifier.FAVOURITE_FOOD,
    SectionIdentifier.RESTAURANTS,
    SectionIdentifier.NEARBY_USERS,
    SectionIdentifier.DISCLAIMERS,
)
"""Canonical display order of the sections."""


class FavouriteFoodItem(Enum):
    SQUARED_FOOD = "squaredFood"
    FOOD_WITH_IMAGE = "foodWithImage"
    FOOD_WITH_RATINGS = "foodWithRatings"
    FOOD_DEAL = "foodDeal"


class RestaurantItem(Enum):
    RESTAURANT_WITH_LOGO = "restaurantWithLogo"
    RESTAURANT_WITH_RATINGS = "restaurantWithRatings"
    BIG_RESTAURANT = "bigRestaurant"
    SMALL_RESTAURANT = "smallRestaurant"


class NearbyUserItem(Enum):
    USER_WITH_AVATAR = "userWithAvatar"
    USER_WITH_NAME_ONLY = "userWithNameOnly"


class DisclaimerItem(Enum):
    MAIN_DISCLAIMER = "mainDisclaimer"
    COPYRIGHT = "copyright"


@dataclass(frozen=True)
class CompanyLogo:
    """Disclaimer row showing the company logo; ``index`` keeps repeated logos distinct."""

    index: int

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError("CompanyLogo index must be an int.")


DisclaimerRow = Union[DisclaimerItem, CompanyLogo]
Item = Hashable
"""Opaque row identity. Two rows are the same row iff their items are equal."""


@dataclass(frozen=True)
class CellModel:
    """Display-only projection of an item (currently one text label)."""

    message: str


@dataclass(frozen=True)
class IndexPath:
    """Flattened row address: section index plus row index within that section."""

    section: int
    row: int

    def __str__(self) -> str:
        return f"[{self.section}, {self.row}]"


class ActionKind(Enum):
    RELOAD = "reload"
    SAY_HELLO = "sayHello"


@dataclass(frozen=True)
class SectionAction:
    """Request raised by a section towards its data source."""

    kind: ActionKind
    name: Optional[str] = None

    @classmethod
    def reload(cls) -> "SectionAction":
        return cls(ActionKind.RELOAD)

    @classmethod
    def say_hello(cls, name: str) -> "SectionAction":
        if not isinstance(name, str) or not name.strip():
            raise ValueError("say_hello requires a non-empty name.")
        return cls(ActionKind.SAY_HELLO, name.strip())


__all__ = [
    "ActionKind",
    "CellModel",
    "CompanyLogo",
    "DisclaimerItem",
    "DisclaimerRow",
    "FavouriteFoodItem",
    "IndexPath",
    "Item",
    "NearbyUserItem",
    "RestaurantItem",
    "SECTION_ORDER",
    "SectionAction",
    "SectionIdentifier",
]
