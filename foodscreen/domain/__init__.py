"""Domain package exports for value objects and snapshots."""

from .entities import (
    SECTION_ORDER,
    ActionKind,
    CellModel,
    CompanyLogo,
    DisclaimerItem,
    FavouriteFoodItem,
    IndexPath,
    NearbyUserItem,
    RestaurantItem,
    SectionAction,
    SectionIdentifier,
)
from .snapshot import FoodSnapshot, SnapshotBuilder, SnapshotError, item_key

__all__ = [
    "SECTION_ORDER",
    "ActionKind",
    "CellModel",
    "CompanyLogo",
    "DisclaimerItem",
    "FavouriteFoodItem",
    "FoodSnapshot",
    "IndexPath",
    "NearbyUserItem",
    "RestaurantItem",
    "SectionAction",
    "SectionIdentifier",
    "SnapshotBuilder",
    "SnapshotError",
    "item_key",
]
