from __future__ import annotations

import random
from typing import Callable, Dict, List, Optional, Tuple

from foodscreen.datasource.food_data_source import FoodDataSource
from foodscreen.datasource.disclaimers import DisclaimersSection
from foodscreen.datasource.favourite_food import FavouriteFoodSection
from foodscreen.datasource.nearby_users import NearbyUsersSection
from foodscreen.datasource.restaurants import RestaurantsSection


class FakeScheduler:
    """RepeatingScheduler double: ``tick()`` fires every live channel once."""

    def __init__(self) -> None:
        self.channels: Dict[str, Tuple[int, Callable[[], None]]] = {}
        self.scheduled: List[str] = []
        self.cancelled: List[str] = []

    def schedule_repeating(self, key: str, interval_ms: int, callback: Callable[[], None]) -> None:
        self.scheduled.append(key)
        self.channels[key] = (interval_ms, callback)

    def cancel(self, key: str) -> None:
        self.cancelled.append(key)
        self.channels.pop(key, None)

    def tick(self, times: int = 1) -> None:
        for _ in range(times):
            for _, callback in list(self.channels.values()):
                callback()


class WinStub:
    """Tk ``after``/``after_cancel`` double; ``run_pending`` plays due callbacks."""

    def __init__(self) -> None:
        self.after_calls: List[tuple[int, object]] = []
        self.after_cancelled: List[object] = []
        self._pending: Dict[str, Callable[[], None]] = {}

    def after(self, delay: int, callback) -> str:
        token = f"after-{len(self.after_calls)+1}"
        self.after_calls.append((delay, callback))
        self._pending[token] = callback
        return token

    def after_cancel(self, token: object) -> None:
        self.after_cancelled.append(token)
        self._pending.pop(str(token), None)

    def run_pending(self) -> int:
        due = list(self._pending.items())
        self._pending.clear()
        for _, callback in due:
            callback()
        return len(due)


class TreeStub:
    """ttk.Treeview double covering the item methods used when patching rows."""

    def __init__(self) -> None:
        self._children: Dict[str, List[str]] = {"": []}
        self._parent: Dict[str, str] = {}
        self._text: Dict[str, str] = {}
        self.calls: List[Tuple[str, str]] = []

    def get_children(self, item: str = "") -> Tuple[str, ...]:
        return tuple(self._children[item])

    def exists(self, item: str) -> bool:
        return item in self._parent

    def insert(self, parent: str, index: int, iid: str, text: str = "", **_options) -> str:
        if iid in self._parent:
            raise ValueError(f"Item {iid} already exists")
        self.calls.append(("insert", iid))
        self._children[parent].insert(index, iid)
        self._children[iid] = []
        self._parent[iid] = parent
        self._text[iid] = text
        return iid

    def move(self, item: str, parent: str, index: int) -> None:
        self.calls.append(("move", item))
        self._children[self._parent[item]].remove(item)
        self._children[parent].insert(index, item)
        self._parent[item] = parent

    def delete(self, *items: str) -> None:
        for item in items:
            self.calls.append(("delete", item))
            for child in list(self._children[item]):
                self.delete(child)
            self._children[self._parent.pop(item)].remove(item)
            del self._children[item]
            self._text.pop(item, None)

    def item(self, item: str, option: Optional[str] = None, **options):
        if item not in self._parent:
            raise KeyError(item)
        if "text" in options:
            self._text[item] = options["text"]
        if option == "text":
            return self._text[item]
        return None


def make_data_source(scheduler=None, seed: int = 7) -> FoodDataSource:
    rng = random.Random(seed)
    return FoodDataSource(
        favourite_food=FavouriteFoodSection(scheduler, rng=rng),
        restaurants=RestaurantsSection(scheduler, rng=rng),
        nearby_users=NearbyUsersSection(),
        disclaimers=DisclaimersSection(),
    )


__all__ = ["FakeScheduler", "TreeStub", "WinStub", "make_data_source"]
