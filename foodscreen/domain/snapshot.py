"""Immutable section/item snapshots handed from the view model to the list view.

Call context:
    ``FoodViewModel.make_snapshot`` fills a ``SnapshotBuilder`` on every reload
    and publishes the resulting ``FoodSnapshot``. ``FoodListView.apply`` reads
    it to patch the tree. Snapshots are never edited after ``build()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Sequence, Tuple

from .entities import IndexPath, Item, SectionIdentifier


class SnapshotError(ValueError):
    """Raised when a snapshot would violate the unique-key requirement."""


def item_key(item: Item) -> str:
    """Return a stable text key for ``item``, unique across item variants."""
    kind = type(item).__name__
    if isinstance(item, Enum):
        return f"{kind}.{item.value}"
    index = getattr(item, "index", None)
    if index is not None:
        return f"{kind}({index})"
    return f"{kind}:{item!r}"


@dataclass(frozen=True)
class FoodSnapshot:
    """Ordered sections, each mapped to its ordered items."""

    entries: Tuple[Tuple[SectionIdentifier, Tuple[Item, ...]], ...] = ()

    @property
    def section_identifiers(self) -> List[SectionIdentifier]:
        return [section for section, _ in self.entries]

    @property
    def number_of_sections(self) -> int:
        return len(self.entries)

    @property
    def number_of_items(self) -> int:
        return sum(len(items) for _, items in self.entries)

    def item_identifiers(self, section: SectionIdentifier) -> List[Item]:
        """Return the items of ``section`` in display order."""
        return list(self.entries[self.index_of_section(section)][1])

    def index_of_section(self, section: SectionIdentifier) -> int:
        for index, (candidate, _) in enumerate(self.entries):
            if candidate == section:
                return index
        raise KeyError(f"Section {section} is not part of this snapshot.")

    def item_at(self, index_path: IndexPath) -> Item:
        return self.entries[index_path.section][1][index_path.row]

    def as_dict(self) -> Dict[SectionIdentifier, List[Item]]:
        return {section: list(items) for section, items in self.entries}


class SnapshotBuilder:
    """Mutable staging area that produces one ``FoodSnapshot``."""

    def __init__(self) -> None:
        self._sections: List[SectionIdentifier] = []
        self._items: Dict[SectionIdentifier, List[Item]] = {}
        self._seen: set = set()

    def append_sections(self, sections: Iterable[SectionIdentifier]) -> "SnapshotBuilder":
        for section in sections:
            if section in self._items:
                raise SnapshotError(f"Duplicate section {section} in snapshot.")
            self._sections.append(section)
            self._items[section] = []
        return self

    def append_items(self, items: Sequence[Item], to_section: SectionIdentifier) -> "SnapshotBuilder":
        if to_section not in self._items:
            raise SnapshotError(f"Cannot append items to unknown section {to_section}.")
        for item in items:
            if item in self._seen:
                raise SnapshotError(f"Duplicate item {item!r} in snapshot.")
            self._seen.add(item)
            self._items[to_section].append(item)
        return self

    def build(self) -> FoodSnapshot:
        return FoodSnapshot(
            entries=tuple((section, tuple(self._items[section])) for section in self._sections)
        )


__all__ = ["FoodSnapshot", "SnapshotBuilder", "SnapshotError", "item_key"]
