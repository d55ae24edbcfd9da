"""Thin web-facing viewmodel for NiceGUI bindings.

It turns each ``FoodSnapshot`` published by ``FoodViewModel`` into plain
section/row records that a refreshable NiceGUI block can render, without adding
I/O or orchestration logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from foodscreen.domain.entities import IndexPath
from foodscreen.domain.snapshot import FoodSnapshot, item_key
from foodscreen.viewmodels.food_vm import FoodViewModel
from foodscreen.viewmodels.section_format import section_title


@dataclass(frozen=True)
class WebRow:
    """One rendered list row; ``key`` is the item identity."""

    key: str
    text: str


@dataclass(frozen=True)
class WebSection:
    identifier: str
    title: str
    rows: Tuple[WebRow, ...]


class WebFoodScreenVM:
    """Browser projection of the food screen kept in sync with ``FoodViewModel``."""

    def __init__(self, food_vm: FoodViewModel) -> None:
        self._food_vm = food_vm
        self.sections: List[WebSection] = []
        self.snapshots_seen = 0
        self.on_changed: Optional[Callable[[], None]] = None
        food_vm.update_snapshot_signal.connect(self.apply_snapshot)

    def apply_snapshot(self, snapshot: FoodSnapshot) -> bool:
        """Rebuild the rows from ``snapshot``. Returns ``False`` when nothing visible changed."""
        self.snapshots_seen += 1
        sections = [
            WebSection(
                identifier=section.value,
                title=section_title(section),
                rows=tuple(
                    WebRow(
                        key=item_key(item),
                        text=self._food_vm.cell_model(IndexPath(section_index, row)).message,
                    )
                    for row, item in enumerate(items)
                ),
            )
            for section_index, (section, items) in enumerate(snapshot.entries)
        ]
        if sections == self.sections:
            return False
        self.sections = sections
        if self.on_changed:
            self.on_changed()
        return True

    @property
    def row_count(self) -> int:
        return sum(len(section.rows) for section in self.sections)

    def status_text(self) -> str:
        return f"Snapshots: {self.snapshots_seen}  Rows: {self.row_count}"


__all__ = ["WebFoodScreenVM", "WebRow", "WebSection"]
