from __future__ import annotations

from typing import Callable, List, Protocol

from ..utils.signals import CallbackSlot
from .entities import CellModel, IndexPath, Item, SectionAction, SectionIdentifier


# ---- Sections ----
class FoodSection(Protocol):
    """One section of the food screen: owns its items and projects rows to cells."""

    identifier: SectionIdentifier

    def update(self) -> None: ...
    def get_elements(self) -> List[Item]: ...
    def cell_model(self, row: int) -> CellModel: ...


class TimedSection(FoodSection, Protocol):
    """Section that regenerates on a timer and reports each change as an action."""

    did_request_action: CallbackSlot[SectionAction]

    def stop(self) -> None: ...


# ---- Data source ----
class FoodDataSourcePort(Protocol):
    """Composite of all sections with flattened section/row addressing."""

    reload: CallbackSlot[None]

    def get_sections(self) -> List[SectionIdentifier]: ...
    def get_elements(self, section: int) -> List[Item]: ...
    def setup(self) -> None: ...
    def update(self) -> None: ...
    def cell_model(self, index_path: IndexPath) -> CellModel: ...


# ---- Timers ----
class RepeatingScheduler(Protocol):
    """Repeating UI-thread timers keyed by a caller-chosen channel name."""

    def schedule_repeating(self, key: str, interval_ms: int, callback: Callable[[], None]) -> None: ...
    def cancel(self, key: str) -> None: ...
