"""Shared plumbing for section providers.

Call context:
    Every concrete section in this package inherits ``SectionBase`` for row
    lookup. Sections that regenerate on a timer also inherit
    ``RepeatingSectionMixin``, which owns the timer channel and the
    ``did_request_action`` slot consumed by ``FoodDataSource``.
"""

from __future__ import annotations

import logging
import weakref
from typing import Callable, Generic, List, Optional, TypeVar

from ..domain.entities import CellModel, SectionAction, SectionIdentifier
from ..domain.ports import RepeatingScheduler
from ..utils.signals import CallbackSlot

E = TypeVar("E")

DEFAULT_TICK_INTERVAL_MS = 1000


class SectionBase(Generic[E]):
    """Ordered items of one section plus the row-to-cell projection."""

    identifier: SectionIdentifier

    def __init__(self) -> None:
        self._elements: List[E] = []

    def update(self) -> None:
        """Regenerate the item sequence. Static sections keep their items."""

    def get_elements(self) -> List[E]:
        return list(self._elements)

    def cell_model(self, row: int) -> CellModel:
        """Project the item at ``row`` to its cell; ``row`` must be in ``[0, count)``."""
        if row < 0 or row >= len(self._elements):
            raise IndexError(
                f"Row {row} out of range for section {self.identifier} "
                f"with {len(self._elements)} items."
            )
        return self._cell_for(self._elements[row])

    def _cell_for(self, element: E) -> CellModel:
        raise NotImplementedError

    def __len__(self) -> int:
        return len(self._elements)


class RepeatingSectionMixin:
    """Runs ``_on_tick`` every ``interval_ms`` and reports changes as actions."""

    identifier: SectionIdentifier

    def _init_repeating(
        self,
        scheduler: Optional[RepeatingScheduler],
        interval_ms: int,
    ) -> None:
        self._log = logging.getLogger(type(self).__module__)
        self._scheduler = scheduler
        self._interval_ms = max(1, int(interval_ms))
        self._timer_key = f"{self.identifier.value}-{id(self):x}"
        self._ticks = 0
        self.did_request_action: CallbackSlot[SectionAction] = CallbackSlot(
            f"{self.identifier.value}.did_request_action"
        )

    @property
    def timer_key(self) -> str:
        return self._timer_key

    @property
    def ticks(self) -> int:
        """Number of completed timer regenerations."""
        return self._ticks

    def _start_timer(self) -> None:
        """(Re)start the repeating timer; a previous timer for this section is replaced."""
        if self._scheduler is None:
            self._log.debug("No scheduler for %s; periodic refresh disabled", self.identifier)
            return
        self._scheduler.schedule_repeating(
            self._timer_key, self._interval_ms, _weak_tick(self, self._scheduler, self._timer_key)
        )

    def stop(self) -> None:
        """Cancel the repeating timer, if any."""
        if self._scheduler is not None:
            self._scheduler.cancel(self._timer_key)

    def _tick(self) -> None:
        self._on_tick()
        self._ticks += 1
        self._log.debug("%s tick #%d", self.identifier, self._ticks)
        self.did_request_action.emit(SectionAction.reload())

    def _on_tick(self) -> None:
        raise NotImplementedError


def _weak_tick(
    section: RepeatingSectionMixin, scheduler: RepeatingScheduler, key: str
) -> Callable[[], None]:
    """Timer callback holding only a weak reference back to ``section``."""
    ref = weakref.ref(section)

    def _fire() -> None:
        target = ref()
        if target is None:
            scheduler.cancel(key)
            return
        target._tick()

    return _fire


__all__ = ["DEFAULT_TICK_INTERVAL_MS", "RepeatingSectionMixin", "SectionBase"]
