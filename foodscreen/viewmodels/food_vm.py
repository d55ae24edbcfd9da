"""Snapshot-publishing view model for the food list screen.

Call context:
    ``foodscreen/app/main.py`` connects ``update_snapshot_signal`` to
    ``FoodListView.apply`` and uses ``cell_model`` as the view's cell provider.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..domain.entities import CellModel, IndexPath
from ..domain.ports import FoodDataSourcePort
from ..domain.snapshot import FoodSnapshot, SnapshotBuilder
from ..utils.signals import CallbackSlot


class FoodViewModel:
    """Owns the data source and republishes a full snapshot on every reload."""

    def __init__(self, data_source: FoodDataSourcePort) -> None:
        self._log = logging.getLogger(__name__)
        self._data_source = data_source
        self.update_snapshot_signal: CallbackSlot[FoodSnapshot] = CallbackSlot(
            "food_vm.update_snapshot_signal"
        )
        self.last_snapshot: Optional[FoodSnapshot] = None
        self.reload_count = 0

    @property
    def data_source(self) -> FoodDataSourcePort:
        return self._data_source

    def setup(self) -> None:
        self._data_source.reload.connect(self._on_reload)
        self._data_source.setup()

    def load_data(self) -> None:
        """Trigger the initial load; the data source answers with a reload."""
        self._log.info("Loading food screen data")
        self._data_source.update()

    def cell_model(self, index_path: IndexPath) -> CellModel:
        return self._data_source.cell_model(index_path)

    def make_snapshot(self) -> FoodSnapshot:
        """Read every section and its current items, in order, into a new snapshot."""
        builder = SnapshotBuilder()
        sections = self._data_source.get_sections()
        builder.append_sections(sections)
        for index, section in enumerate(sections):
            builder.append_items(self._data_source.get_elements(index), to_section=section)
        return builder.build()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_reload(self) -> None:
        snapshot = self.make_snapshot()
        self.last_snapshot = snapshot
        self.reload_count += 1
        self._log.debug(
            "Snapshot #%d: %d sections, %d items",
            self.reload_count,
            snapshot.number_of_sections,
            snapshot.number_of_items,
        )
        self.update_snapshot_signal.emit(snapshot)


__all__ = ["FoodViewModel"]
