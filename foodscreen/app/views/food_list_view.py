"""Sectioned list view that patches a ttk.Treeview from food snapshots.

The view is UI-only: it receives ``FoodSnapshot`` objects through ``apply`` and
asks the injected cell provider for each row's text.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from foodscreen.domain.snapshot import FoodSnapshot

from .view_utils import CellProvider, TreePatcher


class FoodListView(ttk.Frame):
    """One parent row per section with one child row per item."""

    def __init__(self, parent, *, cell_provider: Optional[CellProvider] = None, **kwargs):
        """Build the tree and its scrollbar.

        Args:
            parent: Container widget.
            cell_provider: Callable returning the ``CellModel`` for an ``IndexPath``.
            **kwargs: Additional frame options forwarded to ``ttk.Frame``.
        """
        super().__init__(parent, **kwargs)

        self.tree = ttk.Treeview(self, show="tree", selectmode="browse")
        self.tree.column("#0", anchor=tk.W, stretch=True)
        vsb = ttk.Scrollbar(self, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=vsb.set)

        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        vsb.pack(side=tk.RIGHT, fill=tk.Y)

        self._patcher = TreePatcher(self.tree, cell_provider)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def apply(self, snapshot: FoodSnapshot) -> bool:
        """Patch the tree to match ``snapshot``. Returns ``False`` when nothing changed."""
        return self._patcher.apply(snapshot)

    def visible_rows(self) -> List[str]:
        return self._patcher.visible_rows()


__all__ = ["FoodListView"]
