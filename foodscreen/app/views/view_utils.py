"""Small rendering helpers shared by food-screen views.

Nothing here creates widgets. ``TreePatcher`` only calls the Treeview item
methods (``get_children``, ``exists``, ``insert``, ``move``, ``delete``,
``item``), so any object offering them can stand in for the tree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional

from foodscreen.domain.entities import CellModel, IndexPath
from foodscreen.domain.snapshot import FoodSnapshot, item_key
from foodscreen.viewmodels.section_format import section_title

if TYPE_CHECKING:
    from tkinter import ttk

CellProvider = Callable[[IndexPath], CellModel]


def render_cell(cell_model: CellModel, tree: "ttk.Treeview", iid: str, index_path: IndexPath) -> str:
    """Write ``cell_model`` into the tree row ``iid`` located at ``index_path``."""
    tree.item(iid, text=cell_model.message, tags=(f"section-{index_path.section}",))
    return iid


def section_iid(value: str) -> str:
    return f"section:{value}"


def row_iid(section_value: str, key: str) -> str:
    return f"{section_value}/{key}"


class TreePatcher:
    """
    Keeps a two-level tree (section parents, item children) in step with
    snapshots. Rows are keyed by item identity so reorders become moves
    instead of rebuilds.
    """

    def __init__(self, tree: "ttk.Treeview", cell_provider: Optional[CellProvider] = None) -> None:
        self.tree = tree
        self.cell_provider = cell_provider
        self.applied: Optional[FoodSnapshot] = None

    def apply(self, snapshot: FoodSnapshot) -> bool:
        """Patch the tree to match ``snapshot``. Returns ``False`` when nothing changed."""
        if snapshot == self.applied:
            return False

        tree = self.tree
        section_iids = [section_iid(section.value) for section in snapshot.section_identifiers]
        for stale in set(tree.get_children("")) - set(section_iids):
            tree.delete(stale)

        for section_index, (section, items) in enumerate(snapshot.entries):
            parent = section_iids[section_index]
            if tree.exists(parent):
                tree.move(parent, "", section_index)
            else:
                tree.insert("", section_index, iid=parent, text=section_title(section), open=True)

            row_iids = [row_iid(section.value, item_key(item)) for item in items]
            for stale in set(tree.get_children(parent)) - set(row_iids):
                tree.delete(stale)
            for row, iid in enumerate(row_iids):
                if tree.exists(iid):
                    tree.move(iid, parent, row)
                else:
                    tree.insert(parent, row, iid=iid, text="")
                if self.cell_provider is not None:
                    index_path = IndexPath(section_index, row)
                    render_cell(self.cell_provider(index_path), tree, iid, index_path)

        self.applied = snapshot
        return True

    def visible_rows(self) -> List[str]:
        """Return the rendered row texts in display order (section headers excluded)."""
        rows: List[str] = []
        for parent in self.tree.get_children(""):
            rows.extend(self.tree.item(iid, "text") for iid in self.tree.get_children(parent))
        return rows


__all__ = ["CellProvider", "TreePatcher", "render_cell", "row_iid", "section_iid"]
