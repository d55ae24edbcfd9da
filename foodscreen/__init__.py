"""Sectioned, diffable food list screen built as Tk MVVM.

Sections produce items, ``FoodDataSource`` folds their change notifications
into one reload, and ``FoodViewModel`` publishes immutable snapshots that the
Tk list view patches in place.
"""

__version__ = "1.0.0"
