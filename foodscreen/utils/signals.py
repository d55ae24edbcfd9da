"""Single-subscriber callback slots used between sections, data source and view model.

Call context:
    Sections expose ``did_request_action``, the data source exposes ``reload``
    and the view model exposes ``update_snapshot_signal``. Each is one
    ``CallbackSlot``; the owner of the slot emits, one subscriber listens.

Ownership:
    Bound methods are stored through ``weakref.WeakMethod`` so the slot never
    keeps its subscriber alive. Once the subscriber is collected, ``emit``
    becomes a silent no-op. Plain functions and lambdas are stored strongly
    because nothing else would keep them alive.
"""

from __future__ import annotations

import inspect
import weakref
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class CallbackSlot(Generic[T]):
    """Holds at most one subscriber; ``connect`` replaces the previous one."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._ref: Optional[Callable[[], Optional[Callable[..., None]]]] = None

    def connect(self, callback: Callable[..., None]) -> None:
        """Register ``callback`` as the only subscriber, dropping any previous one."""
        if not callable(callback):
            raise TypeError(f"{self.name or 'slot'} subscriber must be callable.")
        if inspect.ismethod(callback):
            self._ref = weakref.WeakMethod(callback)
        else:
            self._ref = lambda: callback

    def disconnect(self) -> None:
        self._ref = None

    @property
    def connected(self) -> bool:
        return self._resolve() is not None

    def emit(self, *args: T) -> bool:
        """Deliver to the subscriber. Returns ``False`` when nobody is listening."""
        callback = self._resolve()
        if callback is None:
            return False
        callback(*args)
        return True

    def _resolve(self) -> Optional[Callable[..., None]]:
        if self._ref is None:
            return None
        return self._ref()

    def __repr__(self) -> str:
        state = "connected" if self.connected else "idle"
        return f"CallbackSlot({self.name!r}, {state})"


__all__ = ["CallbackSlot"]
