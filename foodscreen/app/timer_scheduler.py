"""Scheduler helper that owns repeating UI timers for the food screen.

The app passes Tk ``after`` and ``after_cancel`` callables into this class so
section timers can be tracked in one place and canceled safely when a section
restarts, is collected, or the window closes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional


ScheduleFn = Callable[[int, Callable[[], None]], Any]
CancelFn = Callable[[Any], None]


@dataclass
class TimerHandle:
    """Timer token associated with a single timer channel.

    Attributes:
        key: Channel key (usually a section timer key).
        token: Scheduler token returned by the UI scheduler implementation.
        interval_ms: Delay between firings.
        repeating: Whether the channel re-arms itself after each firing.
    """
    key: str
    token: Any
    interval_ms: int
    repeating: bool
    callback: Callable[[], None]
    generation: int = 0


class TimerScheduler:
    """Manage keyed one-shot and repeating timers using a UI scheduler (for example Tk)."""

    def __init__(self, schedule: ScheduleFn, cancel: CancelFn) -> None:
        """Store schedule/cancel functions and initialize handle registry.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(token)``.
        """
        self._log = logging.getLogger(__name__)
        self._schedule = schedule
        self._cancel = cancel
        self._handles: Dict[str, TimerHandle] = {}
        self._paused = False
        self._generation = 0

    def schedule_repeating(self, key: str, interval_ms: int, callback: Callable[[], None]) -> None:
        """Run ``callback`` every ``interval_ms`` until the key is canceled or rescheduled."""
        self._arm(key, interval_ms, callback, repeating=True)

    def schedule_once(self, key: str, delay_ms: int, callback: Callable[[], None]) -> None:
        """Schedule or reschedule a single firing for ``key``."""
        self._arm(key, delay_ms, callback, repeating=False)

    def cancel(self, key: str) -> None:
        """Cancel a pending timer for a key.

        Args:
            key: Timer channel key to cancel.
        """
        handle = self._handles.pop(key, None)
        if not handle:
            return
        self._release(handle)

    def cancel_all(self) -> None:
        """Cancel all pending timers across all channel keys."""
        for key in list(self._handles.keys()):
            self.cancel(key)

    def pause(self) -> None:
        """Stop firing without forgetting the registered channels."""
        if self._paused:
            return
        self._paused = True
        for handle in self._handles.values():
            self._release(handle)
        self._log.info("Timers paused (%d channels)", len(self._handles))

    def resume(self) -> None:
        """Re-arm every channel remembered by ``pause``."""
        if not self._paused:
            return
        self._paused = False
        for handle in self._handles.values():
            self._post(handle)
        self._log.info("Timers resumed (%d channels)", len(self._handles))

    @property
    def paused(self) -> bool:
        return self._paused

    def handle_for(self, key: str) -> Optional[TimerHandle]:
        """Return the current handle for a channel, if scheduled."""
        return self._handles.get(key)

    def active_keys(self) -> List[str]:
        return list(self._handles.keys())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _arm(self, key: str, delay_ms: int, callback: Callable[[], None], *, repeating: bool) -> None:
        delay = max(1, int(delay_ms))
        self.cancel(key)
        handle = TimerHandle(key=key, token=None, interval_ms=delay, repeating=repeating, callback=callback)
        self._handles[key] = handle
        if not self._paused:
            self._post(handle)

    def _post(self, handle: TimerHandle) -> None:
        self._generation += 1
        generation = self._generation
        handle.generation = generation
        handle.token = self._schedule(handle.interval_ms, lambda: self._fire(handle.key, generation))

    def _fire(self, key: str, generation: int) -> None:
        handle = self._handles.get(key)
        # stale tokens belong to a canceled or rescheduled channel
        if handle is None or handle.generation != generation or self._paused:
            return
        if handle.repeating:
            self._post(handle)
        else:
            self._handles.pop(key, None)
        handle.callback()

    def _release(self, handle: TimerHandle) -> None:
        if handle.token is None:
            return
        try:
            self._cancel(handle.token)
        except Exception as exc:  # already fired or window destroyed
            self._log.debug("Ignoring cancel failure for %s: %s", handle.key, exc)
        handle.token = None


__all__ = ["TimerHandle", "TimerScheduler"]
