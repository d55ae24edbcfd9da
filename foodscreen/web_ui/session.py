"""Per-browser-client object graph for the NiceGUI runtime.

Each client gets its own scheduler, data source and view models. Callback slots
hold subscribers weakly, so the live sessions are owned by ``SESSIONS`` until
the client is deleted.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from foodscreen.app.timer_scheduler import TimerScheduler
from foodscreen.datasource.food_data_source import FoodDataSource
from foodscreen.viewmodels.food_vm import FoodViewModel
from foodscreen.web_ui.viewmodels import WebFoodScreenVM

LOGGER = logging.getLogger(__name__)

SESSIONS: Dict[str, "FoodScreenSession"] = {}


class FoodScreenSession:
    def __init__(self, client_id: str, scheduler: TimerScheduler, *, interval_ms: int) -> None:
        self.client_id = client_id
        self.scheduler = scheduler
        self.data_source = FoodDataSource.create(scheduler, interval_ms=interval_ms)
        self.food_vm = FoodViewModel(self.data_source)
        self.web_vm = WebFoodScreenVM(self.food_vm)
        self.closed = False

    def open(self) -> None:
        """Register the session, then set up and load the data source."""
        SESSIONS[self.client_id] = self
        self.food_vm.setup()
        self.food_vm.load_data()
        LOGGER.info("Session %s opened", self.client_id)

    def bind_client(self, client: Any) -> None:
        """Close when NiceGUI deletes ``client``."""
        # a socket drop alone keeps the session; the browser may reconnect to it
        client.on_delete(self.close)

    def toggle_pause(self) -> None:
        if self.scheduler.paused:
            self.scheduler.resume()
        else:
            self.scheduler.pause()

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.scheduler.cancel_all()
        self.data_source.teardown()
        SESSIONS.pop(self.client_id, None)
        LOGGER.info("Session %s closed", self.client_id)


__all__ = ["FoodScreenSession", "SESSIONS"]
