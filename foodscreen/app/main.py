# foodscreen/app/main.py
from __future__ import annotations
import logging
from typing import Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.food_list_view import FoodListView

# ---- ViewModels & data ----
from ..viewmodels.food_vm import FoodViewModel
from ..datasource.food_data_source import FoodDataSource
from ..domain.snapshot import FoodSnapshot

from .settings import ScreenSettings
from .timer_scheduler import TimerScheduler
from ..utils import logging as logging_utils


class App:
    """Bootstrap: wire Views <-> ViewModel <-> DataSource and the section timers."""

    def __init__(self, settings: Optional[ScreenSettings] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.settings = settings or ScreenSettings.from_env()
        logging_utils.configure_root(self.settings.effective_log_level)

        self.win = MainWindowView(
            title=self.settings.window_title,
            geometry=self.settings.window_geometry,
            on_reload=self._on_reload,
            on_toggle_pause=self._on_toggle_pause,
        )
        self.scheduler = TimerScheduler(self.win.after, self.win.after_cancel)

        # ---- Data source & ViewModel ----
        self.data_source = FoodDataSource.create(
            self.scheduler, interval_ms=self.settings.tick_interval_ms
        )
        self.food_vm = FoodViewModel(self.data_source)

        # ---- Subviews ----
        self.list_view = FoodListView(self.win.list_host, cell_provider=self.food_vm.cell_model)
        self.list_view.pack(fill="both", expand=True)

        # bind view model
        self.food_vm.update_snapshot_signal.connect(self._apply_snapshot)
        self.win.protocol("WM_DELETE_WINDOW", self._on_close)

        # setup data, then load it
        self.food_vm.setup()
        self.food_vm.load_data()

    # ------------------------------------------------------------------
    # ViewModel -> View
    # ------------------------------------------------------------------
    def _apply_snapshot(self, snapshot: FoodSnapshot) -> None:
        changed = self.list_view.apply(snapshot)
        self.win.set_status(
            f"Reloads: {self.food_vm.reload_count}  Items: {snapshot.number_of_items}"
            + ("" if changed else "  (unchanged)")
        )

    # ------------------------------------------------------------------
    # View -> ViewModel
    # ------------------------------------------------------------------
    def _on_reload(self) -> None:
        self._log.info("Manual reload requested")
        if self.scheduler.paused:
            self._on_toggle_pause()
        self.food_vm.load_data()

    def _on_toggle_pause(self) -> None:
        if self.scheduler.paused:
            self.scheduler.resume()
        else:
            self.scheduler.pause()
        self.win.set_paused(self.scheduler.paused)

    def _on_close(self) -> None:
        self.scheduler.cancel_all()
        self.data_source.teardown()
        self.win.destroy()

    def run(self) -> None:
        self.win.mainloop()


def main() -> int:
    app = App()
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
