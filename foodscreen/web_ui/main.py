"""NiceGUI entrypoint for the food screen web runtime."""

from __future__ import annotations

import argparse
import logging

from nicegui import ui

from foodscreen.app.settings import ScreenSettings
from foodscreen.app.timer_scheduler import TimerScheduler
from foodscreen.utils import logging as logging_utils
from foodscreen.web_ui.session import FoodScreenSession

LOGGER = logging.getLogger(__name__)


def _install_theme() -> None:
    """Install global CSS tokens for the web runtime."""
    ui.add_head_html(
        """
<style>
.food-page { max-width: 560px; margin: 0 auto; padding: 14px; }
.food-card { border: 1px solid #d7dde8; border-radius: 12px; }
.food-mono { font-family: monospace; }
</style>
        """
    )


def _schedule(delay_ms: int, callback) -> ui.timer:
    return ui.timer(delay_ms / 1000.0, callback, once=True)


def _cancel(timer: ui.timer) -> None:
    timer.cancel()


def _build_ui(settings: ScreenSettings) -> None:
    """Register the NiceGUI pages; each browser tab gets its own data source."""

    @ui.page("/")
    def index() -> None:
        _install_theme()
        client = ui.context.client
        session = FoodScreenSession(
            client.id,
            TimerScheduler(_schedule, _cancel),
            interval_ms=settings.tick_interval_ms,
        )
        web_vm = session.web_vm

        @ui.refreshable
        def render_sections() -> None:
            for section in web_vm.sections:
                with ui.card().classes("food-card w-full q-pa-sm"):
                    ui.label(section.title).classes("text-subtitle1")
                    for row in section.rows:
                        ui.label(row.text).classes("food-mono")

        @ui.refreshable
        def render_status() -> None:
            ui.label(web_vm.status_text()).classes("text-caption")

        def refresh() -> None:
            render_sections.refresh()
            render_status.refresh()

        def toggle_pause() -> None:
            session.toggle_pause()
            render_status.refresh()

        with ui.column().classes("food-page w-full"):
            ui.label(settings.window_title).classes("text-h5")
            with ui.row().classes("q-gutter-sm"):
                ui.button("Reload", on_click=session.food_vm.load_data, color="primary")
                ui.button("Pause / Resume", on_click=toggle_pause)
            render_status()
            render_sections()

        web_vm.on_changed = refresh
        session.bind_client(client)
        session.open()


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the food screen NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    settings = ScreenSettings.from_env()
    logging_utils.configure_root(settings.effective_log_level)
    LOGGER.info("Starting web UI on %s:%d", args.host, args.port)
    _build_ui(settings)
    ui.run(
        host=args.host,
        port=args.port,
        title=settings.window_title,
        reload=args.reload,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
