from __future__ import annotations

from foodscreen.app.timer_scheduler import TimerScheduler
from foodscreen.tests.unit.helpers import WinStub
from foodscreen.web_ui.session import SESSIONS, FoodScreenSession


class ClientStub:
    """NiceGUI client double recording lifecycle handler registrations."""

    def __init__(self, client_id: str = "client-1") -> None:
        self.id = client_id
        self.disconnect_handlers = []
        self.delete_handlers = []

    def on_disconnect(self, handler) -> None:
        self.disconnect_handlers.append(handler)

    def on_delete(self, handler) -> None:
        self.delete_handlers.append(handler)

    def drop_socket(self) -> None:
        for handler in self.disconnect_handlers:
            handler()

    def delete(self) -> None:
        for handler in self.delete_handlers:
            handler()


def _open_session(client: ClientStub):
    win = WinStub()
    scheduler = TimerScheduler(win.after, win.after_cancel)
    session = FoodScreenSession(client.id, scheduler, interval_ms=50)
    session.bind_client(client)
    session.open()
    return session, scheduler, win


def test_socket_drop_keeps_session_ticking():
    client = ClientStub("blip")
    session, scheduler, win = _open_session(client)
    seen = session.web_vm.snapshots_seen

    client.drop_socket()
    win.run_pending()

    assert SESSIONS["blip"] is session
    assert session.closed is False
    assert len(scheduler.active_keys()) == 2
    assert session.web_vm.snapshots_seen > seen
    session.close()


def test_client_deletion_tears_session_down():
    client = ClientStub("gone")
    session, scheduler, win = _open_session(client)

    client.delete()
    fired = win.run_pending()

    assert "gone" not in SESSIONS
    assert session.closed is True
    assert scheduler.active_keys() == []
    assert fired == 0
    assert session.data_source.reload.connected is False


def test_close_is_idempotent():
    client = ClientStub("twice")
    session, _, _ = _open_session(client)

    session.close()
    session.close()

    assert "twice" not in SESSIONS


def test_toggle_pause_stops_and_restarts_timers():
    session, scheduler, _ = _open_session(ClientStub("pause"))

    session.toggle_pause()
    assert scheduler.paused is True
    session.toggle_pause()
    assert scheduler.paused is False
    session.close()
