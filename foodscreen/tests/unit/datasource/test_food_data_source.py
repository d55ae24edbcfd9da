from __future__ import annotations

import gc
import logging

import pytest

from foodscreen.datasource.food_data_source import FoodDataSource
from foodscreen.domain.entities import (
    SECTION_ORDER,
    CellModel,
    CompanyLogo,
    IndexPath,
    NearbyUserItem,
    SectionAction,
    SectionIdentifier,
)
from foodscreen.tests.unit.helpers import FakeScheduler, make_data_source
from foodscreen.utils.signals import CallbackSlot


class ReloadCounter:
    def __init__(self) -> None:
        self.count = 0

    def on_reload(self) -> None:
        self.count += 1


def test_get_sections_is_empty_before_setup_and_canonical_after():
    source = make_data_source(FakeScheduler())
    assert source.get_sections() == []

    source.setup()
    source.update()
    source.setup()

    assert source.get_sections() == [
        SectionIdentifier.FAVOURITE_FOOD,
        SectionIdentifier.RESTAURANTS,
        SectionIdentifier.NEARBY_USERS,
        SectionIdentifier.DISCLAIMERS,
    ]
    assert tuple(source.get_sections()) == SECTION_ORDER


def test_update_fires_exactly_one_reload_synchronously():
    scheduler = FakeScheduler()
    source = make_data_source(scheduler)
    counter = ReloadCounter()
    source.reload.connect(counter.on_reload)
    source.setup()

    source.update()

    assert counter.count == 1
    assert len(scheduler.channels) == 2


def test_timer_ticks_fan_in_to_reload():
    scheduler = FakeScheduler()
    source = make_data_source(scheduler)
    counter = ReloadCounter()
    source.reload.connect(counter.on_reload)
    source.setup()
    source.update()

    scheduler.tick()

    # one initial reload plus one per timed section
    assert counter.count == 3


def test_get_elements_delegates_to_each_section():
    source = make_data_source(FakeScheduler())
    source.setup()
    source.update()

    assert len(source.get_elements(0)) == 4
    assert 1 <= len(source.get_elements(1)) <= 3
    assert source.get_elements(2) == [NearbyUserItem.USER_WITH_NAME_ONLY, NearbyUserItem.USER_WITH_AVATAR]
    assert source.get_elements(3)[0] == CompanyLogo(0)


def test_cell_model_routes_by_index_path():
    source = make_data_source(FakeScheduler())
    source.setup()
    source.update()

    assert source.cell_model(IndexPath(2, 1)) == CellModel("User and its avatar")
    assert source.cell_model(IndexPath(3, 2)) == CellModel("This is the copyright text")


@pytest.mark.parametrize("section", [-1, 4])
def test_invalid_section_index_raises(section):
    source = make_data_source(FakeScheduler())
    source.setup()
    with pytest.raises(IndexError):
        source.get_elements(section)
    with pytest.raises(IndexError):
        source.cell_model(IndexPath(section, 0))


def test_reload_slot_last_assignment_wins():
    source = make_data_source(FakeScheduler())
    first, second = ReloadCounter(), ReloadCounter()
    source.reload.connect(first.on_reload)
    source.reload.connect(second.on_reload)
    source.setup()

    source.update()

    assert (first.count, second.count) == (0, 1)


def test_collected_subscriber_is_a_silent_noop():
    source = make_data_source(FakeScheduler())
    counter = ReloadCounter()
    source.reload.connect(counter.on_reload)
    source.setup()

    del counter
    gc.collect()

    source.update()
    assert source.reload.connected is False


def test_collected_data_source_stops_receiving_section_actions():
    scheduler = FakeScheduler()
    source = make_data_source(scheduler)
    favourites = source._favourite_food
    source.setup()
    source.update()

    del source
    gc.collect()

    scheduler.tick()
    assert favourites.did_request_action.connected is False
    assert favourites.ticks == 1


def test_say_hello_is_logged(caplog):
    source = make_data_source(FakeScheduler())
    source.setup()
    counter = ReloadCounter()
    source.reload.connect(counter.on_reload)

    with caplog.at_level(logging.INFO, logger="foodscreen.datasource.food_data_source"):
        source._favourite_food.greet("Vincent")

    assert "Hello Vincent" in caplog.text
    assert counter.count == 0


def test_teardown_stops_timers_and_subscriptions():
    scheduler = FakeScheduler()
    source = make_data_source(scheduler)
    counter = ReloadCounter()
    source.reload.connect(counter.on_reload)
    source.setup()
    source.update()

    source.teardown()
    scheduler.tick()

    assert scheduler.channels == {}
    assert counter.count == 1
    assert source.reload.connected is False


def test_create_builds_default_sections_sharing_the_scheduler():
    scheduler = FakeScheduler()
    source = FoodDataSource.create(scheduler, interval_ms=250)
    source.setup()
    source.update()

    assert sorted(interval for interval, _ in scheduler.channels.values()) == [250, 250]


class SectionStub:
    """Section built from plain values; ``did_request_action``/``stop`` make it timed."""

    def __init__(self, identifier: SectionIdentifier, elements) -> None:
        self.identifier = identifier
        self.elements = list(elements)
        self.updates = 0
        self.stopped = False
        self.did_request_action: CallbackSlot[SectionAction] = CallbackSlot(f"{identifier}.stub")

    def update(self) -> None:
        self.updates += 1

    def get_elements(self):
        return list(self.elements)

    def cell_model(self, row: int) -> CellModel:
        return CellModel(f"{self.identifier}:{self.elements[row]}")

    def stop(self) -> None:
        self.stopped = True


def test_data_source_accepts_any_sections_matching_the_ports():
    favourites = SectionStub(SectionIdentifier.FAVOURITE_FOOD, ["a", "b"])
    restaurants = SectionStub(SectionIdentifier.RESTAURANTS, ["r"])
    users = SectionStub(SectionIdentifier.NEARBY_USERS, [])
    disclaimers = SectionStub(SectionIdentifier.DISCLAIMERS, ["d"])
    source = FoodDataSource(favourites, restaurants, users, disclaimers)
    counter = ReloadCounter()
    source.reload.connect(counter.on_reload)
    source.setup()

    source.update()
    restaurants.did_request_action.emit(SectionAction.reload())

    assert (favourites.updates, restaurants.updates, users.updates, disclaimers.updates) == (1, 1, 1, 0)
    assert counter.count == 2
    assert source.cell_model(IndexPath(0, 1)) == CellModel("favouriteFood:b")

    source.teardown()

    assert favourites.stopped and restaurants.stopped
    assert restaurants.did_request_action.connected is False
