"""
End-to-end binding scenarios across observables, dynamic properties and
schedulers.
"""

import asyncio
import threading

import pytest

from hanson import (
    EventLoopScheduler,
    Observable,
    ObservableAttribute,
    ObservationManager,
    ThreadAffinityScheduler,
    set_default_scheduler,
)
from tests.test_factories import Label, SampleObject


class Settings:
    volume = ObservableAttribute(5)


@pytest.mark.integration
def test_chained_bindings_propagate_in_one_direction(manager):
    first = Observable("a")
    second = Observable("")
    third = Observable("")

    manager.bind(first, second)
    manager.bind(second, third)
    assert third.value == "a"

    first.value = "b"
    assert (second.value, third.value) == ("b", "b")

    third.value = "c"
    assert (first.value, second.value) == ("b", "b")


@pytest.mark.integration
def test_attribute_to_dynamic_property_to_label(manager):
    """A descriptor attribute drives a plain object which drives a write-only label"""
    settings = Settings()
    sample = SampleObject(0)
    label = Label()

    def show_volume(target: Label, volume: int) -> None:
        target.set_text(f"{volume}%")

    manager.bind(Settings.volume.of(settings), sample.dynamic_property("value", int))
    manager.bind_setter(sample.dynamic_property("value", int), label, show_volume)

    settings.volume = 11

    assert sample.value == 11
    assert label.text == "11%"


@pytest.mark.integration
def test_unobserve_all_breaks_every_binding(manager):
    source = Observable(1)
    targets = [Observable(0) for _ in range(3)]
    for target in targets:
        manager.bind(source, target)

    manager.unobserve_all()
    source.value = 2

    assert [target.value for target in targets] == [1, 1, 1]
    assert not source.has_event_handlers


@pytest.mark.integration
@pytest.mark.scheduling
def test_worker_thread_updates_are_delivered_on_ui_thread():
    """A thread running run_forever() receives every update published elsewhere"""
    source = Observable(0)
    delivered_on = []
    ready = threading.Event()
    holder = {}

    def ui_thread():
        scheduler = ThreadAffinityScheduler()
        holder["scheduler"] = scheduler
        ready.set()
        scheduler.run_forever()

    ui = threading.Thread(target=ui_thread, name="ui")
    ui.start()
    ready.wait()
    scheduler = holder["scheduler"]

    with ObservationManager() as manager:
        target = Observable(None)
        target.add_event_handler(lambda _: delivered_on.append(threading.current_thread()))
        manager.bind(source, target, scheduler)

        for value in range(1, 6):
            source.value = value

        scheduler.stop()
        ui.join(timeout=5)

    assert not ui.is_alive()
    assert target.value == 5
    assert delivered_on == [ui] * 6


@pytest.mark.integration
@pytest.mark.scheduling
def test_default_scheduler_applies_to_bindings():
    scheduler = ThreadAffinityScheduler()
    set_default_scheduler(scheduler)
    source = Observable("X")
    target = Observable("")

    with ObservationManager() as manager:
        manager.bind(source, target)
        assert target.value == "X"

        worker = threading.Thread(target=lambda: source.set("Y"))
        worker.start()
        worker.join()

        assert target.value == "X"
        scheduler.run_pending()
        assert target.value == "Y"


@pytest.mark.integration
@pytest.mark.scheduling
def test_binding_delivered_on_event_loop():
    source = Observable("start")
    target = Observable("")

    async def main():
        scheduler = EventLoopScheduler()
        done = asyncio.Event()
        target.add_event_handler(lambda change: change.new_value == "end" and done.set())

        with ObservationManager() as manager:
            manager.bind(source, target, scheduler)
            assert target.value == "start"

            await asyncio.to_thread(source.set, "end")
            await asyncio.wait_for(done.wait(), timeout=5)

    asyncio.run(main())

    assert target.value == "end"
