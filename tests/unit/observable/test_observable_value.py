"""Unit tests for Observable value cells."""

import pytest

from hanson import Bindable, EventPublisher, Observable, Property, ValueChange


@pytest.mark.unit
@pytest.mark.observable
def test_observable_holds_initial_value():
    assert Observable("Hello World").value == "Hello World"


@pytest.mark.unit
@pytest.mark.observable
def test_setting_value_publishes_old_and_new_value(tracker):
    """Each write publishes exactly one ValueChange describing that write"""
    # Arrange
    observable = Observable("A")
    observable.add_event_handler(tracker.record)

    # Act & Assert
    observable.value = "B"
    assert tracker.events == [ValueChange("A", "B")]

    observable.value = "C"
    assert tracker.events == [ValueChange("A", "B"), ValueChange("B", "C")]


@pytest.mark.unit
@pytest.mark.observable
def test_removed_handler_is_not_invoked_again(tracker):
    observable = Observable("A")
    token = observable.add_event_handler(tracker.record)

    observable.value = "B"
    observable.value = "C"
    observable.remove_event_handler(token)
    observable.value = "D"

    assert tracker.events == [ValueChange("A", "B"), ValueChange("B", "C")]
    assert observable.value == "D"


@pytest.mark.unit
@pytest.mark.observable
def test_serialized_writes_publish_a_chain_of_changes(tracker):
    """Events for writes v1..vn are (init, v1), (v1, v2), ..., (vn-1, vn)"""
    observable = Observable(0)
    observable.add_event_handler(tracker.record)

    for value in range(1, 11):
        observable.value = value

    assert tracker.events == [ValueChange(i - 1, i) for i in range(1, 11)]


@pytest.mark.unit
@pytest.mark.observable
def test_writing_equal_value_still_publishes(tracker):
    """Observables do not compare values; every write is an event"""
    observable = Observable("same")
    observable.add_event_handler(tracker.record)

    observable.value = "same"

    assert tracker.events == [ValueChange("same", "same")]


@pytest.mark.unit
@pytest.mark.observable
def test_set_returns_observable_for_chaining(tracker):
    observable = Observable(1)
    observable.add_event_handler(tracker.record)

    assert observable.set(2).set(3) is observable
    assert tracker.events == [ValueChange(1, 2), ValueChange(2, 3)]


class TestSilentUpdates:
    """silently_update() writes without notifying."""

    @pytest.mark.unit
    @pytest.mark.observable
    def test_silent_update_changes_value_without_event(self, tracker):
        observable = Observable("Hello World")
        observable.add_event_handler(tracker.record)

        observable.silently_update("New Value")

        assert observable.value == "New Value"
        assert tracker.events == []

    @pytest.mark.unit
    @pytest.mark.observable
    def test_next_write_reports_silently_updated_value_as_old(self, tracker):
        """The baseline of the next event is the silent value, not the last published one"""
        observable = Observable("A")
        observable.add_event_handler(tracker.record)

        observable.value = "B"
        observable.silently_update("S")
        observable.value = "C"

        assert tracker.events == [ValueChange("A", "B"), ValueChange("S", "C")]


@pytest.mark.unit
@pytest.mark.observable
def test_handler_reads_new_value_during_publish():
    """Handlers see the new value when they read it back synchronously"""
    observable = Observable(1)
    seen = []
    observable.add_event_handler(lambda change: seen.append(observable.value))

    observable.value = 2

    assert seen == [2]


@pytest.mark.unit
@pytest.mark.observable
def test_handler_may_write_back_to_same_observable():
    """A handler writing the observable it observes re-enters the lock without deadlock"""
    observable = Observable(0)
    changes = []

    def clamp(change):
        changes.append(change)
        if change.new_value > 10:
            observable.value = 10

    observable.add_event_handler(clamp)
    observable.value = 42

    assert observable.value == 10
    assert changes == [ValueChange(0, 42), ValueChange(42, 10)]


@pytest.mark.unit
@pytest.mark.observable
def test_observable_is_publisher_and_bindable():
    observable = Observable(None)

    assert isinstance(observable, EventPublisher)
    assert isinstance(observable, Bindable)


@pytest.mark.unit
@pytest.mark.observable
def test_property_is_observable_alias():
    assert Property is Observable
    assert repr(Property("x")) == "Observable('x')"
