"""Unit tests for the Observer mixin."""

import pytest

from hanson import Observable, ObservationManager, Observer
from tests.test_factories import Label


class ProfileView(Observer):
    def __init__(self, name: Observable) -> None:
        self._observation_manager = ObservationManager()
        self.title = Label()
        self.history = []

        self.bind_setter(name, self.title, Label.set_text)
        self.observe(name, self.history.append)

    @property
    def observation_manager(self) -> ObservationManager:
        return self._observation_manager


@pytest.mark.unit
@pytest.mark.observation
def test_observer_forwards_to_its_manager():
    name = Observable("Alice")
    view = ProfileView(name)

    name.value = "Bob"

    assert view.title.text == "Bob"
    assert [change.new_value for change in view.history] == ["Bob"]
    assert len(view.observation_manager) == 2


@pytest.mark.unit
@pytest.mark.observation
def test_observer_unobserve_all():
    name = Observable("Alice")
    view = ProfileView(name)

    view.unobserve_all()
    name.value = "Bob"

    assert view.title.text == "Alice"
    assert not name.has_event_handlers


@pytest.mark.unit
@pytest.mark.observation
def test_observer_unobserve_single_observation():
    name = Observable(1)
    view = ProfileView(Observable("unused"))
    seen = []

    observation = view.observe(name, seen.append)
    name.value = 2
    view.unobserve(observation)
    name.value = 3

    assert len(seen) == 1


@pytest.mark.unit
@pytest.mark.observation
def test_observer_bind():
    name = Observable("Alice")
    view = ProfileView(Observable("unused"))
    mirror = Observable("")

    view.bind(name, mirror)
    name.value = "Carol"

    assert mirror.value == "Carol"


@pytest.mark.unit
@pytest.mark.observation
def test_observer_requires_manager():
    class Incomplete(Observer):
        pass

    with pytest.raises(TypeError):
        Incomplete()
