"""
Shared pytest fixtures and configuration for Hanson tests.
"""

import pytest

from hanson import NotificationCenter, ObservationManager
from hanson.scheduling.defaults import _reset_default_scheduler
from tests.test_factories import EventTracker, StringPublisher


@pytest.fixture(autouse=True)
def reset_default_scheduler():
    """Reset the default scheduler around each test to prevent state leakage."""
    _reset_default_scheduler()
    yield
    _reset_default_scheduler()


@pytest.fixture(autouse=True)
def reset_default_notification_center():
    """Give every test a fresh process-wide notification center."""
    NotificationCenter._reset_default()
    yield
    NotificationCenter._reset_default()


@pytest.fixture
def publisher():
    """Provide a fresh string event publisher."""
    return StringPublisher()


@pytest.fixture
def tracker():
    """Provide an event tracker whose record() method is usable as a handler."""
    return EventTracker()


@pytest.fixture
def manager():
    """Provide an observation manager that is torn down after the test."""
    with ObservationManager() as observation_manager:
        yield observation_manager
