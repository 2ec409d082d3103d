"""
Memory testing utilities for observations and bindings.

These utilities help verify that publishers, managers and bound targets are
kept alive exactly as long as they should be.

Examples:
    Lifetime check:

        >>> from tests.utils.memory_utils import collect_and_check
        >>> publisher = StringPublisher()
        >>> publisher_ref = weakref.ref(publisher)
        >>> del publisher
        >>> assert collect_and_check(publisher_ref) is None

    Counting live instances:

        >>> before = count_instances(Observation)
        >>> manager.observe(publisher, handler)
        >>> assert count_instances(Observation) == before + 1
"""

import gc
import weakref
from typing import Any, Optional


def collect_and_check(ref: "weakref.ref[Any]") -> Optional[Any]:
    """Run a full garbage collection and return what ``ref`` still points to."""
    gc.collect()
    return ref()


def assert_cleaned_up(
    ref: "weakref.ref[Any]", description: str = "Object should be cleaned up"
) -> None:
    """Assert that the object behind ``ref`` has been garbage collected.

    The caller must drop its own strong references before calling this.

    Args:
        ref: Weak reference to the object under test
        description: Custom description for the assertion failure
    """
    assert collect_and_check(ref) is None, f"{description}: object was not cleaned up"


def assert_alive(
    ref: "weakref.ref[Any]", description: str = "Object should still be alive"
) -> None:
    """Assert that the object behind ``ref`` survives a full garbage collection."""
    assert collect_and_check(ref) is not None, f"{description}: object was collected"


def count_instances(cls: type) -> int:
    """Count live instances of ``cls`` (subclasses included).

    Returns:
        Number of objects tracked by the garbage collector that are ``cls`` instances
    """
    gc.collect()
    return sum(1 for obj in gc.get_objects() if isinstance(obj, cls))
