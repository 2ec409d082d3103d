"""
Hanson ValueChange - Value Change Events
========================================

The event published by observables and dynamic properties whenever their
value is written.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class ValueChange(Generic[V]):
    """
    Immutable pair of the value before and after a single write.

    Example:
        ```python
        change = ValueChange("A", "B")
        change.old_value  # "A"
        change.new_value  # "B"
        ```
    """

    old_value: V
    new_value: V
