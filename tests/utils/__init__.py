"""
Test utilities for Hanson.

This package contains shared testing utilities to help write
better, more maintainable tests.
"""

from .memory_utils import (
    assert_alive,
    assert_cleaned_up,
    collect_and_check,
    count_instances,
)

__all__ = [
    "assert_alive",
    "assert_cleaned_up",
    "collect_and_check",
    "count_instances",
]
