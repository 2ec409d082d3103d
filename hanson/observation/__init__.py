"""
Hanson Observation Module
=========================

Observation handles, the ObservationManager and the Observer mixin.
"""

from hanson.observation.manager import ObservationManager
from hanson.observation.observation import Observation
from hanson.observation.observer import Observer

__all__ = [
    "Observation",
    "ObservationManager",
    "Observer",
]
