"""Time unit definitions.

Time scales are expressed in seconds.

Units:
    day: 86400 seconds.
    hour: 3600 seconds.
    minute: 60 seconds.
    second: Base time unit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .unit_registry import UnitRegistry

TIME = "time"

TIME_UNITS = (
    ("day", "d", 86400),
    ("hour", "hr", 3600),
    ("minute", "min", 60),
    ("second", "s", 1),
)


def register_time_units(registry: UnitRegistry) -> None:
    """Register the standard time units on ``registry``."""
    for name, abbreviation, scale in TIME_UNITS:
        registry.register_unit(TIME, name, abbreviation, scale)
