"""Distance and length unit definitions for spatial measurements.

All distance scales are expressed in meters, so the meter has a scale of
1 and every other distance unit converts through it.

Units:
    astronomical_unit: 149 597 870 700 meters.
    kilometer: 1000 meters.
    meter: Base distance unit.
    millimeter: 0.001 meters.
    mile: International mile, 1609.344 meters.
    yard: 0.9144 meters.
    foot: 0.3048 meters.
    inch: 0.0254 meters.

Example:
    >>> from unitd.unit import units
    >>> units.distance.kilometer.scale
    1000
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .unit_registry import UnitRegistry

DISTANCE = "distance"

DISTANCE_UNITS = (
    ("astronomical_unit", "au", 149597870700),
    ("kilometer", "km", 1000),
    ("meter", "m", 1),
    ("millimeter", "mm", 0.001),
    ("mile", "mi", 1609.344),
    ("yard", "yd", 0.9144),
    ("foot", "ft", 0.3048),
    ("inch", "in", 0.0254),
)


def register_distance_units(registry: UnitRegistry) -> None:
    """Register the standard distance units on ``registry``."""
    for name, abbreviation, scale in DISTANCE_UNITS:
        registry.register_unit(DISTANCE, name, abbreviation, scale)
