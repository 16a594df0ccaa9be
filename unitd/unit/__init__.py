"""Unit types, units and the registry that holds them.

This package defines the unit model used by Measure. A unit type is a
dimension (distance, time, amount); a unit is a named scale within one
type. Units of the same type convert into one another; units of different
types never mix.

Architecture:
    - unit_base: Unit record and UnitType namespace
    - unit_registry: Append-only UnitRegistry and the default seeding
    - unit_amount: Amount units (count, mole)
    - unit_distance: Distance units, scales in meters
    - unit_time: Time units, scales in seconds

Unit Types:
    - _reserved: dimensionless (used when a Measure has no unit)
    - amount: count, mole
    - distance: astronomical_unit, kilometer, meter, millimeter, mile,
      yard, foot, inch
    - time: day, hour, minute, second

The process-wide registry ``units`` is created on import. Registering new
units on it is an extension point; register them once at startup.

Example:
    >>> from unitd.unit import units
    >>> units.distance.mile.abbreviation
    'mi'
    >>> units.register_unit("distance", "league", "lea", 4828.032).scale
    4828.032
"""

from .unit_base import Unit, UnitType
from .unit_registry import UnitRegistry, create_default_registry

units = create_default_registry()

__all__ = [
    "Unit",
    "UnitType",
    "UnitRegistry",
    "create_default_registry",
    "units",
]
