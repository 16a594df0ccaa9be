"""Unit records and unit type namespaces.

A unit belongs to exactly one unit type (a dimension such as distance or
time). Units of the same type can be converted into one another and can be
operated on together, while units of different types are never mixed.

Unlike a class hierarchy per dimension, the unit type is an explicit field
on each unit record, so comparability is a plain equality check on that
field.

Key Concepts:
- Unit: Frozen record of type, name, abbreviation and scale
- UnitType: Namespace of the units registered under one type
- Scale: Factor converting a magnitude into the implicit base of its type

Classes:
    Unit: Immutable unit record.
    UnitType: Ordered, attribute-accessible collection of units of one type.

Example:
    >>> meter = Unit("distance", "meter", "m", 1)
    >>> kilometer = Unit("distance", "kilometer", "km", 1000)
    >>> meter.is_comparable(kilometer)
    True
    >>> str(kilometer)
    'kilometer'
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from unitd.config import Number
from unitd.errors import UnresolvableUnitError


@dataclass(frozen=True, slots=True)
class Unit:
    """A named scale within a unit type.

    Units are created by :meth:`UnitRegistry.register_unit` and never
    change afterwards.

    Attributes:
        type (str): Name of the unit type this unit belongs to.
        name (str): Unit name, unique within its type.
        abbreviation (str): Display symbol, may be empty.
        scale (Number): Size of the unit relative to the type's implicit base.
    """

    type: str
    name: str
    abbreviation: str
    scale: Number

    def is_comparable(self, other: object) -> bool:
        """Check if another unit belongs to the same unit type.

        Args:
            other: Object to check compatibility with.

        Returns:
            bool: True if ``other`` is a Unit of the same type.
        """
        return isinstance(other, Unit) and other.type == self.type

    def __str__(self) -> str:
        return self.name


class UnitType:
    """Namespace of all units registered under one unit type.

    Units are reachable as attributes (``distance.meter``), by subscription
    (``distance["meter"]``) or through :meth:`get`. Iteration yields units
    in registration order.

    A unit named like a namespace member (``get``, ``name``) is only
    reachable by subscription or :meth:`get`.

    Attributes:
        name (str): The unit type identifier.
    """

    __slots__ = ("name", "_units")

    def __init__(self, name: str):
        self.name = name
        self._units: dict[str, Unit] = {}

    def _add(self, unit: Unit) -> None:
        self._units[unit.name] = unit

    def get(self, name: str, default: Unit | None = None) -> Unit | None:
        """Return the unit called ``name``, or ``default`` when missing."""
        return self._units.get(name, default)

    def __getitem__(self, name: str) -> Unit:
        try:
            return self._units[name]
        except KeyError:
            msg = f"Unable to find unit [{self.name}][{name}]"
            raise UnresolvableUnitError(msg) from None

    def __getattr__(self, name: str) -> Unit:
        if name.startswith("__") or name == "_units":
            raise AttributeError(name)
        try:
            return self._units[name]
        except KeyError:
            msg = f"Unit type [{self.name}] has no unit [{name}]"
            raise AttributeError(msg) from None

    def __contains__(self, name: object) -> bool:
        return name in self._units

    def __iter__(self) -> Iterator[Unit]:
        return iter(list(self._units.values()))

    def __len__(self) -> int:
        return len(self._units)

    def __dir__(self):
        return [*super().__dir__(), *self._units]

    def __repr__(self) -> str:
        return f"UnitType({self.name!r}, units={list(self._units)})"
