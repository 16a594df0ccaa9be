"""Registry of unit types and units.

The registry owns every unit type and unit known to a Measure. It is
append-only: types and units can be added at any time but are never
removed or modified, so a Unit obtained from the registry stays valid for
the lifetime of the process.

Registration is serialized with a re-entrant lock. Lookups are plain dict
reads and need no locking once registration has settled.

Classes:
    UnitRegistry: Append-only store of unit types and units.

Functions:
    create_default_registry: Build a registry seeded with the standard units.

Example:
    >>> registry = create_default_registry()
    >>> registry.distance.meter.scale
    1
    >>> furlong = registry.register_unit("distance", "furlong", "fur", 201.168)
    >>> registry.is_comparable(furlong, registry.distance.mile)
    True
"""

from __future__ import annotations

import logging
import math
from numbers import Real
import threading

from unitd.config import DIMENSIONLESS, IDENTIFIER_PATTERN, RESERVED_TYPE, Number
from unitd.errors import (
    DuplicateRegistrationError,
    InvalidIdentifierError,
    InvalidValueError,
    UnresolvableUnitError,
)

from .unit_amount import register_amount_units
from .unit_base import Unit, UnitType
from .unit_distance import register_distance_units
from .unit_time import register_time_units

logger = logging.getLogger(__name__)


class UnitRegistry:
    """Append-only store of unit types and their units.

    Unit types are reachable as attributes (``registry.time``) or by
    subscription (``registry["time"]``). Lookup of a unit by type and name
    is two dict reads.

    Attribute access is a shortcut: a type named like a registry member
    (``get``, ``lookup``, ``types``, ``dimensionless``) is shadowed by that
    member. Subscription always reaches the unit type.

    Attributes:
        _types: Mapping from type name to its UnitType namespace.
        _lock: Serializes registration.
    """

    def __init__(self):
        self._types: dict[str, UnitType] = {}
        self._lock = threading.RLock()

    def register_type(self, type_name: str) -> UnitType:
        """Create the unit type ``type_name`` if it does not exist yet.

        Args:
            type_name: Identifier of the unit type.

        Returns:
            UnitType: The new or already existing unit type.

        Raises:
            InvalidIdentifierError: If ``type_name`` is not identifier-shaped.
        """
        _check_identifier("Type", type_name)
        with self._lock:
            unit_type = self._types.get(type_name)
            if unit_type is None:
                unit_type = UnitType(type_name)
                self._types[type_name] = unit_type
                logger.debug("Registered unit type [%s]", type_name)
            return unit_type

    def register_unit(
        self, type_name: str, name: str, abbreviation: str, scale: Number
    ) -> Unit:
        """Create a unit under ``type_name``, creating the type when new.

        Args:
            type_name: Identifier of the unit type.
            name: Identifier of the unit, unique within its type.
            abbreviation: Display symbol, may be empty.
            scale: Positive size of the unit relative to the type's base.

        Returns:
            Unit: The registered unit.

        Raises:
            InvalidIdentifierError: If ``type_name`` or ``name`` is not
                identifier-shaped.
            InvalidValueError: If ``scale`` is not a positive finite number.
            DuplicateRegistrationError: If ``(type_name, name)`` exists.
        """
        _check_identifier("Type", type_name)
        _check_identifier("Name", name)
        if (
            isinstance(scale, bool)
            or not isinstance(scale, Real)
            or not math.isfinite(scale)
            or scale <= 0
        ):
            msg = f"Scale must be a positive finite number, found [{scale!r}]"
            raise InvalidValueError(msg)

        with self._lock:
            unit_type = self.register_type(type_name)
            if name in unit_type:
                msg = f"Unit already exists [{type_name}][{name}]"
                raise DuplicateRegistrationError(msg)
            unit = Unit(type_name, name, abbreviation or "", scale)
            unit_type._add(unit)

        logger.debug("Registered unit [%s][%s] scale=%g", type_name, name, scale)
        return unit

    def get(self, type_name: str, name: str, default: Unit | None = None) -> Unit | None:
        """Return the unit ``name`` of ``type_name``, or ``default``."""
        unit_type = self._types.get(type_name)
        if unit_type is None:
            return default
        return unit_type.get(name, default)

    def lookup(self, type_name: str, name: str) -> Unit:
        """Return the unit ``name`` of ``type_name``.

        Raises:
            UnresolvableUnitError: If no such unit is registered.
        """
        unit = self.get(type_name, name)
        if unit is None:
            msg = f"Unable to find unit [{type_name}][{name}]"
            raise UnresolvableUnitError(msg)
        return unit

    @staticmethod
    def is_comparable(unit_a: Unit, unit_b: Unit) -> bool:
        """Return True if both units belong to the same unit type."""
        return unit_a.is_comparable(unit_b)

    def types(self) -> list[str]:
        """Return the registered type names in registration order."""
        return list(self._types)

    @property
    def dimensionless(self) -> Unit:
        """The reserved unit used for values without a unit."""
        return self.lookup(RESERVED_TYPE, DIMENSIONLESS)

    def __getitem__(self, type_name: str) -> UnitType:
        try:
            return self._types[type_name]
        except KeyError:
            msg = f"Unable to find unit type [{type_name}]"
            raise UnresolvableUnitError(msg) from None

    def __getattr__(self, type_name: str) -> UnitType:
        if type_name.startswith("__") or type_name in ("_types", "_lock"):
            raise AttributeError(type_name)
        try:
            return self._types[type_name]
        except KeyError:
            msg = f"Unit registry has no unit type [{type_name}]"
            raise AttributeError(msg) from None

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types

    def __dir__(self):
        return [*super().__dir__(), *self._types]


def _check_identifier(kind: str, value: object) -> None:
    if not isinstance(value, str) or not IDENTIFIER_PATTERN.fullmatch(value):
        msg = f"{kind} must be an identifier [{value}]"
        raise InvalidIdentifierError(msg)


def create_default_registry() -> UnitRegistry:
    """Build a registry seeded with the reserved unit and the standard units.

    Returns:
        UnitRegistry: Registry with the dimensionless, amount, distance and
        time units registered.
    """
    registry = UnitRegistry()
    registry.register_unit(RESERVED_TYPE, DIMENSIONLESS, "", 1)
    register_amount_units(registry)
    register_distance_units(registry)
    register_time_units(registry)
    return registry
