"""Dimensioned values with unit conversion and precision tracking.

unitd represents measurements tagged with a unit, such as "5 kilometers".
Arithmetic and comparisons only happen between units of the same type,
values convert between units of one type by exact scale ratios, and the
number of significant digits is carried through chained operations.

Framework Components:
    Unit Registry (unitd.unit):
        • Unit: Immutable record of type, name, abbreviation and scale
        • UnitType: Namespace of the units of one dimension
        • UnitRegistry: Append-only store, seeded with standard units
        • units: Process-wide registry

    Operation Registry (unitd.operations):
        • OperationRegistry: Named binary operations with listeners
        • operations: Process-wide registry with add, subtract, multiply
          and divide

    Measure (unitd.measure):
        • Measure: Immutable value with conversion via ``as_unit`` and
          registry-backed arithmetic via ``apply`` and mounted methods

Example:
    >>> from unitd import Measure, units, operations
    >>> Measure(5, units.distance.kilometer).as_unit(units.distance.meter).raw
    5000.0
    >>> trip = Measure(10, units.time.hour).divide(Measure(2, units.time.hour))
    >>> trip.raw, trip.unit.name
    (5.0, 'hour')
    >>> operations.register("pow", lambda a, b: a ** b)
    >>> Measure(2).pow(3).raw
    8.0
"""

import logging

from .errors import (
    DuplicateRegistrationError,
    IncompatibleUnitsError,
    InvalidIdentifierError,
    InvalidValueError,
    UnitdError,
    UnresolvableOperationError,
    UnresolvableUnitError,
)
from .measure import Measure
from .operations import OperationRegistry, operations
from .unit import Unit, UnitRegistry, UnitType, units

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Measure",
    "Unit",
    "UnitType",
    "UnitRegistry",
    "OperationRegistry",
    "units",
    "operations",
    "UnitdError",
    "InvalidIdentifierError",
    "DuplicateRegistrationError",
    "InvalidValueError",
    "IncompatibleUnitsError",
    "UnresolvableUnitError",
    "UnresolvableOperationError",
]
