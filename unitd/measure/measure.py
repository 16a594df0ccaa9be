"""Immutable dimensioned values with precision tracking.

A Measure pairs a magnitude with a Unit and a precision (significant
digits). It converts between units of the same type and combines with
other measures through the operations of an OperationRegistry.

Key Features:
- Identity construction: ``Measure(m) is m`` for any Measure ``m``
- Precision clamped to [MIN_PRECISION, MAX_PRECISION]
- Conversion by exact scale ratio between comparable units
- Registry-backed dispatch through :meth:`Measure.apply`
- Every registered operation mounted as a method on the class, including
  operations registered after instances were created
- Operators and comparisons layered on top of the same dispatch

Operation results are always expressed in the receiver's unit and carry
the lower precision of the two operands.

Classes:
    Measure: Immutable value with unit and precision.

Example:
    >>> from unitd import Measure, units
    >>> distance = Measure(2, units.distance.kilometer)
    >>> distance.add(Measure(500, units.distance.meter)).raw
    2.5
    >>> distance.as_unit("meter").raw
    2000.0
    >>> str(Measure(1.23456, units.distance.meter, 3))
    '1.23 m'
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context
import logging
import math
from numbers import Real
from typing import Any, ClassVar

import numpy as np

from unitd.config import MAX_PRECISION, MIN_PRECISION, Number
from unitd.errors import IncompatibleUnitsError, InvalidValueError, UnresolvableUnitError
from unitd.operations import OperationRegistry, operations as default_operations
from unitd.unit import Unit, UnitRegistry, units as default_units

logger = logging.getLogger(__name__)


class Measure:
    """A numeric value tagged with a unit and a precision.

    Instances are immutable; every conversion or operation returns a new
    Measure. The registries a Measure class works with are class
    attributes. A subclass that declares its own ``operations`` registry
    gets its own method mounting for that registry.

    Attributes:
        raw (float): Full-precision magnitude in the scale of ``unit``.
        unit (Unit): Unit of the magnitude.
        precision (int): Significant digits kept in ``val``.
        val (float): ``raw`` rounded to ``precision`` significant digits.
        units (ClassVar[UnitRegistry]): Registry used to resolve unit names.
        operations (ClassVar[OperationRegistry]): Registry used for dispatch.
    """

    __slots__ = ("raw", "unit", "precision", "val")

    units: ClassVar[UnitRegistry] = default_units
    operations: ClassVar[OperationRegistry] = default_operations

    def __new__(cls, value: Any, unit: Unit | None = None, precision: Any = None):
        """Create a Measure, or return ``value`` if it already is one.

        Args:
            value: Number, or anything ``float()`` accepts.
            unit: Unit of ``value``. Defaults to the dimensionless unit.
            precision: Significant digits. Defaults to MAX_PRECISION when
                missing or not numeric, otherwise clamped to
                [MIN_PRECISION, MAX_PRECISION].

        Returns:
            Measure: The new instance, or ``value`` unchanged.

        Raises:
            InvalidValueError: If ``value`` is not a finite number.
            TypeError: If ``unit`` is not a Unit.
        """
        if isinstance(value, Measure):
            return value
        return cls._create(_coerce_value(value), unit, _clamp_precision(precision))

    @classmethod
    def _create(cls, raw: Number, unit: Unit | None, precision: int) -> Measure:
        # Operation results may be non-finite, so no value check here.
        raw = float(raw)
        if unit is None:
            unit = cls.units.dimensionless
        elif not isinstance(unit, Unit):
            msg = f"A Unit is required, found [{unit!r}]"
            raise TypeError(msg)
        self = object.__new__(cls)
        object.__setattr__(self, "raw", raw)
        object.__setattr__(self, "unit", unit)
        object.__setattr__(self, "precision", precision)
        object.__setattr__(self, "val", _round_significant(raw, precision))
        return self

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "operations" in cls.__dict__:
            _bind_operations(cls)

    # -------------------------------- Conversion --------------------------------
    def as_unit(self, unit: Unit | str) -> Measure:
        """Convert to another unit of the same type.

        Args:
            unit: Target Unit, or the name of a unit of this measure's type.

        Returns:
            Measure: New measure in the target unit with the same precision.

        Raises:
            UnresolvableUnitError: If a unit name does not resolve.
            IncompatibleUnitsError: If the target unit has another type.
        """
        target = self._resolve_unit(unit)
        return self._create(self.raw * self.unit.scale / target.scale, target, self.precision)

    def to(self, unit: Unit | str) -> float:
        """Return the magnitude converted to ``unit``, without the unit."""
        target = self._resolve_unit(unit)
        return self.raw * self.unit.scale / target.scale

    def _resolve_unit(self, unit: Unit | str) -> Unit:
        if isinstance(unit, Unit):
            target = unit
        else:
            target = self.units.get(self.unit.type, unit)
            if target is None:
                msg = f"Unable to find unit [{unit}]"
                raise UnresolvableUnitError(msg)
        if not self.unit.is_comparable(target):
            raise IncompatibleUnitsError(self.unit, target)
        return target

    # -------------------------------- Operations --------------------------------
    def apply(self, name: str, other: Any, *args: Any) -> Measure:
        """Apply the registered operation ``name`` to this measure and ``other``.

        Both magnitudes are scaled to the type's base before the operation.
        The result is divided by this measure's scale raised to the
        operation's scale power, which expresses sums in this unit and
        leaves ratios as plain numbers tagged with this unit.

        Args:
            name: Name of a registered operation.
            other: Measure, or a value built into one with the constructor.
            *args: Unit and precision for building ``other``.

        Returns:
            Measure: Result in this measure's unit, with the lower precision.

        Raises:
            UnresolvableOperationError: If ``name`` is not registered.
            IncompatibleUnitsError: If the units have different types.
        """
        operation = self.operations.get(name)
        scale_power = self.operations.scale_power(name)
        other = type(self)(other, *args)
        if not self.unit.is_comparable(other.unit):
            raise IncompatibleUnitsError(self.unit, other.unit)
        scale = self.unit.scale
        raw = operation(self.raw * scale, other.raw * other.unit.scale) / scale**scale_power
        return self._create(raw, self.unit, min(self.precision, other.precision))

    def __add__(self, other):
        if not isinstance(other, (Measure, Real)):
            return NotImplemented
        return self.apply("add", other)

    def __radd__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return type(self)(other).apply("add", self)

    def __sub__(self, other):
        if not isinstance(other, (Measure, Real)):
            return NotImplemented
        return self.apply("subtract", other)

    def __rsub__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return type(self)(other).apply("subtract", self)

    def __mul__(self, other):
        if not isinstance(other, (Measure, Real)):
            return NotImplemented
        return self.apply("multiply", other)

    def __rmul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return type(self)(other).apply("multiply", self)

    def __truediv__(self, other):
        if not isinstance(other, (Measure, Real)):
            return NotImplemented
        return self.apply("divide", other)

    def __rtruediv__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return type(self)(other).apply("divide", self)

    # -------------------------------- Comparison --------------------------------
    def _base_values(self, other: Measure) -> tuple[Number, Number]:
        if not self.unit.is_comparable(other.unit):
            raise IncompatibleUnitsError(self.unit, other.unit)
        return self.raw * self.unit.scale, other.raw * other.unit.scale

    def __eq__(self, other):
        if not isinstance(other, Measure):
            return NotImplemented
        a, b = self._base_values(other)
        return a == b

    def __lt__(self, other):
        if not isinstance(other, Measure):
            return NotImplemented
        a, b = self._base_values(other)
        return a < b

    def __le__(self, other):
        if not isinstance(other, Measure):
            return NotImplemented
        a, b = self._base_values(other)
        return a <= b

    def __gt__(self, other):
        if not isinstance(other, Measure):
            return NotImplemented
        a, b = self._base_values(other)
        return a > b

    def __ge__(self, other):
        if not isinstance(other, Measure):
            return NotImplemented
        a, b = self._base_values(other)
        return a >= b

    def __hash__(self):
        return hash((self.unit.type, self.raw * self.unit.scale))

    # -------------------------------- Immutability --------------------------------
    def __setattr__(self, name, value):
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name):
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return _rebuild, (type(self), self.raw, self.unit, self.precision)

    # -------------------------------- Display --------------------------------
    def __float__(self) -> float:
        return float(self.raw)

    def __str__(self) -> str:
        """Return the rounded value and unit abbreviation (e.g. "2.5 km")."""
        text = np.format_float_positional(self.val, trim="-")
        return f"{text} {self.unit.abbreviation}".strip()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.raw!r}, {self.unit.type}.{self.unit.name}, "
            f"precision={self.precision})"
        )


def _rebuild(cls: type[Measure], raw: Number, unit: Unit, precision: int) -> Measure:
    return cls._create(raw, unit, precision)


def _coerce_value(value: Any) -> float:
    """Return ``value`` as a finite float.

    Everything goes through ``float()``, so later arithmetic follows float
    semantics and overflows to ``inf`` instead of raising.

    Raises:
        InvalidValueError: If ``value`` is not numeric, too large for a
            float, NaN or infinite.
    """
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        msg = f"A number is required, found [{value!r}]"
        raise InvalidValueError(msg) from None
    if not math.isfinite(number):
        msg = f"A finite number is required, found [{value!r}]"
        raise InvalidValueError(msg)
    return number


def _clamp_precision(precision: Any) -> int:
    if not isinstance(precision, Real):
        try:
            precision = float(precision)
        except (TypeError, ValueError):
            return MAX_PRECISION
    if precision != precision:
        return MAX_PRECISION
    return int(max(min(precision, MAX_PRECISION), MIN_PRECISION))


def _round_significant(value: float, precision: int) -> float:
    """Round ``value`` to ``precision`` significant digits, ties away from zero.

    The exact binary value of ``value`` is rounded, so 0.125 becomes 0.13
    at two digits while 1.005 (stored just below) becomes 1.0.
    """
    if not math.isfinite(value):
        return value
    context = Context(prec=precision, rounding=ROUND_HALF_UP)
    return float(context.create_decimal_from_float(value))


def _operation_method(name: str):
    def method(self, other, *args):
        return self.apply(name, other, *args)

    method.__name__ = name
    method.__qualname__ = f"Measure.{name}"
    method.__doc__ = f"Apply the registered [{name}] operation, see Measure.apply."
    method.operation_name = name
    return method


def _mount_operation(cls: type[Measure], name: str) -> None:
    current = getattr(cls, name, None)
    if current is not None and not hasattr(current, "operation_name"):
        logger.warning(
            "Operation [%s] clashes with %s.%s; use apply() instead", name, cls.__name__, name
        )
        return
    setattr(cls, name, _operation_method(name))
    logger.debug("Mounted operation [%s] on %s", name, cls.__name__)


def _bind_operations(cls: type[Measure]) -> None:
    """Mount every current and future operation of ``cls.operations`` on ``cls``."""
    cls.operations.on_register(lambda name, fn: _mount_operation(cls, name))
    for name in cls.operations:
        _mount_operation(cls, name)


_bind_operations(Measure)
