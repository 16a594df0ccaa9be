"""Exception types raised by the measure library.

Every failure is a caller error and is raised immediately. Each class also
derives from the builtin exception a caller would naturally expect, so
``except ValueError`` or ``except TypeError`` keeps working.
"""


class UnitdError(Exception):
    """Base class for all library errors."""


class InvalidIdentifierError(UnitdError, ValueError):
    """A unit type or unit name is not identifier-shaped."""


class DuplicateRegistrationError(UnitdError, ValueError):
    """A unit or operation with the same key is already registered."""


class InvalidValueError(UnitdError, ValueError):
    """A value cannot be used as a finite number."""


class IncompatibleUnitsError(UnitdError, TypeError):
    """Two units belong to different unit types."""

    def __init__(self, unit, other):
        self.unit = unit
        self.other = other
        super().__init__(f"Unit {unit} is not comparable to {other}")


class UnresolvableUnitError(UnitdError, LookupError):
    """A unit name does not exist under the requested unit type."""


class UnresolvableOperationError(UnitdError, LookupError):
    """An operation name is not registered."""
