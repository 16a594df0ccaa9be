"""Global configuration and type definitions for the measure library.

This module provides the constants shared by the unit registry, the
operation registry and the Measure type. Keeping them in one place makes
the precision bounds and naming rules consistent across all modules.

Type Definitions:
    Number: Union type defining acceptable scalar numeric types. Supports
            Python native types (int, float) and NumPy scalars so values
            produced by vectorized code can be wrapped directly.

Constants:
    MAX_PRECISION: Upper bound for significant digits. Floating point keeps
                   about 15 to 17 significant digits; 15 is the safe limit.
    MIN_PRECISION: Lower bound for significant digits.
    IDENTIFIER_PATTERN: Naming rule for unit types and units.
    RESERVED_TYPE: Unit type holding the dimensionless unit.
    DIMENSIONLESS: Name of the dimensionless unit.

Example:
    >>> from unitd.config import MAX_PRECISION, Number
    >>> import numpy as np
    >>> scalar_int: Number = 42
    >>> scalar_np: Number = np.float64(3.14159)
    >>> MAX_PRECISION
    15
"""

import re

from numpy import floating, integer

Number = int | float | floating | integer

MAX_PRECISION = 15
MIN_PRECISION = 1

IDENTIFIER_PATTERN = re.compile(r"[_a-zA-Z]\w*", re.ASCII)

RESERVED_TYPE = "_reserved"
DIMENSIONLESS = "dimensionless"
