"""Standard arithmetic operations registered at import time.

Division follows IEEE floating point semantics: dividing by zero yields
``inf``, ``-inf`` or ``nan`` instead of raising ``ZeroDivisionError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from unitd.config import Number

    from .operation_registry import OperationRegistry


def add(a: Number, b: Number) -> Number:
    return a + b


def subtract(a: Number, b: Number) -> Number:
    return a - b


def multiply(a: Number, b: Number) -> Number:
    return a * b


def divide(a: Number, b: Number) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.true_divide(a, b))


# name, function, scale power of the result
BASIC_OPERATIONS = (
    ("add", add, 1),
    ("subtract", subtract, 1),
    ("multiply", multiply, 2),
    ("divide", divide, 0),
)


def register_basic_operations(registry: OperationRegistry) -> None:
    """Register add, subtract, multiply and divide on ``registry``."""
    for name, fn, scale_power in BASIC_OPERATIONS:
        registry.register(name, fn, scale_power)
