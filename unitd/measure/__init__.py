"""Dimensioned values built on the unit and operation registries.

Exports:
    Measure: Immutable value with unit and precision
"""

from .measure import Measure

__all__ = ["Measure"]
