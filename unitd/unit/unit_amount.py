"""Amount units for counted quantities and amounts of substance."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .unit_registry import UnitRegistry

AMOUNT = "amount"

AMOUNT_UNITS = (
    ("count", "", 1),
    ("mole", "mol", 1),
)


def register_amount_units(registry: UnitRegistry) -> None:
    """Register the standard amount units on ``registry``."""
    for name, abbreviation, scale in AMOUNT_UNITS:
        registry.register_unit(AMOUNT, name, abbreviation, scale)
