"""
Tests for Measure construction, conversion and operations.
"""

import copy
import math
import pickle
import unittest

import numpy as np

from unitd import Measure, operations, units
from unitd.errors import (
    IncompatibleUnitsError,
    InvalidValueError,
    UnresolvableOperationError,
    UnresolvableUnitError,
)
from unitd.operations import create_default_operations

km = units.distance.kilometer
m = units.distance.meter
mile = units.distance.mile
inch = units.distance.inch
hour = units.time.hour
minute = units.time.minute


class TestMeasureConstruction(unittest.TestCase):
    """Test the Measure constructor contract."""

    def test_fields(self):
        measure = Measure(5, km, 3)
        self.assertEqual(measure.raw, 5)
        self.assertIs(measure.unit, km)
        self.assertEqual(measure.precision, 3)
        self.assertEqual(measure.val, 5.0)

    def test_default_unit_is_dimensionless(self):
        """Test a Measure without a unit uses the reserved unit."""
        self.assertIs(Measure(1).unit, units.dimensionless)

    def test_default_precision(self):
        self.assertEqual(Measure(1).precision, 15)

    def test_identity(self):
        """Test constructing from a Measure returns the same instance."""
        measure = Measure(5, km)
        self.assertIs(Measure(measure), measure)
        self.assertIs(Measure(measure, hour, 2), measure)

    def test_precision_clamping(self):
        """Test precision is clamped to [1, 15] and defaults to 15."""
        cases = [(0, 1), (-4, 1), (99, 15), ("bogus", 15), (None, 15),
                 (float("nan"), 15), (float("inf"), 15), ("5", 5), (3.7, 3), (7, 7)]
        for given, expected in cases:
            with self.subTest(precision=given):
                self.assertEqual(Measure(1.23456789, m, given).precision, expected)

    def test_val_rounds_to_significant_digits(self):
        """Test val keeps precision significant digits while raw stays exact."""
        measure = Measure(1.23456789, m, 3)
        self.assertEqual(measure.val, 1.23)
        self.assertEqual(measure.raw, 1.23456789)
        self.assertEqual(Measure(1.23456789, m, 0).val, 1.0)
        self.assertEqual(Measure(123456, m, 2).val, 120000.0)
        self.assertEqual(Measure(0.000123456, m, 3).val, 0.000123)

    def test_val_rounds_ties_away_from_zero(self):
        """Test exact ties round up rather than to even."""
        cases = [(2.5, 1, 3.0), (0.125, 2, 0.13), (12.5, 2, 13.0), (-2.5, 1, -3.0),
                 (3.5, 1, 4.0), (1.005, 3, 1.0)]
        for value, precision, expected in cases:
            with self.subTest(value=value, precision=precision):
                self.assertEqual(Measure(value, None, precision).val, expected)

    def test_numeric_coercion(self):
        """Test strings and numpy scalars are coerced to numbers."""
        self.assertEqual(Measure("5").raw, 5.0)
        self.assertEqual(Measure(" 2.5 ").raw, 2.5)
        self.assertEqual(Measure(np.float32(0.5)).raw, 0.5)
        self.assertEqual(Measure(np.int64(7)).raw, 7.0)

    def test_invalid_value(self):
        """Test non-numeric values fail and the message quotes the input."""
        for bad in ["abc", None, [1], float("nan"), float("inf"), "nan"]:
            with self.subTest(value=bad):
                with self.assertRaises(InvalidValueError) as ctx:
                    Measure(bad, m)
                self.assertIn(repr(bad), str(ctx.exception))

    def test_invalid_value_is_value_error(self):
        with self.assertRaises(ValueError):
            Measure("five")

    def test_value_too_large_for_float(self):
        """Test integers beyond float range fail with InvalidValueError."""
        with self.assertRaises(InvalidValueError) as ctx:
            Measure(10**400, m)
        self.assertIn("[1000", str(ctx.exception))

    def test_integer_values_stored_as_float(self):
        measure = Measure(10**20, km)
        self.assertIsInstance(measure.raw, float)
        self.assertEqual(measure.as_unit(m).raw, 1e23)

    def test_unit_must_be_unit(self):
        with self.assertRaises(TypeError):
            Measure(5, "kilometer")

    def test_immutable(self):
        """Test attributes cannot be reassigned or deleted."""
        measure = Measure(5, km)
        with self.assertRaises(AttributeError):
            measure.raw = 6
        with self.assertRaises(AttributeError):
            del measure.unit
        with self.assertRaises(AttributeError):
            measure.extra = 1

    def test_copy_and_pickle(self):
        measure = Measure(5, km, 4)
        self.assertIs(copy.copy(measure), measure)
        self.assertIs(copy.deepcopy(measure), measure)
        restored = pickle.loads(pickle.dumps(measure))
        self.assertEqual(restored, measure)
        self.assertEqual(restored.precision, 4)


class TestMeasureConversion(unittest.TestCase):
    """Test as_unit and to."""

    def test_kilometer_to_meter(self):
        self.assertEqual(Measure(5, km).as_unit(m).raw, 5000)

    def test_conversion_by_name(self):
        """Test names resolve under the measure's own type."""
        converted = Measure(5, km).as_unit("meter")
        self.assertIs(converted.unit, m)
        self.assertEqual(converted.raw, 5000)

    def test_conversion_keeps_precision(self):
        self.assertEqual(Measure(5, km, 4).as_unit(m).precision, 4)

    def test_round_trip(self):
        """Test converting there and back restores the magnitude."""
        for value in [0, 1, 3.75, -12.5, 1e9]:
            for first in units.distance:
                for second in units.distance:
                    with self.subTest(value=value, first=first.name, second=second.name):
                        back = Measure(value, first).as_unit(second).as_unit(first)
                        self.assertTrue(math.isclose(back.raw, value, rel_tol=1e-12, abs_tol=1e-12))

    def test_comparable_units_convert(self):
        for target in units.time:
            Measure(90, minute).as_unit(target)

    def test_incompatible_unit(self):
        """Test converting across types fails."""
        with self.assertRaises(IncompatibleUnitsError):
            Measure(5, km).as_unit(hour)
        with self.assertRaises(TypeError):
            Measure(5, km).as_unit(units.dimensionless)

    def test_unresolvable_unit(self):
        """Test unknown names, and names of another type, do not resolve."""
        with self.assertRaises(UnresolvableUnitError):
            Measure(5, km).as_unit("parsec")
        with self.assertRaises(UnresolvableUnitError):
            Measure(5, km).as_unit("hour")

    def test_to_returns_magnitude(self):
        self.assertEqual(Measure(1, hour).to("minute"), 60)
        self.assertEqual(Measure(1, mile).to(inch), 1609.344 / 0.0254)


class TestMeasureOperations(unittest.TestCase):
    """Test registry-backed operations."""

    def test_add_mixed_units(self):
        """Test the result is expressed in the receiver's unit."""
        result = Measure(2, km).add(Measure(500, m))
        self.assertEqual(result.raw, 2.5)
        self.assertIs(result.unit, km)

    def test_add_is_receiver_unit(self):
        result = Measure(500, m).add(Measure(2, km))
        self.assertEqual(result.raw, 2500)
        self.assertIs(result.unit, m)

    def test_subtract(self):
        result = Measure(1, hour).subtract(Measure(30, minute))
        self.assertEqual(result.raw, 0.5)
        self.assertIs(result.unit, hour)

    def test_divide_same_unit(self):
        """Test a ratio stays tagged with the receiver's unit."""
        result = Measure(10, hour).divide(Measure(2, hour))
        self.assertEqual(result.raw, 5)
        self.assertIs(result.unit, hour)

    def test_multiply(self):
        result = Measure(2, km).multiply(Measure(3, km))
        self.assertEqual(result.raw, 6)
        self.assertIs(result.unit, km)

    def test_bare_number_operand_is_dimensionless(self):
        """Test a bare number is built with the constructor contract."""
        self.assertEqual(Measure(3).multiply(2).raw, 6)
        with self.assertRaises(IncompatibleUnitsError):
            Measure(3, km).multiply(2)

    def test_operand_built_with_unit_and_precision(self):
        result = Measure(2, km).add(500, m, 2)
        self.assertEqual(result.raw, 2.5)
        self.assertEqual(result.precision, 2)

    def test_result_precision_is_minimum(self):
        """Test every operation keeps the lower precision of its operands."""
        for name in operations:
            for left, right in [(3, 9), (9, 3), (15, 15), (1, 15)]:
                with self.subTest(operation=name, left=left, right=right):
                    result = Measure(1.23456, m, left).apply(name, Measure(2.5, m, right))
                    self.assertEqual(result.precision, min(left, right))

    def test_result_val_uses_result_precision(self):
        result = Measure(1.23456, m, 3).add(Measure(1, m, 5))
        self.assertEqual(result.val, 2.23)

    def test_incompatible_operands(self):
        with self.assertRaises(IncompatibleUnitsError):
            Measure(2, km).add(Measure(1, hour))

    def test_divide_by_zero(self):
        """Test division by zero yields inf or nan measures."""
        self.assertEqual(Measure(1, m).divide(Measure(0, m)).raw, math.inf)
        result = Measure(0, m).divide(Measure(0, m))
        self.assertTrue(math.isnan(result.raw))
        self.assertTrue(math.isnan(result.val))

    def test_overflow_yields_inf(self):
        """Test operations overflowing the float range give inf instead of raising."""
        result = Measure(10**200).multiply(10**200)
        self.assertEqual(result.raw, math.inf)
        self.assertEqual(result.val, math.inf)
        self.assertEqual(Measure(1e300, units.distance.astronomical_unit).to(inch), math.inf)

    def test_apply_unknown_operation(self):
        with self.assertRaises(UnresolvableOperationError):
            Measure(1).apply("nope", 1)

    def test_operations_return_new_instances(self):
        measure = Measure(1, m)
        result = measure.add(Measure(0, m))
        self.assertIsNot(result, measure)
        self.assertEqual(measure.raw, 1)


class TestOperationMounting(unittest.TestCase):
    """Test operations registered later become methods on existing instances."""

    def test_late_registration_mounts_on_existing_instances(self):
        """Test pow registered after construction is available everywhere."""

        class LabMeasure(Measure):
            operations = create_default_operations()

        before = LabMeasure(2)
        self.assertFalse(hasattr(before, "pow"))
        LabMeasure.operations.register("pow", lambda a, b: a ** b)
        self.assertEqual(before.pow(3).raw, 8)
        self.assertEqual(LabMeasure(3).pow(2).raw, 9)
        self.assertIsInstance(before.pow(3), LabMeasure)
        self.assertFalse(hasattr(Measure, "pow"))

    def test_subclass_mounts_existing_operations(self):
        class LabMeasure(Measure):
            operations = create_default_operations()

        self.assertEqual(LabMeasure(2, km).add(LabMeasure(500, m)).raw, 2.5)

    def test_registration_on_shared_registry_mounts_on_subclass(self):
        """Test an operation registered on a class-level registry reaches old instances."""

        class LabMeasure(Measure):
            operations = create_default_operations()

        measure = LabMeasure(3, m)
        LabMeasure.operations.register("greatest", max)
        self.assertEqual(measure.greatest(LabMeasure(5, m)).raw, 5)
        self.assertEqual(LabMeasure(7, km).greatest(LabMeasure(5, m)).raw, 7)
        self.assertNotIn("greatest", operations)
        self.assertFalse(hasattr(Measure, "greatest"))

    def test_clashing_name_only_via_apply(self):
        """Test an operation named like a Measure attribute is not mounted."""

        class LabMeasure(Measure):
            operations = create_default_operations()

        with self.assertLogs("unitd.measure", level="WARNING"):
            LabMeasure.operations.register("apply", lambda a, b: a - b)
        measure = LabMeasure(5)
        self.assertEqual(measure.apply("apply", 2).raw, 3)


class TestMeasureOperators(unittest.TestCase):
    """Test operators and comparisons."""

    def test_arithmetic_operators(self):
        self.assertEqual((Measure(2, km) + Measure(500, m)).raw, 2.5)
        self.assertEqual((Measure(2, km) - Measure(500, m)).raw, 1.5)
        self.assertEqual((Measure(10, hour) / Measure(2, hour)).raw, 5)
        self.assertEqual((Measure(3) * 2).raw, 6)

    def test_reflected_operators(self):
        self.assertEqual((1 + Measure(2)).raw, 3)
        self.assertEqual((10 - Measure(4)).raw, 6)
        self.assertEqual((3 * Measure(2)).raw, 6)
        self.assertEqual((10 / Measure(4)).raw, 2.5)

    def test_scalar_with_unit_is_incompatible(self):
        with self.assertRaises(IncompatibleUnitsError):
            Measure(2, km) * 2

    def test_unsupported_operand(self):
        with self.assertRaises(TypeError):
            Measure(2, km) + "2"

    def test_comparisons(self):
        """Test comparisons use the common base scale."""
        self.assertEqual(Measure(1, km), Measure(1000, m))
        self.assertNotEqual(Measure(1, km), Measure(1, m))
        self.assertLess(Measure(1, km), Measure(1, mile))
        self.assertLessEqual(Measure(60, minute), Measure(1, hour))
        self.assertGreater(Measure(1, hour), Measure(59, minute))
        self.assertGreaterEqual(Measure(1, hour), Measure(60, minute))

    def test_hash_consistent_with_equality(self):
        self.assertEqual(hash(Measure(1, km)), hash(Measure(1000, m)))
        self.assertEqual(len({Measure(1, km), Measure(1000, m)}), 1)

    def test_compare_incompatible(self):
        with self.assertRaises(IncompatibleUnitsError):
            Measure(1, km) < Measure(1, hour)
        with self.assertRaises(IncompatibleUnitsError):
            Measure(1, km) == Measure(1, hour)

    def test_compare_non_measure(self):
        self.assertFalse(Measure(1) == 1)
        with self.assertRaises(TypeError):
            Measure(1) < 2


class TestMeasureDisplay(unittest.TestCase):
    """Test string conversions."""

    def test_str(self):
        self.assertEqual(str(Measure(2.5, km)), "2.5 km")
        self.assertEqual(str(Measure(5000.0, m)), "5000 m")
        self.assertEqual(str(Measure(1.23456, m, 3)), "1.23 m")
        self.assertEqual(str(Measure(3)), "3")

    def test_repr(self):
        self.assertEqual(repr(Measure(5, km, 3)), "Measure(5.0, distance.kilometer, precision=3)")

    def test_float(self):
        self.assertEqual(float(Measure(2, km)), 2.0)


if __name__ == "__main__":
    unittest.main()
