"""
Tests for absolute temperatures and temperature differences.
"""

import itertools
import unittest

from quantify.exceptions import DivisionByZeroError
from quantify.unit import (
    LengthUnit,
    Temperature,
    TemperatureDelta,
    TemperatureDeltaUnit,
    TemperatureUnit,
)


class TestTemperatureConversion(unittest.TestCase):
    """Test the affine formula table."""

    def test_known_points(self):
        """Test reference points on every scale."""
        self.assertEqual(TemperatureUnit.CELSIUS(100).convert_to(TemperatureUnit.FAHRENHEIT).value, 212.0)
        self.assertEqual(TemperatureUnit.CELSIUS(0).in_kelvin, 273.15)
        self.assertEqual(TemperatureUnit.FAHRENHEIT(32).in_celsius, 0.0)
        self.assertAlmostEqual(TemperatureUnit.KELVIN(0).in_fahrenheit, -459.67)
        self.assertAlmostEqual(TemperatureUnit.KELVIN(0).in_rankine, 0.0)
        self.assertAlmostEqual(TemperatureUnit.FAHRENHEIT(32).in_rankine, 491.67)
        self.assertAlmostEqual(TemperatureUnit.RANKINE(491.67).in_celsius, 0.0)
        self.assertAlmostEqual(TemperatureUnit.FAHRENHEIT(-40).in_celsius, -40.0)

    def test_round_trip_every_pair(self):
        """Test that converting between any two scales and back is lossless."""
        for source, target in itertools.permutations(TemperatureUnit, 2):
            with self.subTest(source=source.name, target=target.name):
                original = Temperature(36.6, source)
                back = original.convert_to(target).convert_to(source)
                self.assertAlmostEqual(back.value, 36.6, places=9)

    def test_convert_to_same_scale_returns_self(self):
        """Test the identity case."""
        reading = TemperatureUnit.KELVIN(300)
        self.assertIs(reading.convert_to(TemperatureUnit.KELVIN), reading)

    def test_other_family_rejected(self):
        """Test that a non-temperature unit is rejected."""
        with self.assertRaises(TypeError):
            TemperatureUnit.CELSIUS(20).get_value(LengthUnit.METER)
        with self.assertRaises(TypeError):
            TemperatureUnit.CELSIUS(20).get_value(TemperatureDeltaUnit.KELVIN_DELTA)

    def test_comparison_across_scales(self):
        """Test ordering and equivalence between scales."""
        self.assertTrue(TemperatureUnit.CELSIUS(0).is_equivalent_to(TemperatureUnit.KELVIN(273.15)))
        self.assertNotEqual(TemperatureUnit.CELSIUS(0), TemperatureUnit.KELVIN(273.15))
        self.assertTrue(TemperatureUnit.FAHRENHEIT(212) > TemperatureUnit.CELSIUS(99))
        self.assertTrue(TemperatureUnit.KELVIN(0) < TemperatureUnit.RANKINE(1))

    def test_format(self):
        """Test that temperatures render with their scale symbol."""
        self.assertEqual(str(TemperatureUnit.CELSIUS(25)), "25.0\u00a0°C")
        self.assertEqual(
            TemperatureUnit.CELSIUS(100).format(target_unit=TemperatureUnit.FAHRENHEIT),
            "212.0\u00a0°F",
        )


class TestTemperatureArithmetic(unittest.TestCase):
    """Test the operations linking Temperature and TemperatureDelta."""

    def test_difference_of_temperatures(self):
        """Test that subtracting temperatures yields a delta in the left scale."""
        warming = TemperatureUnit.CELSIUS(30) - TemperatureUnit.CELSIUS(10)
        self.assertIsInstance(warming, TemperatureDelta)
        self.assertEqual(warming, TemperatureDelta(20, TemperatureDeltaUnit.CELSIUS_DELTA))

    def test_difference_across_scales(self):
        """Test that the right operand is converted to the left scale."""
        difference = TemperatureUnit.KELVIN(300) - TemperatureUnit.CELSIUS(20)
        self.assertIs(difference.unit, TemperatureDeltaUnit.KELVIN_DELTA)
        self.assertAlmostEqual(difference.value, 6.85)

        difference = TemperatureUnit.FAHRENHEIT(212) - TemperatureUnit.CELSIUS(0)
        self.assertIs(difference.unit, TemperatureDeltaUnit.FAHRENHEIT_DELTA)
        self.assertAlmostEqual(difference.value, 180.0)

    def test_add_delta(self):
        """Test shifting a temperature by a delta."""
        result = TemperatureUnit.CELSIUS(10) + TemperatureDelta(20, TemperatureDeltaUnit.CELSIUS_DELTA)
        self.assertEqual(result, TemperatureUnit.CELSIUS(30))

    def test_add_delta_from_left(self):
        """Test that delta + temperature is a temperature too."""
        result = TemperatureDelta(20, TemperatureDeltaUnit.CELSIUS_DELTA) + TemperatureUnit.CELSIUS(10)
        self.assertEqual(result, TemperatureUnit.CELSIUS(30))

    def test_add_delta_of_other_scale(self):
        """Test that the delta is converted to the temperature's own step."""
        result = TemperatureUnit.FAHRENHEIT(50) + TemperatureDelta(10, TemperatureDeltaUnit.KELVIN_DELTA)
        self.assertIs(result.unit, TemperatureUnit.FAHRENHEIT)
        self.assertAlmostEqual(result.value, 68.0)

    def test_subtract_delta(self):
        """Test shifting a temperature down by a delta."""
        result = TemperatureUnit.CELSIUS(30) - TemperatureDelta(5, TemperatureDeltaUnit.CELSIUS_DELTA)
        self.assertEqual(result, TemperatureUnit.CELSIUS(25))

    def test_add_to(self):
        """Test TemperatureDelta.add_to."""
        delta = TemperatureDelta(5, TemperatureDeltaUnit.KELVIN_DELTA)
        self.assertEqual(delta.add_to(TemperatureUnit.KELVIN(300)), TemperatureUnit.KELVIN(305))

    def test_unsupported_operators(self):
        """Test that scaling or adding absolute temperatures is not provided."""
        room = TemperatureUnit.CELSIUS(20)
        with self.assertRaises(TypeError):
            room + TemperatureUnit.CELSIUS(5)
        with self.assertRaises(TypeError):
            room * 2
        with self.assertRaises(TypeError):
            2 * room
        with self.assertRaises(TypeError):
            room / 2
        with self.assertRaises(TypeError):
            TemperatureDelta(5, TemperatureDeltaUnit.KELVIN_DELTA) - room

    def test_ratio_to(self):
        """Test ratios of absolute temperatures."""
        self.assertEqual(TemperatureUnit.KELVIN(600).ratio_to(TemperatureUnit.KELVIN(300)), 2.0)
        self.assertAlmostEqual(
            TemperatureUnit.CELSIUS(0).ratio_to(TemperatureUnit.KELVIN(273.15)), 1.0
        )

    def test_ratio_to_absolute_zero(self):
        """Test that dividing by absolute zero raises DivisionByZeroError."""
        with self.assertRaises(DivisionByZeroError):
            TemperatureUnit.CELSIUS(20).ratio_to(TemperatureUnit.KELVIN(0))

    def test_ratio_to_other_type(self):
        """Test that a ratio needs two temperatures."""
        with self.assertRaises(TypeError):
            TemperatureUnit.KELVIN(300).ratio_to(TemperatureDelta(1, TemperatureDeltaUnit.KELVIN_DELTA))


class TestTemperatureDelta(unittest.TestCase):
    """Test TemperatureDelta as a linear quantity."""

    def test_delta_unit_mapping_is_total(self):
        """Test that every scale has a matching delta unit."""
        for unit in TemperatureUnit:
            with self.subTest(unit=unit.name):
                self.assertIsInstance(unit.delta_unit, TemperatureDeltaUnit)
                self.assertEqual(unit.delta_unit.symbol, unit.symbol)

    def test_step_sizes(self):
        """Test that 1 °C step equals 1 K step and 9 °F steps equal 5 K steps."""
        self.assertEqual(TemperatureDelta(1, TemperatureDeltaUnit.CELSIUS_DELTA).in_kelvin, 1.0)
        self.assertAlmostEqual(TemperatureDelta(9, TemperatureDeltaUnit.FAHRENHEIT_DELTA).in_kelvin, 5.0)
        self.assertAlmostEqual(TemperatureDelta(5, TemperatureDeltaUnit.KELVIN_DELTA).in_fahrenheit, 9.0)

    def test_linear_arithmetic(self):
        """Test that deltas add and scale like any linear quantity."""
        total = TemperatureDelta(10, TemperatureDeltaUnit.KELVIN_DELTA) + TemperatureDelta(
            18, TemperatureDeltaUnit.FAHRENHEIT_DELTA
        )
        self.assertIs(total.unit, TemperatureDeltaUnit.KELVIN_DELTA)
        self.assertAlmostEqual(total.value, 20.0)
        self.assertEqual(TemperatureDelta(3, TemperatureDeltaUnit.KELVIN_DELTA) * 2, TemperatureDelta(6, TemperatureDeltaUnit.KELVIN_DELTA))


if __name__ == '__main__':
    unittest.main()
