"""
Tests for the unit tables of every linear dimension.
"""

import itertools
import logging
import math
import unittest

import quantify
from quantify.unit import (
    AccelerationUnit,
    AngleUnit,
    AngularVelocityUnit,
    AreaUnit,
    CurrentUnit,
    DensityUnit,
    ElectricChargeUnit,
    EnergyUnit,
    ForceUnit,
    FrequencyUnit,
    LengthUnit,
    LinearUnit,
    LuminousIntensityUnit,
    MassUnit,
    MolarUnit,
    PowerUnit,
    PressureUnit,
    SolidAngleUnit,
    SpecificEnergyUnit,
    SpeedUnit,
    TemperatureDeltaUnit,
    TimeUnit,
    VolumeUnit,
)

LINEAR_FAMILIES = (
    AccelerationUnit,
    AngleUnit,
    AngularVelocityUnit,
    AreaUnit,
    CurrentUnit,
    DensityUnit,
    ElectricChargeUnit,
    EnergyUnit,
    ForceUnit,
    FrequencyUnit,
    LengthUnit,
    LuminousIntensityUnit,
    MassUnit,
    MolarUnit,
    PowerUnit,
    PressureUnit,
    SolidAngleUnit,
    SpecificEnergyUnit,
    SpeedUnit,
    TemperatureDeltaUnit,
    TimeUnit,
    VolumeUnit,
)


class TestFamilyTables(unittest.TestCase):
    """Test structural properties shared by all linear families."""

    def test_first_member_is_base(self):
        """Test that every family lists its base unit first."""
        for family in LINEAR_FAMILIES:
            with self.subTest(family=family.__name__):
                self.assertEqual(list(family)[0].to_base, 1.0)

    def test_members_are_distinct(self):
        """Test that no member silently aliases another."""
        for family in LINEAR_FAMILIES:
            with self.subTest(family=family.__name__):
                self.assertEqual(len(list(family)), len(family.__members__))

    def test_every_family_builds_quantities(self):
        """Test that every family has a registered quantity type."""
        for family in LINEAR_FAMILIES:
            with self.subTest(family=family.__name__):
                unit = list(family)[-1]
                quantity = unit(2.5)
                self.assertIsInstance(quantity, family.quantity_type())
                self.assertTrue(unit.symbol)

    def test_round_trip_every_pair(self):
        """Test converting between every ordered pair of units and back."""
        for family in LINEAR_FAMILIES:
            for source, target in itertools.permutations(family, 2):
                with self.subTest(pair=f"{family.__name__}.{source.name}->{target.name}"):
                    back = source(42.0).convert_to(target).convert_to(source)
                    self.assertTrue(math.isclose(back.value, 42.0, rel_tol=1e-9))

    def test_factors_are_reciprocal_every_pair(self):
        """Test that a->b and b->a factors multiply to one for every pair."""
        for family in LINEAR_FAMILIES:
            for a, b in itertools.permutations(family, 2):
                with self.subTest(pair=f"{family.__name__}.{a.name}<->{b.name}"):
                    self.assertTrue(math.isclose(a.factor_to(b) * b.factor_to(a), 1.0, rel_tol=1e-9))


class TestKnownFactors(unittest.TestCase):
    """Test factors against published definitions."""

    def assertFactor(self, source: LinearUnit, target: LinearUnit, expected: float) -> None:
        self.assertTrue(
            math.isclose(source.factor_to(target), expected, rel_tol=1e-9),
            f"{source.name} -> {target.name}: {source.factor_to(target)} != {expected}",
        )

    def test_length(self):
        self.assertFactor(LengthUnit.MILE, LengthUnit.KILOMETER, 1.609344)
        self.assertFactor(LengthUnit.YARD, LengthUnit.FOOT, 3.0)
        self.assertFactor(LengthUnit.PARSEC, LengthUnit.LIGHT_YEAR, 3.261563777)
        self.assertFactor(LengthUnit.ANGSTROM, LengthUnit.NANOMETER, 0.1)

    def test_time(self):
        self.assertFactor(TimeUnit.DAY, TimeUnit.HOUR, 24.0)
        self.assertFactor(TimeUnit.YEAR, TimeUnit.DAY, 365.25)
        self.assertFactor(TimeUnit.WEEK, TimeUnit.MINUTE, 10080.0)

    def test_mass(self):
        self.assertFactor(MassUnit.POUND, MassUnit.OUNCE, 16.0)
        self.assertFactor(MassUnit.STONE, MassUnit.POUND, 14.0)
        self.assertFactor(MassUnit.TONNE, MassUnit.KILOGRAM, 1000.0)
        self.assertFactor(MassUnit.CARAT, MassUnit.MILLIGRAM, 200.0)

    def test_area_and_volume(self):
        self.assertFactor(AreaUnit.ACRE, AreaUnit.SQUARE_FOOT, 43560.0)
        self.assertFactor(AreaUnit.SQUARE_MILE, AreaUnit.ACRE, 640.0)
        self.assertFactor(VolumeUnit.GALLON, VolumeUnit.LITRE, 3.785411784)
        self.assertFactor(VolumeUnit.CUBIC_FOOT, VolumeUnit.LITRE, 28.316846592)
        self.assertFactor(VolumeUnit.TABLESPOON, VolumeUnit.TEASPOON, 3.0)

    def test_speed_and_acceleration(self):
        self.assertFactor(SpeedUnit.KNOT, SpeedUnit.KILOMETER_PER_HOUR, 1.852)
        self.assertFactor(SpeedUnit.MILE_PER_HOUR, SpeedUnit.FOOT_PER_SECOND, 22.0 / 15.0)
        self.assertFactor(AccelerationUnit.STANDARD_GRAVITY, AccelerationUnit.FOOT_PER_SECOND_SQUARED, 32.174048556)

    def test_force_and_pressure(self):
        self.assertFactor(ForceUnit.KILOGRAM_FORCE, ForceUnit.NEWTON, 9.80665)
        self.assertFactor(ForceUnit.POUND_FORCE, ForceUnit.NEWTON, 4.4482216152605)
        self.assertFactor(PressureUnit.ATMOSPHERE, PressureUnit.POUND_PER_SQUARE_INCH, 14.695948775)
        self.assertFactor(PressureUnit.ATMOSPHERE, PressureUnit.TORR, 760.0)
        self.assertFactor(PressureUnit.BAR, PressureUnit.MILLIBAR, 1000.0)

    def test_energy_and_power(self):
        self.assertFactor(EnergyUnit.KILOWATT_HOUR, EnergyUnit.MEGAJOULE, 3.6)
        self.assertFactor(EnergyUnit.KILOCALORIE, EnergyUnit.KILOJOULE, 4.184)
        self.assertFactor(PowerUnit.HORSEPOWER, PowerUnit.WATT, 745.69987158227022)
        self.assertFactor(SpecificEnergyUnit.KILOWATT_HOUR_PER_KILOGRAM, SpecificEnergyUnit.MEGAJOULE_PER_KILOGRAM, 3.6)

    def test_angles(self):
        self.assertFactor(AngleUnit.REVOLUTION, AngleUnit.DEGREE, 360.0)
        self.assertFactor(AngleUnit.DEGREE, AngleUnit.ARCSECOND, 3600.0)
        self.assertFactor(AngleUnit.REVOLUTION, AngleUnit.GRADIAN, 400.0)
        self.assertFactor(SolidAngleUnit.SPAT, SolidAngleUnit.SQUARE_DEGREE, 41252.96124941927)
        self.assertFactor(AngularVelocityUnit.REVOLUTION_PER_SECOND, AngularVelocityUnit.REVOLUTION_PER_MINUTE, 60.0)

    def test_electric(self):
        self.assertFactor(ElectricChargeUnit.AMPERE_HOUR, ElectricChargeUnit.MILLIAMPERE_HOUR, 1000.0)
        self.assertFactor(ElectricChargeUnit.MILLIAMPERE_HOUR, ElectricChargeUnit.COULOMB, 3.6)
        self.assertFactor(CurrentUnit.KILOAMPERE, CurrentUnit.MILLIAMPERE, 1e6)

    def test_small_dimensions(self):
        self.assertFactor(LuminousIntensityUnit.KILOCANDELA, LuminousIntensityUnit.MILLICANDELA, 1e6)
        self.assertFactor(MolarUnit.KILOMOLE, MolarUnit.MILLIMOLE, 1e6)
        self.assertFactor(FrequencyUnit.MEGAHERTZ, FrequencyUnit.KILOHERTZ, 1000.0)
        self.assertFactor(DensityUnit.GRAM_PER_CUBIC_CENTIMETER, DensityUnit.KILOGRAM_PER_LITRE, 1.0)


class TestPackageSurface(unittest.TestCase):
    """Test the top-level package exports."""

    def test_exports(self):
        """Test that unit families and errors are importable from quantify."""
        for name in ("LengthUnit", "Temperature", "QuantityError", "DivisionByZeroError"):
            with self.subTest(name=name):
                self.assertIn(name, quantify.__all__)
                self.assertTrue(hasattr(quantify, name))

    def test_null_handler(self):
        """Test that the package logger does not emit by default."""
        handlers = logging.getLogger("quantify").handlers
        self.assertTrue(any(isinstance(h, logging.NullHandler) for h in handlers))


if __name__ == '__main__':
    unittest.main()
