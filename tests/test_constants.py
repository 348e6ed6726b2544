"""
Tests for physical, astronomical and engineering constants.
"""

import unittest

from quantify.constants import astronomical, engineering, physical
from quantify.exceptions import DivisionByZeroError
from quantify.unit import (
    AreaUnit,
    DensityUnit,
    EnergyUnit,
    ForceUnit,
    LengthUnit,
    MassUnit,
    PressureUnit,
    SpeedUnit,
    TemperatureDeltaUnit,
    TemperatureUnit,
    TimeUnit,
    TemperatureDelta,
)


class TestPhysicalConstants(unittest.TestCase):
    """Test fundamental constants and helpers."""

    def test_exact_si_values(self):
        """Test constants fixed exactly by the 2019 SI redefinition."""
        self.assertEqual(physical.SPEED_OF_LIGHT.in_meters_per_second, 299792458.0)
        self.assertEqual(physical.ELEMENTARY_CHARGE.in_coulombs, 1.602176634e-19)
        self.assertEqual(physical.PLANCK_CONSTANT, 6.62607015e-34)
        self.assertEqual(physical.AVOGADRO_CONSTANT, 6.02214076e23)
        self.assertEqual(physical.BOLTZMANN_CONSTANT, 1.380649e-23)

    def test_particle_masses(self):
        """Test that particle masses are Mass quantities in kilograms."""
        self.assertIs(physical.ELECTRON_MASS.unit, MassUnit.KILOGRAM)
        self.assertAlmostEqual(physical.PROTON_MASS.in_kilograms / physical.ELECTRON_MASS.in_kilograms, 1836.15, places=1)

    def test_light_speed_distance(self):
        """Test the distance light covers in one Julian year."""
        distance = physical.light_speed_distance(TimeUnit.YEAR(1))
        self.assertAlmostEqual(distance.get_value(LengthUnit.LIGHT_YEAR), 1.0)

    def test_mass_energy_equivalence(self):
        """Test E = mc²."""
        energy = physical.mass_energy_equivalence(MassUnit.KILOGRAM(1))
        self.assertAlmostEqual(energy.in_joules / 299792458.0**2, 1.0)

    def test_photon_energy(self):
        """Test the energy of green light."""
        energy = physical.photon_energy(LengthUnit.NANOMETER(500))
        self.assertAlmostEqual(energy.get_value(EnergyUnit.ELECTRONVOLT), 2.48, places=2)
        with self.assertRaises(DivisionByZeroError):
            physical.photon_energy(LengthUnit.NANOMETER(0))

    def test_thermal_energy(self):
        """Test kT at room temperature."""
        energy = physical.thermal_energy(TemperatureUnit.CELSIUS(26.85))
        self.assertAlmostEqual(energy.in_joules / 4.1419e-21, 1.0, places=4)

    def test_gravitational_force(self):
        """Test Newtonian attraction and the zero-distance guard."""
        force = physical.gravitational_force(MassUnit.KILOGRAM(1), MassUnit.KILOGRAM(1), LengthUnit.METER(1))
        self.assertAlmostEqual(force.in_newtons / physical.GRAVITATIONAL_CONSTANT, 1.0)
        with self.assertRaises(DivisionByZeroError):
            physical.gravitational_force(MassUnit.KILOGRAM(1), MassUnit.KILOGRAM(1), LengthUnit.METER(0))

    def test_de_broglie_wavelength(self):
        """Test the wavelength of a 1000 km/s electron."""
        wavelength = physical.de_broglie_wavelength(physical.ELECTRON_MASS, SpeedUnit.METER_PER_SECOND(1e6))
        self.assertAlmostEqual(wavelength.get_value(LengthUnit.NANOMETER), 0.727, places=3)
        with self.assertRaises(DivisionByZeroError):
            physical.de_broglie_wavelength(physical.ELECTRON_MASS, SpeedUnit.METER_PER_SECOND(0))


class TestAstronomicalConstants(unittest.TestCase):
    """Test astronomical constants and orbital mechanics."""

    def test_distance_scales(self):
        """Test the IAU distance units."""
        self.assertEqual(astronomical.ASTRONOMICAL_UNIT.in_meters, 149597870700.0)
        self.assertAlmostEqual(astronomical.PARSEC.get_value(LengthUnit.LIGHT_YEAR), 3.2616, places=4)

    def test_surface_gravity(self):
        """Test Earth's surface gravity."""
        g = astronomical.surface_gravity(astronomical.EARTH_MASS, astronomical.EARTH_RADIUS)
        self.assertAlmostEqual(g.in_meters_per_second_squared, 9.80, places=1)

    def test_escape_velocity(self):
        """Test Earth's escape velocity."""
        v = astronomical.escape_velocity(astronomical.EARTH_MASS, astronomical.EARTH_RADIUS)
        self.assertAlmostEqual(v.in_meters_per_second / 1000, 11.18, places=2)

    def test_orbital_velocity(self):
        """Test that Earth's orbit around the Sun is near 29.8 km/s."""
        v = astronomical.orbital_velocity(astronomical.SOLAR_MASS, astronomical.ASTRONOMICAL_UNIT)
        self.assertAlmostEqual(v.in_meters_per_second / 1000, 29.78, places=1)

    def test_orbital_period(self):
        """Test Kepler's third law for Earth."""
        period = astronomical.orbital_period(astronomical.ASTRONOMICAL_UNIT, astronomical.SOLAR_MASS)
        self.assertAlmostEqual(period.in_days, 365.25, delta=0.5)
        with self.assertRaises(ValueError):
            astronomical.orbital_period(LengthUnit.METER(-1), astronomical.SOLAR_MASS)
        with self.assertRaises(ValueError):
            astronomical.orbital_period(astronomical.ASTRONOMICAL_UNIT, MassUnit.KILOGRAM(0))

    def test_schwarzschild_radius(self):
        """Test the Sun's Schwarzschild radius."""
        radius = astronomical.schwarzschild_radius(astronomical.SOLAR_MASS)
        self.assertAlmostEqual(radius.in_kilometers, 2.953, places=2)


class TestEngineeringConstants(unittest.TestCase):
    """Test engineering reference values and formulas."""

    def test_reference_conditions(self):
        """Test STP values."""
        self.assertEqual(engineering.STANDARD_TEMPERATURE.in_celsius, 0.0)
        self.assertEqual(engineering.STANDARD_ATMOSPHERE.in_pascals, 101325.0)
        self.assertTrue(engineering.WATER_BOILING_POINT.is_close_to(TemperatureUnit.CELSIUS(100)))

    def test_reynolds_number(self):
        """Test Re = vD/ν."""
        re = engineering.reynolds_number_pipe(SpeedUnit.METER_PER_SECOND(1), LengthUnit.METER(0.1), 1e-6)
        self.assertAlmostEqual(re, 1e5)
        with self.assertRaises(DivisionByZeroError):
            engineering.reynolds_number_pipe(SpeedUnit.METER_PER_SECOND(1), LengthUnit.METER(0.1), 0.0)

    def test_pipe_pressure_drop(self):
        """Test the Darcy-Weisbach equation."""
        drop = engineering.pipe_pressure_drop(
            0.02,
            LengthUnit.METER(100),
            LengthUnit.METER(0.1),
            SpeedUnit.METER_PER_SECOND(2),
            DensityUnit.KILOGRAM_PER_CUBIC_METER(1000),
        )
        self.assertAlmostEqual(drop.in_pascals, 40000.0)
        with self.assertRaises(DivisionByZeroError):
            engineering.pipe_pressure_drop(
                0.02,
                LengthUnit.METER(100),
                LengthUnit.METER(0),
                SpeedUnit.METER_PER_SECOND(2),
                engineering.WATER_DENSITY_MAX,
            )

    def test_thermal_expansion_uses_delta(self):
        """Test that equal temperature steps expand equally on every scale."""
        kelvin = engineering.thermal_expansion(
            LengthUnit.METER(1),
            engineering.STEEL_THERMAL_EXPANSION,
            TemperatureDelta(10, TemperatureDeltaUnit.KELVIN_DELTA),
        )
        fahrenheit = engineering.thermal_expansion(
            LengthUnit.METER(1),
            engineering.STEEL_THERMAL_EXPANSION,
            TemperatureDelta(18, TemperatureDeltaUnit.FAHRENHEIT_DELTA),
        )
        self.assertAlmostEqual(kelvin.in_millimeters, 0.12)
        self.assertTrue(kelvin.is_close_to(fahrenheit))

    def test_thermal_expansion_from_temperature_difference(self):
        """Test feeding the difference of two temperatures."""
        warming = TemperatureUnit.CELSIUS(30) - TemperatureUnit.CELSIUS(20)
        growth = engineering.thermal_expansion(LengthUnit.METER(1), engineering.STEEL_THERMAL_EXPANSION, warming)
        self.assertAlmostEqual(growth.in_millimeters, 0.12)

    def test_conductive_heat_transfer(self):
        """Test q = kAΔT/Δx."""
        heat = engineering.conductive_heat_transfer(
            engineering.COPPER_THERMAL_CONDUCTIVITY,
            AreaUnit.SQUARE_METER(1),
            LengthUnit.CENTIMETER(1),
            TemperatureDelta(10, TemperatureDeltaUnit.CELSIUS_DELTA),
        )
        self.assertAlmostEqual(heat.in_kilowatts, 401.0)
        with self.assertRaises(DivisionByZeroError):
            engineering.conductive_heat_transfer(
                401.0,
                AreaUnit.SQUARE_METER(1),
                LengthUnit.METER(0),
                TemperatureDelta(10, TemperatureDeltaUnit.KELVIN_DELTA),
            )

    def test_electrical_resistance(self):
        """Test R = ρL/A for a copper wire."""
        resistance = engineering.electrical_resistance(
            engineering.COPPER_RESISTIVITY, LengthUnit.METER(100), AreaUnit.SQUARE_MILLIMETER(1)
        )
        self.assertAlmostEqual(resistance, 1.68)
        with self.assertRaises(DivisionByZeroError):
            engineering.electrical_resistance(1.0, LengthUnit.METER(1), AreaUnit.SQUARE_MILLIMETER(0))

    def test_stress_and_strain(self):
        """Test σ = F/A and ε = σ/E."""
        stress = engineering.mechanical_stress(ForceUnit.KILONEWTON(10), AreaUnit.SQUARE_CENTIMETER(1))
        self.assertAlmostEqual(stress.get_value(PressureUnit.MEGAPASCAL), 100.0)
        strain = engineering.mechanical_strain(engineering.STEEL_YIELD_STRENGTH, engineering.STEEL_YOUNGS_MODULUS)
        self.assertAlmostEqual(strain, 0.00125)
        with self.assertRaises(DivisionByZeroError):
            engineering.mechanical_strain(stress, PressureUnit.PASCAL(0))


if __name__ == '__main__':
    unittest.main()
