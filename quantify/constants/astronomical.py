"""Astronomical constants and celestial mechanics helpers.

Distance units (AU, light year, parsec) follow the IAU definitions exposed
by ``scipy.constants``; body masses and radii are nominal values from the
IAU 2015 resolution B3 and NASA planetary fact sheets.
"""

from __future__ import annotations

import math

import scipy.constants as sc

from quantify.unit.unit_energy import Power, PowerUnit
from quantify.unit.unit_length import Length, LengthUnit
from quantify.unit.unit_mass import Mass, MassUnit
from quantify.unit.unit_rotation import Frequency, FrequencyUnit
from quantify.unit.unit_temperature import Temperature, TemperatureUnit
from quantify.unit.unit_time import Time, TimeUnit
from quantify.unit.unit_velocity import Acceleration, AccelerationUnit, Speed, SpeedUnit

from .physical import GRAVITATIONAL_CONSTANT, SPEED_OF_LIGHT

# ---------------------------- Distance scales ----------------------------
ASTRONOMICAL_UNIT = Length(sc.au, LengthUnit.METER)
LIGHT_YEAR = Length(sc.light_year, LengthUnit.METER)
PARSEC = Length(sc.parsec, LengthUnit.METER)

# ---------------------------- Sun ----------------------------
SOLAR_MASS = Mass(1.98847e30, MassUnit.KILOGRAM)
SOLAR_RADIUS = Length(6.957e8, LengthUnit.METER)
SOLAR_LUMINOSITY = Power(3.828e26, PowerUnit.WATT)
SOLAR_EFFECTIVE_TEMPERATURE = Temperature(5778, TemperatureUnit.KELVIN)
SOLAR_CONSTANT = 1361.0  # W/m²

# ---------------------------- Earth and Moon ----------------------------
EARTH_MASS = Mass(5.9722e24, MassUnit.KILOGRAM)
EARTH_RADIUS = Length(6378140, LengthUnit.METER)
EARTH_POLAR_RADIUS = Length(6356750, LengthUnit.METER)
MOON_MASS = Mass(7.342e22, MassUnit.KILOGRAM)
MOON_RADIUS = Length(1737000, LengthUnit.METER)
EARTH_MOON_DISTANCE = Length(384400000, LengthUnit.METER)
STANDARD_GRAVITY = Acceleration(sc.g, AccelerationUnit.METER_PER_SECOND_SQUARED)
SIDEREAL_DAY = Time(86164.0905, TimeUnit.SECOND)
SIDEREAL_YEAR = Time(31558149.8, TimeUnit.SECOND)
EARTH_ORBITAL_VELOCITY = Speed(29780, SpeedUnit.METER_PER_SECOND)
EARTH_ESCAPE_VELOCITY = Speed(11190, SpeedUnit.METER_PER_SECOND)
GEOSTATIONARY_ORBIT_RADIUS = Length(42164000, LengthUnit.METER)

# ---------------------------- Planets ----------------------------
MERCURY_MASS = Mass(3.301e23, MassUnit.KILOGRAM)
MERCURY_RADIUS = Length(2439700, LengthUnit.METER)
VENUS_MASS = Mass(4.867e24, MassUnit.KILOGRAM)
VENUS_RADIUS = Length(6051800, LengthUnit.METER)
MARS_MASS = Mass(6.39e23, MassUnit.KILOGRAM)
MARS_RADIUS = Length(3389500, LengthUnit.METER)
JUPITER_MASS = Mass(1.898e27, MassUnit.KILOGRAM)
JUPITER_RADIUS = Length(71492000, LengthUnit.METER)
SATURN_MASS = Mass(5.683e26, MassUnit.KILOGRAM)
SATURN_RADIUS = Length(60268000, LengthUnit.METER)
URANUS_MASS = Mass(8.681e25, MassUnit.KILOGRAM)
URANUS_RADIUS = Length(25559000, LengthUnit.METER)
NEPTUNE_MASS = Mass(1.024e26, MassUnit.KILOGRAM)
NEPTUNE_RADIUS = Length(24764000, LengthUnit.METER)

# ---------------------------- Galactic and cosmological ----------------------------
MILKY_WAY_MASS = Mass(2.98e42, MassUnit.KILOGRAM)
GALACTIC_CENTER_DISTANCE = Length(2.615e20, LengthUnit.METER)
HUBBLE_CONSTANT = Frequency(2.18e-18, FrequencyUnit.HERTZ)
CRITICAL_DENSITY = 9.47e-27  # kg/m³
OBSERVABLE_UNIVERSE_RADIUS = Length(4.40e26, LengthUnit.METER)
AGE_OF_UNIVERSE = Time(4.35e17, TimeUnit.SECOND)
CMB_TEMPERATURE = Temperature(2.72548, TemperatureUnit.KELVIN)
CHANDRASEKHAR_LIMIT = Mass(2.785e30, MassUnit.KILOGRAM)

# ---------------------------- Planck scale ----------------------------
PLANCK_MASS = Mass(sc.value("Planck mass"), MassUnit.KILOGRAM)
PLANCK_LENGTH = Length(sc.value("Planck length"), LengthUnit.METER)
PLANCK_TIME = Time(sc.value("Planck time"), TimeUnit.SECOND)


def _require_positive(**quantities) -> None:
    for name, quantity in quantities.items():
        if quantity.value <= 0:
            raise ValueError(f"{name} must be positive, got {quantity}")


def surface_gravity(body_mass: Mass, body_radius: Length) -> Acceleration:
    """Return the gravitational acceleration at a body's surface, ``g = G·M / r²``.

    Raises:
        ValueError: If the mass or radius is not positive.
    """
    _require_positive(body_mass=body_mass, body_radius=body_radius)
    r = body_radius.in_meters
    return Acceleration(
        GRAVITATIONAL_CONSTANT * body_mass.in_kilograms / (r * r),
        AccelerationUnit.METER_PER_SECOND_SQUARED,
    )


def escape_velocity(body_mass: Mass, body_radius: Length) -> Speed:
    """Return the escape velocity from a body's surface, ``v = √(2·G·M / r)``.

    Raises:
        ValueError: If the mass or radius is not positive.
    """
    _require_positive(body_mass=body_mass, body_radius=body_radius)
    v2 = 2.0 * GRAVITATIONAL_CONSTANT * body_mass.in_kilograms / body_radius.in_meters
    return Speed(math.sqrt(v2), SpeedUnit.METER_PER_SECOND)


def orbital_velocity(central_mass: Mass, orbital_radius: Length) -> Speed:
    """Return the speed of a circular orbit, ``v = √(G·M / r)``.

    Raises:
        ValueError: If the mass or radius is not positive.
    """
    _require_positive(central_mass=central_mass, orbital_radius=orbital_radius)
    v2 = GRAVITATIONAL_CONSTANT * central_mass.in_kilograms / orbital_radius.in_meters
    return Speed(math.sqrt(v2), SpeedUnit.METER_PER_SECOND)


def schwarzschild_radius(mass: Mass) -> Length:
    """Return the event horizon radius of ``mass``, ``r = 2·G·M / c²``."""
    c = SPEED_OF_LIGHT.in_meters_per_second
    return Length(2.0 * GRAVITATIONAL_CONSTANT * mass.in_kilograms / (c * c), LengthUnit.METER)


def orbital_period(semi_major_axis: Length, central_mass: Mass) -> Time:
    """Return the orbital period from Kepler's third law.

    ``T = 2π·√(a³ / (G·M))``

    Args:
        semi_major_axis: Semi-major axis of the orbit.
        central_mass: Mass of the body being orbited.

    Returns:
        Time: Orbital period in seconds.

    Raises:
        ValueError: If the central mass or semi-major axis is not positive.
    """
    _require_positive(semi_major_axis=semi_major_axis, central_mass=central_mass)
    a = semi_major_axis.in_meters
    gm = GRAVITATIONAL_CONSTANT * central_mass.in_kilograms
    return Time(2 * math.pi * math.sqrt(a**3 / gm), TimeUnit.SECOND)
