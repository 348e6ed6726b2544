"""Engineering reference values and textbook formulas.

Reference conditions (STP, NTP), fluid and material properties, and small
helpers for pipe flow, heat transfer, electrical resistance and mechanical
stress. Material properties are typical room-temperature handbook values.

Functions that depend on a temperature *difference* take a TemperatureDelta,
never an absolute Temperature, so ``20 °C -> 30 °C`` and ``293.15 K ->
303.15 K`` give the same result.
"""

from __future__ import annotations

import scipy.constants as sc

from quantify.exceptions import DivisionByZeroError
from quantify.unit.unit_area import Area
from quantify.unit.unit_density import Density, DensityUnit
from quantify.unit.unit_energy import (
    Energy,
    EnergyUnit,
    Power,
    PowerUnit,
    SpecificEnergy,
    SpecificEnergyUnit,
)
from quantify.unit.unit_force import Force
from quantify.unit.unit_length import Length, LengthUnit
from quantify.unit.unit_pressure import Pressure, PressureUnit
from quantify.unit.unit_temperature import Temperature, TemperatureDelta, TemperatureUnit
from quantify.unit.unit_velocity import Speed, SpeedUnit

from .physical import ATOMIC_MASS_CONSTANT

# ---------------------------- Reference conditions ----------------------------
STANDARD_TEMPERATURE = Temperature(sc.zero_Celsius, TemperatureUnit.KELVIN)
STANDARD_PRESSURE = Pressure(sc.bar, PressureUnit.PASCAL)
STANDARD_ATMOSPHERE = Pressure(sc.atm, PressureUnit.PASCAL)
NORMAL_TEMPERATURE = Temperature(293.15, TemperatureUnit.KELVIN)
ROOM_TEMPERATURE = Temperature(295.15, TemperatureUnit.KELVIN)
WATER_FREEZING_POINT = Temperature(sc.zero_Celsius, TemperatureUnit.KELVIN)
WATER_BOILING_POINT = Temperature(373.15, TemperatureUnit.KELVIN)
BODY_TEMPERATURE = Temperature(310.15, TemperatureUnit.KELVIN)

# ---------------------------- Fluids ----------------------------
WATER_DENSITY_MAX = Density(999.97, DensityUnit.KILOGRAM_PER_CUBIC_METER)
AIR_DENSITY_STP = Density(1.225, DensityUnit.KILOGRAM_PER_CUBIC_METER)
SOUND_SPEED_AIR_20C = Speed(343.2, SpeedUnit.METER_PER_SECOND)
SOUND_SPEED_WATER_25C = Speed(1497, SpeedUnit.METER_PER_SECOND)
WATER_VISCOSITY_20C = 1.002e-3  # Pa·s
AIR_VISCOSITY_20C = 1.81e-5  # Pa·s

# ---------------------------- Thermal properties ----------------------------
COPPER_THERMAL_CONDUCTIVITY = 401.0  # W/(m·K)
WATER_SPECIFIC_HEAT = 4184.0  # J/(kg·K)
WATER_LATENT_HEAT_VAPORIZATION = SpecificEnergy(2.26e6, SpecificEnergyUnit.JOULE_PER_KILOGRAM)
WATER_LATENT_HEAT_FUSION = SpecificEnergy(3.34e5, SpecificEnergyUnit.JOULE_PER_KILOGRAM)
STEEL_THERMAL_EXPANSION = 1.2e-5  # 1/K

# ---------------------------- Electrical properties ----------------------------
COPPER_RESISTIVITY = 1.68e-8  # Ω·m

# ---------------------------- Structural materials ----------------------------
STEEL_YOUNGS_MODULUS = Pressure(200e9, PressureUnit.PASCAL)
ALUMINUM_YOUNGS_MODULUS = Pressure(70e9, PressureUnit.PASCAL)
CONCRETE_YOUNGS_MODULUS = Pressure(30e9, PressureUnit.PASCAL)
STEEL_TENSILE_STRENGTH = Pressure(400e6, PressureUnit.PASCAL)
STEEL_YIELD_STRENGTH = Pressure(250e6, PressureUnit.PASCAL)
STEEL_POISSONS_RATIO = 0.29
ALUMINUM_POISSONS_RATIO = 0.33
CONCRETE_POISSONS_RATIO = 0.20

# ---------------------------- Fuels and nuclear ----------------------------
METHANE_HEATING_VALUE = SpecificEnergy(50e6, SpecificEnergyUnit.JOULE_PER_KILOGRAM)
GASOLINE_AIR_FUEL_RATIO = 14.7
ATOMIC_MASS_UNIT = ATOMIC_MASS_CONSTANT
NUCLEAR_BINDING_ENERGY_PER_NUCLEON = Energy(1.28e-12, EnergyUnit.JOULE)


def reynolds_number_pipe(velocity: Speed, diameter: Length, kinematic_viscosity: float) -> float:
    """Return the Reynolds number of flow in a pipe, ``Re = v·D / ν``.

    Args:
        velocity: Mean flow velocity.
        diameter: Inner pipe diameter.
        kinematic_viscosity: Kinematic viscosity in m²/s.

    Raises:
        DivisionByZeroError: If ``kinematic_viscosity`` is zero.
    """
    if kinematic_viscosity == 0:
        raise DivisionByZeroError("Kinematic viscosity cannot be zero.")
    return velocity.in_meters_per_second * diameter.in_meters / kinematic_viscosity


def pipe_pressure_drop(
    friction_factor: float,
    length: Length,
    diameter: Length,
    velocity: Speed,
    density: Density,
) -> Pressure:
    """Return the Darcy-Weisbach pressure drop along a pipe.

    ``Δp = f · (L / D) · (ρ·v² / 2)``

    Args:
        friction_factor: Darcy friction factor.
        length: Pipe length.
        diameter: Inner pipe diameter.
        velocity: Mean flow velocity.
        density: Fluid density.

    Returns:
        Pressure: Pressure drop in pascals.

    Raises:
        DivisionByZeroError: If ``diameter`` is zero.
    """
    if diameter.value == 0:
        raise DivisionByZeroError("Pipe diameter cannot be zero.")
    v = velocity.in_meters_per_second
    dynamic_pressure = density.in_kilograms_per_cubic_meter * v * v / 2.0
    return Pressure(
        friction_factor * (length.in_meters / diameter.in_meters) * dynamic_pressure,
        PressureUnit.PASCAL,
    )


def thermal_expansion(
    original_length: Length, expansion_coefficient: float, temperature_change: TemperatureDelta
) -> Length:
    """Return the change in length of a body heated by ``temperature_change``.

    ``ΔL = L₀ · α · ΔT``, with ``α`` in 1/K.
    """
    return Length(
        original_length.in_meters * expansion_coefficient * temperature_change.in_kelvin,
        LengthUnit.METER,
    )


def conductive_heat_transfer(
    thermal_conductivity: float,
    area: Area,
    thickness: Length,
    temperature_difference: TemperatureDelta,
) -> Power:
    """Return the steady conductive heat flow through a slab.

    ``q = k · A · ΔT / Δx``

    Args:
        thermal_conductivity: Conductivity ``k`` in W/(m·K).
        area: Cross-section the heat flows through.
        thickness: Slab thickness.
        temperature_difference: Temperature difference across the slab.

    Returns:
        Power: Heat flow in watts.

    Raises:
        DivisionByZeroError: If ``thickness`` is zero.
    """
    if thickness.value == 0:
        raise DivisionByZeroError("Thickness cannot be zero when calculating heat transfer.")
    return Power(
        thermal_conductivity
        * area.in_square_meters
        * temperature_difference.in_kelvin
        / thickness.in_meters,
        PowerUnit.WATT,
    )


def electrical_resistance(resistivity: float, length: Length, cross_section: Area) -> float:
    """Return the resistance in ohms of a uniform conductor, ``R = ρ·L / A``.

    Raises:
        DivisionByZeroError: If ``cross_section`` is zero.
    """
    if cross_section.value == 0:
        raise DivisionByZeroError("Cross-section cannot be zero when calculating resistance.")
    return resistivity * length.in_meters / cross_section.in_square_meters


def mechanical_stress(force: Force, area: Area) -> Pressure:
    """Return the normal stress of ``force`` over ``area``, ``σ = F / A``."""
    return Pressure.from_force_and_area(force, area)


def mechanical_strain(stress: Pressure, youngs_modulus: Pressure) -> float:
    """Return the dimensionless elastic strain ``ε = σ / E``.

    Raises:
        DivisionByZeroError: If ``youngs_modulus`` is zero.
    """
    if youngs_modulus.value == 0:
        raise DivisionByZeroError("Young's modulus cannot be zero.")
    return stress.in_pascals / youngs_modulus.in_pascals
