"""Fundamental physical constants as typed quantities.

Values come from ``scipy.constants`` (CODATA). Constants with a dimension
that quantify models are exposed as quantities; the rest (Planck constant,
Boltzmann constant, ...) stay plain floats in SI units.

Example:
    >>> from quantify.constants import physical
    >>> physical.mass_energy_equivalence(MassUnit.GRAM(1)).in_kilowatt_hours  # about 2.5e7
    >>> physical.photon_energy(LengthUnit.NANOMETER(500)).get_value(EnergyUnit.ELECTRONVOLT)  # about 2.48
"""

from __future__ import annotations

import scipy.constants as sc

from quantify.exceptions import DivisionByZeroError
from quantify.unit.unit_electric import ElectricCharge, ElectricChargeUnit
from quantify.unit.unit_energy import Energy, EnergyUnit
from quantify.unit.unit_force import Force, ForceUnit
from quantify.unit.unit_length import Length, LengthUnit
from quantify.unit.unit_mass import Mass, MassUnit
from quantify.unit.unit_temperature import Temperature
from quantify.unit.unit_time import Time
from quantify.unit.unit_velocity import Speed, SpeedUnit

# ---------------------------- Universal constants ----------------------------
SPEED_OF_LIGHT = Speed(sc.c, SpeedUnit.METER_PER_SECOND)
PLANCK_CONSTANT = sc.h  # J·s
REDUCED_PLANCK_CONSTANT = sc.hbar  # J·s
GRAVITATIONAL_CONSTANT = sc.G  # m³/(kg·s²)
VACUUM_PERMEABILITY = sc.mu_0  # H/m
VACUUM_PERMITTIVITY = sc.epsilon_0  # F/m
FINE_STRUCTURE_CONSTANT = sc.alpha

# ---------------------------- Electromagnetic constants ----------------------------
ELEMENTARY_CHARGE = ElectricCharge(sc.e, ElectricChargeUnit.COULOMB)
BOHR_MAGNETON = sc.value("Bohr magneton")  # J/T
NUCLEAR_MAGNETON = sc.value("nuclear magneton")  # J/T
ELECTRON_CHARGE_TO_MASS_RATIO = abs(sc.value("electron charge to mass quotient"))  # C/kg
PROTON_CHARGE_TO_MASS_RATIO = sc.value("proton charge to mass quotient")  # C/kg

# ---------------------------- Physico-chemical constants ----------------------------
AVOGADRO_CONSTANT = sc.N_A  # 1/mol
BOLTZMANN_CONSTANT = sc.k  # J/K
GAS_CONSTANT = sc.R  # J/(mol·K)
FARADAY_CONSTANT = sc.value("Faraday constant")  # C/mol
STEFAN_BOLTZMANN_CONSTANT = sc.sigma  # W/(m²·K⁴)
WIEN_DISPLACEMENT_CONSTANT = sc.Wien  # m·K
FIRST_RADIATION_CONSTANT = sc.value("first radiation constant")  # W·m²
SECOND_RADIATION_CONSTANT = sc.value("second radiation constant")  # m·K

# ---------------------------- Particle masses ----------------------------
ELECTRON_MASS = Mass(sc.m_e, MassUnit.KILOGRAM)
PROTON_MASS = Mass(sc.m_p, MassUnit.KILOGRAM)
NEUTRON_MASS = Mass(sc.m_n, MassUnit.KILOGRAM)
DEUTERON_MASS = Mass(sc.value("deuteron mass"), MassUnit.KILOGRAM)
ALPHA_PARTICLE_MASS = Mass(sc.value("alpha particle mass"), MassUnit.KILOGRAM)
ATOMIC_MASS_CONSTANT = Mass(sc.m_u, MassUnit.KILOGRAM)

# ---------------------------- Atomic lengths ----------------------------
CLASSICAL_ELECTRON_RADIUS = Length(sc.value("classical electron radius"), LengthUnit.METER)
BOHR_RADIUS = Length(sc.value("Bohr radius"), LengthUnit.METER)
ELECTRON_COMPTON_WAVELENGTH = Length(sc.value("Compton wavelength"), LengthUnit.METER)

# ---------------------------- Energies ----------------------------
ELECTRON_VOLT = Energy(sc.eV, EnergyUnit.JOULE)
RYDBERG_ENERGY = Energy(sc.value("Rydberg constant times hc in J"), EnergyUnit.JOULE)
ELECTRON_REST_ENERGY = Energy(sc.value("electron mass energy equivalent"), EnergyUnit.JOULE)
PROTON_REST_ENERGY = Energy(sc.value("proton mass energy equivalent"), EnergyUnit.JOULE)


def light_speed_distance(time: Time) -> Length:
    """Return the distance light travels in vacuum during ``time``."""
    return SPEED_OF_LIGHT.distance_over(time)


def mass_energy_equivalence(mass: Mass) -> Energy:
    """Return the rest energy of ``mass``, ``E = m·c²``."""
    c = SPEED_OF_LIGHT.in_meters_per_second
    return Energy(mass.in_kilograms * c * c, EnergyUnit.JOULE)


def thermal_energy(temperature: Temperature) -> Energy:
    """Return the characteristic thermal energy ``k·T`` at ``temperature``."""
    return Energy(BOLTZMANN_CONSTANT * temperature.in_kelvin, EnergyUnit.JOULE)


def gravitational_force(mass1: Mass, mass2: Mass, distance: Length) -> Force:
    """Return the Newtonian attraction between two point masses.

    Args:
        mass1: First mass.
        mass2: Second mass.
        distance: Separation between the centers of mass.

    Returns:
        Force: ``G·m1·m2 / r²`` in newtons.

    Raises:
        DivisionByZeroError: If ``distance`` is zero.
    """
    if distance.value == 0:
        raise DivisionByZeroError("Distance cannot be zero when calculating gravitational force.")
    r = distance.in_meters
    return Force(
        GRAVITATIONAL_CONSTANT * mass1.in_kilograms * mass2.in_kilograms / (r * r),
        ForceUnit.NEWTON,
    )


def photon_energy(wavelength: Length) -> Energy:
    """Return the energy of a photon of ``wavelength``, ``E = h·c / λ``.

    Raises:
        DivisionByZeroError: If ``wavelength`` is zero.
    """
    if wavelength.value == 0:
        raise DivisionByZeroError("Wavelength cannot be zero when calculating photon energy.")
    return Energy(
        PLANCK_CONSTANT * SPEED_OF_LIGHT.in_meters_per_second / wavelength.in_meters,
        EnergyUnit.JOULE,
    )


def de_broglie_wavelength(mass: Mass, velocity: Speed) -> Length:
    """Return the de Broglie wavelength ``λ = h / (m·v)`` of a particle.

    Args:
        mass: Particle mass.
        velocity: Particle speed.

    Returns:
        Length: Wavelength in meters.

    Raises:
        DivisionByZeroError: If the momentum is zero.
    """
    momentum = mass.in_kilograms * velocity.in_meters_per_second
    if momentum == 0:
        raise DivisionByZeroError(
            "Cannot calculate de Broglie wavelength for a particle with zero momentum."
        )
    return Length(PLANCK_CONSTANT / momentum, LengthUnit.METER)
