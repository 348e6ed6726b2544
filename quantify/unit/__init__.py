"""Type-safe physical quantities with per-family unit conversion.

This package provides one unit family and one quantity type per physical
dimension. A quantity keeps the unit it was created with; conversion is an
explicit request and uses a precomputed direct factor, so values are never
silently normalized to SI behind the caller's back.

Architecture:
    The unit system is organized into specialized modules:

    - unit_base: Unit and LinearUnit enum bases, family checks and the
      cached factor matrix
    - unit_quantity: Quantity and LinearQuantity, conversion, comparison,
      left-biased arithmetic and formatting
    - unit_length, unit_time, unit_mass, unit_angle, unit_area, unit_volume:
      geometric and base dimensions
    - unit_velocity, unit_force, unit_pressure, unit_density: mechanics
    - unit_energy: energy, power and specific energy
    - unit_rotation: angular velocity and frequency
    - unit_electric: current and electric charge
    - unit_temperature: absolute temperature and temperature difference
    - unit_luminous_intensity, unit_molar, unit_solid_angle: remaining SI
      dimensions

Key Features:
    - Type Safety: mixing dimensions (meters + seconds) raises TypeError
    - Factory Sugar: ``LengthUnit.KILOMETER(5)`` builds a Length
    - Exact Identity: converting to the current unit returns the same object
    - Structural Equality: ``1 kg != 1000 g``, while
      ``is_equivalent_to``/``compare_to`` compare magnitudes
    - Dimensional Analysis: named constructors such as
      ``Speed.from_length_and_time`` and their inverses

Example:
    >>> from quantify.unit import LengthUnit, TimeUnit, Speed
    >>>
    >>> leg = LengthUnit.KILOMETER(12)
    >>> duration = TimeUnit.MINUTE(30)
    >>> speed = Speed.from_length_and_time(leg, duration)
    >>> speed.in_kilometers_per_hour  # about 24
    >>>
    >>> # Left-biased arithmetic keeps the left unit
    >>> print(LengthUnit.METER(500) + leg)  # "12500.0 m"
    >>>
    >>> # Cross-family operations are prevented
    >>> # leg + duration  # TypeError
"""

from .unit_angle import Angle, AngleUnit
from .unit_area import Area, AreaUnit
from .unit_base import LinearUnit, Unit
from .unit_density import Density, DensityUnit
from .unit_electric import Current, CurrentUnit, ElectricCharge, ElectricChargeUnit
from .unit_energy import (
    Energy,
    EnergyUnit,
    Power,
    PowerUnit,
    SpecificEnergy,
    SpecificEnergyUnit,
)
from .unit_force import Force, ForceUnit
from .unit_length import Length, LengthUnit
from .unit_luminous_intensity import LuminousIntensity, LuminousIntensityUnit
from .unit_mass import Mass, MassUnit
from .unit_molar import MolarAmount, MolarUnit
from .unit_pressure import Pressure, PressureUnit
from .unit_quantity import LinearQuantity, Quantity
from .unit_rotation import AngularVelocity, AngularVelocityUnit, Frequency, FrequencyUnit
from .unit_solid_angle import SolidAngle, SolidAngleUnit
from .unit_temperature import (
    Temperature,
    TemperatureDelta,
    TemperatureDeltaUnit,
    TemperatureUnit,
)
from .unit_time import Time, TimeUnit
from .unit_velocity import Acceleration, AccelerationUnit, Speed, SpeedUnit
from .unit_volume import Volume, VolumeUnit

# Define public API
__all__ = [
    # Base classes
    "Unit",
    "LinearUnit",
    "Quantity",
    "LinearQuantity",
    # Geometry
    "Length",
    "LengthUnit",
    "Area",
    "AreaUnit",
    "Volume",
    "VolumeUnit",
    "Angle",
    "AngleUnit",
    "SolidAngle",
    "SolidAngleUnit",
    # Time and rates
    "Time",
    "TimeUnit",
    "Frequency",
    "FrequencyUnit",
    "AngularVelocity",
    "AngularVelocityUnit",
    # Mechanics
    "Mass",
    "MassUnit",
    "Speed",
    "SpeedUnit",
    "Acceleration",
    "AccelerationUnit",
    "Force",
    "ForceUnit",
    "Pressure",
    "PressureUnit",
    "Density",
    "DensityUnit",
    # Energy
    "Energy",
    "EnergyUnit",
    "Power",
    "PowerUnit",
    "SpecificEnergy",
    "SpecificEnergyUnit",
    # Electricity
    "Current",
    "CurrentUnit",
    "ElectricCharge",
    "ElectricChargeUnit",
    # Thermodynamics
    "Temperature",
    "TemperatureUnit",
    "TemperatureDelta",
    "TemperatureDeltaUnit",
    # Other SI dimensions
    "LuminousIntensity",
    "LuminousIntensityUnit",
    "MolarAmount",
    "MolarUnit",
]
