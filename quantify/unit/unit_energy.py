"""Energy, power and specific energy unit definitions.

The three families are kept together because their relationships run in
both directions: energy is power integrated over time (``E = P × t``),
power is energy per time, and specific energy is energy per mass
(``e = E / m``).

Classes:
    EnergyUnit: Enumeration of supported energy units.
    Energy: Quantity of energy.
    PowerUnit: Enumeration of supported power units.
    Power: Quantity of power.
    SpecificEnergyUnit: Enumeration of supported specific energy units.
    SpecificEnergy: Quantity of energy per unit mass.

Example:
    >>> pack = EnergyUnit.KILOWATT_HOUR(1.2)
    >>> pack.time_at(PowerUnit.WATT(400)).in_hours  # about 3.0
    >>> SpecificEnergy.from_energy_and_mass(pack, MassUnit.KILOGRAM(6)).in_watt_hours_per_kilogram  # about 200
"""

from __future__ import annotations

from quantify.exceptions import DivisionByZeroError

from .unit_base import LinearUnit
from .unit_mass import Mass, MassUnit
from .unit_quantity import LinearQuantity
from .unit_time import SECONDS_PER_HOUR, Time, TimeUnit

JOULES_PER_CALORIE = 4.184
JOULES_PER_INTERNATIONAL_CALORIE = 4.1868
JOULES_PER_WATT_HOUR = SECONDS_PER_HOUR
JOULES_PER_ELECTRONVOLT = 1.602176634e-19
JOULES_PER_BTU = 1055.056


class EnergyUnit(LinearUnit):
    """Units of energy, relative to the joule."""

    JOULE = (1.0, "J")
    KILOJOULE = (1e3, "kJ")
    MEGAJOULE = (1e6, "MJ")
    CALORIE = (JOULES_PER_CALORIE, "cal")
    CALORIE_IT = (JOULES_PER_INTERNATIONAL_CALORIE, "cal_IT")
    KILOCALORIE = (JOULES_PER_CALORIE * 1e3, "kcal")
    KILOCALORIE_IT = (JOULES_PER_INTERNATIONAL_CALORIE * 1e3, "kcal_IT")
    WATT_HOUR = (JOULES_PER_WATT_HOUR, "Wh")
    KILOWATT_HOUR = (JOULES_PER_WATT_HOUR * 1e3, "kWh")
    ELECTRONVOLT = (JOULES_PER_ELECTRONVOLT, "eV")
    BRITISH_THERMAL_UNIT = (JOULES_PER_BTU, "Btu")
    ERG = (1e-7, "erg")


class PowerUnit(LinearUnit):
    """Units of power, relative to the watt."""

    WATT = (1.0, "W")
    MILLIWATT = (1e-3, "mW")
    KILOWATT = (1e3, "kW")
    MEGAWATT = (1e6, "MW")
    GIGAWATT = (1e9, "GW")
    HORSEPOWER = (745.69987158227022, "hp")
    METRIC_HORSEPOWER = (735.49875, "PS")
    BTU_PER_HOUR = (JOULES_PER_BTU / SECONDS_PER_HOUR, "Btu/h")
    ERG_PER_SECOND = (1e-7, "erg/s")


class SpecificEnergyUnit(LinearUnit):
    """Units of specific energy, relative to joules per kilogram."""

    JOULE_PER_KILOGRAM = (1.0, "J/kg")
    KILOJOULE_PER_KILOGRAM = (1e3, "kJ/kg")
    MEGAJOULE_PER_KILOGRAM = (1e6, "MJ/kg")
    WATT_HOUR_PER_KILOGRAM = (JOULES_PER_WATT_HOUR, "Wh/kg")
    KILOWATT_HOUR_PER_KILOGRAM = (JOULES_PER_WATT_HOUR * 1e3, "kWh/kg")


class Energy(LinearQuantity[EnergyUnit]):
    """Quantity of energy."""

    UNIT = EnergyUnit

    @classmethod
    def from_power_and_time(cls, power: Power, time: Time) -> Energy:
        """Create the energy delivered by a steady ``power`` over ``time``.

        Args:
            power: Steady power.
            time: Duration the power is sustained.

        Returns:
            Energy: Energy in joules.
        """
        return cls(power.in_watts * time.in_seconds, EnergyUnit.JOULE)

    @property
    def in_joules(self) -> float:
        return self.get_value(EnergyUnit.JOULE)

    @property
    def in_kilojoules(self) -> float:
        return self.get_value(EnergyUnit.KILOJOULE)

    @property
    def in_watt_hours(self) -> float:
        return self.get_value(EnergyUnit.WATT_HOUR)

    @property
    def in_kilowatt_hours(self) -> float:
        return self.get_value(EnergyUnit.KILOWATT_HOUR)

    def power_over(self, time: Time) -> Power:
        """Return the steady power that delivers this energy within ``time``.

        Raises:
            DivisionByZeroError: If ``time`` is zero.
        """
        if time.value == 0:
            raise DivisionByZeroError("Time cannot be zero when calculating power.")
        return Power(self.in_joules / time.in_seconds, PowerUnit.WATT)

    def time_at(self, power: Power) -> Time:
        """Return how long ``power`` takes to deliver this energy.

        Raises:
            DivisionByZeroError: If ``power`` is zero.
        """
        if power.value == 0:
            raise DivisionByZeroError("Power cannot be zero when calculating time.")
        return Time(self.in_joules / power.in_watts, TimeUnit.SECOND)


class Power(LinearQuantity[PowerUnit]):
    """Quantity of power."""

    UNIT = PowerUnit

    @classmethod
    def from_energy_and_time(cls, energy: Energy, time: Time) -> Power:
        """Create the average power of ``energy`` delivered within ``time``.

        Raises:
            DivisionByZeroError: If ``time`` is zero.
        """
        return energy.power_over(time)

    @property
    def in_watts(self) -> float:
        return self.get_value(PowerUnit.WATT)

    @property
    def in_kilowatts(self) -> float:
        return self.get_value(PowerUnit.KILOWATT)

    @property
    def in_horsepower(self) -> float:
        return self.get_value(PowerUnit.HORSEPOWER)

    def energy_over(self, time: Time) -> Energy:
        """Return the energy delivered at this power during ``time``."""
        return Energy.from_power_and_time(self, time)


class SpecificEnergy(LinearQuantity[SpecificEnergyUnit]):
    """Quantity of specific energy, such as a battery's gravimetric density."""

    UNIT = SpecificEnergyUnit

    @classmethod
    def from_energy_and_mass(cls, energy: Energy, mass: Mass) -> SpecificEnergy:
        """Create the energy carried per unit of ``mass``.

        Args:
            energy: Stored energy.
            mass: Mass carrying the energy.

        Returns:
            SpecificEnergy: Specific energy in joules per kilogram.

        Raises:
            DivisionByZeroError: If ``mass`` is zero.
        """
        if mass.value == 0:
            raise DivisionByZeroError("Mass cannot be zero when calculating specific energy.")
        return cls(energy.in_joules / mass.in_kilograms, SpecificEnergyUnit.JOULE_PER_KILOGRAM)

    @property
    def in_joules_per_kilogram(self) -> float:
        return self.get_value(SpecificEnergyUnit.JOULE_PER_KILOGRAM)

    @property
    def in_watt_hours_per_kilogram(self) -> float:
        return self.get_value(SpecificEnergyUnit.WATT_HOUR_PER_KILOGRAM)

    def energy_in(self, mass: Mass) -> Energy:
        """Return the energy stored in ``mass`` at this specific energy."""
        return Energy(self.in_joules_per_kilogram * mass.in_kilograms, EnergyUnit.JOULE)

    def mass_for(self, energy: Energy) -> Mass:
        """Return the mass needed to store ``energy`` at this specific energy.

        Raises:
            DivisionByZeroError: If this specific energy is zero.
        """
        if self.value == 0:
            raise DivisionByZeroError("Specific energy cannot be zero when calculating mass.")
        return Mass(energy.in_joules / self.in_joules_per_kilogram, MassUnit.KILOGRAM)
