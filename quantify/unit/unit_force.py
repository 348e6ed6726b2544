"""Force unit definitions.

Force is derived from mass and acceleration (Newton's second law,
``F = m × a``). All force units are declared relative to the newton.

Classes:
    ForceUnit: Enumeration of supported force units.
    Force: Quantity of force.

Example:
    >>> weight = Force.from_mass_and_acceleration(
    ...     MassUnit.KILOGRAM(10), AccelerationUnit.STANDARD_GRAVITY(1)
    ... )
    >>> weight.in_newtons  # about 98.0665
"""

from __future__ import annotations

from quantify.exceptions import DivisionByZeroError

from .unit_base import LinearUnit
from .unit_mass import KILOGRAMS_PER_POUND, Mass, MassUnit
from .unit_quantity import LinearQuantity
from .unit_velocity import STANDARD_GRAVITY, Acceleration, AccelerationUnit

NEWTONS_PER_POUND_FORCE = KILOGRAMS_PER_POUND * STANDARD_GRAVITY


class ForceUnit(LinearUnit):
    """Units of force, relative to the newton."""

    NEWTON = (1.0, "N")
    KILONEWTON = (1e3, "kN")
    MEGANEWTON = (1e6, "MN")
    MILLINEWTON = (1e-3, "mN")
    POUND_FORCE = (NEWTONS_PER_POUND_FORCE, "lbf")
    DYNE = (1e-5, "dyn")
    KILOGRAM_FORCE = (STANDARD_GRAVITY, "kgf")


class Force(LinearQuantity[ForceUnit]):
    """Quantity of force."""

    UNIT = ForceUnit

    @classmethod
    def from_mass_and_acceleration(cls, mass: Mass, acceleration: Acceleration) -> Force:
        """Create the force accelerating ``mass`` at ``acceleration``.

        Args:
            mass: Accelerated mass.
            acceleration: Resulting acceleration.

        Returns:
            Force: Force in newtons.
        """
        return cls(
            mass.in_kilograms * acceleration.in_meters_per_second_squared, ForceUnit.NEWTON
        )

    @property
    def in_newtons(self) -> float:
        return self.get_value(ForceUnit.NEWTON)

    @property
    def in_kilonewtons(self) -> float:
        return self.get_value(ForceUnit.KILONEWTON)

    @property
    def in_pounds_force(self) -> float:
        return self.get_value(ForceUnit.POUND_FORCE)

    def acceleration_of(self, mass: Mass) -> Acceleration:
        """Return the acceleration this force gives ``mass``.

        Raises:
            DivisionByZeroError: If ``mass`` is zero.
        """
        if mass.value == 0:
            raise DivisionByZeroError("Mass cannot be zero when calculating acceleration.")
        return Acceleration(
            self.in_newtons / mass.in_kilograms, AccelerationUnit.METER_PER_SECOND_SQUARED
        )

    def mass_from(self, acceleration: Acceleration) -> Mass:
        """Return the mass this force accelerates at ``acceleration``.

        Raises:
            DivisionByZeroError: If ``acceleration`` is zero.
        """
        if acceleration.value == 0:
            raise DivisionByZeroError("Acceleration cannot be zero when calculating mass.")
        return Mass(self.in_newtons / acceleration.in_meters_per_second_squared, MassUnit.KILOGRAM)
