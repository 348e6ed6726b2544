"""Density unit definitions.

Mass per unit volume, declared relative to kilograms per cubic meter.

Classes:
    DensityUnit: Enumeration of supported density units.
    Density: Quantity of density.

Example:
    >>> water = Density.from_mass_and_volume(MassUnit.KILOGRAM(1), VolumeUnit.LITRE(1))
    >>> water.get_value(DensityUnit.GRAM_PER_CUBIC_CENTIMETER)  # about 1.0
"""

from __future__ import annotations

from quantify.exceptions import DivisionByZeroError

from .unit_base import LinearUnit
from .unit_mass import KILOGRAMS_PER_POUND, Mass, MassUnit
from .unit_quantity import LinearQuantity
from .unit_volume import CUBIC_METERS_PER_CUBIC_FOOT, CUBIC_METERS_PER_GALLON, Volume, VolumeUnit


class DensityUnit(LinearUnit):
    """Units of density, relative to kilograms per cubic meter."""

    KILOGRAM_PER_CUBIC_METER = (1.0, "kg/m³")
    GRAM_PER_CUBIC_CENTIMETER = (1000.0, "g/cm³")
    GRAM_PER_MILLILITER = (1000.0, "g/mL")
    KILOGRAM_PER_LITRE = (1000.0, "kg/L")
    GRAM_PER_LITRE = (1.0, "g/L")
    POUND_PER_CUBIC_FOOT = (KILOGRAMS_PER_POUND / CUBIC_METERS_PER_CUBIC_FOOT, "lb/ft³")
    POUND_PER_GALLON = (KILOGRAMS_PER_POUND / CUBIC_METERS_PER_GALLON, "lb/gal")


class Density(LinearQuantity[DensityUnit]):
    """Quantity of density."""

    UNIT = DensityUnit

    @classmethod
    def from_mass_and_volume(cls, mass: Mass, volume: Volume) -> Density:
        """Create the density of ``mass`` occupying ``volume``.

        Raises:
            DivisionByZeroError: If ``volume`` is zero.
        """
        if volume.value == 0:
            raise DivisionByZeroError("Volume cannot be zero when calculating density.")
        return cls(mass.in_kilograms / volume.in_cubic_meters, DensityUnit.KILOGRAM_PER_CUBIC_METER)

    @property
    def in_kilograms_per_cubic_meter(self) -> float:
        return self.get_value(DensityUnit.KILOGRAM_PER_CUBIC_METER)

    @property
    def in_grams_per_cubic_centimeter(self) -> float:
        return self.get_value(DensityUnit.GRAM_PER_CUBIC_CENTIMETER)

    def mass_of(self, volume: Volume) -> Mass:
        """Return the mass of ``volume`` of material at this density."""
        return Mass(self.in_kilograms_per_cubic_meter * volume.in_cubic_meters, MassUnit.KILOGRAM)

    def volume_of(self, mass: Mass) -> Volume:
        """Return the volume ``mass`` occupies at this density.

        Raises:
            DivisionByZeroError: If this density is zero.
        """
        if self.value == 0:
            raise DivisionByZeroError("Density cannot be zero when calculating volume.")
        return Volume(mass.in_kilograms / self.in_kilograms_per_cubic_meter, VolumeUnit.CUBIC_METER)
