"""Volume unit definitions.

All volume units are declared relative to the cubic meter. Metric litre
multiples alias the matching cubic units (1 L = 1 dm³); US customary liquid
measures derive from the exact cubic inch (16.387064 cm³) via the 231 in³
gallon.

Classes:
    VolumeUnit: Enumeration of supported volume units.
    Volume: Quantity of volume.
"""

from __future__ import annotations

from .unit_base import LinearUnit
from .unit_quantity import LinearQuantity

CUBIC_METERS_PER_LITRE = 1e-3
CUBIC_METERS_PER_CUBIC_INCH = 16.387064e-6
CUBIC_METERS_PER_CUBIC_FOOT = CUBIC_METERS_PER_CUBIC_INCH * 1728.0
CUBIC_METERS_PER_GALLON = CUBIC_METERS_PER_CUBIC_INCH * 231.0
CUBIC_METERS_PER_QUART = CUBIC_METERS_PER_GALLON / 4.0
CUBIC_METERS_PER_PINT = CUBIC_METERS_PER_QUART / 2.0
CUBIC_METERS_PER_FLUID_OUNCE = CUBIC_METERS_PER_PINT / 16.0
CUBIC_METERS_PER_TABLESPOON = CUBIC_METERS_PER_FLUID_OUNCE / 2.0


class VolumeUnit(LinearUnit):
    """Units of volume, relative to the cubic meter."""

    CUBIC_METER = (1.0, "m³")
    CUBIC_DECAMETER = (1e3, "dam³")
    CUBIC_HECTOMETER = (1e6, "hm³")
    CUBIC_KILOMETER = (1e9, "km³")
    CUBIC_DECIMETER = (1e-3, "dm³")
    CUBIC_CENTIMETER = (1e-6, "cm³")
    CUBIC_MILLIMETER = (1e-9, "mm³")
    KILOLITER = (1.0, "kl")
    MEGALITER = (1e3, "Ml")
    GIGALITER = (1e6, "Gl")
    TERALITER = (1e9, "Tl")
    LITRE = (CUBIC_METERS_PER_LITRE, "L")
    CENTILITER = (1e-5, "cL")
    MILLILITER = (1e-6, "mL")
    MICROLITER = (1e-9, "µL")
    CUBIC_INCH = (CUBIC_METERS_PER_CUBIC_INCH, "in³")
    CUBIC_FOOT = (CUBIC_METERS_PER_CUBIC_FOOT, "ft³")
    CUBIC_MILE = (CUBIC_METERS_PER_CUBIC_FOOT * 147197952000.0, "mi³")
    GALLON = (CUBIC_METERS_PER_GALLON, "gal")
    QUART = (CUBIC_METERS_PER_QUART, "qt")
    PINT = (CUBIC_METERS_PER_PINT, "pt")
    FLUID_OUNCE = (CUBIC_METERS_PER_FLUID_OUNCE, "fl-oz")
    TABLESPOON = (CUBIC_METERS_PER_TABLESPOON, "tbsp")
    TEASPOON = (CUBIC_METERS_PER_TABLESPOON / 3.0, "tsp")


class Volume(LinearQuantity[VolumeUnit]):
    """Quantity of volume."""

    UNIT = VolumeUnit

    @property
    def in_cubic_meters(self) -> float:
        return self.get_value(VolumeUnit.CUBIC_METER)

    @property
    def in_liters(self) -> float:
        return self.get_value(VolumeUnit.LITRE)

    @property
    def in_milliliters(self) -> float:
        return self.get_value(VolumeUnit.MILLILITER)
