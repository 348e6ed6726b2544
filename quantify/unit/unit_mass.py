"""Mass unit definitions.

All mass units are declared relative to the kilogram, the SI base unit for
mass. The avoirdupois pound is exactly 0.45359237 kg; ounce, stone and the
short and long tons are derived from it.

Classes:
    MassUnit: Enumeration of supported mass units.
    Mass: Quantity of mass.

Example:
    >>> package = MassUnit.POUND(5)
    >>> package.in_kilograms  # 2.26796185
    >>> MassUnit.KILOGRAM(1) == MassUnit.GRAM(1000)
    False
"""

from __future__ import annotations

from .unit_base import LinearUnit
from .unit_quantity import LinearQuantity

KILOGRAMS_PER_POUND = 0.45359237


class MassUnit(LinearUnit):
    """Units of mass, relative to the kilogram."""

    KILOGRAM = (1.0, "kg")
    HECTOGRAM = (0.1, "hg")
    DECAGRAM = (0.01, "dag")
    GRAM = (0.001, "g")
    DECIGRAM = (1e-4, "dg")
    CENTIGRAM = (1e-5, "cg")
    MILLIGRAM = (1e-6, "mg")
    MICROGRAM = (1e-9, "μg")
    NANOGRAM = (1e-12, "ng")
    MEGAGRAM = (1000.0, "Mg")
    GIGAGRAM = (1e6, "Gg")
    TONNE = (1000.0, "t")
    POUND = (KILOGRAMS_PER_POUND, "lb")
    OUNCE = (KILOGRAMS_PER_POUND / 16.0, "oz")
    STONE = (KILOGRAMS_PER_POUND * 14.0, "st")
    SLUG = (14.5939029372, "slug")
    SHORT_TON = (KILOGRAMS_PER_POUND * 2000.0, "short ton")
    LONG_TON = (KILOGRAMS_PER_POUND * 2240.0, "long ton")
    ATOMIC_MASS_UNIT = (1.66053906660e-27, "u")
    CARAT = (0.0002, "ct")


class Mass(LinearQuantity[MassUnit]):
    """Quantity of mass.

    Mass is a measure of an object's resistance to acceleration. Combine it
    with Acceleration to get a Force, or with Volume to get a Density.
    """

    UNIT = MassUnit

    @property
    def in_kilograms(self) -> float:
        return self.get_value(MassUnit.KILOGRAM)

    @property
    def in_grams(self) -> float:
        return self.get_value(MassUnit.GRAM)

    @property
    def in_pounds(self) -> float:
        return self.get_value(MassUnit.POUND)
