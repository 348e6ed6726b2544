"""Angular unit definitions.

All angular measurements are declared relative to the radian, the SI unit
for plane angles.

Classes:
    AngleUnit: Enumeration of supported angle units.
    Angle: Quantity of plane angle.

Example:
    >>> heading = AngleUnit.DEGREE(45)
    >>> print(heading)  # "45.0 °"
    >>> heading.in_radians  # 0.7853981633974483
"""

from __future__ import annotations

from math import pi

from .unit_base import LinearUnit
from .unit_quantity import LinearQuantity

RADIANS_PER_REVOLUTION = 2 * pi
RADIANS_PER_DEGREE = RADIANS_PER_REVOLUTION / 360.0
RADIANS_PER_ARCMINUTE = RADIANS_PER_DEGREE / 60.0


class AngleUnit(LinearUnit):
    """Units of plane angle, relative to the radian."""

    RADIAN = (1.0, "rad")
    DEGREE = (RADIANS_PER_DEGREE, "°")
    GRADIAN = (RADIANS_PER_REVOLUTION / 400.0, "grad")
    REVOLUTION = (RADIANS_PER_REVOLUTION, "rev")
    ARCMINUTE = (RADIANS_PER_ARCMINUTE, "'")
    ARCSECOND = (RADIANS_PER_ARCMINUTE / 60.0, '"')
    MILLIRADIAN = (0.001, "mrad")


class Angle(LinearQuantity[AngleUnit]):
    """Quantity of plane angle."""

    UNIT = AngleUnit

    @property
    def in_radians(self) -> float:
        return self.get_value(AngleUnit.RADIAN)

    @property
    def in_degrees(self) -> float:
        return self.get_value(AngleUnit.DEGREE)

    @property
    def in_revolutions(self) -> float:
        return self.get_value(AngleUnit.REVOLUTION)
