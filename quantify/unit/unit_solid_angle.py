"""Solid angle unit definitions.

All units are declared relative to the steradian. A full sphere subtends
one spat, 4π sr.

Classes:
    SolidAngleUnit: Enumeration of supported solid angle units.
    SolidAngle: Quantity of solid angle.
"""

from __future__ import annotations

from math import pi

from .unit_angle import RADIANS_PER_DEGREE
from .unit_base import LinearUnit
from .unit_quantity import LinearQuantity


class SolidAngleUnit(LinearUnit):
    """Units of solid angle, relative to the steradian."""

    STERADIAN = (1.0, "sr")
    SQUARE_DEGREE = (RADIANS_PER_DEGREE * RADIANS_PER_DEGREE, "deg²")
    SPAT = (4 * pi, "sp")


class SolidAngle(LinearQuantity[SolidAngleUnit]):
    """Quantity of solid angle."""

    UNIT = SolidAngleUnit

    @property
    def in_steradians(self) -> float:
        return self.get_value(SolidAngleUnit.STERADIAN)

    @property
    def in_square_degrees(self) -> float:
        return self.get_value(SolidAngleUnit.SQUARE_DEGREE)
