"""Area unit definitions.

All area units are declared relative to the square meter.

Classes:
    AreaUnit: Enumeration of supported area units.
    Area: Quantity of area, with construction from two lengths.

Example:
    >>> plot = Area.from_lengths(LengthUnit.METER(20), LengthUnit.METER(50))
    >>> plot.get_value(AreaUnit.HECTARE)  # about 0.1
"""

from __future__ import annotations

from quantify.exceptions import DivisionByZeroError

from .unit_base import LinearUnit
from .unit_length import Length, LengthUnit
from .unit_quantity import LinearQuantity


class AreaUnit(LinearUnit):
    """Units of area, relative to the square meter."""

    SQUARE_METER = (1.0, "m²")
    SQUARE_DECIMETER = (0.01, "dm²")
    SQUARE_CENTIMETER = (1e-4, "cm²")
    SQUARE_MILLIMETER = (1e-6, "mm²")
    SQUARE_MICROMETER = (1e-12, "µm²")
    SQUARE_DECAMETER = (100.0, "dam²")
    SQUARE_HECTOMETER = (1e4, "hm²")
    HECTARE = (1e4, "ha")
    SQUARE_KILOMETER = (1e6, "km²")
    SQUARE_MEGAMETER = (1e12, "Mm²")
    SQUARE_INCH = (0.00064516, "in²")
    SQUARE_FOOT = (0.09290304, "ft²")
    SQUARE_YARD = (0.83612736, "yd²")
    SQUARE_MILE = (2589988.110336, "mi²")
    ACRE = (4046.8564224, "ac")


class Area(LinearQuantity[AreaUnit]):
    """Quantity of area."""

    UNIT = AreaUnit

    @classmethod
    def from_lengths(cls, length: Length, width: Length) -> Area:
        """Create the area of a rectangle, ``Area = Length × Length``.

        Args:
            length: One side of the rectangle.
            width: The other side.

        Returns:
            Area: Area in square meters.
        """
        return cls(length.in_meters * width.in_meters, AreaUnit.SQUARE_METER)

    @property
    def in_square_meters(self) -> float:
        return self.get_value(AreaUnit.SQUARE_METER)

    def side_for(self, length: Length) -> Length:
        """Return the other side of a rectangle of this area and one known side.

        Raises:
            DivisionByZeroError: If ``length`` is zero.
        """
        if length.value == 0:
            raise DivisionByZeroError("Length cannot be zero when calculating the other side.")
        return Length(self.in_square_meters / length.in_meters, LengthUnit.METER)
