"""Length unit definitions for spatial measurements.

All length units are declared relative to the meter, the SI base unit for
length. Factors are exact by definition for the metric prefixes and the
international inch/foot/yard/mile (1959 agreement), and follow the IAU 2012
definitions for the astronomical units.

Classes:
    LengthUnit: Enumeration of supported length units.
    Length: Quantity of length.

Example:
    >>> flight_range = LengthUnit.KILOMETER(25.5)
    >>> print(flight_range)  # "25.5 km"
    >>> flight_range.in_meters
    25500.0
    >>> LengthUnit.METER(120).get_value(LengthUnit.FOOT)  # 393.7007874015748
"""

from __future__ import annotations

from .unit_base import LinearUnit
from .unit_quantity import LinearQuantity

METERS_PER_INCH = 0.0254
METERS_PER_FOOT = 0.3048
METERS_PER_YARD = 0.9144
METERS_PER_MILE = 1609.344
METERS_PER_NAUTICAL_MILE = 1852.0
METERS_PER_ASTRONOMICAL_UNIT = 149597870700.0
METERS_PER_LIGHT_YEAR = 9460730472580800.0
METERS_PER_PARSEC = 3.0856775814913673e16


class LengthUnit(LinearUnit):
    """Units of length, relative to the meter."""

    METER = (1.0, "m")
    KILOMETER = (1000.0, "km")
    HECTOMETER = (100.0, "hm")
    DECAMETER = (10.0, "dam")
    DECIMETER = (0.1, "dm")
    CENTIMETER = (0.01, "cm")
    MILLIMETER = (0.001, "mm")
    MICROMETER = (1e-6, "μm")
    NANOMETER = (1e-9, "nm")
    PICOMETER = (1e-12, "pm")
    FEMTOMETER = (1e-15, "fm")
    ANGSTROM = (1e-10, "Å")
    INCH = (METERS_PER_INCH, "in")
    FOOT = (METERS_PER_FOOT, "ft")
    YARD = (METERS_PER_YARD, "yd")
    MILE = (METERS_PER_MILE, "mi")
    NAUTICAL_MILE = (METERS_PER_NAUTICAL_MILE, "nmi")
    ASTRONOMICAL_UNIT = (METERS_PER_ASTRONOMICAL_UNIT, "AU")
    LIGHT_YEAR = (METERS_PER_LIGHT_YEAR, "ly")
    PARSEC = (METERS_PER_PARSEC, "pc")


class Length(LinearQuantity[LengthUnit]):
    """Quantity of length.

    Example:
        >>> altitude = Length(150.5, LengthUnit.METER)
        >>> altitude.convert_to(LengthUnit.KILOMETER)  # about 0.1505 km
    """

    UNIT = LengthUnit

    @property
    def in_meters(self) -> float:
        return self.get_value(LengthUnit.METER)

    @property
    def in_kilometers(self) -> float:
        return self.get_value(LengthUnit.KILOMETER)

    @property
    def in_centimeters(self) -> float:
        return self.get_value(LengthUnit.CENTIMETER)

    @property
    def in_millimeters(self) -> float:
        return self.get_value(LengthUnit.MILLIMETER)

    @property
    def in_feet(self) -> float:
        return self.get_value(LengthUnit.FOOT)

    @property
    def in_miles(self) -> float:
        return self.get_value(LengthUnit.MILE)
