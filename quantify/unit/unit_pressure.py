"""Pressure unit definitions.

Pressure is force per unit area (``P = F / A``); every unit is declared
relative to the pascal. Manometric units (mmHg, inHg, cmH₂O, inH₂O) use
the conventional standard-gravity column heights.

Classes:
    PressureUnit: Enumeration of supported pressure units.
    Pressure: Quantity of pressure.
"""

from __future__ import annotations

from quantify.exceptions import DivisionByZeroError

from .unit_area import Area
from .unit_base import LinearUnit
from .unit_force import Force, ForceUnit
from .unit_quantity import LinearQuantity

PASCALS_PER_ATMOSPHERE = 101325.0
PASCALS_PER_MILLIMETER_OF_MERCURY = 133.322387415


class PressureUnit(LinearUnit):
    """Units of pressure, relative to the pascal."""

    PASCAL = (1.0, "Pa")
    HECTOPASCAL = (100.0, "hPa")
    KILOPASCAL = (1e3, "kPa")
    MEGAPASCAL = (1e6, "MPa")
    BAR = (1e5, "bar")
    MILLIBAR = (100.0, "mbar")
    ATMOSPHERE = (PASCALS_PER_ATMOSPHERE, "atm")
    POUND_PER_SQUARE_INCH = (6894.757293168361, "psi")
    TORR = (PASCALS_PER_ATMOSPHERE / 760.0, "Torr")
    MILLIMETER_OF_MERCURY = (PASCALS_PER_MILLIMETER_OF_MERCURY, "mmHg")
    INCH_OF_MERCURY = (PASCALS_PER_MILLIMETER_OF_MERCURY * 25.4, "inHg")
    CENTIMETER_OF_WATER = (98.0665, "cmH₂O")
    INCH_OF_WATER = (249.08891, "inH₂O")


class Pressure(LinearQuantity[PressureUnit]):
    """Quantity of pressure."""

    UNIT = PressureUnit

    @classmethod
    def from_force_and_area(cls, force: Force, area: Area) -> Pressure:
        """Create the pressure of ``force`` spread evenly over ``area``.

        Args:
            force: Normal force.
            area: Surface the force acts on.

        Returns:
            Pressure: Pressure in pascals.

        Raises:
            DivisionByZeroError: If ``area`` is zero.
        """
        if area.value == 0:
            raise DivisionByZeroError("Area cannot be zero when calculating pressure.")
        return cls(force.in_newtons / area.in_square_meters, PressureUnit.PASCAL)

    @property
    def in_pascals(self) -> float:
        return self.get_value(PressureUnit.PASCAL)

    @property
    def in_kilopascals(self) -> float:
        return self.get_value(PressureUnit.KILOPASCAL)

    @property
    def in_bars(self) -> float:
        return self.get_value(PressureUnit.BAR)

    @property
    def in_atmospheres(self) -> float:
        return self.get_value(PressureUnit.ATMOSPHERE)

    @property
    def in_psi(self) -> float:
        return self.get_value(PressureUnit.POUND_PER_SQUARE_INCH)

    def force_on(self, area: Area) -> Force:
        """Return the total force this pressure exerts on ``area``."""
        return Force(self.in_pascals * area.in_square_meters, ForceUnit.NEWTON)
