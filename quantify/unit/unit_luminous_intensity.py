"""Luminous intensity unit definitions, relative to the candela."""

from __future__ import annotations

from .unit_base import LinearUnit
from .unit_quantity import LinearQuantity


class LuminousIntensityUnit(LinearUnit):
    """Units of luminous intensity, relative to the candela."""

    CANDELA = (1.0, "cd")
    MILLICANDELA = (1e-3, "mcd")
    KILOCANDELA = (1e3, "kcd")


class LuminousIntensity(LinearQuantity[LuminousIntensityUnit]):
    """Quantity of luminous intensity."""

    UNIT = LuminousIntensityUnit

    @property
    def in_candelas(self) -> float:
        return self.get_value(LuminousIntensityUnit.CANDELA)

    @property
    def in_millicandelas(self) -> float:
        return self.get_value(LuminousIntensityUnit.MILLICANDELA)
