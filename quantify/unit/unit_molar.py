"""Amount of substance unit definitions, relative to the mole.

Example:
    >>> sample = MolarUnit.MILLIMOLE(250)
    >>> sample.in_moles  # 0.25
"""

from __future__ import annotations

from .unit_base import LinearUnit
from .unit_quantity import LinearQuantity


class MolarUnit(LinearUnit):
    """Units of amount of substance, relative to the mole."""

    MOLE = (1.0, "mol")
    MILLIMOLE = (1e-3, "mmol")
    MICROMOLE = (1e-6, "µmol")
    NANOMOLE = (1e-9, "nmol")
    PICOMOLE = (1e-12, "pmol")
    KILOMOLE = (1e3, "kmol")


class MolarAmount(LinearQuantity[MolarUnit]):
    """Quantity of amount of substance."""

    UNIT = MolarUnit

    @property
    def in_moles(self) -> float:
        return self.get_value(MolarUnit.MOLE)

    @property
    def in_millimoles(self) -> float:
        return self.get_value(MolarUnit.MILLIMOLE)
