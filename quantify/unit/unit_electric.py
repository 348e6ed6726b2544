"""Electric current and electric charge unit definitions.

Current is an SI base dimension (ampere); charge is derived from it as
``Charge = Current × Time`` (coulomb = ampere-second). Both families live in
this module because their dimensional analysis is two-way: a charge can be
built from a current and a duration, and a current or duration recovered
from a charge.

Classes:
    CurrentUnit: Enumeration of supported current units.
    Current: Quantity of electric current.
    ElectricChargeUnit: Enumeration of supported charge units.
    ElectricCharge: Quantity of electric charge.

Example:
    >>> battery = ElectricChargeUnit.MILLIAMPERE_HOUR(5000)
    >>> battery.time_for(CurrentUnit.AMPERE(2)).in_hours  # about 2.5
"""

from __future__ import annotations

from quantify.exceptions import DivisionByZeroError

from .unit_base import LinearUnit
from .unit_quantity import LinearQuantity
from .unit_time import Time, TimeUnit

COULOMBS_PER_ELEMENTARY_CHARGE = 1.602176634e-19
COULOMBS_PER_AMPERE_HOUR = 3600.0


class CurrentUnit(LinearUnit):
    """Units of electric current, relative to the ampere."""

    AMPERE = (1.0, "A")
    MILLIAMPERE = (1e-3, "mA")
    MICROAMPERE = (1e-6, "µA")
    NANOAMPERE = (1e-9, "nA")
    KILOAMPERE = (1e3, "kA")
    STATAMPERE = (3.3356409519815204e-10, "statA")
    ABAMPERE = (10.0, "abA")


class Current(LinearQuantity[CurrentUnit]):
    """Quantity of electric current."""

    UNIT = CurrentUnit

    @property
    def in_amperes(self) -> float:
        return self.get_value(CurrentUnit.AMPERE)

    @property
    def in_milliamperes(self) -> float:
        return self.get_value(CurrentUnit.MILLIAMPERE)


class ElectricChargeUnit(LinearUnit):
    """Units of electric charge, relative to the coulomb."""

    COULOMB = (1.0, "C")
    MILLICOULOMB = (1e-3, "mC")
    MICROCOULOMB = (1e-6, "µC")
    NANOCOULOMB = (1e-9, "nC")
    ELEMENTARY_CHARGE = (COULOMBS_PER_ELEMENTARY_CHARGE, "e")
    AMPERE_HOUR = (COULOMBS_PER_AMPERE_HOUR, "Ah")
    MILLIAMPERE_HOUR = (COULOMBS_PER_AMPERE_HOUR / 1000.0, "mAh")
    STATCOULOMB = (3.3356409519815204e-10, "statC")
    ABCOULOMB = (10.0, "abC")


class ElectricCharge(LinearQuantity[ElectricChargeUnit]):
    """Quantity of electric charge.

    The charge delivered by a steady current ``I`` over a duration ``t`` is
    ``Q = I × t``.
    """

    UNIT = ElectricChargeUnit

    @classmethod
    def from_current_and_time(cls, current: Current, time: Time) -> ElectricCharge:
        """Create a charge from a steady current and a duration.

        Args:
            current: Steady current.
            time: Duration the current flows for.

        Returns:
            ElectricCharge: Charge in coulombs.
        """
        return cls(current.in_amperes * time.in_seconds, ElectricChargeUnit.COULOMB)

    @property
    def in_coulombs(self) -> float:
        return self.get_value(ElectricChargeUnit.COULOMB)

    @property
    def in_ampere_hours(self) -> float:
        return self.get_value(ElectricChargeUnit.AMPERE_HOUR)

    def current_over(self, time: Time) -> Current:
        """Return the steady current that moves this charge within ``time``.

        Raises:
            DivisionByZeroError: If ``time`` is zero.
        """
        if time.value == 0:
            raise DivisionByZeroError("Time cannot be zero when calculating current from charge.")
        return Current(self.in_coulombs / time.in_seconds, CurrentUnit.AMPERE)

    def time_for(self, current: Current) -> Time:
        """Return how long ``current`` takes to move this charge.

        Raises:
            DivisionByZeroError: If ``current`` is zero.
        """
        if current.value == 0:
            raise DivisionByZeroError("Current cannot be zero when calculating time from charge.")
        return Time(self.in_coulombs / current.in_amperes, TimeUnit.SECOND)
