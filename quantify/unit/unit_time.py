"""Time unit definitions.

This module provides time units from picoseconds to Julian years. All units
are declared relative to the second, the SI base unit for time. Months and
years use the Julian year (365.25 days), as astronomy does.

Classes:
    TimeUnit: Enumeration of supported time units.
    Time: Quantity of time (a duration).

Example:
    >>> duration = TimeUnit.HOUR(2.5)
    >>> print(duration)  # "2.5 h"
    >>> duration.in_seconds
    9000.0
"""

from __future__ import annotations

from .unit_base import LinearUnit
from .unit_quantity import LinearQuantity

SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
SECONDS_PER_WEEK = 604800.0
SECONDS_PER_YEAR = 31557600.0  # Julian year
SECONDS_PER_MONTH = SECONDS_PER_YEAR / 12.0


class TimeUnit(LinearUnit):
    """Units of time, relative to the second."""

    SECOND = (1.0, "s")
    MILLISECOND = (1e-3, "ms")
    MICROSECOND = (1e-6, "μs")
    NANOSECOND = (1e-9, "ns")
    PICOSECOND = (1e-12, "ps")
    MINUTE = (SECONDS_PER_MINUTE, "min")
    HOUR = (SECONDS_PER_HOUR, "h")
    DAY = (SECONDS_PER_DAY, "d")
    WEEK = (SECONDS_PER_WEEK, "wk")
    MONTH = (SECONDS_PER_MONTH, "mo")
    YEAR = (SECONDS_PER_YEAR, "yr")


class Time(LinearQuantity[TimeUnit]):
    """Quantity of time."""

    UNIT = TimeUnit

    @property
    def in_seconds(self) -> float:
        return self.get_value(TimeUnit.SECOND)

    @property
    def in_milliseconds(self) -> float:
        return self.get_value(TimeUnit.MILLISECOND)

    @property
    def in_minutes(self) -> float:
        return self.get_value(TimeUnit.MINUTE)

    @property
    def in_hours(self) -> float:
        return self.get_value(TimeUnit.HOUR)

    @property
    def in_days(self) -> float:
        return self.get_value(TimeUnit.DAY)
