"""Speed and acceleration unit definitions.

Speed is derived from length and time (``Speed = Length / Time``) and
acceleration from speed and time (``Acceleration = Speed / Time``). Both
families are declared relative to their SI units, m/s and m/s².

Classes:
    SpeedUnit: Enumeration of supported speed units.
    Speed: Quantity of speed.
    AccelerationUnit: Enumeration of supported acceleration units.
    Acceleration: Quantity of acceleration.

Example:
    >>> cruise = Speed.from_length_and_time(LengthUnit.KILOMETER(90), TimeUnit.HOUR(1))
    >>> cruise.in_meters_per_second
    25.0
    >>> Acceleration.from_speed_and_time(cruise, TimeUnit.SECOND(10)).in_meters_per_second_squared
    2.5
"""

from __future__ import annotations

from quantify.exceptions import DivisionByZeroError

from .unit_base import LinearUnit
from .unit_length import METERS_PER_FOOT, METERS_PER_MILE, METERS_PER_NAUTICAL_MILE, Length, LengthUnit
from .unit_quantity import LinearQuantity
from .unit_time import SECONDS_PER_HOUR, Time, TimeUnit

STANDARD_GRAVITY = 9.80665  # m/s², exact by definition


class SpeedUnit(LinearUnit):
    """Units of speed, relative to meters per second."""

    METER_PER_SECOND = (1.0, "m/s")
    KILOMETER_PER_HOUR = (1000.0 / SECONDS_PER_HOUR, "km/h")
    MILE_PER_HOUR = (METERS_PER_MILE / SECONDS_PER_HOUR, "mph")
    KNOT = (METERS_PER_NAUTICAL_MILE / SECONDS_PER_HOUR, "kn")
    FOOT_PER_SECOND = (METERS_PER_FOOT, "ft/s")


class Speed(LinearQuantity[SpeedUnit]):
    """Quantity of speed."""

    UNIT = SpeedUnit

    @classmethod
    def from_length_and_time(cls, length: Length, time: Time) -> Speed:
        """Create a speed from a distance covered in a duration.

        Args:
            length: Distance travelled.
            time: Duration of travel.

        Returns:
            Speed: Speed in meters per second.

        Raises:
            DivisionByZeroError: If ``time`` is zero.
        """
        if time.value == 0:
            raise DivisionByZeroError("Time cannot be zero when calculating speed.")
        return cls(length.in_meters / time.in_seconds, SpeedUnit.METER_PER_SECOND)

    @property
    def in_meters_per_second(self) -> float:
        return self.get_value(SpeedUnit.METER_PER_SECOND)

    @property
    def in_kilometers_per_hour(self) -> float:
        return self.get_value(SpeedUnit.KILOMETER_PER_HOUR)

    @property
    def in_miles_per_hour(self) -> float:
        return self.get_value(SpeedUnit.MILE_PER_HOUR)

    @property
    def in_knots(self) -> float:
        return self.get_value(SpeedUnit.KNOT)

    def distance_over(self, time: Time) -> Length:
        """Return the distance covered at this speed during ``time``."""
        return Length(self.in_meters_per_second * time.in_seconds, LengthUnit.METER)

    def time_to_cover(self, length: Length) -> Time:
        """Return how long covering ``length`` takes at this speed.

        Raises:
            DivisionByZeroError: If this speed is zero.
        """
        if self.value == 0:
            raise DivisionByZeroError("Speed cannot be zero when calculating travel time.")
        return Time(length.in_meters / self.in_meters_per_second, TimeUnit.SECOND)


class AccelerationUnit(LinearUnit):
    """Units of acceleration, relative to meters per second squared."""

    METER_PER_SECOND_SQUARED = (1.0, "m/s²")
    STANDARD_GRAVITY = (STANDARD_GRAVITY, "g")
    KILOMETER_PER_HOUR_PER_SECOND = (1000.0 / SECONDS_PER_HOUR, "km/h/s")
    MILE_PER_HOUR_PER_SECOND = (METERS_PER_MILE / SECONDS_PER_HOUR, "mph/s")
    KNOT_PER_SECOND = (METERS_PER_NAUTICAL_MILE / SECONDS_PER_HOUR, "kn/s")
    FOOT_PER_SECOND_SQUARED = (METERS_PER_FOOT, "ft/s²")
    CENTIMETER_PER_SECOND_SQUARED = (0.01, "Gal")


class Acceleration(LinearQuantity[AccelerationUnit]):
    """Quantity of acceleration."""

    UNIT = AccelerationUnit

    @classmethod
    def from_speed_and_time(cls, speed: Speed, time: Time) -> Acceleration:
        """Create the constant acceleration reaching ``speed`` within ``time``.

        Args:
            speed: Change in speed.
            time: Duration of the change.

        Returns:
            Acceleration: Acceleration in meters per second squared.

        Raises:
            DivisionByZeroError: If ``time`` is zero.
        """
        if time.value == 0:
            raise DivisionByZeroError("Time cannot be zero when calculating acceleration.")
        return cls(
            speed.in_meters_per_second / time.in_seconds,
            AccelerationUnit.METER_PER_SECOND_SQUARED,
        )

    @property
    def in_meters_per_second_squared(self) -> float:
        return self.get_value(AccelerationUnit.METER_PER_SECOND_SQUARED)

    @property
    def in_standard_gravity(self) -> float:
        return self.get_value(AccelerationUnit.STANDARD_GRAVITY)

    def speed_gained_over(self, time: Time) -> Speed:
        """Return the change in speed after accelerating for ``time``."""
        return Speed(self.in_meters_per_second_squared * time.in_seconds, SpeedUnit.METER_PER_SECOND)

    def time_to_reach(self, speed: Speed) -> Time:
        """Return how long this acceleration takes to gain ``speed``.

        Raises:
            DivisionByZeroError: If this acceleration is zero.
        """
        if self.value == 0:
            raise DivisionByZeroError("Acceleration cannot be zero when calculating time.")
        return Time(speed.in_meters_per_second / self.in_meters_per_second_squared, TimeUnit.SECOND)
