"""Angular velocity and frequency unit definitions.

Angular velocity is an angle swept per unit time; frequency counts events
per unit time. The two overlap for rotation, where one revolution per
second is one hertz. Frequency keeps rotational units of its own (rpm,
rad/s, °/s) so that a rotational frequency can be handed to an
AngularVelocity without losing its unit.

Classes:
    AngularVelocityUnit: Enumeration of supported angular velocity units.
    AngularVelocity: Quantity of angular velocity.
    FrequencyUnit: Enumeration of supported frequency units.
    Frequency: Quantity of frequency.

Example:
    >>> motor = AngularVelocityUnit.REVOLUTION_PER_MINUTE(3000)
    >>> motor.as_frequency().in_hertz  # about 50
    >>> FrequencyUnit.BEAT_PER_MINUTE(72).as_angular_velocity()
    Traceback (most recent call last):
        ...
    quantify.exceptions.UnsupportedOperationError: ...
"""

from __future__ import annotations

from math import pi

from quantify.exceptions import DivisionByZeroError, UnsupportedOperationError

from .unit_angle import RADIANS_PER_DEGREE, RADIANS_PER_REVOLUTION, Angle, AngleUnit
from .unit_base import LinearUnit
from .unit_quantity import LinearQuantity
from .unit_time import SECONDS_PER_MINUTE, Time, TimeUnit


class AngularVelocityUnit(LinearUnit):
    """Units of angular velocity, relative to radians per second."""

    RADIAN_PER_SECOND = (1.0, "rad/s")
    DEGREE_PER_SECOND = (RADIANS_PER_DEGREE, "°/s")
    REVOLUTION_PER_MINUTE = (RADIANS_PER_REVOLUTION / SECONDS_PER_MINUTE, "rpm")
    REVOLUTION_PER_SECOND = (RADIANS_PER_REVOLUTION, "rps")


class FrequencyUnit(LinearUnit):
    """Units of frequency, relative to the hertz."""

    HERTZ = (1.0, "Hz")
    TERAHERTZ = (1e12, "THz")
    GIGAHERTZ = (1e9, "GHz")
    MEGAHERTZ = (1e6, "MHz")
    KILOHERTZ = (1e3, "kHz")
    REVOLUTION_PER_MINUTE = (1.0 / SECONDS_PER_MINUTE, "rpm")
    BEAT_PER_MINUTE = (1.0 / SECONDS_PER_MINUTE, "bpm")
    RADIAN_PER_SECOND = (1.0 / (2 * pi), "rad/s")
    DEGREE_PER_SECOND = (1.0 / 360.0, "°/s")


_FREQUENCY_TO_ANGULAR_VELOCITY = {
    FrequencyUnit.RADIAN_PER_SECOND: AngularVelocityUnit.RADIAN_PER_SECOND,
    FrequencyUnit.DEGREE_PER_SECOND: AngularVelocityUnit.DEGREE_PER_SECOND,
    FrequencyUnit.REVOLUTION_PER_MINUTE: AngularVelocityUnit.REVOLUTION_PER_MINUTE,
    FrequencyUnit.HERTZ: AngularVelocityUnit.REVOLUTION_PER_SECOND,
}
_ANGULAR_VELOCITY_TO_FREQUENCY = {av: f for f, av in _FREQUENCY_TO_ANGULAR_VELOCITY.items()}


class AngularVelocity(LinearQuantity[AngularVelocityUnit]):
    """Quantity of angular velocity."""

    UNIT = AngularVelocityUnit

    @classmethod
    def from_angle_and_time(cls, angle: Angle, time: Time) -> AngularVelocity:
        """Create the steady angular velocity sweeping ``angle`` in ``time``.

        Args:
            angle: Angle swept.
            time: Duration of the sweep.

        Returns:
            AngularVelocity: Angular velocity in radians per second.

        Raises:
            DivisionByZeroError: If ``time`` is zero.
        """
        if time.value == 0:
            raise DivisionByZeroError("Time cannot be zero when calculating angular velocity.")
        return cls(angle.in_radians / time.in_seconds, AngularVelocityUnit.RADIAN_PER_SECOND)

    @property
    def in_radians_per_second(self) -> float:
        return self.get_value(AngularVelocityUnit.RADIAN_PER_SECOND)

    @property
    def in_degrees_per_second(self) -> float:
        return self.get_value(AngularVelocityUnit.DEGREE_PER_SECOND)

    @property
    def in_rpm(self) -> float:
        return self.get_value(AngularVelocityUnit.REVOLUTION_PER_MINUTE)

    def total_angle_over(self, time: Time) -> Angle:
        """Return the angle swept at this angular velocity during ``time``."""
        return Angle(self.in_radians_per_second * time.in_seconds, AngleUnit.RADIAN)

    def time_to_sweep(self, angle: Angle) -> Time:
        """Return how long sweeping ``angle`` takes at this angular velocity.

        Raises:
            DivisionByZeroError: If this angular velocity is zero.
        """
        if self.value == 0:
            raise DivisionByZeroError("Angular velocity cannot be zero when calculating time.")
        return Time(angle.in_radians / self.in_radians_per_second, TimeUnit.SECOND)

    def as_frequency(self) -> Frequency:
        """Return the same rotation rate as a Frequency in the matching unit.

        Every angular velocity unit has a frequency counterpart, with
        revolutions per second becoming hertz.
        """
        return Frequency(self.value, _ANGULAR_VELOCITY_TO_FREQUENCY[self.unit])


class Frequency(LinearQuantity[FrequencyUnit]):
    """Quantity of frequency."""

    UNIT = FrequencyUnit

    @classmethod
    def from_period(cls, period: Time) -> Frequency:
        """Create the frequency of an event repeating every ``period``.

        Raises:
            DivisionByZeroError: If ``period`` is zero.
        """
        if period.value == 0:
            raise DivisionByZeroError("Period cannot be zero when calculating frequency.")
        return cls(1.0 / period.in_seconds, FrequencyUnit.HERTZ)

    @classmethod
    def from_angular_velocity(cls, angular_velocity: AngularVelocity) -> Frequency:
        """Create the frequency matching a rotation rate, unit for unit."""
        return angular_velocity.as_frequency()

    @property
    def in_hertz(self) -> float:
        return self.get_value(FrequencyUnit.HERTZ)

    @property
    def in_kilohertz(self) -> float:
        return self.get_value(FrequencyUnit.KILOHERTZ)

    @property
    def in_megahertz(self) -> float:
        return self.get_value(FrequencyUnit.MEGAHERTZ)

    @property
    def in_rpm(self) -> float:
        return self.get_value(FrequencyUnit.REVOLUTION_PER_MINUTE)

    @property
    def period(self) -> Time:
        """Duration of one cycle.

        Raises:
            DivisionByZeroError: If this frequency is zero.
        """
        if self.value == 0:
            raise DivisionByZeroError("Cannot calculate the period of a zero frequency.")
        return Time(1.0 / self.in_hertz, TimeUnit.SECOND)

    def as_angular_velocity(self) -> AngularVelocity:
        """Return this frequency as an AngularVelocity in the matching unit.

        Only rotational units convert: rad/s, °/s, rpm, and Hz read as
        revolutions per second.

        Raises:
            UnsupportedOperationError: If the unit has no rotational meaning.
        """
        target = _FREQUENCY_TO_ANGULAR_VELOCITY.get(self.unit)
        if target is None:
            msg = (
                f'Cannot convert a Frequency in "{self.unit.symbol}" to an AngularVelocity; '
                "only rad/s, °/s, rpm and Hz (as rps) are rotational"
            )
            raise UnsupportedOperationError(msg)
        return AngularVelocity(self.value, target)
