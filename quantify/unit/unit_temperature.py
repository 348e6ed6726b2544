"""Absolute temperature and temperature difference definitions.

Absolute temperature scales differ by an offset as well as a factor, so a
single multiplier cannot convert between them. They are therefore modelled
by two separate families:

- TemperatureUnit / Temperature: a point on an absolute scale. Conversions
  go through an explicit pairwise formula table and the type offers no
  scaling or addition of two temperatures.
- TemperatureDeltaUnit / TemperatureDelta: a difference between two
  temperatures. Differences are purely multiplicative (1 °C step == 1 K
  step, 1 °F step == 5/9 K step) and get the full linear arithmetic.

The two meet through subtraction and addition::

    Temperature - Temperature       -> TemperatureDelta
    Temperature +/- TemperatureDelta -> Temperature

Classes:
    TemperatureUnit: Enumeration of absolute temperature scales.
    Temperature: Quantity of absolute temperature.
    TemperatureDeltaUnit: Enumeration of temperature difference units.
    TemperatureDelta: Quantity of temperature difference.

Example:
    >>> boiling = TemperatureUnit.CELSIUS(100)
    >>> boiling.in_fahrenheit
    212.0
    >>> warming = TemperatureUnit.CELSIUS(30) - TemperatureUnit.CELSIUS(10)
    >>> print(warming)  # "20.0 °C"
"""

from __future__ import annotations

from collections.abc import Callable

from quantify.exceptions import DivisionByZeroError, UnsupportedOperationError

from .unit_base import LinearUnit, Unit
from .unit_quantity import LinearQuantity, Quantity

CELSIUS_KELVIN_OFFSET = 273.15
FAHRENHEIT_RANKINE_OFFSET = 459.67
FAHRENHEIT_PER_CELSIUS = 1.8
FAHRENHEIT_FREEZING_POINT = 32.0


class TemperatureUnit(Unit):
    """Absolute temperature scales.

    Members carry only their display symbol. ``factor_to`` is refused because
    the scales are affine; convert through Temperature instead.
    """

    CELSIUS = "°C"
    KELVIN = "K"
    FAHRENHEIT = "°F"
    RANKINE = "°R"

    def __init__(self, symbol: str):
        self.symbol = symbol

    def factor_to(self, target: Unit) -> float:
        """Refuse a multiplicative factor between affine scales.

        Raises:
            UnsupportedOperationError: Always.
        """
        msg = (
            f"{type(self).__name__}.{self.name} has no conversion factor; "
            "use Temperature.get_value or Temperature.convert_to"
        )
        raise UnsupportedOperationError(msg)

    @property
    def delta_unit(self) -> TemperatureDeltaUnit:
        """The difference unit whose step matches one degree of this scale."""
        return _DELTA_UNITS[self]


class TemperatureDeltaUnit(LinearUnit):
    """Units of temperature difference, relative to the kelvin step."""

    KELVIN_DELTA = (1.0, "K")
    CELSIUS_DELTA = (1.0, "°C")
    FAHRENHEIT_DELTA = (5.0 / 9.0, "°F")
    RANKINE_DELTA = (5.0 / 9.0, "°R")


_DELTA_UNITS = {
    TemperatureUnit.CELSIUS: TemperatureDeltaUnit.CELSIUS_DELTA,
    TemperatureUnit.KELVIN: TemperatureDeltaUnit.KELVIN_DELTA,
    TemperatureUnit.FAHRENHEIT: TemperatureDeltaUnit.FAHRENHEIT_DELTA,
    TemperatureUnit.RANKINE: TemperatureDeltaUnit.RANKINE_DELTA,
}


def _celsius_to_kelvin(c: float) -> float:
    return c + CELSIUS_KELVIN_OFFSET


def _kelvin_to_celsius(k: float) -> float:
    return k - CELSIUS_KELVIN_OFFSET


def _celsius_to_fahrenheit(c: float) -> float:
    return c * FAHRENHEIT_PER_CELSIUS + FAHRENHEIT_FREEZING_POINT


def _fahrenheit_to_celsius(f: float) -> float:
    return (f - FAHRENHEIT_FREEZING_POINT) / FAHRENHEIT_PER_CELSIUS


def _fahrenheit_to_rankine(f: float) -> float:
    return f + FAHRENHEIT_RANKINE_OFFSET


def _rankine_to_fahrenheit(r: float) -> float:
    return r - FAHRENHEIT_RANKINE_OFFSET


_C, _K, _F, _R = (
    TemperatureUnit.CELSIUS,
    TemperatureUnit.KELVIN,
    TemperatureUnit.FAHRENHEIT,
    TemperatureUnit.RANKINE,
)

# (source, target) -> formula; pairs without a direct formula go through C or F.
_FORMULAS: dict[tuple[TemperatureUnit, TemperatureUnit], Callable[[float], float]] = {
    (_C, _K): _celsius_to_kelvin,
    (_C, _F): _celsius_to_fahrenheit,
    (_C, _R): lambda c: _fahrenheit_to_rankine(_celsius_to_fahrenheit(c)),
    (_K, _C): _kelvin_to_celsius,
    (_K, _F): lambda k: _celsius_to_fahrenheit(_kelvin_to_celsius(k)),
    (_K, _R): lambda k: _fahrenheit_to_rankine(_celsius_to_fahrenheit(_kelvin_to_celsius(k))),
    (_F, _C): _fahrenheit_to_celsius,
    (_F, _K): lambda f: _celsius_to_kelvin(_fahrenheit_to_celsius(f)),
    (_F, _R): _fahrenheit_to_rankine,
    (_R, _C): lambda r: _fahrenheit_to_celsius(_rankine_to_fahrenheit(r)),
    (_R, _K): lambda r: _celsius_to_kelvin(_fahrenheit_to_celsius(_rankine_to_fahrenheit(r))),
    (_R, _F): _rankine_to_fahrenheit,
}


class Temperature(Quantity[TemperatureUnit]):
    """Quantity of absolute temperature.

    Temperature offers conversion, comparison and formatting like every
    quantity, but no ``*``, ``/`` or addition of two temperatures: those
    operations have no meaning on an affine scale and Python reports them
    with its usual ``TypeError``.
    """

    UNIT = TemperatureUnit

    def get_value(self, target: TemperatureUnit) -> float:
        """Return the temperature on the ``target`` scale.

        Args:
            target: Temperature scale to read the value on.

        Returns:
            float: Temperature on the target scale; the stored value itself
            when ``target`` is this temperature's own scale.

        Raises:
            TypeError: If ``target`` is not a TemperatureUnit.
        """
        if target is self.unit:
            return self.value
        self.unit._check_same_root(target)
        return _FORMULAS[(self.unit, target)](self.value)

    @property
    def in_kelvin(self) -> float:
        return self.get_value(TemperatureUnit.KELVIN)

    @property
    def in_celsius(self) -> float:
        return self.get_value(TemperatureUnit.CELSIUS)

    @property
    def in_fahrenheit(self) -> float:
        return self.get_value(TemperatureUnit.FAHRENHEIT)

    @property
    def in_rankine(self) -> float:
        return self.get_value(TemperatureUnit.RANKINE)

    def __sub__(self, other):
        """Subtract a temperature or a temperature difference.

        ``Temperature - Temperature`` converts the right operand to this scale
        and returns the difference in this scale's delta unit.
        ``Temperature - TemperatureDelta`` shifts this temperature down and
        keeps its scale.
        """
        if isinstance(other, Temperature):
            return TemperatureDelta(self.value - other.get_value(self.unit), self.unit.delta_unit)
        if isinstance(other, TemperatureDelta):
            return Temperature(self.value - other.get_value(self.unit.delta_unit), self.unit)
        return NotImplemented

    def __add__(self, other):
        """Shift this temperature up by a TemperatureDelta, keeping its scale."""
        if isinstance(other, TemperatureDelta):
            return Temperature(self.value + other.get_value(self.unit.delta_unit), self.unit)
        return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def ratio_to(self, other: Temperature) -> float:
        """Return the ratio of two absolute temperatures on the Kelvin scale.

        Args:
            other: Divisor temperature.

        Returns:
            float: ``self.in_kelvin / other.in_kelvin``.

        Raises:
            TypeError: If ``other`` is not a Temperature.
            DivisionByZeroError: If ``other`` is exactly absolute zero.
        """
        self._check_same_root(other)
        divisor = other.in_kelvin
        if divisor == 0:
            raise DivisionByZeroError("Cannot divide by a temperature of absolute zero.")
        return self.in_kelvin / divisor


class TemperatureDelta(LinearQuantity[TemperatureDeltaUnit]):
    """Quantity of temperature difference."""

    UNIT = TemperatureDeltaUnit

    @property
    def in_kelvin(self) -> float:
        return self.get_value(TemperatureDeltaUnit.KELVIN_DELTA)

    @property
    def in_celsius(self) -> float:
        return self.get_value(TemperatureDeltaUnit.CELSIUS_DELTA)

    @property
    def in_fahrenheit(self) -> float:
        return self.get_value(TemperatureDeltaUnit.FAHRENHEIT_DELTA)

    def add_to(self, temperature: Temperature) -> Temperature:
        """Return ``temperature`` shifted by this difference, on its own scale."""
        return temperature + self
