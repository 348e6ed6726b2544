"""Type-safe physical quantities and unit conversion for Python.

quantify models a measured value as an immutable ``(value, unit)`` pair whose
unit belongs to one closed family per physical dimension. Conversions use a
precomputed direct factor between any two units of a family, arithmetic is
left-biased, and dimensional analysis is available through named
constructors (``Speed.from_length_and_time``, ``Force.from_mass_and_acceleration``
and friends).

Package Components:
    quantify.unit:
        • Unit and quantity types for every supported dimension
        • Affine Temperature kept apart from linear TemperatureDelta
    quantify.constants:
        • Physical, astronomical and engineering constants as quantities
        • Convenience formulas built on them
    quantify.exceptions:
        • QuantityError hierarchy raised by the library
    quantify.config:
        • Numeric type aliases and formatting defaults

Example:
    >>> from quantify import MassUnit, TemperatureUnit
    >>> MassUnit.KILOGRAM(1).is_equivalent_to(MassUnit.GRAM(1000))
    True
    >>> TemperatureUnit.CELSIUS(100).convert_to(TemperatureUnit.FAHRENHEIT).value
    212.0
"""

import logging

from .exceptions import DivisionByZeroError, QuantityError, UnsupportedOperationError
from .unit import *  # noqa: F403
from .unit import __all__ as _unit_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "QuantityError",
    "DivisionByZeroError",
    "UnsupportedOperationError",
    *_unit_all,
]
