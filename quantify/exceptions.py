"""Exception types raised by the quantity library.

Every failure raised on purpose by quantify derives from QuantityError, so
callers can catch the whole family at once. The concrete classes also derive
from the closest builtin exception, which keeps ``except ZeroDivisionError``
and ``except NotImplementedError`` working for code that does not know about
this package.

Classes:
    QuantityError: Base class for all library errors.
    DivisionByZeroError: A division whose divisor is exactly zero.
    UnsupportedOperationError: An operation that a unit cannot perform.
"""

from __future__ import annotations


class QuantityError(Exception):
    """Base class for errors raised by quantify."""


class DivisionByZeroError(QuantityError, ZeroDivisionError):
    """Raised when a quantity is divided by an exact zero.

    Covers scalar division (``mass / 0``), dimensional-analysis constructors
    whose denominator operand is zero, and temperature ratios against
    absolute zero.
    """


class UnsupportedOperationError(QuantityError, NotImplementedError):
    """Raised when a unit cannot take part in the requested operation.

    The message always names the offending unit, e.g. asking an affine
    temperature unit for a multiplicative factor, or viewing a
    non-rotational frequency as an angular velocity.
    """
