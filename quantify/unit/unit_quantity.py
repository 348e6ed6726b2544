"""Quantity value types pairing a magnitude with a unit of its family.

This module provides the Quantity class, the immutable ``(value, unit)``
pair every dimension in quantify is built on, and LinearQuantity, which adds
the arithmetic that only makes sense for purely multiplicative families.

Key Features:
- Values are kept in the unit they were created with; nothing is silently
  normalized to SI
- Strict structural equality (``1 kg != 1000 g``) kept apart from magnitude
  equivalence (``compare_to``/``is_equivalent_to``)
- Left-biased arithmetic: the right operand is converted into the left
  operand's unit and the result keeps the left unit
- Formatting with an optional target unit, fraction digits or format spec

Classes:
    Quantity: Base class for all quantities, with conversion and comparison.
    LinearQuantity: Quantity with addition, subtraction and scalar scaling.

Example:
    >>> from quantify.unit import MassUnit
    >>> total = MassUnit.GRAM(500) + MassUnit.KILOGRAM(1)
    >>> print(total)  # "1500.0 g"
    >>> MassUnit.KILOGRAM(1) == MassUnit.GRAM(1000)
    False
    >>> MassUnit.KILOGRAM(1).is_equivalent_to(MassUnit.GRAM(1000))
    True
"""

from __future__ import annotations

import math
from collections.abc import Callable
from numbers import Real
from typing import Any, ClassVar, Generic, TypeVar

from quantify.config import (
    DEFAULT_ABSOLUTE_TOLERANCE,
    DEFAULT_RELATIVE_TOLERANCE,
    UNIT_SYMBOL_SEPARATOR,
    Number,
)
from quantify.exceptions import DivisionByZeroError

from .unit_base import Unit

U = TypeVar("U", bound=Unit)
Q = TypeVar("Q", bound="Quantity")


class Quantity(Generic[U]):
    """Base class for type-safe quantities of one physical dimension.

    A quantity holds a float magnitude together with the unit it is
    expressed in. Instances are immutable; every conversion or operation
    returns a new instance. Subclasses bind themselves to a unit family by
    setting the ``UNIT`` class attribute, which also registers the subclass
    as the factory target of that family's members.

    Attributes:
        UNIT (ClassVar[type[Unit]]): Unit family accepted by this quantity.
    """

    __slots__ = ("_value", "_unit")

    UNIT: ClassVar[type[Unit]]

    def __init_subclass__(cls, **kwargs):
        """Register the subclass as the quantity type of its unit family.

        Only classes that declare ``UNIT`` themselves are registered, so a
        further subclass of a concrete quantity does not hijack the family.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        unit_type = cls.__dict__.get("UNIT")
        if unit_type is not None:
            unit_type._quantity_type = cls

    def __init__(self, value: Number, unit: U):
        """Create a new quantity.

        Args:
            value: Numeric magnitude expressed in ``unit``.
            unit: Member of this quantity's unit family.

        Raises:
            TypeError: If ``value`` is not a real number or ``unit`` belongs
                to another family.
        """
        if not isinstance(value, Real):
            msg = f"{type(self).__name__} requires a real number, got {type(value).__name__}"
            raise TypeError(msg)
        if not isinstance(unit, self.UNIT):
            msg = f"{type(self).__name__} requires a {self.UNIT.__name__}, got {unit!r}"
            raise TypeError(msg)
        object.__setattr__(self, "_value", float(value))
        object.__setattr__(self, "_unit", unit)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return type(self), (self._value, self._unit)

    @property
    def value(self) -> float:
        """Numeric magnitude in this quantity's own unit."""
        return self._value

    @property
    def unit(self) -> U:
        """Unit the magnitude is expressed in."""
        return self._unit

    # -------------------------------- Conversion --------------------------------
    def get_value(self, target: U) -> float:
        """Return the magnitude expressed in ``target``.

        The identity case returns the stored value untouched, so no rounding
        happens at all when no conversion is needed.

        Args:
            target: Unit of the same family.

        Returns:
            float: Magnitude in the target unit.

        Raises:
            TypeError: If ``target`` belongs to another family.
        """
        if target is self._unit:
            return self._value
        return self._value * self._unit.factor_to(target)

    def convert_to(self: Q, target: U) -> Q:
        """Return this quantity expressed in ``target``.

        Args:
            target: Unit of the same family.

        Returns:
            Quantity: ``self`` when already in ``target``, otherwise a new
            instance of the same type.
        """
        if target is self._unit:
            return self
        return type(self)(self.get_value(target), target)

    # -------------------------------- Comparison --------------------------------
    def _check_same_root(self, other: Quantity) -> None:
        """Check that ``other`` measures the same physical dimension.

        Args:
            other: Quantity to check compatibility with.

        Raises:
            TypeError: If the quantities belong to different unit families.
        """
        if not isinstance(other, Quantity) or other.UNIT is not self.UNIT:
            msg = f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            raise TypeError(msg)

    def compare_to(self, other: Quantity[U]) -> int:
        """Compare magnitudes after converting this quantity into ``other``'s unit.

        Args:
            other: Quantity of the same dimension.

        Returns:
            int: -1, 0 or 1 as this quantity is smaller, equal or larger.

        Raises:
            TypeError: If ``other`` has another dimension.
        """
        self._check_same_root(other)
        mine = self.get_value(other._unit)
        return (mine > other._value) - (mine < other._value)

    def is_equivalent_to(self, other: Quantity[U]) -> bool:
        """Return True when both quantities have exactly the same magnitude."""
        return self.compare_to(other) == 0

    def is_close_to(
        self,
        other: Quantity[U],
        rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
        abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
    ) -> bool:
        """Return True when the magnitudes agree within the given tolerances.

        The comparison happens in ``other``'s unit, so ``abs_tol`` is read in
        that unit too.
        """
        self._check_same_root(other)
        return math.isclose(
            self.get_value(other._unit), other._value, rel_tol=rel_tol, abs_tol=abs_tol
        )

    def __lt__(self, other: Quantity[U]) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Quantity[U]) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Quantity[U]) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Quantity[U]) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __eq__(self, other: object) -> bool:
        """Strict structural equality: same type, same value and same unit."""
        if self is other:
            return True
        if not isinstance(other, Quantity):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._value == other._value
            and self._unit is other._unit
        )

    def __hash__(self) -> int:
        return hash((type(self), self._value, self._unit))

    # -------------------------------- Formatting --------------------------------
    def format(
        self,
        target_unit: U | None = None,
        fraction_digits: int | None = None,
        show_unit_symbol: bool = True,
        unit_symbol_separator: str = UNIT_SYMBOL_SEPARATOR,
        number_format: str | Callable[[float], str] | None = None,
    ) -> str:
        """Render the quantity as text.

        Args:
            target_unit: Convert to this unit before rendering.
            fraction_digits: Fixed number of decimals. Ignored when
                ``number_format`` is given.
            show_unit_symbol: Append the unit symbol. Defaults to True.
            unit_symbol_separator: Text between magnitude and symbol. Defaults
                to a non-breaking space.
            number_format: A format spec such as ``",.2f"`` or a callable
                taking the float and returning its text.

        Returns:
            str: Formatted magnitude, optionally followed by the symbol.
        """
        value, unit = self._value, self._unit
        if target_unit is not None and target_unit is not unit:
            value, unit = self.get_value(target_unit), target_unit

        if number_format is not None:
            text = number_format(value) if callable(number_format) else format(value, number_format)
        elif fraction_digits is not None:
            text = f"{value:.{fraction_digits}f}"
        else:
            text = str(value)

        if not show_unit_symbol:
            return text
        return f"{text}{unit_symbol_separator}{unit.symbol}"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.format()
        return self.format(number_format=format_spec)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r}, {type(self._unit).__name__}.{self._unit.name})"


class LinearQuantity(Quantity[U]):
    """Quantity of a purely multiplicative family, with full arithmetic.

    Addition and subtraction take another quantity of the same dimension;
    the right operand is converted into the left operand's unit and the
    result keeps the left unit. Multiplication and division take a plain
    number and keep the unit.
    """

    __slots__ = ()

    def _same_family(self, other: Any) -> bool:
        return isinstance(other, Quantity) and other.UNIT is self.UNIT

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self: Q, other: Q) -> Q:
        """Add a quantity of the same dimension, keeping this unit.

        Args:
            other: Quantity to add; converted into this quantity's unit.

        Returns:
            LinearQuantity: Sum expressed in this quantity's unit.
        """
        if not self._same_family(other):
            return NotImplemented
        return type(self)(self._value + other.get_value(self._unit), self._unit)

    def __sub__(self: Q, other: Q) -> Q:
        """Subtract a quantity of the same dimension, keeping this unit.

        Args:
            other: Quantity to subtract; converted into this quantity's unit.

        Returns:
            LinearQuantity: Difference expressed in this quantity's unit.
        """
        if not self._same_family(other):
            return NotImplemented
        return type(self)(self._value - other.get_value(self._unit), self._unit)

    def __mul__(self: Q, k: Number) -> Q:
        """Multiply by a dimensionless scalar.

        Args:
            k: Numeric scalar to multiply by.

        Returns:
            LinearQuantity: Scaled quantity in the same unit.
        """
        if isinstance(k, Real):
            return type(self)(self._value * float(k), self._unit)
        return NotImplemented

    def __rmul__(self: Q, k: Number) -> Q:
        return self.__mul__(k)

    def __truediv__(self: Q, k: Number) -> Q:
        """Divide by a dimensionless scalar.

        Args:
            k: Numeric scalar to divide by.

        Returns:
            LinearQuantity: Scaled quantity in the same unit.

        Raises:
            DivisionByZeroError: If ``k`` is exactly zero.
        """
        if not isinstance(k, Real):
            return NotImplemented
        if k == 0:
            raise DivisionByZeroError("Cannot divide by zero.")
        return type(self)(self._value / float(k), self._unit)
