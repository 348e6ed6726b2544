"""Base unit system foundation for type-safe physical quantities.

This module provides the Unit enumeration base that every unit family in
quantify derives from. A unit family is one closed ``Enum`` per physical
dimension (LengthUnit, MassUnit, ...). Members of the same family can be
converted into one another, while asking for a conversion between two
families is rejected at runtime.

The family system works on two levels:

- Unit: the abstract root. Provides the family check, the display symbol
  contract and the factory call ``LengthUnit.METER(100)``.
- LinearUnit: families whose members differ only by a multiplicative
  factor. Each member declares its factor to the family's base unit; the
  direct factor between every ordered pair of members is precomputed into
  a NumPy matrix the first time the family is used, so a conversion is
  always a single multiplication rather than a trip through the base unit.

Affine families (absolute temperature) derive from Unit directly and refuse
``factor_to``.

Classes:
    Unit: Abstract base class for all unit enumerations.
    LinearUnit: Base class for purely multiplicative unit families.

Example:
    >>> class LengthUnit(LinearUnit):
    ...     METER = (1.0, "m")
    ...     KILOMETER = (1000.0, "km")
    >>> LengthUnit.KILOMETER.factor_to(LengthUnit.METER)
    1000.0
    >>> LengthUnit.METER.factor_to(LengthUnit.KILOMETER)
    0.001
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import cache
from typing import TYPE_CHECKING, ClassVar

import numpy as np
import pandas as pd

from quantify.config import FACTOR_DTYPE, Number

if TYPE_CHECKING:
    from .unit_quantity import Quantity

logger = logging.getLogger(__name__)


class Unit(Enum):
    """Base class for all unit enumerations.

    Concrete families are Enum subclasses with members. Each member exposes
    a ``symbol`` for display and a ``factor_to`` conversion contract.
    Calling a member with a number builds the quantity type registered for
    the family, which is how the numeric factory sugar works::

        LengthUnit.METER(100)  # Length(100.0, LengthUnit.METER)

    Attributes:
        symbol (str): Unit symbol for display purposes.
    """

    symbol: str
    _quantity_type: ClassVar[type[Quantity]]

    def factor_to(self, target: Unit) -> float:
        """Return the multiplier converting a value from this unit to ``target``.

        Args:
            target: Unit of the same family to convert into.

        Returns:
            float: Factor such that ``value_in_target = value * factor``.
        """
        raise NotImplementedError

    def _check_same_root(self, target: Unit) -> None:
        """Check that ``target`` belongs to the same unit family.

        Args:
            target: The other unit to check compatibility with.

        Raises:
            TypeError: If the units belong to different physical dimensions.
        """
        if type(target) is not type(self):
            msg = (
                f"Cannot convert between {type(self).__name__}.{self.name} "
                f"and {type(target).__name__}: different dimensions"
            )
            raise TypeError(msg)

    @classmethod
    def quantity_type(cls) -> type[Quantity]:
        """Return the Quantity subclass registered for this unit family.

        Raises:
            TypeError: If no quantity class declares this family as its UNIT.
        """
        quantity_type = cls.__dict__.get("_quantity_type")
        if quantity_type is None:
            raise TypeError(f"No quantity type is registered for {cls.__name__}")
        return quantity_type

    def __call__(self, value: Number) -> Quantity:
        """Create a quantity of this unit's family holding ``value``.

        Args:
            value: Numeric magnitude expressed in this unit.

        Returns:
            Quantity: New quantity tagged with this unit.
        """
        return type(self).quantity_type()(value, self)

    def __str__(self) -> str:
        return self.symbol


class LinearUnit(Unit):
    """Base class for unit families related by pure multiplicative factors.

    Members are declared as ``NAME = (factor_to_base, symbol)`` where the
    base unit of the family has factor ``1.0``.

    Attributes:
        to_base (float): Factor converting this unit into the family base unit.
        symbol (str): Unit symbol for display purposes.
    """

    to_base: float

    def __init__(self, to_base: float, symbol: str):
        self.to_base = float(to_base)
        self.symbol = symbol

    def factor_to(self, target: LinearUnit) -> float:
        """Return the precomputed direct factor from this unit to ``target``.

        Args:
            target: Unit of the same family to convert into.

        Returns:
            float: Factor such that ``value_in_target = value * factor``.

        Raises:
            TypeError: If ``target`` belongs to another family.
        """
        self._check_same_root(target)
        ordinals, matrix = _factor_table(type(self))
        return float(matrix[ordinals[self], ordinals[target]])

    @classmethod
    def factor_table(cls) -> pd.DataFrame:
        """Return the family's factor matrix as a labelled DataFrame.

        Rows are source units and columns are target units, both labelled by
        member name, so ``table.loc["KILOMETER", "METER"] == 1000.0``.

        Returns:
            pandas.DataFrame: Copy of the precomputed conversion factors.
        """
        _, matrix = _factor_table(cls)
        names = [member.name for member in cls]
        return pd.DataFrame(matrix.copy(), index=names, columns=names)


@cache
def _factor_table(unit_type: type[LinearUnit]) -> tuple[dict[LinearUnit, int], np.ndarray]:
    """Build the ordinal index and direct factor matrix for a unit family.

    ``matrix[i, j] = to_base[i] / to_base[j]``, so the diagonal is exactly 1
    and every conversion needs one multiplication. The matrix is frozen and
    cached per family.
    """
    members = list(unit_type)
    ordinals = {member: index for index, member in enumerate(members)}
    to_base = np.array([member.to_base for member in members], dtype=FACTOR_DTYPE)
    matrix = to_base[:, np.newaxis] / to_base[np.newaxis, :]
    matrix.setflags(write=False)
    logger.debug(
        "Built %dx%d factor table for %s", len(members), len(members), unit_type.__name__
    )
    return ordinals, matrix
