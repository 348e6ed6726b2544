"""Global configuration and type definitions for the quantity library.

This module centralizes the numeric type aliases and default settings shared
by every unit family. Values here are plain module-level constants: they are
read when a quantity is formatted or when a factor table is built, and are
never mutated at runtime.

Type Definitions:
    Number: Scalar types accepted as quantity magnitudes and scale factors.

Settings:
    FACTOR_DTYPE: NumPy dtype of the precomputed unit factor matrices.
    UNIT_SYMBOL_SEPARATOR: Default text between a magnitude and its symbol.
                           A non-breaking space, so "100 km" never wraps.
    DEFAULT_RELATIVE_TOLERANCE: Relative tolerance used by
                                Quantity.is_close_to when none is given.
    DEFAULT_ABSOLUTE_TOLERANCE: Absolute tolerance used by
                                Quantity.is_close_to when none is given.

Example:
    >>> from quantify.config import FACTOR_DTYPE
    >>> import numpy as np
    >>> np.array([1.0, 1000.0], dtype=FACTOR_DTYPE).dtype
    dtype('float64')
"""

from numpy import float64

Number = int | float

FACTOR_DTYPE = float64

UNIT_SYMBOL_SEPARATOR = "\u00a0"

DEFAULT_RELATIVE_TOLERANCE = 1e-9
DEFAULT_ABSOLUTE_TOLERANCE = 0.0
