"""Reference constants expressed as typed quantities.

Modules:
    physical: CODATA fundamental constants and quantum/relativity helpers.
    astronomical: Solar-system and cosmological values, orbital mechanics.
    engineering: Reference conditions, material properties, textbook formulas.

Example:
    >>> from quantify.constants import astronomical
    >>> astronomical.escape_velocity(astronomical.EARTH_MASS, astronomical.EARTH_RADIUS)
"""

from . import astronomical, engineering, physical

__all__ = ["physical", "astronomical", "engineering"]
