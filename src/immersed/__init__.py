"""Immersed boundary data types.

Containers for quantities attached to the points of an immersed boundary
(forces, velocities, coordinates), grouped with the direction labels they
are indexed by.
"""

from .boundary_vector import BoundaryVector, inner_product
from .config import PrintOptions, load_print_options
from .direction import XY, X, Y, Direction

__all__ = [
    # Containers
    "BoundaryVector",
    "inner_product",
    # Directions
    "Direction",
    "X",
    "Y",
    "XY",
    # Configuration
    "PrintOptions",
    "load_print_options",
]
