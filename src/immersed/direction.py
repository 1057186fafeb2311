"""Component directions for two-dimensional boundary quantities."""

from enum import IntEnum


class Direction(IntEnum):
    """Axis of a vector component at a boundary point."""

    X = 0
    Y = 1


X = Direction.X
Y = Direction.Y

# Number of components per boundary point (stride between axis blocks)
XY = len(Direction)
