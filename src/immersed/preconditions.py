"""Checked preconditions for boundary vector operations.

Violations are programmer errors. Every check is an ``assert``, so a failed
check raises ``AssertionError`` and all checks are compiled out when Python
runs with ``-O``. Nothing here clamps or wraps an index.
"""

import numbers

from .direction import X, Y, XY


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_direction(direction) -> None:
    """Direction must be X or Y."""
    assert _is_integer(direction) and X <= direction <= Y, (
        f"direction {direction!r} is not X or Y"
    )


def check_point(i, num_points: int) -> None:
    """Point index must lie in [0, num_points)."""
    assert _is_integer(i) and 0 <= i < num_points, (
        f"point index {i!r} out of range [0, {num_points})"
    )


def check_key_arity(key) -> None:
    """A tuple key must be a (direction, point) pair."""
    assert len(key) == 2, f"expected (direction, point), got {key!r}"


def check_flat_index(ind, num_points: int) -> None:
    """Flat index must lie in [0, XY * num_points)."""
    assert _is_integer(ind) and 0 <= ind < XY * num_points, (
        f"flat index {ind!r} out of range [0, {XY * num_points})"
    )


def check_same_size(f, g) -> None:
    """Both operands must have the same number of boundary points."""
    assert f.num_points == g.num_points, (
        f"size mismatch: {f.num_points} points vs {g.num_points} points"
    )


def check_buffer_size(data, num_points: int) -> None:
    """A raw buffer must hold exactly XY * num_points values."""
    assert len(data) == XY * num_points, (
        f"buffer holds {len(data)} values, expected {XY * num_points}"
    )


def check_not_borrowed(f) -> None:
    """The container must not be mutated while a borrowed view is live."""
    assert f._borrows == 0, "cannot modify a BoundaryVector while it is borrowed"


def check_matching_components(x, y) -> None:
    """Per-axis sequences must describe the same number of points."""
    assert len(x) == len(y), (
        f"component length mismatch: {len(x)} X values vs {len(y)} Y values"
    )
