"""BoundaryVector: two-component quantities on immersed boundary points.

Examples are forces, velocities, and coordinates of points on a body.

Storage Layout:
- One contiguous float64 array of length 2n for a body with n points.
- Component-major: indices [0, n) hold the X values of every point,
  indices [n, 2n) hold the Y values.
- v[dir, i] addresses the value in direction dir at point i, v[ind] addresses
  storage directly by flat index ind = dir * n + i.

Index and size violations are checked preconditions (see ``preconditions``).
"""

import logging
import numbers
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

import numpy as np
import pandas as pd

from .config import PrintOptions
from .direction import XY, Direction
from .preconditions import (
    check_buffer_size,
    check_direction,
    check_flat_index,
    check_key_arity,
    check_matching_components,
    check_not_borrowed,
    check_point,
    check_same_size,
)

log = logging.getLogger(__name__)


def _read_only(data: np.ndarray) -> np.ndarray:
    """View of ``data`` backed by a read-only buffer.

    The writeable flag of the result cannot be switched back on.
    """
    return np.asarray(memoryview(data).toreadonly())


class BoundaryVector:
    """Vector-valued quantity stored at each of ``n`` boundary points.

    Parameters
    ----------
    n : int
        Number of boundary points. Storage for ``2 * n`` values is allocated
        and zero-filled.
    """

    # Make numpy scalars defer to our reflected operators (np.float64(2) * v)
    __array_ufunc__ = None

    def __init__(self, n: int):
        self._num_points = n
        self._data = np.zeros(XY * n)
        self._borrows = 0

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def _wrap(cls, data: np.ndarray, n: int) -> "BoundaryVector":
        """Take ownership of an already-allocated array of length 2n."""
        f = cls.__new__(cls)
        f._num_points = n
        f._data = data
        f._borrows = 0
        return f

    @classmethod
    def from_buffer(cls, n: int, data: Sequence[float]) -> "BoundaryVector":
        """Construct from pre-existing data, given as a flat array of size 2n.

        The values are copied: the new vector never aliases ``data``, and
        later changes to either one are not seen by the other.

        Parameters
        ----------
        n : int
            Number of boundary points
        data : array_like
            2n values in component-major order (all X values, then all Y values)
        """
        flat = np.array(data, dtype=np.float64).reshape(-1)
        check_buffer_size(flat, n)
        log.debug("BoundaryVector: copied %d values from buffer", flat.size)
        return cls._wrap(flat, n)

    @classmethod
    def from_components(
        cls, x: Sequence[float], y: Sequence[float]
    ) -> "BoundaryVector":
        """Construct from separate X and Y values of equal length."""
        check_matching_components(x, y)
        return cls._wrap(np.concatenate([np.asarray(x, dtype=np.float64),
                                         np.asarray(y, dtype=np.float64)]),
                         len(x))

    def copy(self) -> "BoundaryVector":
        """Allocate a new BoundaryVector and copy the data."""
        return self._wrap(self._data.copy(), self._num_points)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def num_points(self) -> int:
        """Number of boundary points."""
        return self._num_points

    @property
    def size(self) -> int:
        """Number of elements in the array (twice the number of points)."""
        return XY * self._num_points

    def get_num_points(self) -> int:
        """Return the number of boundary points."""
        return self.num_points

    def get_size(self) -> int:
        """Return the number of elements in the array."""
        return self.size

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"BoundaryVector(num_points={self._num_points})"

    # =========================================================================
    # Indexed access
    # =========================================================================

    def get_index(self, direction: int, i: int) -> int:
        """Return the flat index for the value in ``direction`` at point ``i``."""
        check_direction(direction)
        check_point(i, self._num_points)
        return int(direction) * self._num_points + int(i)

    def _flat(self, key) -> int:
        if isinstance(key, tuple):
            check_key_arity(key)
            direction, i = key
            return self.get_index(direction, i)
        check_flat_index(key, self._num_points)
        return int(key)

    def __getitem__(self, key) -> float:
        """``v[dir, i]`` or ``v[ind]``."""
        return self._data[self._flat(key)]

    def __setitem__(self, key, value: float) -> None:
        check_not_borrowed(self)
        self._data[self._flat(key)] = value

    def __iter__(self) -> Iterator[float]:
        """Iterate over all values in flat-index order."""
        return iter(self._data.tolist())

    # =========================================================================
    # Index ranges
    # =========================================================================

    def begin(self, direction: Optional[int] = None) -> int:
        """First flat index, overall or for one direction."""
        if direction is None:
            return 0
        check_direction(direction)
        return int(direction) * self._num_points

    def end(self, direction: Optional[int] = None) -> int:
        """One past the last flat index, overall or for one direction."""
        if direction is None:
            return XY * self._num_points
        check_direction(direction)
        return (int(direction) + 1) * self._num_points

    def indices(self, direction: Optional[int] = None) -> range:
        """Half-open flat index range [begin(direction), end(direction))."""
        return range(self.begin(direction), self.end(direction))

    def component(self, direction: int) -> np.ndarray:
        """Read-only view of the values in one direction, ordered by point."""
        return _read_only(self._data[self.begin(direction):self.end(direction)])

    # =========================================================================
    # Assignment and arithmetic
    # =========================================================================

    def assign(self, other: "BoundaryVector") -> "BoundaryVector":
        """Copy the values of ``other`` (same number of points) into this vector."""
        check_same_size(self, other)
        check_not_borrowed(self)
        self._data[:] = other._data
        return self

    def fill(self, a: float) -> "BoundaryVector":
        """Set every element to ``a``."""
        check_not_borrowed(self)
        self._data[:] = a
        return self

    def __iadd__(self, other):
        if not isinstance(other, BoundaryVector):
            return NotImplemented
        check_same_size(self, other)
        check_not_borrowed(self)
        self._data += other._data
        return self

    def __isub__(self, other):
        if not isinstance(other, BoundaryVector):
            return NotImplemented
        check_same_size(self, other)
        check_not_borrowed(self)
        self._data -= other._data
        return self

    def __imul__(self, a):
        if not isinstance(a, numbers.Real):
            return NotImplemented
        check_not_borrowed(self)
        self._data *= a
        return self

    def __itruediv__(self, a):
        if not isinstance(a, numbers.Real):
            return NotImplemented
        check_not_borrowed(self)
        # Division by zero gives inf/nan, as for any float
        with np.errstate(divide="ignore", invalid="ignore"):
            self._data /= a
        return self

    def __add__(self, other):
        if not isinstance(other, BoundaryVector):
            return NotImplemented
        h = self.copy()
        h += other
        return h

    def __sub__(self, other):
        if not isinstance(other, BoundaryVector):
            return NotImplemented
        h = self.copy()
        h -= other
        return h

    def __mul__(self, a):
        if not isinstance(a, numbers.Real):
            return NotImplemented
        g = self.copy()
        g *= a
        return g

    def __truediv__(self, a):
        if not isinstance(a, numbers.Real):
            return NotImplemented
        g = self.copy()
        g /= a
        return g

    def __rmul__(self, a):
        """a * f"""
        return self.__mul__(a)

    def __neg__(self) -> "BoundaryVector":
        g = self.copy()
        g *= -1
        return g

    def __eq__(self, other):
        if not isinstance(other, BoundaryVector):
            return NotImplemented
        return (self._num_points == other._num_points
                and np.array_equal(self._data, other._data))

    __hash__ = None

    # =========================================================================
    # Reductions
    # =========================================================================

    def dot(self, other: "BoundaryVector") -> float:
        """Return the dot product of this vector and ``other``."""
        return inner_product(self, other)

    def norm(self) -> float:
        """Euclidean norm over all 2n values."""
        return float(np.sqrt(inner_product(self, self)))

    # =========================================================================
    # Export
    # =========================================================================

    def flatten(self) -> np.ndarray:
        """Return the data as a flat, read-only array.

        The array is a view of this vector's storage (component-major), not
        a copy: it reflects later changes to the vector and cannot be written
        through.
        """
        return _read_only(self._data)

    @contextmanager
    def borrow(self) -> Iterator[np.ndarray]:
        """Scoped read-only view of the storage.

        While the ``with`` block is active the vector cannot be modified;
        any attempt fails its precondition check.

        Examples
        --------
        >>> with f.borrow() as data:
        ...     total = data.sum()
        """
        self._borrows += 1
        log.debug("BoundaryVector: borrow opened (%d live)", self._borrows)
        try:
            yield self.flatten()
        finally:
            self._borrows -= 1
            log.debug("BoundaryVector: borrow closed (%d live)", self._borrows)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to DataFrame with one row per boundary point."""
        return pd.DataFrame({
            "x": self._data[self.begin(Direction.X):self.end(Direction.X)].copy(),
            "y": self._data[self.begin(Direction.Y):self.end(Direction.Y)].copy(),
        })

    def print(self, file=None, options: Optional[PrintOptions] = None) -> None:
        """Print the contents for debugging (default: standard output)."""
        if options is None:
            options = PrintOptions()
        text = np.array2string(
            self._data,
            precision=options.precision,
            threshold=options.threshold,
            max_line_width=options.linewidth,
            separator=options.separator,
        )
        print(text, file=sys.stdout if file is None else file)


def inner_product(x: BoundaryVector, y: BoundaryVector) -> float:
    """Return the inner product of BoundaryVectors x and y.

    Sum over all 2n stored values of x[ind] * y[ind], treating both
    directions as one combined vector.
    """
    check_same_size(x, y)
    return float(np.dot(x._data, y._data))
