"""Pytest configuration and fixtures for boundary vector tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def three_point_vector():
    """n = 3 with X values [1, 2, 3] and Y values [4, 5, 6]."""
    from immersed import BoundaryVector, X, Y

    f = BoundaryVector(3)
    for i, (fx, fy) in enumerate([(1.0, 4.0), (2.0, 5.0), (3.0, 6.0)]):
        f[X, i] = fx
        f[Y, i] = fy
    return f


@pytest.fixture
def random_vectors():
    """Three random vectors on the same 7-point boundary."""
    from immersed import BoundaryVector

    rng = np.random.default_rng(1234)
    return tuple(BoundaryVector.from_buffer(7, rng.standard_normal(14)) for _ in range(3))
