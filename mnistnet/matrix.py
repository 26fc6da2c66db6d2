"""Matrix helpers: random initialisation, row broadcasting and products."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


def _generator(rng: np.random.Generator | None) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def rand_float(low: float, high: float, rng: np.random.Generator | None = None) -> float:
    """A uniform random number in ``[low, high)``."""
    return low + float(_generator(rng).random()) * (high - low)


def random_dense(
    rows: int,
    cols: int,
    low: float,
    high: float,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """A ``rows`` x ``cols`` matrix of uniform values in ``[low, high)``."""
    return low + _generator(rng).random((rows, cols)) * (high - low)


def add_vector_to_matrix(m: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Add the single-row matrix ``b`` to every row of ``m``."""
    matrix = np.asarray(m, dtype=np.float64)
    vector = np.asarray(b, dtype=np.float64)
    if matrix.ndim != 2 or vector.ndim != 2:
        raise ValueError("both arguments must be matrices")
    if vector.shape[0] != 1 or vector.shape[1] != matrix.shape[1]:
        raise ValueError("b.rows must = 1 and b.columns = m.columns")
    return matrix + vector


def multiply_matrix(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Matrix product of ``a`` and ``b``."""
    left = np.asarray(a, dtype=np.float64)
    right = np.asarray(b, dtype=np.float64)
    if left.ndim != 2 or right.ndim != 2 or left.shape[1] != right.shape[0]:
        raise ValueError("wrong matrix sizes")
    return left @ right