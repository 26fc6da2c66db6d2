"""Conversion of raw dataset bytes into network inputs and targets."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np


def bytes_to_floats(data: bytes | bytearray | Iterable[int]) -> np.ndarray:
    """Turn a byte sequence into a flat float64 array of the same values."""
    raw = data if isinstance(data, (bytes, bytearray)) else bytes(data)
    return np.frombuffer(raw, dtype=np.uint8).astype(np.float64)


def labels_to_outputs(labels: bytes | bytearray | Iterable[int], size: int) -> np.ndarray:
    """One-hot encode labels into a ``len(labels)`` x ``size`` matrix.

    A label outside ``range(size)`` gives a row of zeros.
    """
    raw = labels if isinstance(labels, (bytes, bytearray)) else bytes(labels)
    codes = np.frombuffer(raw, dtype=np.uint8).astype(np.intp)
    outputs = np.zeros((len(codes), size), dtype=np.float64)
    valid = codes < size
    outputs[np.flatnonzero(valid), codes[valid]] = 1.0
    return outputs