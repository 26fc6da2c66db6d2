"""Activation functions, their derivatives and the cross-entropy loss."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


def softmax(m: ArrayLike) -> np.ndarray:
    """Row-wise softmax, shifted by each row's maximum for stability."""
    values = np.asarray(m, dtype=np.float64)
    shifted = np.exp(values - values.max(axis=-1, keepdims=True))
    return shifted / shifted.sum(axis=-1, keepdims=True)


def cross_entropy(t: ArrayLike, p: ArrayLike) -> float:
    """Cross-entropy of predictions ``p`` against targets ``t``."""
    target = np.asarray(t, dtype=np.float64)
    predicted = np.asarray(p, dtype=np.float64)
    return float(-np.sum(target * np.log(predicted)))


def sigmoid(m: ArrayLike) -> np.ndarray:
    """Numerically stable logistic function, applied element-wise."""
    values = np.asarray(m, dtype=np.float64)
    e = np.exp(-np.abs(values))
    return np.where(values > 0, 1.0 / (1.0 + e), e / (1.0 + e))


def sigmoid_derivative(m: ArrayLike) -> np.ndarray:
    """Derivative of the logistic function evaluated at each element."""
    values = np.asarray(m, dtype=np.float64)
    with np.errstate(over="ignore"):
        s = 1.0 / (1.0 + np.exp(-values))
    return s * (1.0 - s)


def relu(m: ArrayLike) -> np.ndarray:
    """Rectified linear unit: negative elements become zero."""
    values = np.asarray(m, dtype=np.float64)
    return np.where(values < 0, 0.0, values)


def relu_derivative(m: ArrayLike) -> np.ndarray:
    """1 where the element is positive, 0 elsewhere."""
    values = np.asarray(m, dtype=np.float64)
    return (values > 0).astype(np.float64)