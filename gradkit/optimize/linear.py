"""Linear model primitives: predictions, MSE cost and its gradient.

The cost is ``J(theta) = 1/(2m) * ||X theta - y||^2`` and its gradient is
``1/m * X^T (X theta - y)``. Public functions validate their inputs; the
underscored variants assume validated ``float64`` arrays and are what the
solver loops call.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .utils import Array, as_design_matrix, check_dataset, check_theta


def _predict(X: Array, theta: Array) -> Array:
    return X @ theta


def _cost(X: Array, y: Array, theta: Array) -> float:
    residual = _predict(X, theta) - y
    return float(residual @ residual) / (2.0 * y.shape[0])


def _gradient(X: Array, y: Array, theta: Array) -> Array:
    residual = _predict(X, theta) - y
    return (X.T @ residual) / y.shape[0]


def predict(X: Any, theta: Any) -> Array:
    """Return one prediction per row of ``X``: ``X @ theta``."""
    X = as_design_matrix(X)
    return _predict(X, check_theta(theta, X.shape[1]))


def compute_cost(X: Any, y: Any, theta: Any) -> float:
    """Mean-squared-error cost ``1/(2m) * sum((X theta - y)^2)``.

    Non-negative for finite inputs, and zero exactly when every prediction
    matches its target.
    """
    X, y = check_dataset(X, y)
    return _cost(X, y, check_theta(theta, X.shape[1]))


def compute_gradient(X: Any, y: Any, theta: Any) -> Array:
    """Analytic gradient of :func:`compute_cost` with respect to ``theta``."""
    X, y = check_dataset(X, y)
    return _gradient(X, y, check_theta(theta, X.shape[1]))


def add_bias(X: Any) -> Array:
    """Prepend a constant-1 column so ``theta[0]`` acts as the intercept.

    An empty matrix is passed through unchanged.
    """
    if len(X) == 0:
        return np.asarray(X, dtype=float).copy()
    X = as_design_matrix(X)
    return np.column_stack((np.ones(X.shape[0]), X))


__all__ = ["add_bias", "compute_cost", "compute_gradient", "predict"]
