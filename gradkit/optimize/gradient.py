"""Full-batch gradient descent, plain and with momentum."""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np

from .convergence import run_until_converged
from .core import FitResult, GDConfig, MomentumConfig, coerce_config
from .utils import check_dataset


def batch_gradient_descent(X: Any, y: Any, config: GDConfig | Mapping[str, Any]) -> FitResult:
    """Fit ``theta`` with ``theta <- theta - lr * grad`` on the whole dataset.

    Stops early once two consecutive costs differ by less than
    ``config.tolerance``; ``iterations_performed`` is then the index of the
    stopping iteration plus one.

    Example:
        >>> res = batch_gradient_descent(
        ...     [[1, 1], [1, 2], [1, 3]], [3, 5, 7],
        ...     GDConfig(learning_rate=0.1, iterations=5000, tolerance=1e-12),
        ... )
        >>> [round(float(t), 3) for t in res.theta]
        [1.0, 2.0]
    """
    X, y = check_dataset(X, y)
    config = coerce_config(config, GDConfig)
    lr = config.learning_rate

    def step(theta: np.ndarray, grad: np.ndarray) -> np.ndarray:
        return theta - lr * grad

    return run_until_converged(
        X, y, step, config.iterations, config.tolerance, label="batch_gradient_descent"
    )


gradient_descent = batch_gradient_descent


def momentum_gradient_descent(
    X: Any, y: Any, config: MomentumConfig | Mapping[str, Any]
) -> FitResult:
    """Batch gradient descent with a velocity term.

    ``v <- momentum * v + grad`` then ``theta <- theta - lr * v``. With
    ``momentum=0`` the trajectory is identical to
    :func:`batch_gradient_descent`.
    """
    X, y = check_dataset(X, y)
    config = coerce_config(config, MomentumConfig)
    lr = config.learning_rate
    beta = config.momentum
    velocity = np.zeros(X.shape[1])

    def step(theta: np.ndarray, grad: np.ndarray) -> np.ndarray:
        nonlocal velocity
        velocity = beta * velocity + grad
        return theta - lr * velocity

    return run_until_converged(
        X, y, step, config.iterations, config.tolerance, label="momentum_gradient_descent"
    )


__all__ = ["batch_gradient_descent", "gradient_descent", "momentum_gradient_descent"]
