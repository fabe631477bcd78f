"""Adaptive step-size solvers: Adam and RMSProp.

Both keep per-coordinate statistics of the gradient and scale each step by
the inverse root of the squared-gradient estimate, so coordinates with large
gradients take proportionally smaller steps.
"""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np

from .convergence import run_until_converged
from .core import AdamConfig, FitResult, RMSPropConfig, coerce_config
from .utils import check_dataset


def adam(X: Any, y: Any, config: AdamConfig | Mapping[str, Any]) -> FitResult:
    """Adaptive Moment Estimation.

    For ``t = 1 .. iterations``::

        m <- beta1 * m + (1 - beta1) * g
        v <- beta2 * v + (1 - beta2) * g**2
        m_hat = m / (1 - beta1**t)
        v_hat = v / (1 - beta2**t)
        theta <- theta - lr * m_hat / (sqrt(v_hat) + epsilon)

    Adam has no tolerance and always spends its full budget, so
    ``iterations_performed == iterations`` and ``converged`` is False.
    """
    X, y = check_dataset(X, y)
    config = coerce_config(config, AdamConfig)
    lr = config.learning_rate
    beta1, beta2, eps = config.beta1, config.beta2, config.epsilon
    m = np.zeros(X.shape[1])
    v = np.zeros(X.shape[1])
    t = 0

    def step(theta: np.ndarray, grad: np.ndarray) -> np.ndarray:
        nonlocal m, v, t
        t += 1
        m = beta1 * m + (1.0 - beta1) * grad
        v = beta2 * v + (1.0 - beta2) * grad**2
        m_hat = m / (1.0 - beta1**t)
        v_hat = v / (1.0 - beta2**t)
        return theta - lr * m_hat / (np.sqrt(v_hat) + eps)

    return run_until_converged(X, y, step, config.iterations, None, label="adam")


def rmsprop(X: Any, y: Any, config: RMSPropConfig | Mapping[str, Any]) -> FitResult:
    """Root Mean Square Propagation.

    ``s <- beta * s + (1 - beta) * g**2`` then
    ``theta <- theta - lr * g / (sqrt(s) + epsilon)``, stopping early on the
    same cost-delta rule as :func:`~gradkit.optimize.gradient.batch_gradient_descent`.
    """
    X, y = check_dataset(X, y)
    config = coerce_config(config, RMSPropConfig)
    lr = config.learning_rate
    beta, eps = config.beta, config.epsilon
    s = np.zeros(X.shape[1])

    def step(theta: np.ndarray, grad: np.ndarray) -> np.ndarray:
        nonlocal s
        s = beta * s + (1.0 - beta) * grad**2
        return theta - lr * grad / (np.sqrt(s) + eps)

    return run_until_converged(
        X, y, step, config.iterations, config.tolerance, label="rmsprop"
    )


__all__ = ["adam", "rmsprop"]
