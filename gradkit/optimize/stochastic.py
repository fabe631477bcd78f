"""Sampling solvers: single-sample SGD and mini-batch gradient descent.

Both shuffle the row order once per pass through the data. The shuffle comes
from ``permute`` when given, otherwise from :func:`~gradkit.optimize.utils.shuffle`
driven by ``rng``, so a seeded generator makes a run reproducible.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Iterator, Mapping, Optional

import numpy as np

from .convergence import Permutation, run_passes
from .core import FitResult, MiniBatchConfig, SGDConfig, coerce_config
from .linear import _gradient
from .utils import Array, SeedLike, check_dataset, rng_default, shuffle


def _resolve_permutation(rng: SeedLike, permute: Optional[Permutation]) -> Permutation:
    if permute is not None:
        return permute
    return partial(shuffle, rng=rng_default(rng))


def _chunks(order: Array, size: int) -> Iterator[Array]:
    for start in range(0, order.shape[0], size):
        yield order[start : start + size]


def _descend(lr: float):
    def update(theta: Array, X_batch: Array, y_batch: Array) -> Array:
        return theta - lr * _gradient(X_batch, y_batch, theta)

    return update


def stochastic_gradient_descent(
    X: Any,
    y: Any,
    config: SGDConfig | Mapping[str, Any],
    rng: SeedLike = None,
    permute: Optional[Permutation] = None,
) -> FitResult:
    """Update ``theta`` after every single sample, one epoch at a time.

    Within an epoch each row ``x`` with target ``t`` applies
    ``theta <- theta - lr * (x . theta - t) * x``. The full-data cost is
    recorded after the epoch and compared with the previous epoch's cost.

    Args:
        X: Design matrix of shape ``(m, n)``.
        y: Targets of shape ``(m,)``.
        config: :class:`SGDConfig` or an equivalent mapping.
        rng: Generator or seed for the per-epoch shuffle.
        permute: Replaces the shuffle entirely; receives ``np.arange(m)`` and
            must return a permutation of it.

    Returns:
        FitResult whose ``iterations_performed`` counts epochs and whose
        ``n_updates`` counts single-sample updates.
    """
    X, y = check_dataset(X, y)
    config = coerce_config(config, SGDConfig)
    return run_passes(
        X,
        y,
        _descend(config.learning_rate),
        config.epochs,
        config.tolerance,
        _resolve_permutation(rng, permute),
        partial(_chunks, size=1),
        label="stochastic_gradient_descent",
    )


def minibatch_gradient_descent(
    X: Any,
    y: Any,
    config: MiniBatchConfig | Mapping[str, Any],
    rng: SeedLike = None,
    permute: Optional[Permutation] = None,
) -> FitResult:
    """Update ``theta`` once per contiguous batch of the shuffled rows.

    A pass splits the permuted indices into ``ceil(m / batch_size)`` chunks
    (the last one may be short) and applies the averaged chunk gradient for
    each. With ``batch_size >= m`` and an identity ``permute`` the trajectory
    matches :func:`~gradkit.optimize.gradient.batch_gradient_descent`, except
    that the cost is recorded after each pass instead of before each update.
    """
    X, y = check_dataset(X, y)
    config = coerce_config(config, MiniBatchConfig)
    batch_size = min(int(config.batch_size), X.shape[0])
    return run_passes(
        X,
        y,
        _descend(config.learning_rate),
        config.iterations,
        config.tolerance,
        _resolve_permutation(rng, permute),
        partial(_chunks, size=batch_size),
        label="minibatch_gradient_descent",
    )


__all__ = ["minibatch_gradient_descent", "stochastic_gradient_descent"]
