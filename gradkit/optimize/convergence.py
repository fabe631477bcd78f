"""Loop skeletons shared by the solvers.

Two shapes of loop cover every variant:

* :func:`run_until_converged` evaluates the full-data cost, checks the
  tolerance, then applies one full-batch update. Batch, momentum, RMSProp and
  Adam only differ in the ``step`` closure they hand in.
* :func:`run_passes` shuffles the rows, applies one update per batch of the
  shuffled order, and checks the full-data cost once per pass. Stochastic and
  mini-batch descent only differ in how a pass is partitioned.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable, Optional

import numpy as np

from ..logging import get_logger
from .core import MSG_CONVERGED, MSG_MAXITER, FitResult
from .linear import _cost, _gradient
from .utils import Array

logger = get_logger(__name__)

Step = Callable[[Array, Array], Array]
BatchUpdate = Callable[[Array, Array, Array], Array]
Permutation = Callable[[Array], Array]
Partition = Callable[[Array], Iterable[Array]]


def has_converged(costs: list[float], tolerance: Optional[float]) -> bool:
    """True when the last two costs differ by less than ``tolerance``."""
    if tolerance is None or len(costs) < 2:
        return False
    return abs(costs[-1] - costs[-2]) < tolerance


class _DivergenceWatch:
    """Warn once per solver call when the cost stops being finite."""

    def __init__(self, label: str) -> None:
        self.label = label
        self.warned = False

    def __call__(self, cost: float, step: int) -> None:
        if not self.warned and not math.isfinite(cost):
            logger.warning(
                "%s: cost became non-finite at step %d; learning rate is likely too large.",
                self.label,
                step,
            )
            self.warned = True


def _finish(
    label: str,
    theta: Array,
    costs: list[float],
    converged: bool,
    n_updates: int,
) -> FitResult:
    if converged:
        logger.info("%s: converged after %d steps (cost=%.6g).", label, len(costs), costs[-1])
    else:
        logger.info("%s: budget of %d steps exhausted (cost=%.6g).", label, len(costs), costs[-1])
    return FitResult(
        theta=theta,
        costs=costs,
        iterations_performed=len(costs),
        converged=converged,
        n_updates=n_updates,
        message=MSG_CONVERGED if converged else MSG_MAXITER,
    )


def run_until_converged(
    X: Array,
    y: Array,
    step: Step,
    iterations: int,
    tolerance: Optional[float],
    label: str = "solver",
) -> FitResult:
    """Drive a full-batch solver from ``theta = 0``.

    Each iteration records the cost at the current theta, stops if the cost
    moved by less than ``tolerance`` since the previous iteration, and
    otherwise replaces theta with ``step(theta, gradient)``. ``tolerance=None``
    runs the whole budget.
    """
    theta = np.zeros(X.shape[1])
    costs: list[float] = []
    watch = _DivergenceWatch(label)
    converged = False
    n_updates = 0
    logger.debug("%s: starting, m=%d n=%d budget=%d", label, X.shape[0], X.shape[1], iterations)

    with np.errstate(over="ignore", invalid="ignore"):
        for t in range(iterations):
            costs.append(_cost(X, y, theta))
            watch(costs[-1], t)
            if has_converged(costs, tolerance):
                converged = True
                break
            theta = step(theta, _gradient(X, y, theta))
            n_updates += 1

    return _finish(label, theta, costs, converged, n_updates)


def run_passes(
    X: Array,
    y: Array,
    update: BatchUpdate,
    n_passes: int,
    tolerance: Optional[float],
    permute: Permutation,
    partition: Partition,
    label: str = "solver",
) -> FitResult:
    """Drive a sampling solver from ``theta = 0``.

    Every pass draws a fresh permutation of the row indices, splits it with
    ``partition`` and applies ``update(theta, X_batch, y_batch)`` per batch.
    The full-data cost is recorded and checked against ``tolerance`` once the
    pass is complete.
    """
    theta = np.zeros(X.shape[1])
    indices = np.arange(X.shape[0])
    costs: list[float] = []
    watch = _DivergenceWatch(label)
    converged = False
    n_updates = 0
    logger.debug("%s: starting, m=%d n=%d passes=%d", label, X.shape[0], X.shape[1], n_passes)

    with np.errstate(over="ignore", invalid="ignore"):
        for p in range(n_passes):
            order = np.asarray(permute(indices))
            for batch in partition(order):
                theta = update(theta, X[batch], y[batch])
                n_updates += 1
            costs.append(_cost(X, y, theta))
            watch(costs[-1], p)
            if has_converged(costs, tolerance):
                converged = True
                break

    return _finish(label, theta, costs, converged, n_updates)


__all__ = ["has_converged", "run_passes", "run_until_converged"]
