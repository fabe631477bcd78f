"""Autograd replay of the full-batch solvers.

:func:`torch_fit` differentiates the same MSE cost with ``torch.autograd``
and steps it with the optimizer from :func:`create_optimizer`, keeping the
cost bookkeeping of the NumPy solvers. It exists to cross-check them.
"""

from __future__ import annotations

from typing import Any

import torch

from ..logging import get_logger
from ..optimize.convergence import has_converged
from ..optimize.core import (
    MSG_CONVERGED,
    MSG_MAXITER,
    AdamConfig,
    Config,
    FitResult,
    GDConfig,
    MomentumConfig,
    RMSPropConfig,
)
from ..optimize.errors import InvalidParameter
from ..optimize.utils import check_dataset
from .factory import create_optimizer

logger = get_logger(__name__)


def torch_fit(X: Any, y: Any, config: Config) -> FitResult:
    """Fit ``theta`` from zero with a ``torch.optim`` optimizer in float64.

    Only the full-batch configs are accepted. Adam runs its full budget, the
    others stop on the cost-delta tolerance exactly like their NumPy
    counterparts.
    """
    if not isinstance(config, (GDConfig, MomentumConfig, AdamConfig, RMSPropConfig)):
        raise InvalidParameter(
            f"torch_fit supports full-batch configs only, got {type(config).__name__}."
        )
    X, y = check_dataset(X, y)
    X_t = torch.as_tensor(X, dtype=torch.float64)
    y_t = torch.as_tensor(y, dtype=torch.float64)
    m = X_t.shape[0]

    theta = torch.zeros(X_t.shape[1], dtype=torch.float64, requires_grad=True)
    optimizer = create_optimizer(config, [theta])
    tolerance = None if isinstance(config, AdamConfig) else config.tolerance

    costs: list[float] = []
    converged = False
    n_updates = 0
    for _ in range(config.iterations):
        optimizer.zero_grad()
        residual = X_t @ theta - y_t
        loss = residual.dot(residual) / (2 * m)
        costs.append(float(loss.detach()))
        if has_converged(costs, tolerance):
            converged = True
            break
        loss.backward()
        optimizer.step()
        n_updates += 1

    logger.debug(
        "torch_fit(%s): %d steps, final cost %.6g", type(config).__name__, len(costs), costs[-1]
    )
    return FitResult(
        theta=theta.detach().cpu().numpy(),
        costs=costs,
        iterations_performed=len(costs),
        converged=converged,
        n_updates=n_updates,
        message=MSG_CONVERGED if converged else MSG_MAXITER,
    )


__all__ = ["torch_fit"]
