"""Gradient-based solvers for least-squares linear models.

Example
-------
>>> from gradkit.optimize import GDConfig, add_bias, batch_gradient_descent
>>> X = add_bias([[50], [80], [100], [120], [150]])
>>> y = [100, 160, 200, 240, 300]
>>> res = batch_gradient_descent(X, y, GDConfig(learning_rate=1e-4, iterations=1000))
>>> round(float(res.theta[1]), 2)
2.0
"""

from .adaptive import adam, rmsprop
from .convergence import has_converged, run_passes, run_until_converged
from .core import (
    DEFAULT_EPSILON,
    DEFAULT_TOLERANCE,
    AdamConfig,
    FitResult,
    GDConfig,
    MiniBatchConfig,
    MomentumConfig,
    RMSPropConfig,
    SGDConfig,
    coerce_config,
)
from .errors import DimensionMismatch, EmptyDataset, GradkitError, InvalidParameter
from .gradient import batch_gradient_descent, gradient_descent, momentum_gradient_descent
from .linear import add_bias, compute_cost, compute_gradient, predict
from .stochastic import minibatch_gradient_descent, stochastic_gradient_descent
from .utils import check_dataset, rng_default, shuffle

__all__ = [
    "AdamConfig",
    "DEFAULT_EPSILON",
    "DEFAULT_TOLERANCE",
    "DimensionMismatch",
    "EmptyDataset",
    "FitResult",
    "GDConfig",
    "GradkitError",
    "InvalidParameter",
    "MiniBatchConfig",
    "MomentumConfig",
    "RMSPropConfig",
    "SGDConfig",
    "adam",
    "add_bias",
    "batch_gradient_descent",
    "check_dataset",
    "coerce_config",
    "compute_cost",
    "compute_gradient",
    "gradient_descent",
    "has_converged",
    "minibatch_gradient_descent",
    "momentum_gradient_descent",
    "predict",
    "rmsprop",
    "rng_default",
    "run_passes",
    "run_until_converged",
    "shuffle",
    "stochastic_gradient_descent",
]
