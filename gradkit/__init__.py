"""gradkit - gradient-based least-squares solvers on NumPy."""

__version__ = "0.1.0"

from .logging import configure_logging, get_logger, set_log_level

# Solvers and linear-model primitives
from .optimize import (
    AdamConfig,
    DimensionMismatch,
    EmptyDataset,
    FitResult,
    GDConfig,
    GradkitError,
    InvalidParameter,
    MiniBatchConfig,
    MomentumConfig,
    RMSPropConfig,
    SGDConfig,
    adam,
    add_bias,
    batch_gradient_descent,
    compute_cost,
    compute_gradient,
    gradient_descent,
    minibatch_gradient_descent,
    momentum_gradient_descent,
    predict,
    rmsprop,
    shuffle,
    stochastic_gradient_descent,
)

__all__ = [
    "__version__",
    "AdamConfig",
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
    "compute_cost",
    "compute_gradient",
    "configure_logging",
    "get_logger",
    "gradient_descent",
    "minibatch_gradient_descent",
    "momentum_gradient_descent",
    "predict",
    "rmsprop",
    "set_log_level",
    "shuffle",
    "stochastic_gradient_descent",
]
