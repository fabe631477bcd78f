"""Result and configuration records shared by every solver."""

from __future__ import annotations

import math
from dataclasses import MISSING, dataclass, fields
from numbers import Integral, Real
from typing import Any, Mapping, Optional, Type, TypeVar, Union

import numpy as np

from .errors import InvalidParameter

Array = np.ndarray

DEFAULT_TOLERANCE = 1e-6
DEFAULT_EPSILON = 1e-8

MSG_CONVERGED = "Cost tolerance satisfied."
MSG_MAXITER = "Maximum iterations reached."


@dataclass(frozen=True)
class FitResult:
    """Outcome of a single solver call.

    Attributes:
        theta: Fitted parameter vector (read-only copy).
        costs: Cost recorded once per outer step (read-only copy).
        iterations_performed: Outer steps executed (iterations, epochs or
            passes depending on the solver).
        converged: True when the cost-delta tolerance stopped the loop.
        n_updates: Total parameter updates applied, counting every sample or
            mini-batch update.
        message: Human-readable termination reason.
    """

    theta: Array
    costs: Array
    iterations_performed: int
    converged: bool = False
    n_updates: int = 0
    message: str = ""

    def __post_init__(self) -> None:
        theta = np.array(self.theta, dtype=float)
        costs = np.array(self.costs, dtype=float).reshape(-1)
        theta.setflags(write=False)
        costs.setflags(write=False)
        object.__setattr__(self, "theta", theta)
        object.__setattr__(self, "costs", costs)

    @property
    def final_cost(self) -> float:
        """Last recorded cost, ``nan`` when nothing was recorded."""
        if self.costs.size == 0:
            return float("nan")
        return float(self.costs[-1])


def _check_positive(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameter(f"{name} must be a real number, got {value!r}.")
    if not value > 0 or not math.isfinite(value):
        raise InvalidParameter(f"{name} must be positive and finite, got {value!r}.")


def _check_count(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}.")
    if value <= 0:
        raise InvalidParameter(f"{name} must be positive, got {value!r}.")


def _check_decay(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameter(f"{name} must be a real number, got {value!r}.")
    if not 0.0 <= value < 1.0:
        raise InvalidParameter(f"{name} must lie in [0, 1), got {value!r}.")


def _check_tolerance(value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameter(f"tolerance must be a real number, got {value!r}.")
    if value < 0 or math.isnan(value):
        raise InvalidParameter(f"tolerance must be non-negative, got {value!r}.")


@dataclass(frozen=True)
class GDConfig:
    """Settings for full-batch gradient descent.

    Args:
        learning_rate: Step size multiplier. Must be positive.
        iterations: Outer-loop budget. Must be positive.
        tolerance: Early-stop threshold on the absolute cost delta between
            consecutive iterations. ``0`` or ``None`` disables early stopping.
    """

    learning_rate: float
    iterations: int
    tolerance: Optional[float] = DEFAULT_TOLERANCE

    def validate(self) -> None:
        _check_positive("learning_rate", self.learning_rate)
        _check_count("iterations", self.iterations)
        _check_tolerance(self.tolerance)


@dataclass(frozen=True)
class SGDConfig:
    """Settings for single-sample stochastic gradient descent."""

    learning_rate: float
    epochs: int
    tolerance: Optional[float] = DEFAULT_TOLERANCE

    def validate(self) -> None:
        _check_positive("learning_rate", self.learning_rate)
        _check_count("epochs", self.epochs)
        _check_tolerance(self.tolerance)


@dataclass(frozen=True)
class MiniBatchConfig:
    """Settings for mini-batch gradient descent.

    ``iterations`` counts passes over the shuffled data; each pass applies
    ``ceil(m / batch_size)`` updates.
    """

    learning_rate: float
    iterations: int
    batch_size: int
    tolerance: Optional[float] = DEFAULT_TOLERANCE

    def validate(self) -> None:
        _check_positive("learning_rate", self.learning_rate)
        _check_count("iterations", self.iterations)
        _check_count("batch_size", self.batch_size)
        _check_tolerance(self.tolerance)


@dataclass(frozen=True)
class MomentumConfig:
    """Settings for gradient descent with a velocity term.

    ``momentum`` is the velocity decay factor in ``[0, 1)``; ``0`` reduces the
    solver to plain batch gradient descent.
    """

    learning_rate: float
    iterations: int
    momentum: float
    tolerance: Optional[float] = DEFAULT_TOLERANCE

    def validate(self) -> None:
        _check_positive("learning_rate", self.learning_rate)
        _check_count("iterations", self.iterations)
        _check_decay("momentum", self.momentum)
        _check_tolerance(self.tolerance)


@dataclass(frozen=True)
class AdamConfig:
    """Settings for Adam. There is no tolerance: Adam spends its full budget."""

    learning_rate: float
    iterations: int
    beta1: float = 0.9
    beta2: float = 0.999
    epsilon: float = DEFAULT_EPSILON

    def validate(self) -> None:
        _check_positive("learning_rate", self.learning_rate)
        _check_count("iterations", self.iterations)
        _check_decay("beta1", self.beta1)
        _check_decay("beta2", self.beta2)
        _check_positive("epsilon", self.epsilon)


@dataclass(frozen=True)
class RMSPropConfig:
    """Settings for RMSProp."""

    learning_rate: float
    iterations: int
    beta: float = 0.9
    epsilon: float = DEFAULT_EPSILON
    tolerance: Optional[float] = DEFAULT_TOLERANCE

    def validate(self) -> None:
        _check_positive("learning_rate", self.learning_rate)
        _check_count("iterations", self.iterations)
        _check_decay("beta", self.beta)
        _check_positive("epsilon", self.epsilon)
        _check_tolerance(self.tolerance)


Config = Union[GDConfig, SGDConfig, MiniBatchConfig, MomentumConfig, AdamConfig, RMSPropConfig]
ConfigT = TypeVar("ConfigT", GDConfig, SGDConfig, MiniBatchConfig, MomentumConfig, AdamConfig, RMSPropConfig)

_CONFIG_TYPES = (GDConfig, SGDConfig, MiniBatchConfig, MomentumConfig, AdamConfig, RMSPropConfig)

# alternate spellings accepted in mappings
_ALIASES = {
    "learningRate": "learning_rate",
    "batchSize": "batch_size",
    "lr": "learning_rate",
}

_KNOWN_OPTIONS = frozenset(f.name for cls in _CONFIG_TYPES for f in fields(cls))


def coerce_config(config: ConfigT | Mapping[str, Any], cls: Type[ConfigT]) -> ConfigT:
    """Return ``config`` as a validated ``cls`` instance.

    Mappings may use snake_case or camelCase keys. Options that belong to a
    different solver are ignored; keys no solver recognizes are rejected.

    Raises:
        InvalidParameter: On unknown keys, missing required options, a config
            of the wrong type, or any out-of-range value.
    """
    if isinstance(config, cls):
        config.validate()
        return config
    if isinstance(config, _CONFIG_TYPES):
        raise InvalidParameter(
            f"Expected {cls.__name__} or a mapping, got {type(config).__name__}."
        )
    if not isinstance(config, Mapping):
        raise InvalidParameter(f"Expected {cls.__name__} or a mapping, got {config!r}.")

    accepted = {f.name for f in fields(cls)}
    kwargs: dict[str, Any] = {}
    for key, value in config.items():
        name = _ALIASES.get(key, key)
        if name not in _KNOWN_OPTIONS:
            raise InvalidParameter(f"Unknown option {key!r} for {cls.__name__}.")
        if name in accepted:
            kwargs[name] = value

    missing = [
        f.name
        for f in fields(cls)
        if f.name not in kwargs and f.default is MISSING
    ]
    if missing:
        raise InvalidParameter(f"{cls.__name__} requires {', '.join(missing)}.")

    result = cls(**kwargs)
    result.validate()
    return result


__all__ = [
    "Array",
    "AdamConfig",
    "Config",
    "DEFAULT_EPSILON",
    "DEFAULT_TOLERANCE",
    "FitResult",
    "GDConfig",
    "MSG_CONVERGED",
    "MSG_MAXITER",
    "MiniBatchConfig",
    "MomentumConfig",
    "RMSPropConfig",
    "SGDConfig",
    "coerce_config",
]
