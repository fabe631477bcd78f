"""Map gradkit solver configs onto the equivalent ``torch.optim`` optimizers."""

from __future__ import annotations

from typing import Iterable

import torch
import torch.optim as torch_optim
from torch.optim import Optimizer

from ..optimize.core import AdamConfig, Config, GDConfig, MomentumConfig, RMSPropConfig
from ..optimize.errors import InvalidParameter


def create_optimizer(config: Config, params: Iterable[torch.Tensor]) -> Optimizer:
    """
    Create the PyTorch optimizer whose update rule matches ``config``.

    The mapping is exact for the full-batch solvers:

    - :class:`GDConfig` -> ``SGD(lr)``
    - :class:`MomentumConfig` -> ``SGD(lr, momentum, dampening=0)``
    - :class:`AdamConfig` -> ``Adam(lr, betas=(beta1, beta2), eps)``
    - :class:`RMSPropConfig` -> ``RMSprop(lr, alpha=beta, eps)``

    Args:
        config: A validated solver configuration.
        params: Tensors to optimize.

    Returns:
        A configured ``torch.optim.Optimizer``.

    Raises:
        InvalidParameter: If the config is out of range or describes a
            sampling solver, which torch has no one-to-one counterpart for.
    """
    if isinstance(config, (GDConfig, MomentumConfig, AdamConfig, RMSPropConfig)):
        config.validate()

    if isinstance(config, MomentumConfig):
        return torch_optim.SGD(
            params=params,
            lr=config.learning_rate,
            momentum=config.momentum,
            dampening=0.0,
        )
    elif isinstance(config, GDConfig):
        return torch_optim.SGD(params=params, lr=config.learning_rate)
    elif isinstance(config, AdamConfig):
        return torch_optim.Adam(
            params=params,
            lr=config.learning_rate,
            betas=(config.beta1, config.beta2),
            eps=config.epsilon,
        )
    elif isinstance(config, RMSPropConfig):
        return torch_optim.RMSprop(
            params=params,
            lr=config.learning_rate,
            alpha=config.beta,
            eps=config.epsilon,
        )
    else:
        supported = ["GDConfig", "MomentumConfig", "AdamConfig", "RMSPropConfig"]
        raise InvalidParameter(
            f"No torch optimizer for {type(config).__name__}. "
            f"Supported configs: {supported}"
        )


__all__ = ["create_optimizer"]
