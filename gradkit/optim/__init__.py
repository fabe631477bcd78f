"""PyTorch counterparts of the full-batch solvers."""

from .factory import create_optimizer
from .reference import torch_fit

__all__ = ["create_optimizer", "torch_fit"]
