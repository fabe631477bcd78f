"""Input validation and the random-permutation helper.

Everything here is pure NumPy. Validation runs once per public call so the
solver loops can work on plain ``float64`` arrays without re-checking.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from .core import Array
from .errors import DimensionMismatch, EmptyDataset

SeedLike = int | np.random.Generator | None


def rng_default(seed: SeedLike = None) -> np.random.Generator:
    """Return ``seed`` if it already is a Generator, else a new one seeded by it."""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def shuffle(indices: Sequence[Any] | Array, rng: SeedLike = None) -> Array:
    """Return a uniformly random permutation of ``indices``.

    Fisher-Yates via ``Generator.shuffle`` on a copy; the input is left
    untouched.

    Parameters
    ----------
    indices:
        Items to permute, usually ``np.arange(m)``.
    rng:
        Generator or seed. ``None`` draws fresh OS entropy, so pass a seeded
        generator for reproducible runs.
    """
    gen = rng_default(rng)
    out = np.array(indices, copy=True)
    gen.shuffle(out)
    return out


def _row_widths(rows: Sequence[Any]) -> set[int]:
    try:
        return {len(row) for row in rows}
    except TypeError:
        # scalar rows; the ndim check below reports them
        return set()


def as_design_matrix(X: Any) -> Array:
    """Validate a design matrix and return it as a 2D ``float64`` array.

    Raises:
        EmptyDataset: If ``X`` has no rows.
        DimensionMismatch: If rows differ in width, ``X`` is not 2D or rows
            carry no features.
    """
    if not isinstance(X, np.ndarray):
        rows = list(X)
        if not rows:
            raise EmptyDataset("Design matrix has no rows.")
        if len(_row_widths(rows)) > 1:
            raise DimensionMismatch("Design matrix rows must all have the same length.")
        X = rows
    arr = np.asarray(X, dtype=float)
    if arr.ndim >= 1 and arr.shape[0] == 0:
        raise EmptyDataset("Design matrix has no rows.")
    if arr.ndim != 2:
        raise DimensionMismatch(f"Expected a 2D design matrix, got shape {arr.shape}.")
    if arr.shape[1] == 0:
        raise DimensionMismatch("Design matrix rows have no features.")
    return arr


def check_dataset(X: Any, y: Any) -> tuple[Array, Array]:
    """Validate a design matrix together with its target vector.

    A column vector of shape ``(m, 1)`` is accepted for ``y`` and flattened.
    """
    arr = as_design_matrix(X)
    target = np.asarray(y, dtype=float)
    if target.ndim == 2 and target.shape[1] == 1:
        target = target[:, 0]
    if target.ndim != 1:
        raise DimensionMismatch(f"Expected a 1D target vector, got shape {target.shape}.")
    if target.shape[0] != arr.shape[0]:
        raise DimensionMismatch(
            f"Design matrix has {arr.shape[0]} rows but {target.shape[0]} targets were given."
        )
    return arr, target


def check_theta(theta: Any, n_features: int) -> Array:
    """Validate ``theta`` against the design-matrix width."""
    vec = np.asarray(theta, dtype=float)
    if vec.ndim != 1 or vec.shape[0] != n_features:
        raise DimensionMismatch(
            f"theta must have shape ({n_features},), got {vec.shape}."
        )
    return vec


__all__ = [
    "Array",
    "SeedLike",
    "as_design_matrix",
    "check_dataset",
    "check_theta",
    "rng_default",
    "shuffle",
]
