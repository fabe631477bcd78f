"""Exceptions raised when a solver is handed unusable input.

All of them derive from :class:`ValueError`, so callers that already guard
against ``ValueError`` keep working.
"""

from __future__ import annotations


class GradkitError(ValueError):
    """Base class for input errors detected before fitting starts."""


class DimensionMismatch(GradkitError):
    """Shapes of the design matrix, targets or theta disagree."""


class EmptyDataset(GradkitError):
    """The design matrix has no rows."""


class InvalidParameter(GradkitError):
    """A configuration value is outside its admissible range."""


__all__ = ["DimensionMismatch", "EmptyDataset", "GradkitError", "InvalidParameter"]
