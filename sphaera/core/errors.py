"""Exception taxonomy for sphaera.

All errors raised on purpose by the package derive from ``SphaeraError``.
Each concrete error also derives from the builtin exception a caller would
naturally catch for that situation (``ValueError``, ``ArithmeticError``...).
"""
from __future__ import annotations


class SphaeraError(Exception):
    """Base class for every sphaera error."""


class EmptyInputError(SphaeraError, ValueError):
    """No points were given where at least one is required."""


class NonFiniteCoordinateError(SphaeraError, ValueError):
    """A point with NaN or infinite coordinates reached the engine."""


class DegenerateConfigurationError(SphaeraError, ArithmeticError):
    """The support points do not determine a unique ball.

    Raised for coincident, collinear or coplanar support points whose
    circumscribed ball is undefined. The offending points are kept on
    ``points`` for diagnostics.
    """

    def __init__(self, message: str, points=()):
        super().__init__(message)
        self.points = tuple(points)


class PrecisionConfigurationError(SphaeraError, ValueError):
    """A precision context was configured with an invalid tolerance."""


class EnclosingStateError(SphaeraError, RuntimeError):
    """Internal invariant of the Welzl engine violated (radius shrank)."""


__all__ = [
    'SphaeraError',
    'EmptyInputError',
    'NonFiniteCoordinateError',
    'DegenerateConfigurationError',
    'PrecisionConfigurationError',
    'EnclosingStateError',
]
