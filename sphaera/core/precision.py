"""Tolerant floating point comparisons.

``DoubleEquivalence`` is the single place where the package decides whether
two doubles are "the same". The encloser's containment test and the
generators' degeneracy test both route through it, so a point judged on the
boundary by one is never judged outside by the other.
"""
from __future__ import annotations

import math

from .constants import EPS_DISTANCE, EPS_RELATIVE
from .errors import PrecisionConfigurationError

__all__ = ['DoubleEquivalence']


def _check_tolerance(name: str, value) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise PrecisionConfigurationError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(value) or value < 0.0:
        raise PrecisionConfigurationError(f"{name} must be finite and non-negative, got {value!r}")
    return value


class DoubleEquivalence:
    """Absolute/relative epsilon comparison of doubles.

    Two values ``a`` and ``b`` are equivalent when they are exactly equal
    (this covers equal infinities) or when
    ``|a - b| <= max(epsilon, relative * max(|a|, |b|))``. NaN is never
    equivalent to anything, itself included.

    The effective tolerance has to stay above the rounding scale of the
    compared values: an ``epsilon`` near the ulp of the coordinates makes
    containment of freshly computed support points flip with rounding, and
    the encloser then fails with ``EnclosingStateError``. For inputs far from
    the origin or with large spread use a non-zero ``relative``.
    """

    __slots__ = ('_epsilon', '_relative')

    def __init__(self, epsilon: float = EPS_DISTANCE, relative: float = EPS_RELATIVE):
        self._epsilon = _check_tolerance('epsilon', epsilon)
        self._relative = _check_tolerance('relative', relative)

    @classmethod
    def of_epsilon(cls, epsilon: float) -> 'DoubleEquivalence':
        return cls(epsilon=epsilon, relative=0.0)

    @classmethod
    def from_config(cls, config) -> 'DoubleEquivalence':
        """Build from any object exposing ``epsilon`` and ``relative``."""
        return cls(epsilon=config.epsilon, relative=config.relative)

    @property
    def epsilon(self) -> float:
        return self._epsilon

    @property
    def relative(self) -> float:
        return self._relative

    def tolerance(self, a: float, b: float) -> float:
        """Allowed absolute difference between ``a`` and ``b``."""
        if self._relative == 0.0:
            return self._epsilon
        return max(self._epsilon, self._relative * max(abs(a), abs(b)))

    def eq(self, a: float, b: float) -> bool:
        if a == b:
            return True
        diff = abs(a - b)
        # NaN and inf - inf both land here as nan, which never compares <=
        return diff <= self.tolerance(a, b)

    def compare(self, a: float, b: float) -> int:
        """Return 0 if equivalent, -1 if ``a < b``, 1 otherwise."""
        if self.eq(a, b):
            return 0
        return -1 if a < b else 1

    def lt(self, a: float, b: float) -> bool:
        return self.compare(a, b) < 0

    def lte(self, a: float, b: float) -> bool:
        return self.compare(a, b) <= 0

    def gt(self, a: float, b: float) -> bool:
        return self.compare(a, b) > 0

    def gte(self, a: float, b: float) -> bool:
        return self.compare(a, b) >= 0

    def eq_zero(self, a: float) -> bool:
        return self.eq(a, 0.0)

    def signum(self, a: float) -> int:
        return self.compare(a, 0.0)

    def __eq__(self, other):
        if not isinstance(other, DoubleEquivalence):
            return NotImplemented
        return self._epsilon == other._epsilon and self._relative == other._relative

    def __hash__(self):
        return hash((DoubleEquivalence, self._epsilon, self._relative))

    def __repr__(self):
        return f"DoubleEquivalence(epsilon={self._epsilon!r}, relative={self._relative!r})"
