"""Immutable enclosing ball value type."""
from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

from .points import Point, as_point
from .precision import DoubleEquivalence

__all__ = ['EnclosingBall']


class EnclosingBall:
    """Ball given by a center, a radius and the support points defining it.

    Parameters
    ----------
    center : Point or array-like
        Center of the ball.
    radius : float
        Non-negative radius. NaN is accepted so that balls built from NaN
        points can be reported through ``is_nan`` instead of being rejected.
    support : iterable of points, optional
        Points lying on the boundary that determine the ball.
    """

    __slots__ = ('_center', '_radius', '_support')

    def __init__(self, center, radius: float, support: Iterable = ()):
        radius = float(radius)
        if radius < 0.0:
            raise ValueError(f"radius must be non-negative, got {radius!r}")
        center = as_point(center)
        support = tuple(as_point(p) for p in support)
        for p in support:
            if p.dimension != center.dimension:
                raise ValueError("support points must share the center's dimension")
        object.__setattr__(self, '_center', center)
        object.__setattr__(self, '_radius', radius)
        object.__setattr__(self, '_support', support)

    def __setattr__(self, name, value):
        raise AttributeError("EnclosingBall is immutable")

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def support(self) -> Tuple[Point, ...]:
        return self._support

    @property
    def support_size(self) -> int:
        return len(self._support)

    @property
    def dimension(self) -> int:
        return self._center.dimension

    @property
    def is_nan(self) -> bool:
        return self._center.is_nan or math.isnan(self._radius)

    def contains(self, point, precision: Optional[DoubleEquivalence] = None) -> bool:
        """True if ``point`` lies inside the ball or on its boundary.

        Without a precision context the comparison is exact.
        """
        d = self._center.distance(as_point(point))
        if precision is None:
            return d <= self._radius
        return precision.lte(d, self._radius)

    def is_on_boundary(self, point, precision: DoubleEquivalence) -> bool:
        d = self._center.distance(as_point(point))
        return precision.eq(d, self._radius)

    def __eq__(self, other):
        if not isinstance(other, EnclosingBall):
            return NotImplemented
        return (self._center == other._center and self._radius == other._radius
                and self._support == other._support)

    def __hash__(self):
        return hash((self._center, self._radius, self._support))

    def __repr__(self):
        return (f"EnclosingBall(center={self._center!r}, radius={self._radius!r}, "
                f"support_size={len(self._support)})")
