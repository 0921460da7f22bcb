"""Support ball generators.

A support ball generator builds the smallest ball having a given set of
1..D+1 points on its boundary. The Welzl engine only talks to generators
through ``ball_on_support``; everything dimension-specific lives here.

The circumscribed ball of ``k`` affinely independent points ``p_0..p_{k-1}``
is centred in their affine hull. Writing ``u_i = p_i - p_0`` and
``c = p_0 + c'`` with ``c'`` in the span of the ``u_i``, equidistance from
all points gives the perpendicular bisector system::

    U c' = 0.5 * |u_i|^2

With the reduced factorization ``U^T = Q R`` and ``c' = Q y`` it becomes the
triangular system ``R^T y = 0.5 * |u_i|^2``. The normal equations
``(U U^T) a = ...`` are never formed, so the solve keeps the conditioning of
``U`` instead of its square.
"""
from __future__ import annotations

from typing import Protocol, Sequence

import numpy as np

from .ball import EnclosingBall
from .errors import DegenerateConfigurationError, EmptyInputError, NonFiniteCoordinateError
from .points import Point, as_point, points_to_array
from .precision import DoubleEquivalence

__all__ = [
    'SupportBallGenerator',
    'HypersphereGenerator',
    'DiskGenerator',
    'SphereGenerator',
]


class SupportBallGenerator(Protocol):
    """Capability consumed by :class:`~sphaera.core.encloser.WelzlEncloser`."""

    dimension: int

    def ball_on_support(self, support: Sequence[Point]) -> EnclosingBall:
        ...


class HypersphereGenerator:
    """Circumscribed ball of up to ``dimension + 1`` points in any dimension.

    Degeneracy is decided by ``precision``: the support is rejected when the
    smallest singular value of the edge matrix ``[p_i - p_0]`` is zero
    within tolerance, i.e. the points span a lower dimensional flat than
    their count requires (coincident, collinear, coplanar...).
    """

    def __init__(self, dimension: int, precision: DoubleEquivalence):
        if int(dimension) < 1:
            raise ValueError(f"dimension must be >= 1, got {dimension!r}")
        self.dimension = int(dimension)
        self.precision = precision

    def __repr__(self):
        return f"{type(self).__name__}(dimension={self.dimension}, precision={self.precision!r})"

    def ball_on_support(self, support: Sequence[Point]) -> EnclosingBall:
        pts = [as_point(p) for p in support]
        n = len(pts)
        if n == 0:
            raise EmptyInputError("cannot build a ball on an empty support")
        if n > self.dimension + 1:
            raise ValueError(
                f"at most {self.dimension + 1} support points in dimension {self.dimension}, got {n}")
        for p in pts:
            if p.dimension != self.dimension:
                raise ValueError(f"expected {self.dimension}D support points, got {p.dimension}D")

        if n == 1:
            return EnclosingBall(pts[0], 0.0, pts)

        P = points_to_array(pts)
        if not np.all(np.isfinite(P)):
            raise NonFiniteCoordinateError("support points must have finite coordinates")
        U = P[1:] - P[0]
        self._check_independent(U, pts)

        if n == 2:
            center = 0.5 * (P[0] + P[1])
        else:
            center = self._circumcenter(P, U)
        # the radius reaches the farthest support point so every support
        # point is contained even after rounding
        radius = float(np.max(np.linalg.norm(P - center, axis=1)))
        return EnclosingBall(center, radius, pts)

    def _check_independent(self, U: np.ndarray, pts) -> None:
        s = np.linalg.svd(U, compute_uv=False)
        if not np.all(np.isfinite(s)) or self.precision.eq_zero(float(s[-1])):
            raise DegenerateConfigurationError(
                f"{len(pts)} support points are not affinely independent "
                f"(smallest singular value {float(s[-1])!r})", pts)

    def _circumcenter(self, P: np.ndarray, U: np.ndarray) -> np.ndarray:
        Q, R = np.linalg.qr(U.T)
        b = 0.5 * np.sum(U * U, axis=1)
        try:
            y = np.linalg.solve(R.T, b)
        except np.linalg.LinAlgError as exc:
            raise DegenerateConfigurationError(
                "singular circumscription system", [Point(row) for row in P.tolist()]) from exc
        return P[0] + Q @ y


class DiskGenerator(HypersphereGenerator):
    """Smallest circle through 1..3 points of the plane."""

    def __init__(self, precision: DoubleEquivalence):
        super().__init__(2, precision)

    def _circumcenter(self, P: np.ndarray, U: np.ndarray) -> np.ndarray:
        # Closed form circumcenter relative to P[0]
        (bx, by), (cx, cy) = U
        d = 2.0 * (bx * cy - by * cx)
        b2 = bx * bx + by * by
        c2 = cx * cx + cy * cy
        ux = (cy * b2 - by * c2) / d
        uy = (bx * c2 - cx * b2) / d
        return P[0] + np.array([ux, uy])


class SphereGenerator(HypersphereGenerator):
    """Smallest sphere through 1..4 points of 3D space.

    Three points give the sphere whose great circle is their circumcircle.
    """

    def __init__(self, precision: DoubleEquivalence):
        super().__init__(3, precision)
