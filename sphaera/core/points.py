"""Immutable point/vector value type of any dimension.

Points are thin wrappers around a tuple of floats. Linear algebra that
benefits from numpy goes through ``to_array()``; everything else stays in
plain Python so points remain hashable and cheap to compare.
"""
from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

import numpy as np

__all__ = ['Point', 'as_point', 'as_points', 'points_to_array']

# Shared hash for every NaN point of a given dimension
_NAN_HASH = 7919


class Point:
    """Immutable coordinate tuple.

    Any NaN component puts the point in a single "invalid" class: it equals
    every other NaN point of the same dimension (including ``Point.nan(d)``)
    and never equals a point without NaN components.
    """

    __slots__ = ('_coords',)

    def __init__(self, coords: Iterable[float]):
        coords = tuple(float(c) for c in coords)
        if not coords:
            raise ValueError("a point needs at least one coordinate")
        object.__setattr__(self, '_coords', coords)

    def __setattr__(self, name, value):
        raise AttributeError("Point is immutable")

    @classmethod
    def of(cls, *coords: float) -> 'Point':
        return cls(coords)

    @classmethod
    def nan(cls, dimension: int) -> 'Point':
        return cls((math.nan,) * dimension)

    # -- accessors ----------------------------------------------------------
    @property
    def coords(self) -> Tuple[float, ...]:
        return self._coords

    @property
    def dimension(self) -> int:
        return len(self._coords)

    @property
    def x(self) -> float:
        return self._coords[0]

    @property
    def y(self) -> float:
        return self._coords[1]

    @property
    def z(self) -> float:
        return self._coords[2]

    def to_array(self) -> np.ndarray:
        return np.asarray(self._coords, dtype=np.float64)

    def __len__(self):
        return len(self._coords)

    def __iter__(self):
        return iter(self._coords)

    def __getitem__(self, idx):
        return self._coords[idx]

    # -- classification -----------------------------------------------------
    @property
    def is_nan(self) -> bool:
        return any(math.isnan(c) for c in self._coords)

    @property
    def is_infinite(self) -> bool:
        return not self.is_nan and any(math.isinf(c) for c in self._coords)

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(c) for c in self._coords)

    # -- metric -------------------------------------------------------------
    def _check_dim(self, other: 'Point') -> None:
        if len(other._coords) != len(self._coords):
            raise ValueError(f"dimension mismatch: {self.dimension} vs {other.dimension}")

    def distance_sq(self, other: 'Point') -> float:
        self._check_dim(other)
        return sum((a - b) * (a - b) for a, b in zip(self._coords, other._coords))

    def distance(self, other: 'Point') -> float:
        self._check_dim(other)
        return math.sqrt(self.distance_sq(other))

    def norm(self) -> float:
        return math.sqrt(sum(c * c for c in self._coords))

    def dot(self, other: 'Point') -> float:
        self._check_dim(other)
        return sum(a * b for a, b in zip(self._coords, other._coords))

    def cross(self, other: 'Point') -> 'Point':
        if self.dimension != 3 or other.dimension != 3:
            raise ValueError("cross product is only defined in 3D")
        ax, ay, az = self._coords
        bx, by, bz = other._coords
        return Point((ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx))

    def lerp(self, other: 'Point', t: float) -> 'Point':
        """Linear interpolation; ``t=0`` gives self, ``t=1`` gives other."""
        self._check_dim(other)
        return Point(a + t * (b - a) for a, b in zip(self._coords, other._coords))

    # -- arithmetic ---------------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        self._check_dim(other)
        return Point(a + b for a, b in zip(self._coords, other._coords))

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        self._check_dim(other)
        return Point(a - b for a, b in zip(self._coords, other._coords))

    def __mul__(self, factor):
        if isinstance(factor, Point):
            return NotImplemented
        return Point(c * factor for c in self._coords)

    __rmul__ = __mul__

    def __truediv__(self, factor):
        if isinstance(factor, Point):
            return NotImplemented
        return Point(c / factor for c in self._coords)

    def __neg__(self):
        return Point(-c for c in self._coords)

    # -- identity -----------------------------------------------------------
    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Point):
            return NotImplemented
        if len(other._coords) != len(self._coords):
            return False
        if other.is_nan:
            return self.is_nan
        return self._coords == other._coords

    def __hash__(self):
        if self.is_nan:
            return hash((_NAN_HASH, len(self._coords)))
        return hash(self._coords)

    def __repr__(self):
        return f"Point({', '.join(repr(c) for c in self._coords)})"

    def __str__(self):
        return '(' + ', '.join(str(c) for c in self._coords) + ')'


def as_point(value) -> Point:
    """Coerce a ``Point`` or any 1-D array-like into a ``Point``."""
    if isinstance(value, Point):
        return value
    arr = np.asarray(value, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"expected a 1-D coordinate sequence, got shape {arr.shape}")
    return Point(arr.tolist())


def as_points(values) -> List[Point]:
    """Coerce an iterable of points, or an (N, D) array, into a list of ``Point``.

    A 2-D numpy array is split row-wise. The result is a fresh list; the
    caller's container is never reused.
    """
    if isinstance(values, np.ndarray):
        if values.size == 0:
            return []
        if values.ndim != 2:
            raise ValueError(f"expected an (N, D) array of points, got shape {values.shape}")
        return [Point(row) for row in values.astype(np.float64).tolist()]
    return [as_point(v) for v in values]


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """Stack points into an (N, D) float64 array."""
    if not points:
        return np.empty((0, 0), dtype=np.float64)
    return np.asarray([p.coords for p in points], dtype=np.float64)
