"""Spherical coordinates (radius, azimuth, polar) and conversions to Cartesian.

Angles are in radians. ``azimuth`` is measured counter-clockwise in the x-y
plane from the positive x axis and normalized into ``(-pi, pi]``; ``polar``
is the angle from the positive z axis, normalized into ``[0, pi]``.
"""
from __future__ import annotations

import math
import re
from typing import Tuple

import numpy as np

from .points import Point

__all__ = ['SphericalCoordinates', 'normalize_between_minus_pi_and_pi']

_TWO_PI = 2.0 * math.pi
_NAN_HASH = 127
_FORMAT_RE = re.compile(r'^\s*\(\s*([^,()]+?)\s*,\s*([^,()]+?)\s*,\s*([^,()]+?)\s*\)\s*$')


def normalize_between_minus_pi_and_pi(angle: float) -> float:
    """Map ``angle`` into ``[-pi, pi)``."""
    return angle - _TWO_PI * math.floor((angle + math.pi) / _TWO_PI)


class SphericalCoordinates:
    """Immutable, normalized spherical coordinates.

    Build instances with :meth:`of` or :meth:`of_cartesian`. A negative
    radius is folded back by turning both angles half a revolution. Any NaN
    value makes the coordinates equal to every other NaN set.
    """

    __slots__ = ('_radius', '_azimuth', '_polar')

    def __init__(self, radius: float, azimuth: float, polar: float):
        radius = float(radius)
        azimuth = float(azimuth)
        polar = float(polar)
        if radius < 0:
            radius = abs(radius)
            azimuth += math.pi
            polar += math.pi

        if math.isfinite(azimuth) and (azimuth <= -math.pi or azimuth > math.pi):
            azimuth = normalize_between_minus_pi_and_pi(azimuth)
            # keep the range half-open at -pi so coordinates are unique
            if azimuth <= -math.pi:
                azimuth += _TWO_PI

        if math.isfinite(polar):
            polar = abs(normalize_between_minus_pi_and_pi(polar))

        object.__setattr__(self, '_radius', radius)
        object.__setattr__(self, '_azimuth', azimuth)
        object.__setattr__(self, '_polar', polar)

    def __setattr__(self, name, value):
        raise AttributeError("SphericalCoordinates is immutable")

    @classmethod
    def of(cls, radius: float, azimuth: float, polar: float) -> 'SphericalCoordinates':
        return cls(radius, azimuth, polar)

    @classmethod
    def of_cartesian(cls, x: float, y: float, z: float) -> 'SphericalCoordinates':
        radius = math.sqrt(x * x + y * y + z * z)
        azimuth = math.atan2(y, x)
        # polar angle defaults to 0 at the origin
        polar = math.acos(z / radius) if radius > 0.0 else 0.0
        return cls(radius, azimuth, polar)

    @classmethod
    def from_point(cls, point: Point) -> 'SphericalCoordinates':
        if point.dimension != 3:
            raise ValueError(f"expected a 3D point, got {point.dimension}D")
        return cls.of_cartesian(*point.coords)

    @classmethod
    def parse(cls, text: str) -> 'SphericalCoordinates':
        """Parse the ``"(radius, azimuth, polar)"`` form produced by ``str()``."""
        m = _FORMAT_RE.match(text)
        if m is None:
            raise ValueError(f"failed to parse spherical coordinates from {text!r}")
        try:
            values = [float(g) for g in m.groups()]
        except ValueError as exc:
            raise ValueError(f"failed to parse spherical coordinates from {text!r}") from exc
        return cls(*values)

    @staticmethod
    def to_cartesian(radius: float, azimuth: float, polar: float) -> Tuple[float, float, float]:
        xy_length = radius * math.sin(polar)
        return (xy_length * math.cos(azimuth),
                xy_length * math.sin(azimuth),
                radius * math.cos(polar))

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def azimuth(self) -> float:
        return self._azimuth

    @property
    def polar(self) -> float:
        return self._polar

    @property
    def dimension(self) -> int:
        return 3

    @property
    def is_nan(self) -> bool:
        return math.isnan(self._radius) or math.isnan(self._azimuth) or math.isnan(self._polar)

    @property
    def is_infinite(self) -> bool:
        return not self.is_nan and (math.isinf(self._radius) or math.isinf(self._azimuth)
                                    or math.isinf(self._polar))

    def to_point(self) -> Point:
        return Point(self.to_cartesian(self._radius, self._azimuth, self._polar))

    def to_array(self) -> np.ndarray:
        return np.asarray(self.to_cartesian(self._radius, self._azimuth, self._polar), dtype=np.float64)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, SphericalCoordinates):
            return NotImplemented
        if other.is_nan:
            return self.is_nan
        return (self._radius == other._radius and self._azimuth == other._azimuth
                and self._polar == other._polar)

    def __hash__(self):
        if self.is_nan:
            return _NAN_HASH
        return hash((self._radius, self._azimuth, self._polar))

    def __repr__(self):
        return f"SphericalCoordinates({self._radius!r}, {self._azimuth!r}, {self._polar!r})"

    def __str__(self):
        return f"({self._radius!r}, {self._azimuth!r}, {self._polar!r})"
