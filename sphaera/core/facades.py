"""Fixed-dimension conveniences around :class:`WelzlEncloser`.

Each facade only wires a generator and a precision context into the generic
engine so callers working in one dimension do not have to name the generator.
"""
from __future__ import annotations

from typing import Iterable, Optional

from .ball import EnclosingBall
from .config import EncloserConfig
from .encloser import WelzlEncloser
from .generators import DiskGenerator, HypersphereGenerator, SphereGenerator
from .precision import DoubleEquivalence
from .stats import EncloseStats

__all__ = ['WelzlEncloser2D', 'WelzlEncloser3D', 'WelzlEncloserND']


class _EncloserFacade:
    def __init__(self, engine: WelzlEncloser):
        self.engine = engine

    @property
    def dimension(self) -> int:
        return self.engine.dimension

    @property
    def precision(self) -> DoubleEquivalence:
        return self.engine.precision

    def enclose(self, points: Iterable, stats: Optional[EncloseStats] = None) -> EnclosingBall:
        return self.engine.enclose(points, stats=stats)

    def __repr__(self):
        return f"{type(self).__name__}(precision={self.engine.precision!r}, seed={self.engine.seed!r})"


class WelzlEncloser2D(_EncloserFacade):
    """Smallest enclosing circle of planar points."""

    def __init__(self, precision: DoubleEquivalence, *, seed: Optional[int] = None, shuffle: bool = True):
        super().__init__(WelzlEncloser(DiskGenerator(precision), precision, seed=seed, shuffle=shuffle))

    @classmethod
    def from_config(cls, config: EncloserConfig) -> 'WelzlEncloser2D':
        return cls(config.precision(), seed=config.seed, shuffle=config.shuffle)


class WelzlEncloser3D(_EncloserFacade):
    """Smallest enclosing sphere of 3D points."""

    def __init__(self, precision: DoubleEquivalence, *, seed: Optional[int] = None, shuffle: bool = True):
        super().__init__(WelzlEncloser(SphereGenerator(precision), precision, seed=seed, shuffle=shuffle))

    @classmethod
    def from_config(cls, config: EncloserConfig) -> 'WelzlEncloser3D':
        return cls(config.precision(), seed=config.seed, shuffle=config.shuffle)


class WelzlEncloserND(_EncloserFacade):
    """Smallest enclosing ball in an arbitrary dimension."""

    def __init__(self, dimension: int, precision: DoubleEquivalence, *,
                 seed: Optional[int] = None, shuffle: bool = True):
        super().__init__(WelzlEncloser(HypersphereGenerator(dimension, precision), precision,
                                       seed=seed, shuffle=shuffle))

    @classmethod
    def from_config(cls, dimension: int, config: EncloserConfig) -> 'WelzlEncloserND':
        return cls(dimension, config.precision(), seed=config.seed, shuffle=config.shuffle)
