"""Configuration objects for the enclosing-ball engine."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import EPS_DISTANCE, EPS_RELATIVE
from .precision import DoubleEquivalence


@dataclass
class EncloserConfig:
    """Engine settings.

    Attributes
    ----------
    epsilon : float
        Absolute tolerance of the precision context. It must exceed the
        rounding error of distances at the scale of the input coordinates;
        below that the engine can raise ``EnclosingStateError`` instead of
        returning a ball (the default suits coordinates of order 1 to 1e4).
    relative : float
        Relative tolerance of the precision context (0 disables it). Prefer
        a non-zero value over a larger ``epsilon`` for large coordinates.
    seed : int, optional
        Seed of the per-call shuffle. ``None`` draws fresh entropy on every
        call; set it for reproducible recursion paths in tests.
    shuffle : bool
        Randomize the processing order. Turning it off keeps the input order
        and loses the expected linear running time on adversarial inputs.
    """
    epsilon: float = EPS_DISTANCE
    relative: float = EPS_RELATIVE
    seed: Optional[int] = None
    shuffle: bool = True

    def precision(self) -> DoubleEquivalence:
        return DoubleEquivalence.from_config(self)


__all__ = ['EncloserConfig']
