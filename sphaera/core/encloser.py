"""Welzl minimum enclosing ball engine.

The engine is generic over the dimension: everything dimension specific is
delegated to a :class:`~sphaera.core.generators.SupportBallGenerator`, and
every "inside or outside" decision goes through one
:class:`~sphaera.core.precision.DoubleEquivalence`.

Algorithm
---------
Welzl's move-to-front recursion is driven by Gärtner's pivoting loop:

* the *extreme* list holds the few points that were once farthest from the
  candidate ball, most recent first;
* each pivot step picks the input point farthest from the current center.
  If the ball already contains it the ball is minimal; otherwise the
  move-to-front ball is rebuilt over the extreme list with that point forced
  on the support, and the point joins the front of the extreme list.

The move-to-front recursion adds one support point per level, so its depth
never exceeds ``dimension + 1``.
"""
from __future__ import annotations

import time
from typing import Iterable, List, Optional

import numpy as np

from .ball import EnclosingBall
from .errors import EmptyInputError, EnclosingStateError, NonFiniteCoordinateError
from .generators import SupportBallGenerator
from .logging_utils import get_logger
from .points import Point, as_points, points_to_array
from .precision import DoubleEquivalence
from .stats import EncloseStats

logger = get_logger('sphaera.encloser')

__all__ = ['WelzlEncloser', 'enclose']


class WelzlEncloser:
    """Minimum enclosing ball of a finite point set.

    Parameters
    ----------
    generator : SupportBallGenerator
        Builds balls on 1..D+1 support points for a fixed dimension D.
    precision : DoubleEquivalence
        Tolerance used for every containment test.
    seed : int, optional
        Seed of the per-call shuffle; ``None`` uses fresh entropy per call.
    shuffle : bool
        Process points in random order (default). The input collection itself
        is never reordered.

    The instance holds no per-call state and can be shared between threads.
    """

    def __init__(self, generator: SupportBallGenerator, precision: DoubleEquivalence,
                 *, seed: Optional[int] = None, shuffle: bool = True):
        self.generator = generator
        self.precision = precision
        self.seed = seed
        self.shuffle = shuffle

    @classmethod
    def from_config(cls, generator: SupportBallGenerator, config) -> 'WelzlEncloser':
        return cls(generator, config.precision(), seed=config.seed, shuffle=config.shuffle)

    @property
    def dimension(self) -> int:
        return self.generator.dimension

    def enclose(self, points: Iterable, stats: Optional[EncloseStats] = None) -> EnclosingBall:
        """Return the smallest ball containing every point.

        Raises
        ------
        EmptyInputError
            ``points`` is empty.
        NonFiniteCoordinateError
            A point has a NaN or infinite coordinate.
        DegenerateConfigurationError
            Propagated from the generator.
        """
        t0 = time.perf_counter()
        pts = self._prepare(points)
        if stats is not None:
            stats.reset()
            stats.points = len(pts)

        if self.shuffle and len(pts) > 1:
            rng = np.random.default_rng(self.seed)
            pts = [pts[i] for i in rng.permutation(len(pts))]

        ball = self._pivoting_ball(pts, stats)

        if stats is not None:
            stats.elapsed = time.perf_counter() - t0
        logger.debug("enclosed %d points: center=%s radius=%r support=%d",
                     len(pts), ball.center, ball.radius, ball.support_size)
        return ball

    # ------------------------------------------------------------------
    def _prepare(self, points) -> List[Point]:
        pts = as_points(points)
        if not pts:
            raise EmptyInputError("unable to generate enclosing ball: no points given")
        dim = self.generator.dimension
        for p in pts:
            if p.dimension != dim:
                raise ValueError(f"expected {dim}D points, got a {p.dimension}D point {p}")
        if not np.all(np.isfinite(points_to_array(pts))):
            bad = next(p for p in pts if not p.is_finite)
            raise NonFiniteCoordinateError(f"point {bad} has non-finite coordinates")
        return pts

    def _pivoting_ball(self, pts: List[Point], stats: Optional[EncloseStats]) -> EnclosingBall:
        coords = points_to_array(pts)
        extreme = [pts[0]]
        ball = self._move_to_front_ball(extreme, len(extreme), [], stats)

        while True:
            if stats is not None:
                stats.pivot_iterations += 1
            farthest = pts[self._select_farthest(coords, ball)]
            if ball.contains(farthest, self.precision):
                return ball

            saved = ball
            ball = self._move_to_front_ball(extreme, len(extreme), [farthest], stats)
            if self.precision.lt(ball.radius, saved.radius):
                raise EnclosingStateError(
                    f"found smaller radius ({ball.radius!r} < {saved.radius!r}) "
                    "while adding support point")
            if not ball.contains(farthest, self.precision):
                raise EnclosingStateError(f"pivot point {farthest} is outside the rebuilt ball")
            logger.debug("pivot %s: radius %r -> %r", farthest, saved.radius, ball.radius)

            # Gärtner's heuristic: keep the pivot in front, drop what no longer matters
            extreme.insert(0, farthest)
            del extreme[ball.support_size:]

    def _move_to_front_ball(self, extreme: List[Point], nb_extreme: int, support: List[Point],
                            stats: Optional[EncloseStats]) -> Optional[EnclosingBall]:
        if stats is not None:
            stats.mtf_calls += 1
            stats.max_support_size = max(stats.max_support_size, len(support))

        # an empty support contains nothing; the generator is never asked for it
        ball = None
        if support:
            if stats is not None:
                stats.generator_calls += 1
            ball = self.generator.ball_on_support(support)

        if len(support) <= self.generator.dimension:
            for i in range(nb_extreme):
                pi = extreme[i]
                if ball is None or not ball.contains(pi, self.precision):
                    support.append(pi)
                    ball = self._move_to_front_ball(extreme, i, support, stats)
                    support.pop()
                    # Welzl's heuristic: move the outside point to the front
                    extreme.insert(0, extreme.pop(i))
        return ball

    @staticmethod
    def _select_farthest(coords: np.ndarray, ball: EnclosingBall) -> int:
        d2 = np.sum((coords - ball.center.to_array()) ** 2, axis=1)
        return int(np.argmax(d2))


def enclose(points: Iterable, generator: SupportBallGenerator, precision: DoubleEquivalence,
            *, seed: Optional[int] = None, stats: Optional[EncloseStats] = None) -> EnclosingBall:
    """Functional form of :meth:`WelzlEncloser.enclose`."""
    return WelzlEncloser(generator, precision, seed=seed).enclose(points, stats=stats)
