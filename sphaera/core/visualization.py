"""Plot helpers for enclosing balls (2D circles and 3D spheres)."""
from __future__ import annotations

import os as _os
from typing import Optional

import matplotlib as _mpl
# Non-interactive backend in headless environments, before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt

from .ball import EnclosingBall
from .logging_utils import get_logger
from .points import as_points, points_to_array

logger = get_logger('sphaera.viz')

__all__ = ['plot_enclosing_ball']


def plot_enclosing_ball(points, ball: EnclosingBall, outname: Optional[str] = None, ax=None,
                        resolution: int = 64):
    """Draw points, the ball outline and its support points.

    Args:
        points: iterable of 2D or 3D points (or an (N, D) array)
        ball: EnclosingBall of the same dimension
        outname: if given, save the figure there and close it
        ax: existing matplotlib axes (a 3D axes for 3D balls); created if None
        resolution: number of samples along the circle / sphere parallels

    Returns the axes that were drawn on.
    """
    pts = points_to_array(as_points(points))
    dim = ball.dimension
    if dim not in (2, 3):
        raise ValueError(f"only 2D and 3D balls can be plotted, got {dim}D")
    if pts.size and pts.shape[1] != dim:
        raise ValueError(f"points are {pts.shape[1]}D but the ball is {dim}D")

    c = ball.center.to_array()
    r = ball.radius
    sup = points_to_array(list(ball.support))
    if ax is None:
        fig = plt.figure(figsize=(6, 6))
        ax = fig.add_subplot(111, projection='3d' if dim == 3 else None)

    t = np.linspace(0.0, 2.0 * np.pi, resolution)
    if dim == 2:
        ax.plot(c[0] + r * np.cos(t), c[1] + r * np.sin(t), color=(0.2, 0.4, 0.85), linewidth=1.5)
        if pts.size:
            # shrink markers for dense clouds
            s = max(0.6, min(12.0, 200.0 / float(max(1, pts.shape[0]))))
            ax.scatter(pts[:, 0], pts[:, 1], s=s, color='black')
        if sup.size:
            ax.scatter(sup[:, 0], sup[:, 1], s=30, color=(0.85, 0.2, 0.2), zorder=3)
        ax.set_aspect('equal')
    else:
        u = np.linspace(0.0, np.pi, resolution // 2)
        X = c[0] + r * np.outer(np.cos(t), np.sin(u))
        Y = c[1] + r * np.outer(np.sin(t), np.sin(u))
        Z = c[2] + r * np.outer(np.ones_like(t), np.cos(u))
        ax.plot_wireframe(X, Y, Z, color=(0.2, 0.4, 0.85), linewidth=0.4, alpha=0.5)
        if pts.size:
            ax.scatter(pts[:, 0], pts[:, 1], pts[:, 2], s=4, color='black')
        if sup.size:
            ax.scatter(sup[:, 0], sup[:, 1], sup[:, 2], s=30, color=(0.85, 0.2, 0.2))
    ax.set_title(f"r = {r:.6g}, support = {ball.support_size}")

    if outname is not None:
        ax.figure.savefig(outname, dpi=150)
        plt.close(ax.figure)
        logger.info("saved enclosing ball plot to %s", outname)
    return ax
