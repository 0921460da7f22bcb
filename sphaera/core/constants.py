"""Central numerical tolerances.

Every tolerance used by the enclosing-ball engine and the generators is
defined here so that precision contexts are built from one place instead of
from literals scattered across the code base.
"""
from __future__ import annotations

# Distance tolerances
EPS_DISTANCE: float = 1e-10       # absolute tolerance for distance/radius comparisons
EPS_RELATIVE: float = 0.0         # relative tolerance (disabled by default)

__all__ = [
    'EPS_DISTANCE',
    'EPS_RELATIVE',
]
