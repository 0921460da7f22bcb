"""Per-call statistics of the enclosing-ball engine.

An ``EncloseStats`` instance is owned by the caller and filled by a single
``enclose`` call; the engine itself keeps no counters between calls.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass
class EncloseStats:
    points: int = 0
    pivot_iterations: int = 0
    mtf_calls: int = 0
    generator_calls: int = 0
    max_support_size: int = 0
    # Timing (seconds)
    elapsed: float = 0.0

    def reset(self) -> None:
        self.points = 0
        self.pivot_iterations = 0
        self.mtf_calls = 0
        self.generator_calls = 0
        self.max_support_size = 0
        self.elapsed = 0.0

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d['generator_calls_per_point'] = (self.generator_calls / self.points) if self.points else 0.0
        return d


def format_stats_table(stats_by_label: Dict[str, EncloseStats]) -> str:
    """Return a human readable multi-line table, one row per labelled run."""
    if not stats_by_label:
        return "<no stats>"
    header = ["run", "points", "pivots", "mtf", "gen", "support", "gen/pt", "ms"]
    rows = []
    for label in sorted(stats_by_label):
        s = stats_by_label[label].to_dict()
        rows.append([
            str(label), str(s['points']), str(s['pivot_iterations']), str(s['mtf_calls']),
            str(s['generator_calls']), str(s['max_support_size']),
            f"{s['generator_calls_per_point']:6.2f}", f"{s['elapsed'] * 1000.0:8.3f}",
        ])
    col_w = [len(h) for h in header]
    for r in rows:
        for i, v in enumerate(r):
            col_w[i] = max(col_w[i], len(v))

    def fmt(r):
        return " ".join(r[i].rjust(col_w[i]) for i in range(len(r)))
    lines = [fmt(header), "-" * (sum(col_w) + len(col_w) - 1)] + [fmt(r) for r in rows]
    return "\n".join(lines)


__all__ = ['EncloseStats', 'format_stats_table']
