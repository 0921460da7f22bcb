"""Benchmark the Welzl encloser against point count and dimension.

Expected results:
- running time grows roughly linearly with the number of points
- generator calls per point shrink as the cloud grows (move-to-front)
"""

import time

import numpy as np

from sphaera import DoubleEquivalence, EncloseStats, WelzlEncloserND, format_stats_table


def run(dimension, n_points, repeats=3, seed=42):
    rng = np.random.default_rng(seed)
    precision = DoubleEquivalence.of_epsilon(1e-10)
    encloser = WelzlEncloserND(dimension, precision, seed=seed)
    best = None
    for _ in range(repeats):
        pts = rng.normal(size=(n_points, dimension))
        stats = EncloseStats()
        t0 = time.perf_counter()
        encloser.enclose(pts, stats=stats)
        stats.elapsed = time.perf_counter() - t0
        if best is None or stats.elapsed < best.elapsed:
            best = stats
    return best


def main():
    results = {}
    for dimension in (2, 3, 5):
        for n_points in (100, 1000, 10000):
            results[f"{dimension}d-{n_points}"] = run(dimension, n_points)
    print(format_stats_table(results))


if __name__ == "__main__":
    main()
