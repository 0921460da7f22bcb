"""
sphaera example: smallest enclosing circle and sphere

This example demonstrates the basic usage of sphaera:
1. Build a precision context
2. Enclose a planar point cloud with the 2D encloser
3. Enclose a 3D point cloud and inspect the support points
4. Plot both results

Perfect for: first-time users, quick start guide
"""

import numpy as np

from sphaera import (
    DoubleEquivalence, WelzlEncloser2D, WelzlEncloser3D, EncloseStats,
    format_stats_table, plot_enclosing_ball, configure_logging,
)


def main():
    configure_logging('INFO')
    print("=" * 60)
    print("sphaera example: enclosing balls")
    print("=" * 60)

    rng = np.random.default_rng(7)
    precision = DoubleEquivalence.of_epsilon(1e-10)

    print("\n[1] Smallest enclosing circle of 500 planar points...")
    cloud2 = rng.normal(size=(500, 2))
    stats2 = EncloseStats()
    circle = WelzlEncloser2D(precision).enclose(cloud2, stats=stats2)
    print(f"  center = {circle.center}, radius = {circle.radius:.6f}")
    print(f"  support points: {[str(p) for p in circle.support]}")

    print("\n[2] Smallest enclosing sphere of 2000 points in a box...")
    cloud3 = rng.uniform(-1.0, 1.0, size=(2000, 3))
    stats3 = EncloseStats()
    sphere = WelzlEncloser3D(precision).enclose(cloud3, stats=stats3)
    print(f"  center = {sphere.center}, radius = {sphere.radius:.6f}")
    on_boundary = sum(sphere.is_on_boundary(p, precision) for p in cloud3)
    print(f"  points on the boundary: {on_boundary}")

    print("\n[3] Engine statistics")
    print(format_stats_table({'circle': stats2, 'sphere': stats3}))

    print("\n[4] Plotting...")
    plot_enclosing_ball(cloud2, circle, outname="enclosing_circle.png")
    plot_enclosing_ball(cloud3, sphere, outname="enclosing_sphere.png")
    print("  wrote enclosing_circle.png and enclosing_sphere.png")


if __name__ == "__main__":
    main()
