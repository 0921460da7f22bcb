import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from sphaera import (
    WelzlEncloser, WelzlEncloser3D, enclose, DiskGenerator, SphereGenerator, HypersphereGenerator,
    EnclosingBall, EncloseStats, Point, DoubleEquivalence, EncloserConfig,
    EmptyInputError, NonFiniteCoordinateError, DegenerateConfigurationError, EnclosingStateError,
)


def assert_encloses(ball, pts, precision):
    for p in pts:
        assert ball.contains(p, precision), f"{p} outside {ball}"


def assert_minimal(ball, tol=1e-9):
    """A ball is the minimum enclosing ball of the points it contains iff its
    center lies in the convex hull of the support points on its boundary.
    """
    S = np.array([p.coords for p in ball.support])
    if len(S) == 1:
        assert ball.radius == 0.0
        return
    A = np.vstack([S.T, np.ones(len(S))])
    b = np.append(ball.center.to_array(), 1.0)
    lam, *_ = np.linalg.lstsq(A, b, rcond=None)
    assert np.allclose(A @ lam, b, atol=tol), "center not in the affine hull of the support"
    assert np.all(lam >= -tol), f"center outside the support hull (weights {lam})"
    for p in ball.support:
        assert abs(ball.center.distance(p) - ball.radius) < tol


class TestClosedForms:

    def test_single_point(self, precision):
        ball = enclose([(1.5, -2.0)], DiskGenerator(precision), precision)
        assert ball.center == Point.of(1.5, -2.0)
        assert ball.radius == 0.0

    def test_duplicates_equal_single_point(self, precision):
        p = Point.of(3, 4, 5)
        ball = enclose([p, p, p], SphereGenerator(precision), precision)
        single = enclose([p], SphereGenerator(precision), precision)
        assert ball.center == single.center == p
        assert ball.radius == single.radius == 0.0

    def test_two_points_diameter(self, precision):
        ball = enclose([(0, 0), (6, 8)], DiskGenerator(precision), precision)
        assert ball.center.to_array() == pytest.approx([3.0, 4.0])
        assert ball.radius == pytest.approx(5.0)

    def test_right_triangle(self, precision):
        ball = enclose([(0, 0), (4, 0), (0, 3)], DiskGenerator(precision), precision)
        assert ball.center.to_array() == pytest.approx([2.0, 1.5])
        assert ball.radius == pytest.approx(2.5)

    def test_obtuse_triangle_uses_longest_side(self, precision):
        ball = enclose([(0, 0), (10, 0), (5, 1)], DiskGenerator(precision), precision)
        assert ball.center.to_array() == pytest.approx([5.0, 0.0])
        assert ball.radius == pytest.approx(5.0)
        assert ball.support_size == 2

    def test_coplanar_square_in_3d(self, precision):
        pts = [(0, 0, 0), (2, 0, 0), (1, 1, 0), (1, -1, 0)]
        ball = enclose(pts, SphereGenerator(precision), precision)
        assert ball.center.to_array() == pytest.approx([1.0, 0.0, 0.0], abs=1e-10)
        assert ball.radius == pytest.approx(1.0)
        for p in pts:
            assert ball.is_on_boundary(p, precision)

    def test_regular_tetrahedron(self, precision):
        pts = [(1, 1, 1), (1, -1, -1), (-1, 1, -1), (-1, -1, 1)]
        ball = enclose(pts, SphereGenerator(precision), precision)
        assert ball.center.to_array() == pytest.approx([0.0, 0.0, 0.0], abs=1e-10)
        assert ball.radius == pytest.approx(math.sqrt(3.0))

    def test_cube_vertices(self, precision):
        pts = [(x, y, z) for x in (0, 1) for y in (0, 1) for z in (0, 1)]
        ball = enclose(pts, SphereGenerator(precision), precision, seed=3)
        assert ball.center.to_array() == pytest.approx([0.5, 0.5, 0.5])
        assert ball.radius == pytest.approx(math.sqrt(3.0) / 2)

    def test_cocircular_polygon_in_3d(self, precision):
        t = np.linspace(0, 2 * np.pi, 12, endpoint=False)
        pts = np.column_stack([1 + 2 * np.cos(t), 1 + 2 * np.sin(t), np.zeros_like(t)])
        ball = enclose(pts, SphereGenerator(precision), precision, seed=11)
        assert ball.center.to_array() == pytest.approx([1.0, 1.0, 0.0], abs=1e-9)
        assert ball.radius == pytest.approx(2.0)

    def test_one_dimensional_interval(self, precision):
        ball = enclose([(3,), (-1,), (7,), (2,)], HypersphereGenerator(1, precision), precision)
        assert ball.center == Point.of(3)
        assert ball.radius == pytest.approx(4.0)


class TestRandomClouds:

    @pytest.mark.parametrize('seed', [0, 1, 2, 3, 4])
    def test_2d_cloud(self, precision, seed):
        pts = np.random.default_rng(seed).normal(size=(200, 2))
        ball = enclose(pts, DiskGenerator(precision), precision, seed=seed)
        assert_encloses(ball, pts.tolist(), precision)
        assert_minimal(ball)
        assert 2 <= ball.support_size <= 3

    @pytest.mark.parametrize('seed', [0, 1, 2])
    def test_3d_cloud(self, precision, seed):
        pts = np.random.default_rng(100 + seed).uniform(-3, 3, size=(300, 3))
        ball = enclose(pts, SphereGenerator(precision), precision, seed=seed)
        assert_encloses(ball, pts.tolist(), precision)
        assert_minimal(ball)
        assert ball.support_size <= 4

    def test_points_on_sphere(self, precision, rng):
        v = rng.normal(size=(100, 3))
        v /= np.linalg.norm(v, axis=1)[:, None]
        ball = enclose(v, SphereGenerator(precision), precision)
        assert_encloses(ball, v.tolist(), precision)
        assert ball.radius <= 1.0 + 1e-9
        assert_minimal(ball)

    def test_5d_cloud(self, precision, rng):
        pts = rng.normal(size=(150, 5))
        ball = enclose(pts, HypersphereGenerator(5, precision), precision)
        assert_encloses(ball, pts.tolist(), precision)
        assert_minimal(ball)
        assert ball.support_size <= 6


class TestDeterminism:

    def test_input_order_does_not_matter(self, precision, rng):
        pts = rng.uniform(-10, 10, size=(80, 3))
        gen = SphereGenerator(precision)
        reference = enclose(pts, gen, precision, seed=0)
        for k in range(5):
            shuffled = pts[rng.permutation(len(pts))]
            ball = enclose(shuffled, gen, precision, seed=k + 1)
            assert ball.center.distance(reference.center) < 1e-8
            assert ball.radius == pytest.approx(reference.radius, abs=1e-8)

    def test_unseeded_calls_agree(self, precision, rng):
        pts = rng.normal(size=(60, 2))
        encloser = WelzlEncloser(DiskGenerator(precision), precision)
        a = encloser.enclose(pts)
        b = encloser.enclose(pts)
        assert a.center.distance(b.center) < 1e-8
        assert a.radius == pytest.approx(b.radius, abs=1e-8)

    def test_same_seed_same_ball(self, precision, rng):
        pts = rng.normal(size=(60, 3))
        encloser = WelzlEncloser(SphereGenerator(precision), precision, seed=42)
        assert encloser.enclose(pts) == encloser.enclose(pts)

    def test_without_shuffle(self, precision, rng):
        pts = rng.normal(size=(60, 2))
        ordered = WelzlEncloser(DiskGenerator(precision), precision, shuffle=False).enclose(pts)
        shuffled = WelzlEncloser(DiskGenerator(precision), precision, seed=1).enclose(pts)
        assert ordered.radius == pytest.approx(shuffled.radius, abs=1e-8)

    def test_shared_instance_across_threads(self, precision, rng):
        clouds = [rng.normal(size=(500, 3)) * (k + 1) for k in range(16)]
        encloser = WelzlEncloser3D(precision, seed=7)
        sequential = [encloser.enclose(c) for c in clouds]
        with ThreadPoolExecutor(max_workers=8) as pool:
            concurrent = list(pool.map(encloser.enclose, clouds))
        assert concurrent == sequential
        for cloud, ball in zip(clouds, concurrent):
            assert_encloses(ball, cloud.tolist(), precision)

    def test_caller_collection_untouched(self, precision):
        pts = [Point.of(5, 0), Point.of(0, 0), Point.of(1, 3), Point.of(-2, 1)]
        before = list(pts)
        enclose(pts, DiskGenerator(precision), precision, seed=7)
        assert pts == before


class TestErrors:

    def test_empty_input(self, precision):
        with pytest.raises(EmptyInputError):
            enclose([], SphereGenerator(precision), precision)

    def test_empty_array_input(self, precision):
        with pytest.raises(EmptyInputError):
            enclose(np.empty((0, 2)), DiskGenerator(precision), precision)
        with pytest.raises(EmptyInputError):
            enclose(np.array([]), DiskGenerator(precision), precision)

    @pytest.mark.parametrize('bad', [math.nan, math.inf, -math.inf])
    def test_non_finite_coordinates(self, precision, bad):
        with pytest.raises(NonFiniteCoordinateError):
            enclose([(0, 0), (1, bad)], DiskGenerator(precision), precision)

    def test_dimension_mismatch(self, precision):
        with pytest.raises(ValueError):
            enclose([(0, 0), (1, 1, 1)], DiskGenerator(precision), precision)
        with pytest.raises(ValueError):
            enclose([(0, 0, 0)], DiskGenerator(precision), precision)

    def test_generator_error_propagates_unchanged(self, precision):
        err = DegenerateConfigurationError("boom")

        class FailingGenerator:
            dimension = 2

            def ball_on_support(self, support):
                raise err

        with pytest.raises(DegenerateConfigurationError) as exc:
            enclose([(0, 0), (1, 1)], FailingGenerator(), precision)
        assert exc.value is err

    def test_broken_generator_detected(self, precision):
        class OriginGenerator:
            """Always answers the zero ball at the origin."""
            dimension = 2

            def ball_on_support(self, support):
                return EnclosingBall((0, 0), 0.0, support[:1])

        with pytest.raises(EnclosingStateError):
            enclose([(1, 0), (5, 5)], OriginGenerator(), precision, seed=0)


class TestEngineWiring:

    def test_from_config(self):
        cfg = EncloserConfig(epsilon=1e-8, seed=5)
        encloser = WelzlEncloser.from_config(DiskGenerator(cfg.precision()), cfg)
        assert encloser.precision == DoubleEquivalence(1e-8, 0.0)
        assert encloser.seed == 5
        assert encloser.dimension == 2

    def test_stats_are_filled(self, precision, rng):
        pts = rng.normal(size=(500, 3))
        stats = EncloseStats()
        enclose(pts, SphereGenerator(precision), precision, seed=0, stats=stats)
        assert stats.points == 500
        assert stats.pivot_iterations >= 1
        assert stats.mtf_calls >= stats.generator_calls >= 1
        assert 1 <= stats.max_support_size <= 4
        assert stats.elapsed >= 0.0

    def test_stats_reset_between_calls(self, precision):
        stats = EncloseStats()
        enclose([(0, 0), (1, 0), (0, 1)], DiskGenerator(precision), precision, stats=stats)
        enclose([(0, 0)], DiskGenerator(precision), precision, stats=stats)
        assert stats.points == 1
        assert stats.max_support_size == 1

    @pytest.mark.parametrize('seed', range(10))
    def test_far_coordinates_with_relative_tolerance(self, seed):
        scaled = DoubleEquivalence(relative=1e-12)
        t = np.random.default_rng(seed).uniform(0, 2 * np.pi, size=60)
        pts = np.column_stack([3e6 + 1e6 * np.cos(t), -2e6 + 1e6 * np.sin(t)])
        ball = enclose(pts, DiskGenerator(scaled), scaled, seed=seed)
        assert_encloses(ball, pts.tolist(), scaled)
        assert ball.radius == pytest.approx(1e6, rel=1e-9)
        assert ball.center.to_array() == pytest.approx([3e6, -2e6], rel=1e-9)

    def test_tolerance_controls_boundary_points(self):
        loose = DoubleEquivalence.of_epsilon(0.1)
        pts = [(0, 0), (2, 0), (1, 1.05)]
        ball = enclose(pts, DiskGenerator(loose), loose, seed=0)
        # (1, 1.05) is within 0.1 of the circle on the diameter [(0,0), (2,0)]
        assert ball.radius == pytest.approx(1.0)
        assert ball.support_size == 2
