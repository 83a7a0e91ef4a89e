"""Tests for the planet outline."""

import math

import numpy as np
import pytest

from planetgen.rng import view_point
from planetgen.terrain.config import NoiseKind, ShapeConfig
from planetgen.terrain.noise import sample_noise
from planetgen.terrain.shape import (
    SECOND_SAMPLE_OFFSET,
    angle_of,
    grid_center,
    map_size_for,
    surface_radius,
)


class TestAngleOf:
    """Tests for the four-quadrant angle."""

    @pytest.mark.parametrize(
        "x,y,expected",
        [
            (1.0, 0.0, 0.0),
            (1.0, 1.0, math.pi / 4),
            (-1.0, 1.0, 3 * math.pi / 4),
            (-1.0, 0.0, math.pi),
            (-1.0, -1.0, 5 * math.pi / 4),
            (1.0, -1.0, 7 * math.pi / 4),
        ],
    )
    def test_quadrants(self, x: float, y: float, expected: float) -> None:
        assert angle_of((0.0, 0.0), x, y) == pytest.approx(expected)

    def test_vertical_axis_above(self) -> None:
        assert angle_of((2.0, 2.0), 2.0, 5.0) == pytest.approx(math.pi / 2)

    def test_vertical_axis_below(self) -> None:
        assert angle_of((2.0, 2.0), 2.0, 0.0) == pytest.approx(3 * math.pi / 2)

    def test_origin_is_zero(self) -> None:
        assert angle_of((2.0, 2.0), 2.0, 2.0) == 0.0

    def test_vertical_axis_finite(self) -> None:
        ys = np.arange(-5.0, 6.0)
        angles = angle_of((0.0, 0.0), np.zeros_like(ys), ys)
        assert np.all(np.isfinite(angles))

    def test_range(self) -> None:
        rng = np.random.default_rng(0)
        x = rng.uniform(-10, 10, 1000)
        y = rng.uniform(-10, 10, 1000)
        angles = angle_of((0.0, 0.0), x, y)
        assert angles.min() >= 0.0
        assert angles.max() < 2 * math.pi

    def test_tiny_negative_dy_wraps_to_zero(self) -> None:
        assert angle_of((0.0, 0.0), 1.0, -1e-300) < 2 * math.pi


class TestSurfaceRadius:
    """Tests for surface_radius."""

    def test_no_deformation_is_radius(self) -> None:
        shape = ShapeConfig(radius=50.0, deformation=0.0, deformation_frequency=3.0)
        angles = np.linspace(0, 2 * math.pi, 64, endpoint=False)
        np.testing.assert_array_equal(surface_radius(1, angles, shape), 50.0)

    def test_bounded_by_radius_and_deformation(self) -> None:
        shape = ShapeConfig(radius=50.0, deformation=20.0, deformation_frequency=5.0)
        angles = np.linspace(0, 2 * math.pi, 360, endpoint=False)
        surface = surface_radius(7, angles, shape)
        assert surface.min() >= 50.0
        # Gradient noise samples can overshoot 1 slightly
        assert surface.max() <= 50.0 + 20.0 * 1.1**4

    def test_matches_formula(self) -> None:
        shape = ShapeConfig(
            radius=120.0, deformation=40.0, deformation_frequency=2.5, kind=NoiseKind.PERLIN
        )
        angle = 1.234
        r = 120.0 * 2.5 / 100.0
        vx, vy = view_point(11)
        sx = vx + math.cos(angle) * r
        sy = vy + math.sin(angle) * r
        n1 = sample_noise(NoiseKind.PERLIN, sx, sy)
        n2 = sample_noise(
            NoiseKind.PERLIN, sx + SECOND_SAMPLE_OFFSET, sy + SECOND_SAMPLE_OFFSET
        )
        expected = 120.0 + 40.0 * float(n1 * n2) ** 2
        assert float(surface_radius(11, angle, shape)) == pytest.approx(expected)

    def test_zero_frequency_is_round(self) -> None:
        """With zero frequency every angle samples the same point."""
        shape = ShapeConfig(radius=80.0, deformation=30.0, deformation_frequency=0.0)
        angles = np.linspace(0, 2 * math.pi, 16, endpoint=False)
        surface = surface_radius(3, angles, shape)
        np.testing.assert_allclose(surface, surface[0])

    def test_deterministic(self) -> None:
        shape = ShapeConfig()
        angles = np.linspace(0, 2 * math.pi, 100)
        np.testing.assert_array_equal(
            surface_radius(5, angles, shape), surface_radius(5, angles, shape)
        )

    def test_seed_changes_outline(self) -> None:
        shape = ShapeConfig(radius=100.0, deformation=50.0, deformation_frequency=4.0)
        angles = np.linspace(0, 2 * math.pi, 100)
        assert not np.allclose(surface_radius(5, angles, shape), surface_radius(6, angles, shape))


class TestMapSize:
    """Tests for grid sizing."""

    def test_floor_of_diameter_plus_deformation(self) -> None:
        assert map_size_for(ShapeConfig(radius=100.4, deformation=10.3)) == 221

    def test_small(self) -> None:
        assert map_size_for(ShapeConfig(radius=2.0, deformation=0.0)) == 4

    def test_odd_center_is_fractional(self) -> None:
        assert grid_center(5) == (2.5, 2.5)
