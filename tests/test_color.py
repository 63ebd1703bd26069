"""Tests for color conversions."""

import pytest
import numpy as np

from sphereforge.vec3 import Vec3, Color
from sphereforge.color import (
    normal_to_color, linear_to_gamma, to_rgb8, to_rgb8_array
)


class TestNormalToColor:
    """Test normal_to_color mapping."""

    def test_axes(self):
        assert normal_to_color(Vec3(0, 0, -1)) == Color(0.5, 0.5, 0.0)
        assert normal_to_color(Vec3(1, 0, 0)) == Color(1.0, 0.5, 0.5)

    def test_range(self):
        rng = np.random.default_rng(0)
        for _ in range(100):
            color = normal_to_color(Vec3.random_unit_vector(rng))
            assert all(0.0 <= c <= 1.0 for c in color)


class TestGamma:
    """Test linear_to_gamma."""

    def test_square_root(self):
        assert linear_to_gamma(0.25) == 0.5
        assert linear_to_gamma(1.0) == 1.0

    def test_non_positive_clamped(self):
        assert linear_to_gamma(0.0) == 0.0
        assert linear_to_gamma(-0.5) == 0.0


class TestQuantization:
    """Test 8-bit conversion."""

    def test_black_and_white(self):
        assert to_rgb8(Color(0, 0, 0)) == (0, 0, 0)
        assert to_rgb8(Color(1, 1, 1)) == (255, 255, 255)

    def test_gamma_applied(self):
        # sqrt(0.25) = 0.5 -> int(127.9995)
        assert to_rgb8(Color(0.25, 0.25, 0.25)) == (127, 127, 127)

    def test_out_of_range_clamped(self):
        assert to_rgb8(Color(-1, 2, 1.0001)) == (0, 255, 255)

    def test_nan_maps_to_black(self):
        assert to_rgb8(Color(float("nan"), 0.25, 1.0)) == (0, 127, 255)
        ldr = to_rgb8_array(np.array([[np.nan, 0.25, 1.0]]))
        assert ldr[0].tolist() == [0, 127, 255]

    def test_infinity_saturates(self):
        assert to_rgb8(Color(float("inf"), 0, 0)) == (255, 0, 0)
        assert to_rgb8_array(np.array([[np.inf, 0.0, 0.0]]))[0].tolist() == [255, 0, 0]

    def test_array_matches_scalar(self):
        rng = np.random.default_rng(5)
        colors = rng.uniform(-0.2, 1.2, (4, 5, 3))
        ldr = to_rgb8_array(colors)
        assert ldr.dtype == np.uint8
        assert ldr.shape == (4, 5, 3)
        for y in range(4):
            for x in range(5):
                assert tuple(ldr[y, x]) == to_rgb8(Color(*colors[y, x]))
