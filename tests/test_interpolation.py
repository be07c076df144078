#!/usr/bin/env python3
"""
Unit tests for interpolation functions.
"""

import math
import unittest
import numpy as np
import sys
import os

# Add package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from deadreckoning.math.interpolation import (
    linear_interpolate,
    cubic_interpolate,
    catmull_rom_spline_interpolate,
    hermite_interpolate,
    ease_out_sine,
)

EPSILON = 1e-6

class TestLinearInterpolate(unittest.TestCase):
    """Test linear_interpolate."""

    def test_bounds(self):
        """Endpoints input should return endpoints."""
        for y1, y2 in [(0.0, 10.0), (-3.5, 7.25), (1e6, -1e6), (2.0, 2.0)]:
            self.assertAlmostEqual(linear_interpolate(y1, y2, 0.0), y1, delta=EPSILON)
            self.assertAlmostEqual(linear_interpolate(y1, y2, 1.0), y2, delta=EPSILON)

    def test_middle(self):
        """Middle should return middle of endpoints."""
        self.assertAlmostEqual(linear_interpolate(0.0, 10.0, 0.5), 5.0, delta=EPSILON)

    def test_extrapolate(self):
        """mu outside [0, 1] continues the line."""
        self.assertAlmostEqual(linear_interpolate(0.0, 10.0, 2.0), 20.0, delta=EPSILON)
        self.assertAlmostEqual(linear_interpolate(0.0, 10.0, -1.0), -10.0, delta=EPSILON)

    def test_component_wise(self):
        """Arrays are interpolated per component."""
        result = linear_interpolate(np.array([0.0, 10.0, -4.0]), np.array([10.0, 30.0, 4.0]), 0.25)
        np.testing.assert_allclose(result, [2.5, 15.0, -2.0])

class TestCubicInterpolate(unittest.TestCase):
    """Test cubic_interpolate."""

    def test_passes_through_segment_endpoints(self):
        """Curve starts at y1 and ends at y2."""
        self.assertAlmostEqual(cubic_interpolate(-2.0, 1.0, 4.0, 3.0, 0.0), 1.0, delta=EPSILON)
        self.assertAlmostEqual(cubic_interpolate(-2.0, 1.0, 4.0, 3.0, 1.0), 4.0, delta=EPSILON)

    def test_collinear_points(self):
        """Evenly spaced collinear points give the midpoint at mu = 0.5."""
        self.assertAlmostEqual(cubic_interpolate(0.0, 1.0, 2.0, 3.0, 0.5), 1.5, delta=EPSILON)

    def test_coefficients(self):
        """Closed form a0*mu³ + a1*mu² + a2*mu + a3."""
        y0, y1, y2, y3, mu = 0.0, 1.0, 3.0, 6.0, 0.25
        a0 = y3 - y2 - y0 + y1
        a1 = y0 - y1 - a0
        a2 = y2 - y0
        expected = a0 * mu**3 + a1 * mu**2 + a2 * mu + y1
        self.assertAlmostEqual(cubic_interpolate(y0, y1, y2, y3, mu), expected, delta=EPSILON)

class TestCatmullRomSplineInterpolate(unittest.TestCase):
    """Test catmull_rom_spline_interpolate."""

    def test_passes_through_segment_endpoints(self):
        """Curve starts at y1 and ends at y2."""
        self.assertAlmostEqual(catmull_rom_spline_interpolate(-10.0, 0.0, 10.0, 20.0, 0.0), 0.0, delta=EPSILON)
        self.assertAlmostEqual(catmull_rom_spline_interpolate(-10.0, 0.0, 10.0, 20.0, 1.0), 10.0, delta=EPSILON)

    def test_collinear_points_stay_linear(self):
        """Evenly spaced control points reproduce the straight line."""
        for i in range(11):
            mu = i / 10.0
            self.assertAlmostEqual(
                catmull_rom_spline_interpolate(-10.0, 0.0, 10.0, 20.0, mu), 10.0 * mu, delta=EPSILON
            )

    def test_vector_control_points(self):
        """Arrays of control points produce a point per component."""
        result = catmull_rom_spline_interpolate(
            np.array([-10.0, 0.0]), np.array([0.0, 0.0]),
            np.array([10.0, 100.0]), np.array([20.0, 100.0]), 1.0
        )
        np.testing.assert_allclose(result, [10.0, 100.0])

class TestHermiteInterpolate(unittest.TestCase):
    """Test hermite_interpolate."""

    def test_passes_through_segment_endpoints(self):
        """Curve starts at y1 and ends at y2 for any tension and bias."""
        for tension, bias in [(0.0, 0.0), (1.0, 0.0), (-1.0, 0.5), (0.3, -0.7)]:
            self.assertAlmostEqual(hermite_interpolate(0.0, 1.0, 3.0, 6.0, 0.0, tension, bias), 1.0, delta=EPSILON)
            self.assertAlmostEqual(hermite_interpolate(0.0, 1.0, 3.0, 6.0, 1.0, tension, bias), 3.0, delta=EPSILON)

    def test_matches_catmull_rom_at_zero_tension_and_bias(self):
        """Zero tension and bias give the Catmull-Rom tangents."""
        for i in range(11):
            mu = i / 10.0
            self.assertAlmostEqual(
                hermite_interpolate(1.0, 4.0, 2.0, 7.0, mu, 0.0, 0.0),
                catmull_rom_spline_interpolate(1.0, 4.0, 2.0, 7.0, mu),
                delta=EPSILON
            )

    def test_full_tension_has_flat_tangents(self):
        """Tension 1 zeroes the tangents, giving a smoothstep between y1 and y2."""
        self.assertAlmostEqual(hermite_interpolate(0.0, 1.0, 3.0, 6.0, 0.5, 1.0, 0.0), 2.0, delta=EPSILON)
        # smoothstep(0.25) = 0.15625
        self.assertAlmostEqual(hermite_interpolate(0.0, 1.0, 3.0, 6.0, 0.25, 1.0, 0.0), 1.3125, delta=EPSILON)

    def test_tension_and_bias(self):
        """Hand-computed value with tension 0.5 and bias 0.5."""
        # m0 = 0.625, m1 = 1.125
        self.assertAlmostEqual(hermite_interpolate(0.0, 1.0, 3.0, 6.0, 0.5, 0.5, 0.5), 1.9375, delta=EPSILON)

class TestEaseOutSine(unittest.TestCase):
    """Test ease_out_sine."""

    def test_bounds(self):
        """Starts at start and ends at end."""
        self.assertAlmostEqual(ease_out_sine(0.0, 5.0, 0.0), 0.0, delta=EPSILON)
        self.assertAlmostEqual(ease_out_sine(0.0, 5.0, 1.0), 5.0, delta=EPSILON)
        self.assertAlmostEqual(ease_out_sine(2.0, 4.0, 1.0), 4.0, delta=EPSILON)

    def test_eases_out(self):
        """Progress is ahead of linear and slows toward the end."""
        self.assertAlmostEqual(ease_out_sine(0.0, 5.0, 0.5), 5.0 * math.sin(math.pi / 4), delta=EPSILON)
        self.assertGreater(ease_out_sine(0.0, 1.0, 0.5), 0.5)

        steps = [ease_out_sine(0.0, 1.0, i / 10.0) for i in range(11)]
        deltas = np.diff(steps)
        self.assertTrue(np.all(deltas > 0))
        self.assertTrue(np.all(np.diff(deltas) < 0))

if __name__ == '__main__':
    unittest.main()
