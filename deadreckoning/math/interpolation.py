"""
Interpolation and curve-fitting functions.

Every function is pure and works on scalars or numpy arrays alike, in which
case it is applied component-wise. ``mu`` is nominally in [0, 1]; values
outside that range extrapolate along the same curve.

Reference: http://paulbourke.net/miscellaneous/interpolation/
"""

import math


def linear_interpolate(y1, y2, mu):
    """
    Linear interpolate between y1 and y2.

    Args:
        y1: Value at mu = 0
        y2: Value at mu = 1
        mu: Fraction along the segment (not clamped)

    Returns:
        Interpolated value
    """
    return y1 * (1 - mu) + y2 * mu


def cubic_interpolate(y0, y1, y2, y3, mu):
    """
    Cubic interpolate between y1 and y2.

    y0 and y3 are the outer control points flanking the segment. They can be
    synthesized from the slope at each endpoint.
    """
    mu2 = mu * mu
    a0 = y3 - y2 - y0 + y1
    a1 = y0 - y1 - a0
    a2 = y2 - y0
    a3 = y1

    return a0 * mu * mu2 + a1 * mu2 + a2 * mu + a3


def catmull_rom_spline_interpolate(y0, y1, y2, y3, mu):
    """
    Catmull-Rom spline interpolate between y1 and y2.

    The curve passes through y1 at mu = 0 and y2 at mu = 1, with tangents
    taken from the neighbouring points y0 and y3.
    """
    mu2 = mu * mu
    a0 = -0.5 * y0 + 1.5 * y1 - 1.5 * y2 + 0.5 * y3
    a1 = y0 - 2.5 * y1 + 2 * y2 - 0.5 * y3
    a2 = -0.5 * y0 + 0.5 * y2
    a3 = y1

    return a0 * mu * mu2 + a1 * mu2 + a2 * mu + a3


def hermite_interpolate(y0, y1, y2, y3, mu, tension=0.0, bias=0.0):
    """
    Hermite interpolate between y1 and y2 with points on either side y0 and y3.

    Args:
        y0, y1, y2, y3: Control points
        mu: Fraction along the y1 -> y2 segment
        tension: 1 is tight, 0 normal, -1 loose
        bias: 0 is even, positive skews toward the first segment,
              negative toward the second

    Returns:
        Interpolated value
    """
    mu2 = mu * mu
    mu3 = mu2 * mu
    m0 = (y1 - y0) * (1 + bias) * (1 - tension) / 2
    m0 += (y2 - y1) * (1 - bias) * (1 - tension) / 2
    m1 = (y2 - y1) * (1 + bias) * (1 - tension) / 2
    m1 += (y3 - y2) * (1 - bias) * (1 - tension) / 2
    a0 = 2 * mu3 - 3 * mu2 + 1
    a1 = mu3 - 2 * mu2 + mu
    a2 = mu3 - mu2
    a3 = -2 * mu3 + 3 * mu2

    return a0 * y1 + a1 * m0 + a2 * m1 + a3 * y2


def ease_out_sine(start, end, mu):
    """Ease from start to end, fast at first and flattening as mu reaches 1."""
    return (end - start) * math.sin(mu * (math.pi / 2.0)) + start
