"""
Mathematical utilities for dead reckoning calculations.
"""

from .utils import as_vector3
from .interpolation import (
    linear_interpolate,
    cubic_interpolate,
    catmull_rom_spline_interpolate,
    hermite_interpolate,
    ease_out_sine,
)
from .frames import (
    prime_vertical_radius,
    geodetic_to_ecef,
    ecef_to_geodetic,
    body_to_ned_matrix,
    ned_to_ecef_matrix,
    body_to_ecef_matrix,
)
from .constants import *

__all__ = [
    "as_vector3",
    "linear_interpolate",
    "cubic_interpolate",
    "catmull_rom_spline_interpolate",
    "hermite_interpolate",
    "ease_out_sine",
    "prime_vertical_radius",
    "geodetic_to_ecef",
    "ecef_to_geodetic",
    "body_to_ned_matrix",
    "ned_to_ecef_matrix",
    "body_to_ecef_matrix",
]
