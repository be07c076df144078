"""
Mathematical and physical constants for dead reckoning.
"""

import math

# WGS84 ellipsoid
WGS84_A = 6378137.0                  # Semi-major axis (m)
WGS84_E = 8.1819190842622e-2         # First eccentricity
WGS84_E2 = WGS84_E * WGS84_E         # First eccentricity squared
WGS84_B = WGS84_A * math.sqrt(1.0 - WGS84_E2)  # Semi-minor axis (m)

# Dead reckoning defaults
INTERPOLATION_WINDOW_S = 1.0          # Blend from old to new sample over this span
ACCELERATION_DECAY_INTERVAL_S = 5.0   # Extrapolation coasts to a halt over this span
CIRCULAR_MOTION_THRESHOLD_RAD_S = 0.5 # Angular rate above which turns are circular arcs

# ECEF -> geodetic iteration
GEODETIC_TOLERANCE = 1e-12
GEODETIC_MAX_ITER = 10
