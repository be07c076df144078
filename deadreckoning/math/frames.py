"""
Coordinate frame transformations between geodetic (WGS84), ECEF, NED and body frames.

All angles are in radians. Rotation matrices are 3x3 numpy arrays and are
applied with ``matrix @ vector``.

Frames:
- ECEF: Earth-Centered Earth-Fixed, right handed, origin at the Earth's center
- NED: North-East-Down local tangent plane at a geodetic point
- Body: fixed to the entity (x forward, y right, z down)
"""

import numpy as np

from .constants import WGS84_A, WGS84_B, WGS84_E2, GEODETIC_TOLERANCE, GEODETIC_MAX_ITER


def prime_vertical_radius(lat: float) -> float:
    """
    WGS84 radius of curvature in the prime vertical.

    Args:
        lat: Geodetic latitude in radians

    Returns:
        float: Radius N in meters
    """
    sin_lat = np.sin(lat)
    return WGS84_A / np.sqrt(1.0 - WGS84_E2 * sin_lat * sin_lat)


def geodetic_to_ecef(lat: float, lon: float, alt: float) -> np.ndarray:
    """
    Convert WGS84 geodetic coordinates to ECEF.

    Args:
        lat: Latitude in radians
        lon: Longitude in radians
        alt: Altitude above the WGS84 ellipsoid in meters

    Returns:
        np.ndarray: ECEF position [x, y, z] in meters

    Reference:
        NIMA TR8350.2, "Department of Defense World Geodetic System 1984", p. 4-4
    """
    cos_lat = np.cos(lat)
    sin_lat = np.sin(lat)
    N = prime_vertical_radius(lat)

    return np.array([
        (N + alt) * cos_lat * np.cos(lon),
        (N + alt) * cos_lat * np.sin(lon),
        ((1.0 - WGS84_E2) * N + alt) * sin_lat
    ])


def ecef_to_geodetic(x: float, y: float, z: float,
                     tol: float = GEODETIC_TOLERANCE,
                     max_iter: int = GEODETIC_MAX_ITER) -> np.ndarray:
    """
    Convert ECEF coordinates to WGS84 geodetic coordinates (iterative).

    Args:
        x, y, z: ECEF position in meters
        tol: Latitude convergence tolerance in radians
        max_iter: Maximum number of refinement iterations

    Returns:
        np.ndarray: [lat, lon, alt] with angles in radians, altitude in meters
    """
    lon = np.arctan2(y, x)
    p = np.sqrt(x * x + y * y)

    # On the polar axis latitude is exactly +-90 degrees
    if p < 1e-10:
        lat = np.copysign(np.pi / 2.0, z)
        return np.array([lat, lon, abs(z) - WGS84_B])

    lat = np.arctan2(z, p * (1.0 - WGS84_E2))
    for _ in range(max_iter):
        N = prime_vertical_radius(lat)
        alt = p / np.cos(lat) - N
        lat_new = np.arctan2(z, p * (1.0 - WGS84_E2 * N / (N + alt)))
        converged = abs(lat_new - lat) < tol
        lat = lat_new
        if converged:
            break

    alt = p / np.cos(lat) - prime_vertical_radius(lat)
    return np.array([lat, lon, alt])


def body_to_ned_matrix(roll: float, pitch: float, yaw: float) -> np.ndarray:
    """
    Rotation matrix from body frame to NED (yaw-pitch-roll sequence).

    Args:
        roll, pitch, yaw: Attitude in radians

    Returns:
        np.ndarray: 3x3 rotation matrix
    """
    cos_r, sin_r = np.cos(roll), np.sin(roll)
    cos_p, sin_p = np.cos(pitch), np.sin(pitch)
    cos_y, sin_y = np.cos(yaw), np.sin(yaw)

    return np.array([
        [cos_y * cos_p, -sin_y * cos_r + cos_y * sin_p * sin_r,  sin_y * sin_r + cos_y * sin_p * cos_r],
        [sin_y * cos_p,  cos_y * cos_r + sin_y * sin_p * sin_r, -cos_y * sin_r + sin_y * sin_p * cos_r],
        [-sin_p,         cos_p * sin_r,                          cos_p * cos_r]
    ])


def ned_to_ecef_matrix(lat: float, lon: float) -> np.ndarray:
    """
    Rotation matrix from the NED frame at (lat, lon) to ECEF.

    Columns are the north, east and down unit vectors expressed in ECEF.

    Args:
        lat: Latitude in radians
        lon: Longitude in radians

    Returns:
        np.ndarray: 3x3 rotation matrix
    """
    cos_lat, sin_lat = np.cos(lat), np.sin(lat)
    cos_lon, sin_lon = np.cos(lon), np.sin(lon)

    return np.array([
        [-sin_lat * cos_lon, -sin_lon, -cos_lat * cos_lon],
        [-sin_lat * sin_lon,  cos_lon, -cos_lat * sin_lon],
        [ cos_lat,            0.0,     -sin_lat]
    ])


def body_to_ecef_matrix(lat: float, lon: float,
                        roll: float, pitch: float, yaw: float) -> np.ndarray:
    """Rotation matrix from body frame to ECEF: (NED->ECEF) @ (Body->NED)."""
    return ned_to_ecef_matrix(lat, lon) @ body_to_ned_matrix(roll, pitch, yaw)
