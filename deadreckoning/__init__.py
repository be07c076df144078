"""
Dead reckoning for sparsely updated entities.

This package provides:
- Dead reckoning engines that blend and extrapolate kinematic state
- Kinematic state types with WGS84/NED/body frame conversion
- Interpolation and coordinate frame utilities
"""

__version__ = "1.0.0"
__author__ = "Dead Reckoning Team"

from .engine import (
    KinematicState,
    AeronauticalState,
    DeadReckoner,
    DecayingDeadReckoner,
    NonUniformMotionDeadReckoner,
    create_dead_reckoner,
)
from .config import Config
from .math import linear_interpolate, geodetic_to_ecef

__all__ = [
    "KinematicState",
    "AeronauticalState",
    "DeadReckoner",
    "DecayingDeadReckoner",
    "NonUniformMotionDeadReckoner",
    "create_dead_reckoner",
    "Config",
    "linear_interpolate",
    "geodetic_to_ecef",
]
