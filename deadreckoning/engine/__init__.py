"""
Dead reckoning extrapolation engines.
"""

from .state import KinematicState, AeronauticalState
from .models import MotionModel, LinearMotionModel, NonUniformMotionModel
from .engine import (
    DeadReckoningAlgorithm,
    DeadReckoner,
    DecayingDeadReckoner,
    NonUniformMotionDeadReckoner,
    create_dead_reckoner,
)

__all__ = [
    "KinematicState",
    "AeronauticalState",
    "MotionModel",
    "LinearMotionModel",
    "NonUniformMotionModel",
    "DeadReckoningAlgorithm",
    "DeadReckoner",
    "DecayingDeadReckoner",
    "NonUniformMotionDeadReckoner",
    "create_dead_reckoner",
]
