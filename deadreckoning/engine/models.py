"""
Motion models used to extrapolate a kinematic state forward in time.
"""

from abc import ABC, abstractmethod

import numpy as np

from .state import KinematicState
from ..math.constants import CIRCULAR_MOTION_THRESHOLD_RAD_S


class MotionModel(ABC):
    """
    Base class for extrapolation strategies.

    A model receives the blended state and an extrapolation time and returns
    the extrapolated location and orientation. Rates are not extrapolated;
    the engine passes them through from the newest sample.
    """

    @abstractmethod
    def extrapolate(self, state: KinematicState, t: float):
        """
        Extrapolate location and orientation.

        Args:
            state: Blended kinematic state at t = 0
            t: Extrapolation time in seconds

        Returns:
            (location, orientation) numpy arrays
        """


class LinearMotionModel(MotionModel):
    """
    Constant acceleration position, first-order orientation.

    x(t) = x0 + v0*t + 0.5*a0*t²
    theta(t) = theta0 + omega0*t

    Orientation uses the simplified first-order form, not the full DIS
    rotational propagation.
    """

    @staticmethod
    def predict_location(state: KinematicState, t: float) -> np.ndarray:
        return state.location + state.linear_velocity * t + 0.5 * state.linear_acceleration * t**2

    @staticmethod
    def predict_orientation(state: KinematicState, t: float) -> np.ndarray:
        return state.orientation + state.angular_velocity * t

    def extrapolate(self, state: KinematicState, t: float):
        return self.predict_location(state, t), self.predict_orientation(state, t)


class NonUniformMotionModel(LinearMotionModel):
    """
    Piecewise model that switches on angular rate magnitude.

    Turns at or above ``angular_rate_threshold`` (banking, turning aircraft)
    belong to the non-uniform circular motion branch; slower rotation uses the
    linear equations. The circular branch currently falls back to the linear
    equations as well.
    """

    ANGULAR_RATE_THRESHOLD = CIRCULAR_MOTION_THRESHOLD_RAD_S

    def __init__(self, angular_rate_threshold: float = ANGULAR_RATE_THRESHOLD):
        self.angular_rate_threshold = angular_rate_threshold

    def uses_circular_motion(self, angular_velocity) -> bool:
        """True when the angular rate magnitude selects the circular branch."""
        return bool(np.linalg.norm(angular_velocity) >= self.angular_rate_threshold)

    def extrapolate(self, state: KinematicState, t: float):
        if self.uses_circular_motion(state.angular_velocity):
            return self.extrapolate_circular(state, t)
        return super().extrapolate(state, t)

    def extrapolate_circular(self, state: KinematicState, t: float):
        # TODO: replace with non-uniform circular motion equations (arc about the turn center)
        return super().extrapolate(state, t)
