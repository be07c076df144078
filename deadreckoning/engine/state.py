"""
Kinematic state representation for dead reckoning.
"""

from dataclasses import dataclass, field, fields

import numpy as np

from ..math.utils import as_vector3
from ..math.interpolation import linear_interpolate
from ..math.frames import (
    geodetic_to_ecef,
    ecef_to_geodetic,
    ned_to_ecef_matrix,
    body_to_ecef_matrix,
)


def _zeros() -> np.ndarray:
    return np.zeros(3)


@dataclass(frozen=True, eq=False)
class KinematicState:
    """
    An entity's kinematic state, every vector in the ECEF frame.

    - location: Position (x, y, z) in meters
    - orientation: (roll, pitch, yaw) in radians
    - linear_velocity: (x, y, z) in m/s
    - linear_acceleration: (x, y, z) in m/s²
    - angular_velocity: (roll rate, pitch rate, yaw rate) in rad/s

    Instances are values: the arrays are read-only and every computation
    produces a new state. A default instance is the all-zero state.
    """

    location: np.ndarray = field(default_factory=_zeros)
    orientation: np.ndarray = field(default_factory=_zeros)
    linear_velocity: np.ndarray = field(default_factory=_zeros)
    linear_acceleration: np.ndarray = field(default_factory=_zeros)
    angular_velocity: np.ndarray = field(default_factory=_zeros)

    def __post_init__(self):
        for f in fields(self):
            vector = as_vector3(getattr(self, f.name), f.name)
            vector.flags.writeable = False
            object.__setattr__(self, f.name, vector)

    @classmethod
    def from_aeronautical_frame(cls, lat_lon_alt, orientation_ned, linear_velocity_ned,
                                linear_acceleration_body, angular_velocity_body) -> 'KinematicState':
        """
        Create a state from common aeronautical parameters.

        Accelerometers usually report PROPER acceleration. It must be converted
        to body acceleration (gravity-compensated, i.e. the free-fall vector
        subtracted) before it is passed in; no compensation happens here.

        Args:
            lat_lon_alt: WGS84 latitude (rad), longitude (rad), altitude above the ellipsoid (m)
            orientation_ned: (roll, pitch, yaw) attitude in the NED frame (rad)
            linear_velocity_ned: (north, east, down) velocity (m/s)
            linear_acceleration_body: Body frame acceleration (m/s²)
            angular_velocity_body: Body frame (roll, pitch, yaw) rates (rad/s)

        Returns:
            KinematicState in ECEF
        """
        lat, lon, alt = as_vector3(lat_lon_alt, "lat_lon_alt")
        orientation_ned = as_vector3(orientation_ned, "orientation_ned")
        roll, pitch, yaw = orientation_ned

        ned_to_ecef = ned_to_ecef_matrix(lat, lon)
        body_to_ecef = body_to_ecef_matrix(lat, lon, roll, pitch, yaw)

        return cls(
            location=geodetic_to_ecef(lat, lon, alt),
            orientation=ned_to_ecef @ orientation_ned,
            linear_velocity=ned_to_ecef @ as_vector3(linear_velocity_ned, "linear_velocity_ned"),
            linear_acceleration=body_to_ecef @ as_vector3(linear_acceleration_body, "linear_acceleration_body"),
            angular_velocity=body_to_ecef @ as_vector3(angular_velocity_body, "angular_velocity_body")
        )

    def to_aeronautical_frame(self) -> 'AeronauticalState':
        """Inverse of from_aeronautical_frame."""
        lat, lon, alt = ecef_to_geodetic(*self.location)

        # Rotation matrices are orthonormal, the transpose is the inverse
        ecef_to_ned = ned_to_ecef_matrix(lat, lon).T
        orientation_ned = ecef_to_ned @ self.orientation
        roll, pitch, yaw = orientation_ned
        ecef_to_body = body_to_ecef_matrix(lat, lon, roll, pitch, yaw).T

        return AeronauticalState(
            lat_lon_alt=np.array([lat, lon, alt]),
            orientation_ned=orientation_ned,
            linear_velocity_ned=ecef_to_ned @ self.linear_velocity,
            linear_acceleration_body=ecef_to_body @ self.linear_acceleration,
            angular_velocity_body=ecef_to_body @ self.angular_velocity
        )

    def blend(self, other: 'KinematicState', mu: float) -> 'KinematicState':
        """
        Linearly interpolate every vector from this state toward other.

        Args:
            other: State reached at mu = 1
            mu: Blend fraction (values above 1 extrapolate)

        Returns:
            New blended state
        """
        return KinematicState(
            location=linear_interpolate(self.location, other.location, mu),
            orientation=linear_interpolate(self.orientation, other.orientation, mu),
            linear_velocity=linear_interpolate(self.linear_velocity, other.linear_velocity, mu),
            linear_acceleration=linear_interpolate(self.linear_acceleration, other.linear_acceleration, mu),
            angular_velocity=linear_interpolate(self.angular_velocity, other.angular_velocity, mu)
        )

    @property
    def state_vector(self) -> np.ndarray:
        """Get state as a 15-element numpy vector."""
        return np.concatenate([getattr(self, f.name) for f in fields(self)])

    @classmethod
    def from_state_vector(cls, vector) -> 'KinematicState':
        """Build a state from a 15-element vector."""
        vector = np.asarray(vector, dtype=np.float64)
        if vector.shape != (15,):
            raise ValueError("State vector must have 15 elements")

        return cls(*vector.reshape(5, 3))

    @property
    def is_zero(self) -> bool:
        """True for the all-zero state (also what an unprimed engine returns)."""
        return not np.any(self.state_vector)

    @property
    def speed(self) -> float:
        """Get speed in m/s."""
        return float(np.linalg.norm(self.linear_velocity))

    def copy(self) -> 'KinematicState':
        """Create a copy of the state."""
        return KinematicState.from_state_vector(self.state_vector)

    def __eq__(self, other):
        if not isinstance(other, KinematicState):
            return NotImplemented
        return np.array_equal(self.state_vector, other.state_vector)

    def __hash__(self):
        return hash(tuple(self.state_vector))

    def __str__(self) -> str:
        return (
            f"KinematicState(loc=[{self.location[0]:.2f}, {self.location[1]:.2f}, {self.location[2]:.2f}], "
            f"ori=[{self.orientation[0]:.3f}, {self.orientation[1]:.3f}, {self.orientation[2]:.3f}], "
            f"vel=[{self.linear_velocity[0]:.2f}, {self.linear_velocity[1]:.2f}, {self.linear_velocity[2]:.2f}], "
            f"speed={self.speed:.2f})"
        )


@dataclass(frozen=True, eq=False)
class AeronauticalState:
    """
    The same kinematic state in geodetic, NED and body frames.

    - lat_lon_alt: WGS84 latitude (rad), longitude (rad), altitude (m)
    - orientation_ned: (roll, pitch, yaw) in radians
    - linear_velocity_ned: (north, east, down) in m/s
    - linear_acceleration_body: body frame acceleration in m/s²
    - angular_velocity_body: body frame rates in rad/s
    """

    lat_lon_alt: np.ndarray = field(default_factory=_zeros)
    orientation_ned: np.ndarray = field(default_factory=_zeros)
    linear_velocity_ned: np.ndarray = field(default_factory=_zeros)
    linear_acceleration_body: np.ndarray = field(default_factory=_zeros)
    angular_velocity_body: np.ndarray = field(default_factory=_zeros)

    def __post_init__(self):
        for f in fields(self):
            vector = as_vector3(getattr(self, f.name), f.name)
            vector.flags.writeable = False
            object.__setattr__(self, f.name, vector)

    def to_kinematic_state(self) -> KinematicState:
        """Convert to an ECEF KinematicState."""
        return KinematicState.from_aeronautical_frame(
            self.lat_lon_alt,
            self.orientation_ned,
            self.linear_velocity_ned,
            self.linear_acceleration_body,
            self.angular_velocity_body
        )
