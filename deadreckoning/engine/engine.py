"""
Dead reckoning engines: extrapolate an entity's state between sparse updates.
"""

import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

from .state import KinematicState
from .models import MotionModel, LinearMotionModel, NonUniformMotionModel
from ..config import Config
from ..math.interpolation import ease_out_sine
from ..math.constants import (
    INTERPOLATION_WINDOW_S,
    ACCELERATION_DECAY_INTERVAL_S,
)

logger = logging.getLogger(__name__)


class DeadReckoningAlgorithm(ABC):
    """Interface for all dead reckoning algorithms."""

    @abstractmethod
    def ingest(self, state: KinematicState) -> None:
        """
        Accept a new authoritative kinematic state.

        It is up to the implementation to smooth the transition to it.
        """

    @abstractmethod
    def compute_now(self) -> KinematicState:
        """Calculate the current dead reckoned state."""


class DeadReckoner(DeadReckoningAlgorithm):
    """
    Two-sample dead reckoning engine.

    Keeps the previous and newest samples. On every query the previous sample
    is blended linearly into the newest over ``interpolation_window`` seconds,
    then the blend is extrapolated by the motion model for the time elapsed
    since the last ingest. Velocity, acceleration and angular velocity of the
    result are passed through from the newest sample.

    One lock guards all mutable state; ``ingest`` and ``compute_now`` each hold
    it for their full duration, so a query never mixes samples from two
    different updates. This class is thread-safe.
    """

    def __init__(self,
                 model: Optional[MotionModel] = None,
                 interpolation_window: float = INTERPOLATION_WINDOW_S,
                 clock: Callable[[], float] = time.monotonic):
        """
        Initialize the engine.

        Args:
            model: Extrapolation strategy (default LinearMotionModel)
            interpolation_window: Seconds to blend from old to new sample
            clock: Monotonic time source in seconds
        """
        if interpolation_window <= 0:
            raise ValueError(f"interpolation_window must be positive, got {interpolation_window}")

        self.model = model or LinearMotionModel()
        self.interpolation_window = float(interpolation_window)
        self._clock = clock

        self._lock = threading.Lock()
        self._old_sample: Optional[KinematicState] = None
        self._current_sample: Optional[KinematicState] = None
        self._last_update_time: Optional[float] = None
        self._elapsed_seconds = 0.0

        # Statistics
        self.ingest_count = 0

    @property
    def is_primed(self) -> bool:
        """True once at least one sample has been ingested."""
        with self._lock:
            return self._current_sample is not None

    @property
    def last_update_time(self) -> Optional[float]:
        """Clock reading at the last ingest, None before the first."""
        with self._lock:
            return self._last_update_time

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time used by the most recent compute_now."""
        with self._lock:
            return self._elapsed_seconds

    def ingest(self, state: KinematicState) -> None:
        with self._lock:
            if self._current_sample is None:
                self._old_sample = state
                logger.debug(f"{type(self).__name__} primed with {state}")
            else:
                self._old_sample = self._current_sample
            self._current_sample = state

            self._elapsed_seconds = 0.0
            self._last_update_time = self._clock()
            self.ingest_count += 1
            count = self.ingest_count

        logger.debug(f"{type(self).__name__} ingested sample #{count}")

    def compute_now(self) -> KinematicState:
        with self._lock:
            if self._current_sample is None:
                return KinematicState()

            elapsed = max(self._clock() - self._last_update_time, 0.0)
            self._elapsed_seconds = elapsed

            blended = self._old_sample.blend(self._current_sample, self.blend_fraction(elapsed))
            t = self.extrapolation_time(elapsed)
            location, orientation = self.model.extrapolate(blended, t)

            current = self._current_sample
            return KinematicState(
                location=location,
                orientation=orientation,
                linear_velocity=current.linear_velocity,
                linear_acceleration=current.linear_acceleration,
                angular_velocity=current.angular_velocity
            )

    def blend_fraction(self, elapsed: float) -> float:
        """Fraction of the interpolation window covered, clamped to 1."""
        return min(elapsed / self.interpolation_window, 1.0)

    def extrapolation_time(self, elapsed: float) -> float:
        """Time value fed to the motion model for a given elapsed time."""
        return elapsed


class DecayingDeadReckoner(DeadReckoner):
    """
    Dead reckoning with acceleration decay.

    When enabled, the extrapolation time eases out along a sine curve and
    stops growing once ``acceleration_decay_interval`` seconds have passed
    since the last update. An entity that stops reporting coasts to a halt
    instead of flying off, which also makes stale entities easy to spot.
    """

    def __init__(self,
                 use_acceleration_decay: bool = True,
                 interpolation_window: float = INTERPOLATION_WINDOW_S,
                 acceleration_decay_interval: float = ACCELERATION_DECAY_INTERVAL_S,
                 clock: Callable[[], float] = time.monotonic):
        """
        Initialize the engine.

        Args:
            use_acceleration_decay: Apply the decay stage
            interpolation_window: Seconds to blend from old to new sample
            acceleration_decay_interval: Seconds until extrapolation halts
            clock: Monotonic time source in seconds
        """
        super().__init__(LinearMotionModel(), interpolation_window, clock)

        if acceleration_decay_interval <= 0:
            raise ValueError(
                f"acceleration_decay_interval must be positive, got {acceleration_decay_interval}"
            )

        self.use_acceleration_decay = bool(use_acceleration_decay)
        self.acceleration_decay_interval = float(acceleration_decay_interval)

    def extrapolation_time(self, elapsed: float) -> float:
        if not self.use_acceleration_decay:
            return elapsed

        decay_fraction = min(elapsed / self.acceleration_decay_interval, 1.0)
        return ease_out_sine(0.0, self.acceleration_decay_interval, decay_fraction)


class NonUniformMotionDeadReckoner(DeadReckoner):
    """
    Dead reckoning that combines non-uniform circular and linear motion.

    Angular rates at or above the model threshold select the circular motion
    branch, meant for banking and turning aircraft. That branch currently
    falls back to the linear equations, so results match the plain engine.
    No decay stage is applied.
    """

    def __init__(self,
                 interpolation_window: float = INTERPOLATION_WINDOW_S,
                 angular_rate_threshold: float = NonUniformMotionModel.ANGULAR_RATE_THRESHOLD,
                 clock: Callable[[], float] = time.monotonic):
        super().__init__(NonUniformMotionModel(angular_rate_threshold), interpolation_window, clock)


def create_dead_reckoner(config: Optional[Config] = None, model: str = "decaying",
                         clock: Callable[[], float] = time.monotonic) -> DeadReckoner:
    """
    Build a dead reckoning engine from configuration.

    Args:
        config: Config instance (defaults used when None)
        model: "decaying" or "non_uniform"
        clock: Monotonic time source in seconds

    Returns:
        Configured engine
    """
    if config is None:
        config = Config()

    if model == "decaying":
        return DecayingDeadReckoner(
            use_acceleration_decay=config.use_acceleration_decay,
            interpolation_window=config.interpolation_window_s,
            acceleration_decay_interval=config.acceleration_decay_interval_s,
            clock=clock
        )

    elif model == "non_uniform":
        return NonUniformMotionDeadReckoner(
            interpolation_window=config.interpolation_window_s,
            angular_rate_threshold=config.circular_motion_threshold_rad_s,
            clock=clock
        )

    else:
        raise ValueError(f"Unknown dead reckoning model: {model}")
