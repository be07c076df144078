#!/usr/bin/env python3
"""
Basic usage example of the dead reckoning engines.

An aircraft circles at constant speed. Authoritative updates arrive at 2 Hz
with some jitter, while the "renderer" queries the engine at 60 Hz. After
a while the updates stop and the decaying engine coasts to a halt.
"""

import sys
import os
import time
import logging
import numpy as np

# Add package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from deadreckoning import Config, create_dead_reckoner
from deadreckoning.engine import AeronauticalState

def simulate_aircraft(t, speed=120.0, turn_radius=3000.0):
    """
    Aircraft state at time t on a level circle near Hong Kong.

    Args:
        t: Time in seconds
        speed: Ground speed in m/s
        turn_radius: Circle radius in meters

    Returns:
        AeronauticalState
    """
    omega = speed / turn_radius
    heading = omega * t

    north = turn_radius * np.sin(heading)
    east = turn_radius * (1 - np.cos(heading))

    # Small-offset conversion from meters to radians
    lat0, lon0 = np.deg2rad(22.3), np.deg2rad(114.2)
    earth_radius = 6371000.0
    lat = lat0 + north / earth_radius
    lon = lon0 + east / (earth_radius * np.cos(lat0))

    return AeronauticalState(
        lat_lon_alt=[lat, lon, 1500.0],
        orientation_ned=[0.0, 0.0, heading],
        linear_velocity_ned=[speed * np.cos(heading), speed * np.sin(heading), 0.0],
        # Centripetal acceleration points to the right wing (body +y)
        linear_acceleration_body=[0.0, speed * omega, 0.0],
        angular_velocity_body=[0.0, 0.0, omega]
    )

def main(duration=6.0, updates_until=3.0, update_rate_hz=2.0, query_rate_hz=60.0):
    config = Config()
    config.configure_logging()

    engine = create_dead_reckoner(config)
    rng = np.random.default_rng(0)

    start = time.monotonic()
    next_update = 0.0
    last_location = None

    print("=== Dead Reckoning Example ===")
    print(f"Updates at {update_rate_hz} Hz for {updates_until}s, queries at {query_rate_hz} Hz for {duration}s")

    while True:
        t = time.monotonic() - start
        if t >= duration:
            break

        if t >= next_update and t < updates_until:
            engine.ingest(simulate_aircraft(t).to_kinematic_state())
            next_update = t + (1.0 / update_rate_hz) * rng.uniform(0.8, 1.2)

        state = engine.compute_now()
        if last_location is not None:
            step = np.linalg.norm(state.location - last_location)
            if int(t * query_rate_hz) % 15 == 0:
                print(f"t={t:5.2f}s  step={step:7.3f} m  {state}")
        last_location = state.location

        time.sleep(1.0 / query_rate_hz)

    final = engine.compute_now().to_aeronautical_frame()
    print(f"Final position: lat={np.rad2deg(final.lat_lon_alt[0]):.5f} deg, "
          f"lon={np.rad2deg(final.lat_lon_alt[1]):.5f} deg, alt={final.lat_lon_alt[2]:.1f} m")

if __name__ == "__main__":
    logging.getLogger("deadreckoning").setLevel(logging.INFO)
    main()
