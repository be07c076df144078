"""
Mathematical utility functions for dead reckoning.
"""

import numpy as np


def as_vector3(values, name: str = "vector") -> np.ndarray:
    """
    Coerce values to a float64 array of shape (3,).

    Args:
        values: Any sequence of three numbers
        name: Field name used in the error message

    Returns:
        np.ndarray: New 3-element float array

    Raises:
        ValueError: If values does not hold exactly three elements
    """
    vector = np.array(values, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"{name} must have 3 elements, got shape {vector.shape}")
    return vector
