# vector_utils.py
"""
Small numeric helpers shared by the planner and the reference models.
"""

import numpy as np


def as_vector(x, dim=None):
    """
    Copy an array-like into a flat float vector.

    Parameters
    ----------
    x : array-like
        Values to copy.
    dim : int, optional
        Expected length. A mismatch raises ValueError.

    Returns
    -------
    np.ndarray
        1-D float array.
    """
    v = np.array(x, dtype=float).reshape(-1)
    if dim is not None and v.shape[0] != dim:
        raise ValueError(f"expected vector of dimension {dim}, got {v.shape[0]}")
    return v


def linear_space(start, stop, num_points):
    """Evenly spaced points including both endpoints (a single point is the midpoint)."""
    if num_points < 1:
        raise ValueError("num_points must be at least 1")
    if num_points == 1:
        return np.array([0.5 * (start + stop)])
    return np.linspace(start, stop, num_points)


def norm_sqr(v):
    """Squared Euclidean norm."""
    v = np.asarray(v, dtype=float)
    return float(np.dot(v, v))


def vec_floor(v):
    """Floor each coordinate and return a hashable tuple of ints."""
    return tuple(int(c) for c in np.floor(v))
