"""
Finite control sets.

A control set is parameterized by a resolution and must approach a dense
subset of the admissible controls as the resolution grows.
"""

import numpy as np

from parameters import ConfigurationError
from vector_utils import linear_space

MAX_STEERING_ANGLE = 0.0625 * np.pi  # rad/s at unit speed


class Inputs:
    """Ordered, append-only collection of control samples."""

    def __init__(self):
        self._samples = []

    def add_input_sample(self, u):
        u = np.array(u, dtype=float).reshape(-1)
        if self._samples and u.shape[0] != self._samples[0].shape[0]:
            raise ConfigurationError(
                f"control sample has dimension {u.shape[0]}, expected {self._samples[0].shape[0]}")
        u.flags.writeable = False
        self._samples.append(u)

    def sample_count(self):
        return len(self._samples)

    def samples(self):
        if not self._samples:
            raise ConfigurationError("control set is empty")
        return tuple(self._samples)

    @property
    def control_dim(self):
        return self._samples[0].shape[0] if self._samples else None

    def __len__(self):
        return len(self._samples)

    def __iter__(self):
        return iter(self._samples)


class CarControlInputs(Inputs):
    """All pairs (speed, steering rate) with evenly spaced steering rates."""

    def __init__(self, num_steering_angles, speeds=(1.0,), max_steering=MAX_STEERING_ANGLE):
        super().__init__()
        steering_angles = linear_space(-max_steering, max_steering, num_steering_angles)
        for vel in speeds:
            for ang in steering_angles:
                self.add_input_sample([vel, ang])


class PlanarControlInputs(Inputs):
    """Uniformly spaced velocity directions on a circle of radius speed."""

    def __init__(self, resolution, speed=1.0):
        super().__init__()
        for k in range(resolution):
            angle = 2.0 * np.pi * k / resolution
            self.add_input_sample([speed * np.cos(angle), speed * np.sin(angle)])
