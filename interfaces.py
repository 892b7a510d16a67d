"""
Capability contracts for the pluggable pieces of a planning problem.
Implementations must be side-effect free during a planning run.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from interpolating_polynomial import InterpolatingPolynomial


class CostFunction(ABC):
    """Running cost of a trajectory segment. Must not decrease with duration."""

    def __init__(self, lipschitz_constant=0.0):
        self._lipschitz_constant = float(lipschitz_constant)

    def lipschitz_constant(self) -> float:
        return self._lipschitz_constant

    @abstractmethod
    def cost(self, traj: InterpolatingPolynomial, control: InterpolatingPolynomial,
             t0: float, tf: float) -> float:
        """Non-negative cost accumulated along traj over [t0, tf]."""


class Heuristic(ABC):
    @abstractmethod
    def cost_to_go(self, state: np.ndarray) -> float:
        """Lower bound on the optimal cost from state to the goal."""


class GoalRegion(ABC):
    @abstractmethod
    def in_goal(self, traj: InterpolatingPolynomial) -> Tuple[bool, Optional[float]]:
        """Return (True, first time inside) if traj meets the goal, else (False, None)."""


class Obstacles(ABC):
    @abstractmethod
    def collision_free(self, traj: InterpolatingPolynomial) -> bool:
        """True if every checked point of traj is feasible."""


def check_times(traj: InterpolatingPolynomial, resolution: int) -> np.ndarray:
    """
    Times used by sampled goal and collision checks.

    The initial instant is skipped since it was checked as the end of the
    parent segment.
    """
    if resolution < 1:
        raise ValueError(f"resolution must be at least 1, got {resolution}")
    dt = traj.duration() / resolution
    return traj.initial_time() + dt * np.arange(1, resolution + 1)
