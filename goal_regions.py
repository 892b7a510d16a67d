"""
Reference goal regions.
"""

import numpy as np

import glc_config as cfg
from interfaces import GoalRegion, check_times
from vector_utils import norm_sqr


class SphericalGoal(GoalRegion):
    """
    Open ball around center in the first len(center) state coordinates.

    Parameters
    ----------
    radius_sqr : float
        Squared radius of the ball.
    center : array-like
        Center of the ball.
    resolution : int
        Number of samples checked per segment.
    """

    def __init__(self, radius_sqr, center, resolution=cfg.GOAL_CHECK_RESOLUTION):
        self.radius_sqr = float(radius_sqr)
        self.center = np.asarray(center, dtype=float)
        self.resolution = int(resolution)

    def contains(self, state):
        return norm_sqr(np.asarray(state[:len(self.center)], dtype=float) - self.center) < self.radius_sqr

    def in_goal(self, traj):
        times = check_times(traj, self.resolution)
        diff = traj.states_at(times)[:, :len(self.center)] - self.center
        inside = np.flatnonzero(np.einsum('ij,ij->i', diff, diff) < self.radius_sqr)
        if inside.size == 0:
            return False, None
        return True, float(times[inside[0]])
