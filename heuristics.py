"""
Reference heuristics.
"""

import numpy as np

from interfaces import Heuristic


class EuclideanHeuristic(Heuristic):
    """
    Straight-line distance to a spherical goal, offset by its radius.

    Admissible for any cost that is at least the distance travelled in the
    first len(goal) state coordinates.
    """

    def __init__(self, goal, radius):
        self.goal = np.asarray(goal, dtype=float)
        self.radius = float(radius)

    def cost_to_go(self, state):
        diff = np.asarray(state[:len(self.goal)], dtype=float) - self.goal
        return max(0.0, float(np.sqrt(np.dot(diff, diff))) - self.radius)


class ZeroHeuristic(Heuristic):
    """Trivially admissible; turns the search into uniform-cost search."""

    def cost_to_go(self, state):
        return 0.0
