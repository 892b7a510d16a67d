# collision.py

import numpy as np

import glc_config as cfg
from interfaces import Obstacles, check_times
from rtree_module import ObstacleIndex

class DiskObstacles(Obstacles):
    """
    Disk shaped obstacles in the (x, y) plane, with optional world bounds.

    Parameters
    ----------
    disks : list
        List of (center, radius) tuples.
    resolution : int
        Number of samples checked per segment.
    bounds : np.array, optional
        Array of shape (k, 2); states outside are infeasible.
    """

    def __init__(self, disks=(), resolution=cfg.COLLISION_CHECK_RESOLUTION, bounds=None):
        self.resolution = int(resolution)
        self.bounds = None if bounds is None else np.asarray(bounds, dtype=float)
        self.index = ObstacleIndex()
        for center, radius in disks:
            self.index.insert(center, radius)

    def collision_free(self, traj):
        states = traj.states_at(check_times(traj, self.resolution))

        if self.bounds is not None:
            k = len(self.bounds)
            if np.any(states[:, :k] < self.bounds[:, 0]) or np.any(states[:, :k] > self.bounds[:, 1]):
                return False

        if len(self.index) == 0:
            return True

        # One index query for the bounding box of all samples
        xy = states[:, :2]
        for center, radius in self.index.intersecting(xy.min(axis=0), xy.max(axis=0)):
            d = xy - center
            if np.any(np.einsum('ij,ij->i', d, d) <= radius * radius):
                return False
        return True
