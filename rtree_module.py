import rtree.index as index
import numpy as np


class ObstacleIndex:
    """
    R-tree over disk obstacles.
    Each disk is stored by its bounding box; exact tests are done by the caller.
    """

    def __init__(self):
        # Rtree configuration
        p = index.Property()
        p.dimension = 2  # planar (x, y)
        self.idx = index.Index(properties=p)

        # Keep mapping from Rtree IDs -> (center, radius)
        self.disks = {}
        self.next_id = 0

    def insert(self, center, radius):
        """
        Insert a disk into the R-tree.

        Returns
        -------
        int
            Id of the stored disk.
        """
        center = np.asarray(center, dtype=float)
        radius = float(radius)
        if radius < 0:
            raise ValueError(f"radius must be non-negative, got {radius}")

        did = self.next_id
        self.next_id += 1

        # Rtree requires bounding boxes (min coords, max coords)
        bbox = (center[0] - radius, center[1] - radius,
                center[0] + radius, center[1] + radius)

        self.idx.insert(did, bbox)
        self.disks[did] = (center, radius)
        return did

    def intersecting(self, lower, upper):
        """Disks whose bounding box overlaps the box [lower, upper]."""
        bbox = (float(lower[0]), float(lower[1]), float(upper[0]), float(upper[1]))
        return [self.disks[i] for i in self.idx.intersection(bbox)]

    def __len__(self):
        return len(self.disks)
