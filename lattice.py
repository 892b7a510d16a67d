# lattice.py
"""
Lattice cells and the dominance map.

The continuous state space is partitioned into cubes of side 1/eta. Each
cell remembers the cheapest node seen in it; a new node is kept only if it
is strictly cheaper than that label.
"""

import numpy as np

import glc_config as cfg
from vector_utils import vec_floor


def lattice_cell(state, eta, depth=None, depth_bucket=cfg.DEPTH_BUCKET):
    """
    Dominance key of a state.

    Parameters
    ----------
    state : np.array
        State vector.
    eta : float
        Cells per unit length.
    depth : int, optional
        Search depth; appended as depth // depth_bucket when given.
    """
    key = vec_floor(eta * np.asarray(state, dtype=float))
    if depth is not None:
        key = key + (int(depth) // int(depth_bucket),)
    return key


class DominanceMap:
    def __init__(self):
        self.labels = {}
        self.dominated_count = 0

    def label(self, cell):
        """Node currently labelling cell, or None."""
        return self.labels.get(cell)

    def admits(self, cell, cost):
        """True if a node of this cost would not be dominated in cell."""
        current = self.labels.get(cell)
        if current is not None and current.cost <= cost:
            self.dominated_count += 1
            return False
        return True

    def try_insert(self, cell, node):
        """
        Record node as the label of cell unless it is dominated.

        Returns
        -------
        bool
            False if the cell already holds a node with cost <= node.cost.
        """
        if not self.admits(cell, node.cost):
            return False
        self.labels[cell] = node
        return True

    def nodes(self):
        return list(self.labels.values())

    def __len__(self):
        return len(self.labels)

    def __contains__(self, cell):
        return cell in self.labels
