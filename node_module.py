# node_module.py

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from interpolating_polynomial import InterpolatingPolynomial


@dataclass(frozen=True, eq=False)
class Node:
    """
    A vertex of the search tree.

    Nodes live in the planner's node list and refer to their parent by index,
    so the tree holds no reference cycles. A node is never modified after it
    is created.
    """
    index: int
    state: np.ndarray
    cost: float                 # cost-to-reach
    heuristic: float            # estimated cost-to-go
    time: float = 0.0
    depth: int = 0
    parent: Optional[int] = None
    trajectory_from_parent: Optional[InterpolatingPolynomial] = field(default=None, repr=False)
    control_from_parent: Optional[np.ndarray] = None
    in_goal: bool = False

    @property
    def merit(self):
        """f = g + h, the frontier priority."""
        return self.cost + self.heuristic

    @property
    def is_root(self):
        return self.parent is None

    @property
    def position(self):
        """Get position [x, y]"""
        return self.state[:2]
