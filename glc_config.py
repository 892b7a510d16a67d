"""
Configuration file for the GLC planner.
Defaults mirror the nonholonomic car problem the planner was tuned on.
"""

import numpy as np

# Algorithm parameters
RES = 21               # control resolution (also drives partition density)
CONTROL_DIM = 2
STATE_DIM = 3
DEPTH_SCALE = 100      # depth limit = DEPTH_SCALE * res * floor(log(res))
DT_MAX = 5.0           # max integration step (seconds)
MAX_ITER = 50000
TIME_SCALE = 20        # expansion horizon = TIME_SCALE / res
PARTITION_SCALE = 60   # larger -> coarser lattice cells
X0 = np.array([0.0, 0.0, np.pi / 2.0])

# Lattice
TIME_VARYING = False   # append depth bucket to the dominance key
DEPTH_BUCKET = 1

# Termination policy: "discovery" stops on the first goal-crossing child,
# "pop" stops when a goal node leaves the frontier
TERMINATION = "discovery"
TERMINATION_POLICIES = ("discovery", "pop")

# Sampling resolution for goal and collision checks
GOAL_CHECK_RESOLUTION = 10
COLLISION_CHECK_RESOLUTION = 10

# Spline evaluation tolerance (relative to final time)
TIME_TOLERANCE = 1e-9

# Status output
VERBOSE = True
PROGRESS_EVERY = 5000  # print progress every N iterations
