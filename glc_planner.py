"""
Generalized label correcting (GLC) planner.

Best-first search over trajectories generated by a finite set of controls.
The continuous state space is partitioned into lattice cells; a new node is
kept only if it is cheaper than every node seen in its cell. Under an
admissible heuristic the returned trajectory is optimal over the lattice
induced by the resolution.
"""

import heapq
import itertools
import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import numpy as np

import glc_config as cfg
from interpolating_polynomial import InterpolatingPolynomial
from lattice import DominanceMap, lattice_cell
from node_module import Node
from parameters import ConfigurationError, Parameters


class PlannerStatus(Enum):
    """Status of the planner."""
    READY = "ready"
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    ITERATION_LIMIT = "iteration_limit"


TERMINAL_STATES = (PlannerStatus.SOLVED, PlannerStatus.EXHAUSTED, PlannerStatus.ITERATION_LIMIT)


@dataclass
class PlannerOutput:
    solution_found: bool = False
    goal_node: Optional[Node] = None
    iterations_run: int = 0
    status: PlannerStatus = PlannerStatus.READY
    cost: float = float('inf')
    nodes_created: int = 0
    time_seconds: float = 0.0


class Planner:
    """
    GLC planner.

    Parameters
    ----------
    obstacles : Obstacles
        Feasibility checker for trajectory segments.
    goal_region : GoalRegion
        Goal membership test for trajectory segments.
    dynamic_model : DynamicalSystem
        Integrates the dynamics under a constant control.
    heuristic : Heuristic
        Admissible estimate of cost-to-go.
    cost_function : CostFunction
        Running cost of a segment.
    parameters : Parameters
        Algorithm parameters.
    control_samples : Inputs or sequence of array-like
        Finite control set, expanded in order.
    verbose : bool
        Print status lines.
    """

    def __init__(self, obstacles, goal_region, dynamic_model, heuristic, cost_function,
                 parameters: Parameters, control_samples, verbose=cfg.VERBOSE):
        self.obstacles = obstacles
        self.goal = goal_region
        self.dynamics = dynamic_model
        self.heuristic = heuristic
        self.cost_function = cost_function
        self.params = parameters
        self.verbose = verbose
        self.controls = self._read_controls(control_samples)

        model_dim = getattr(dynamic_model, 'state_dim', None)
        if model_dim is not None and model_dim != parameters.state_dim:
            raise ConfigurationError(
                f"dynamic model has state dimension {model_dim}, "
                f"parameters declare {parameters.state_dim}")

        # Scaling derived from the resolution
        res = parameters.res
        self.expand_time = min(parameters.dt_max, parameters.time_scale / res)
        self.depth_limit = int(parameters.depth_scale * res * max(1, math.floor(math.log(res))))
        lipschitz = dynamic_model.lipschitz_constant()
        if lipschitz > 0.0:
            self.eta = res ** (1.0 + lipschitz) / parameters.partition_scale
        else:
            self.eta = res / parameters.partition_scale

        # Search state
        self.status = PlannerStatus.READY
        self.nodes: List[Node] = []
        self.open_set = []
        self.dominance = DominanceMap()
        self._tie_breaker = itertools.count()
        self.iterations = 0
        self.infeasible_count = 0
        self.goal_node: Optional[Node] = None
        self.output = PlannerOutput()
        self._elapsed = 0.0

        x0 = np.array(parameters.x0, dtype=float)
        root = Node(index=0, state=x0, cost=0.0,
                    heuristic=float(heuristic.cost_to_go(x0)))
        self.root = root
        self.nodes.append(root)
        self.dominance.try_insert(self._cell(root.state, root.depth), root)
        self._push(root)

        if self.verbose:
            print(f"GLC initialized: x0={x0}, {len(self.controls)} controls")
            print(f"Expand time: {self.expand_time:.4f}, eta: {self.eta:.4f}, "
                  f"depth limit: {self.depth_limit}, termination: {parameters.termination}")

    # ------------------------------------------------------------------
    # --- Setup helpers ---
    # ------------------------------------------------------------------
    def _read_controls(self, control_samples):
        samples = control_samples.samples() if hasattr(control_samples, 'samples') \
            else list(control_samples)
        if len(samples) == 0:
            raise ConfigurationError("control set is empty")

        controls = []
        for u in samples:
            u = np.array(u, dtype=float).reshape(-1)
            if u.shape[0] != self.params.control_dim:
                raise ConfigurationError(
                    f"control sample has dimension {u.shape[0]}, "
                    f"parameters declare {self.params.control_dim}")
            u.flags.writeable = False
            controls.append(u)
        return tuple(controls)

    def _cell(self, state, depth):
        return lattice_cell(state, self.eta, depth if self.params.time_varying else None)

    def _push(self, node):
        heapq.heappush(self.open_set, (node.merit, next(self._tie_breaker), node.index))

    # ------------------------------------------------------------------
    # --- Search ---
    # ------------------------------------------------------------------
    def expand(self) -> PlannerStatus:
        """
        Run one iteration: pop the best frontier node and expand it.

        Returns
        -------
        PlannerStatus
            Status after the iteration.
        """
        if self.status in TERMINAL_STATES:
            return self.status
        self.status = PlannerStatus.RUNNING

        if not self.open_set:
            return self._finish(PlannerStatus.EXHAUSTED)
        if self.iterations >= self.params.max_iter:
            return self._finish(PlannerStatus.ITERATION_LIMIT)

        # Get node with lowest f-cost
        _, _, index = heapq.heappop(self.open_set)
        current = self.nodes[index]
        self.iterations += 1

        if self.verbose and self.iterations % cfg.PROGRESS_EVERY == 0:
            print(f"  Progress: {self.iterations}/{self.params.max_iter} iterations, "
                  f"{len(self.open_set)} open, {len(self.nodes)} nodes")

        if self.params.termination == "pop" and current.in_goal:
            self.goal_node = current
            return self._finish(PlannerStatus.SOLVED)

        if current.depth >= self.depth_limit:
            return self.status

        for u in self.controls:
            traj = self.dynamics.integrate(current.state, u, self.expand_time, t0=current.time)

            if not self.obstacles.collision_free(traj):
                self.infeasible_count += 1
                continue

            t0 = current.time
            tf = traj.final_time()
            control = self.dynamics.control_segment(u, t0, tf - t0, traj.number_of_intervals())
            cost = current.cost + float(self.cost_function.cost(traj, control, t0, tf))

            x_new = traj.final_state()
            depth = current.depth + 1
            cell = self._cell(x_new, depth)
            if not self.dominance.admits(cell, cost):
                continue

            found, _ = self.goal.in_goal(traj)
            if found and self.params.termination == "pop":
                h = 0.0
            else:
                h = float(self.heuristic.cost_to_go(x_new))

            child = Node(index=len(self.nodes), state=x_new, cost=cost, heuristic=h,
                         time=tf, depth=depth, parent=current.index,
                         trajectory_from_parent=traj, control_from_parent=u,
                         in_goal=found)
            self.nodes.append(child)
            self.dominance.try_insert(cell, child)
            self._push(child)

            if found and self.params.termination == "discovery":
                self.goal_node = child
                return self._finish(PlannerStatus.SOLVED)

        return self.status

    def plan(self) -> PlannerOutput:
        """
        Run the search to a terminal state (blocking call).

        Returns
        -------
        PlannerOutput
            Also stored on self.output.
        """
        if self.status in TERMINAL_STATES:
            return self.output

        start_time = time.perf_counter()
        while self.expand() not in TERMINAL_STATES:
            pass
        self._elapsed += time.perf_counter() - start_time
        self.output.time_seconds = self._elapsed
        return self.output

    def _finish(self, status):
        self.status = status
        self.output = PlannerOutput(
            solution_found=status == PlannerStatus.SOLVED,
            goal_node=self.goal_node,
            iterations_run=self.iterations,
            status=status,
            cost=self.goal_node.cost if self.goal_node is not None else float('inf'),
            nodes_created=len(self.nodes),
            time_seconds=self._elapsed,
        )

        if self.verbose:
            if status == PlannerStatus.SOLVED:
                print(f"GLC found solution: cost {self.goal_node.cost:.4f}, "
                      f"{self.iterations} iterations, {len(self.nodes)} nodes")
            elif status == PlannerStatus.EXHAUSTED:
                print(f"GLC exhausted search after {self.iterations} iterations")
            else:
                print(f"GLC reached iteration limit ({self.params.max_iter})")
        return status

    # ------------------------------------------------------------------
    # --- Solution recovery ---
    # ------------------------------------------------------------------
    def path_to_root(self, reverse=False, node: Optional[Node] = None) -> List[Node]:
        """
        Walk parent links from node (default: the goal node) to the root.

        Parameters
        ----------
        reverse : bool
            If True return the path root-first, otherwise node-first.
        node : Node, optional
            Start of the walk. Required when no solution was found.
        """
        if node is None:
            node = self.goal_node
        if node is None:
            raise ValueError("no goal node to trace; plan() did not find a solution")

        path = []
        current = node
        while current is not None:
            path.append(current)
            current = self.nodes[current.parent] if current.parent is not None else None

        if reverse:
            path.reverse()
        return path

    def recover_trajectory(self, path: List[Node]) -> InterpolatingPolynomial:
        """Concatenate the segments along a path (either order) into one trajectory."""
        ordered = sorted(path, key=lambda n: n.depth)
        segments = [n.trajectory_from_parent for n in ordered
                    if n.trajectory_from_parent is not None]
        if not segments:
            raise ValueError("path contains no trajectory segments")
        return InterpolatingPolynomial.concatenate(segments)

    def get_planning_info(self) -> dict:
        """Get current planning statistics."""
        return {
            'status': self.status,
            'iterations': self.iterations,
            'nodes': len(self.nodes),
            'open_set_size': len(self.open_set),
            'labels': len(self.dominance),
            'dominated': self.dominance.dominated_count,
            'infeasible': self.infeasible_count,
            'integrations': getattr(self.dynamics, 'sim_counter', None),
            'best_cost': self.goal_node.cost if self.goal_node else float('inf'),
        }
