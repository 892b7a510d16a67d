"""
Dynamic models for the GLC planner.

A model integrates dx/dt = flow(x, u) under a constant control over a
horizon and returns the resulting trajectory as a piecewise quadratic.
"""

import math
from abc import ABC, abstractmethod

import numpy as np

from interpolating_polynomial import InterpolatingPolynomial
from vector_utils import as_vector


class DynamicalSystem(ABC):
    """Interface the planner relies on."""

    state_dim = None

    @abstractmethod
    def integrate(self, x0, u, dt, t0=0.0) -> InterpolatingPolynomial:
        """Trajectory over [t0, t0 + dt] starting at x0 under constant u."""

    @abstractmethod
    def lipschitz_constant(self) -> float:
        """Upper bound on the Lipschitz constant of the vector field."""

    @staticmethod
    def control_segment(u, t0, dt, intervals=1):
        """Piecewise constant control trajectory matching an integrated segment."""
        return InterpolatingPolynomial.constant(u, t0, dt / intervals, intervals)


class RungeKuttaTwo(DynamicalSystem):
    """
    Explicit midpoint integrator with quadratic dense output.

    Each step of length h from x stores the piece

        p(tau) = x + k1 * tau + ((k2 - k1) / h) * tau^2

    with k1 = f(x, u) and k2 = f(x + h/2 * k1, u), so p(h) is the midpoint
    update x + h * k2.

    Parameters
    ----------
    lipschitz_constant : float
        Bound on the vector field's Lipschitz constant.
    max_time_step : float
        Upper bound on a single integration step.
    state_dim : int
        Dimension of the state.
    """

    def __init__(self, lipschitz_constant, max_time_step, state_dim):
        if max_time_step <= 0:
            raise ValueError(f"max_time_step must be positive, got {max_time_step}")
        if lipschitz_constant < 0:
            raise ValueError(f"lipschitz_constant must be non-negative, got {lipschitz_constant}")
        self._lipschitz_constant = float(lipschitz_constant)
        self.max_time_step = float(max_time_step)
        self.state_dim = int(state_dim)
        self.sim_counter = 0

    @abstractmethod
    def flow(self, x, u):
        """Return dx/dt at state x under control u."""

    def lipschitz_constant(self):
        return self._lipschitz_constant

    def step(self, x, u, h):
        """
        One midpoint step.

        Returns
        -------
        x_next : np.ndarray
            State after h.
        piece : np.ndarray
            Coefficients (3, state_dim) of the quadratic covering the step.
        """
        k1 = np.asarray(self.flow(x, u), dtype=float)
        k2 = np.asarray(self.flow(x + 0.5 * h * k1, u), dtype=float)
        x_next = x + h * k2
        piece = np.stack([x, k1, (k2 - k1) / h])
        return x_next, piece

    def integrate(self, x0, u, dt, t0=0.0):
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")
        self.sim_counter += 1

        x = as_vector(x0, self.state_dim)
        u = np.asarray(u, dtype=float)
        num_steps = max(1, int(math.ceil(dt / self.max_time_step - 1e-12)))
        h = dt / num_steps

        pieces = np.empty((num_steps, 3, self.state_dim))
        for i in range(num_steps):
            x, pieces[i] = self.step(x, u, h)
        return InterpolatingPolynomial(pieces, t0, h)
