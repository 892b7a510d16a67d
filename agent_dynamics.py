# agent_dynamics.py
"""
Reference dynamic models:
a unit-wheelbase car with a nonholonomic constraint, and a single integrator
that moves with velocity equal to the control.
"""

import numpy as np

from dynamics import RungeKuttaTwo


class CarNonholonomicConstraint(RungeKuttaTwo):
    """
    State [x, y, theta], control [speed, steering rate].

        x_dot     = v * cos(theta)
        y_dot     = v * sin(theta)
        theta_dot = omega
    """

    def __init__(self, max_time_step, lipschitz_constant=1.0):
        super().__init__(lipschitz_constant, max_time_step, 3)

    def flow(self, x, u):
        return np.array([
            u[0] * np.cos(x[2]),
            u[0] * np.sin(x[2]),
            u[1],
        ])


class SingleIntegrator(RungeKuttaTwo):
    """x_dot = u in any dimension. The flow does not depend on x, so L = 0."""

    def __init__(self, max_time_step, state_dim=2):
        super().__init__(0.0, max_time_step, state_dim)

    def flow(self, x, u):
        return np.asarray(u, dtype=float).copy()
