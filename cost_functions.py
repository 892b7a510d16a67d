"""
Reference cost functionals.
"""

from interfaces import CostFunction


class ArcLength(CostFunction):
    """Distance travelled at the commanded speed u[0]."""

    def cost(self, traj, control, t0, tf):
        speed = abs(float(control.at(t0)[0]))
        return speed * (tf - t0)


class MinTime(CostFunction):
    def cost(self, traj, control, t0, tf):
        return tf - t0
