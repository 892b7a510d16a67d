# export.py
"""
Write planner results to plain text for external plotting, and draw them
with matplotlib.
"""

from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt


def trajectory_to_file(filename, directory, traj, num_points):
    """
    Dump a trajectory sampled at num_points evenly spaced times.

    Each line holds: t x_1 ... x_n

    Returns
    -------
    Path
        The written file.
    """
    path = Path(directory) / filename
    times, states = traj.sample(num_points)
    np.savetxt(path, np.column_stack([times, states]), fmt="%.10g")
    return path


def nodes_to_file(filename, directory, nodes):
    """
    Dump node states and costs, one node per line: x_1 ... x_n cost

    Parameters
    ----------
    nodes : iterable of Node
        For example planner.nodes or planner.dominance.nodes().
    """
    path = Path(directory) / filename
    rows = [np.append(node.state, node.cost) for node in nodes]
    if not rows:
        path.write_text("")
        return path
    np.savetxt(path, np.array(rows), fmt="%.10g")
    return path


def plot_solution(traj, nodes=None, disks=(), goal=None, ax=None, num_points=500):
    """
    Plot a trajectory in the (x, y) plane.

    Parameters
    ----------
    traj : InterpolatingPolynomial or None
        Solution trajectory.
    nodes : iterable of Node, optional
        Explored nodes drawn as dots.
    disks : list
        List of (center, radius) obstacle tuples.
    goal : tuple, optional
        (center, radius) of the goal.
    ax : matplotlib Axes, optional
        Axes to draw into; a new figure is created if None.

    Returns
    -------
    matplotlib Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))

    if nodes is not None:
        states = np.array([n.state[:2] for n in nodes])
        if len(states):
            ax.plot(states[:, 0], states[:, 1], '.', color='gray', markersize=2,
                    alpha=0.5, label='Explored')

    for center, radius in disks:
        circle = plt.Circle(center, radius, fill=True, facecolor='red',
                            alpha=0.3, edgecolor='red')
        ax.add_patch(circle)

    if goal is not None:
        center, radius = goal
        ax.add_patch(plt.Circle(center, radius, fill=False, edgecolor='green', linewidth=2))
        ax.plot(center[0], center[1], 'g+', markersize=10, label='Goal')

    if traj is not None:
        _, states = traj.sample(num_points)
        ax.plot(states[:, 0], states[:, 1], 'b-', linewidth=2, label='Trajectory')
        ax.plot(states[0, 0], states[0, 1], 'go', markersize=8, label='Start')

    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)
    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.legend(loc='upper left', fontsize=9)
    return ax
