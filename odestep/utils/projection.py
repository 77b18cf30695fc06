"""Projection of trajectories onto 2-D point sets."""

import numpy as np
from numpy.typing import NDArray

from odestep.stepping.trajectory import Trajectory


def phase_points(trajectory: Trajectory, i: int = 0, j: int = 1) -> NDArray:
    """
    Phase-space points (y_i, y_j) of every accepted state.

    Args:
        trajectory: Solve result with n >= 2
        i: Component on the first axis
        j: Component on the second axis

    Returns:
        Array of shape (N, 2)
    """
    _check_component(trajectory, i)
    _check_component(trajectory, j)
    return np.column_stack((trajectory.Y[:, i], trajectory.Y[:, j]))


def time_series(trajectory: Trajectory, i: int = 0) -> NDArray:
    """Points (t, y_i), shape (N, 2)."""
    _check_component(trajectory, i)
    return np.column_stack((trajectory.T, trajectory.Y[:, i]))


def _check_component(trajectory: Trajectory, i: int) -> None:
    if not 0 <= i < trajectory.n:
        raise IndexError(
            f"Component {i} out of range for state dimension {trajectory.n}"
        )
