"""Adaptive stepping algorithms."""

from odestep.stepping.trajectory import Trajectory, SolveStats
from odestep.stepping.control import StepSizeController, error_norm
from odestep.stepping.adaptive import solve

__all__ = [
    "Trajectory",
    "SolveStats",
    "StepSizeController",
    "error_norm",
    "solve",
]
