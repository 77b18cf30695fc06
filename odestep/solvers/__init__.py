"""Trial step solvers."""

from odestep.solvers.base import StepSolver, StepAttempt
from odestep.solvers.embedded import EmbeddedStageSolver

__all__ = ["StepSolver", "StepAttempt", "EmbeddedStageSolver"]
