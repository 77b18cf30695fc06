"""Explicit embedded pair stage solver."""

import numpy as np
from numpy.typing import NDArray

from odestep.solvers.base import StepSolver, StepAttempt
from odestep.core.method import EmbeddedMethod
from odestep.core.exceptions import ConfigurationError


class EmbeddedStageSolver(StepSolver):
    """Forward substitution for the strictly lower triangular A of an explicit pair.

    One instance serves a single solve: it counts right-hand-side evaluations
    in ``n_evals``.
    """

    def __init__(self, method: EmbeddedMethod) -> None:
        if not method.is_explicit:
            raise ConfigurationError("Method is not explicit")
        self.method = method
        self.n_evals = 0

    def evaluate(self, f, t: float, y: NDArray) -> NDArray:
        """Evaluate f and check the derivative has the state's length."""
        dy = np.asarray(f(t, y), dtype=float)
        self.n_evals += 1
        if dy.shape != y.shape:
            raise ConfigurationError(
                f"Right-hand side returned shape {dy.shape}, expected {y.shape}"
            )
        return dy

    def attempt_step(
        self,
        f,
        t: float,
        y: NDArray,
        h: float,
        f0: NDArray,
    ) -> StepAttempt:
        """Evaluate all stages and both solutions of the pair."""
        method = self.method
        s = method.s
        A, c = method.A, method.c

        K = np.zeros((s, y.shape[0]))
        K[0] = f0
        Z = y

        for i in range(1, s):
            # Z_i = y + h Σ_{j<i} a_{ij} k_j
            Z = y + h * (A[i, :i] @ K[:i])
            K[i] = self.evaluate(f, t + c[i] * h, Z)

        if method.fsal:
            # Last stage was evaluated at the propagated solution itself
            y_new = Z
        else:
            y_new = y + h * (method.b @ K)
        y_low = y + h * (method.b_hat @ K)

        return StepAttempt(y_new=y_new, y_low=y_low, error=y_new - y_low, K=K)
