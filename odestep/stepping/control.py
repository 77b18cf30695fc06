"""Local error measurement and step-size adaptation."""

from dataclasses import dataclass
import math

import numpy as np
from numpy.typing import NDArray


def error_norm(
    error: NDArray,
    y: NDArray,
    y_new: NDArray,
    rel_tol: float,
    abs_tol: float,
) -> float:
    """
    Scaled RMS norm of a local error estimate.

        ||e|| = sqrt( (1/n) Σ_i ( e_i / (atol + rtol * max(|y_i|, |y_new_i|)) )² )

    A step is acceptable when the norm is at most 1.

    Args:
        error: Local error estimate (n,)
        y: State at the start of the step (n,)
        y_new: Proposed state at the end of the step (n,)
        rel_tol: Relative tolerance
        abs_tol: Absolute tolerance

    Returns:
        The norm, which is NaN or inf when the inputs are non-finite
    """
    scale = abs_tol + rel_tol * np.maximum(np.abs(y), np.abs(y_new))
    return float(np.sqrt(np.mean((error / scale) ** 2)))


@dataclass(frozen=True)
class StepSizeController:
    """Elementary controller h <- h * clip(safety * ||e||^exponent) within [h_min, h_max]."""

    h_min: float
    h_max: float
    exponent: float = -0.2
    safety: float = 0.9
    min_factor: float = 0.2
    max_factor: float = 5.0

    def factor(self, err_norm: float) -> float:
        """Growth factor for the next trial step."""
        if not math.isfinite(err_norm):
            return self.min_factor
        if err_norm == 0.0:
            return self.max_factor
        factor = self.safety * err_norm ** self.exponent
        return min(self.max_factor, max(self.min_factor, factor))

    def adapt(self, h: float, err_norm: float) -> float:
        """Next trial step after a step of size h with error norm err_norm."""
        h = h * self.factor(err_norm)
        h = min(h, self.h_max)
        return max(h, self.h_min)

    def at_floor(self, h: float) -> bool:
        """True when h cannot be reduced any further."""
        return h <= self.h_min
