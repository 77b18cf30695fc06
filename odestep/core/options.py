"""Integrator tolerances and step-size bounds."""

from dataclasses import dataclass
import math

from odestep.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class SolverOptions:
    """
    Tolerances and step-size bounds for one solve.

    Args:
        rel_tol: Relative tolerance of the scaled error norm
        abs_tol: Absolute tolerance of the scaled error norm
        h0: Initial trial step
        h_max: Upper bound on the adapted step
        h_min: Lower bound on the adapted step; only the final step, shrunk
            to land on the end time, may be smaller

    Raises:
        ConfigurationError: a value is non-positive or non-finite, or h_min > h_max
    """

    rel_tol: float = 1e-6
    abs_tol: float = 1e-9
    h0: float = 0.01
    h_max: float = 0.1
    h_min: float = 1e-6

    def __post_init__(self):
        for name in ("rel_tol", "abs_tol", "h0", "h_max", "h_min"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0.0:
                raise ConfigurationError(
                    f"{name} must be a positive finite number, got {value!r}"
                )
        if self.h_min > self.h_max:
            raise ConfigurationError(
                f"h_min ({self.h_min}) must not exceed h_max ({self.h_max})"
            )
