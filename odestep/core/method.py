"""Embedded Runge-Kutta pair specification."""

from dataclasses import dataclass
from functools import cached_property
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class EmbeddedMethod:
    """Butcher tableau of an embedded Runge-Kutta pair."""

    A: NDArray      # (s, s) - internal stage coefficients
    b: NDArray      # (s,)   - weights of the propagated (higher order) solution
    b_hat: NDArray  # (s,)   - weights of the embedded (lower order) solution
    c: NDArray      # (s,)   - abscissae
    order: int
    embedded_order: int

    @cached_property
    def s(self) -> int:
        """Number of stages."""
        return self.A.shape[0]

    @cached_property
    def is_explicit(self) -> bool:
        """True if A is strictly lower triangular."""
        return bool(np.allclose(self.A, np.tril(self.A, -1)))

    @cached_property
    def error_weights(self) -> NDArray:
        """b - b_hat, the weights of the local error estimate."""
        return self.b - self.b_hat

    @cached_property
    def error_exponent(self) -> float:
        """Exponent -1/(q+1) of the step-size update, q the embedded order."""
        return -1.0 / (self.embedded_order + 1)

    @cached_property
    def fsal(self) -> bool:
        """First same as last: the final stage is evaluated at the new solution."""
        return bool(
            np.isclose(self.c[-1], 1.0)
            and np.allclose(self.A[-1], self.b)
        )
