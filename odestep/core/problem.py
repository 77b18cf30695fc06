"""Right-hand-side protocol."""

from typing import Protocol
from numpy.typing import ArrayLike, NDArray


class RightHandSide(Protocol):
    """ODE system dy/dt = f(t, y).

    Any callable with this signature qualifies: plain functions, lambdas and
    objects defining ``__call__``. The integrator evaluates it repeatedly and
    assumes it is deterministic for a given (t, y) and holds no state that
    changes between calls.
    """

    def __call__(self, t: float, y: NDArray) -> ArrayLike:
        """Derivative vector of the same length as y."""
        ...
