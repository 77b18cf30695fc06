"""Base step solver interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from numpy.typing import NDArray


@dataclass
class StepAttempt:
    """Result of one trial step, accepted or not."""

    y_new: NDArray      # (n,) propagated (higher order) solution
    y_low: NDArray      # (n,) embedded (lower order) solution
    error: NDArray      # (n,) y_new - y_low
    K: NDArray          # (s, n) stage derivatives

    @property
    def f_last(self) -> NDArray:
        """Derivative of the final stage."""
        return self.K[-1]


class StepSolver(ABC):
    """Computes trial steps of an embedded pair."""

    @abstractmethod
    def evaluate(self, f, t: float, y: NDArray) -> NDArray:
        """
        Evaluate the right-hand side once.

        Args:
            f: Right-hand side f(t, y)
            t: Time
            y: State (n,)

        Returns:
            Derivative (n,) as a float array
        """
        ...

    @abstractmethod
    def attempt_step(
        self,
        f,
        t: float,
        y: NDArray,
        h: float,
        f0: NDArray,
    ) -> StepAttempt:
        """
        Compute a trial step from (t, y) of size h.

        Args:
            f: Right-hand side f(t, y)
            t: Time at start of step
            y: State at start of step (n,)
            h: Step size
            f0: Derivative at (t, y), i.e. the first stage

        Returns:
            The trial solutions, error estimate and stage derivatives
        """
        ...
