"""Trajectory returned by the integrator."""

from dataclasses import dataclass, field
from typing import Iterator

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class SolveStats:
    """Counters of one solve."""

    n_accepted: int = 0     # accepted steps (len(T) - 1)
    n_rejected: int = 0     # rejected trial steps
    n_forced: int = 0       # steps accepted at h_min despite ||e|| > 1
    n_evals: int = 0        # right-hand-side evaluations


@dataclass(frozen=True)
class Trajectory:
    """Accepted (t, y) points of one solve.

    Unpacks as ``T, Y = trajectory``. Both arrays are read-only.
    """

    T: NDArray          # (N,) accepted times, strictly increasing
    Y: NDArray          # (N, n) accepted states
    stats: SolveStats = field(default_factory=SolveStats)

    @classmethod
    def from_points(
        cls,
        times: list[float],
        states: list[NDArray],
        stats: SolveStats,
    ) -> "Trajectory":
        """Freeze accumulated points into read-only arrays."""
        T = np.array(times, dtype=float)
        Y = np.array(states, dtype=float).reshape(len(times), -1)
        T.flags.writeable = False
        Y.flags.writeable = False
        return cls(T=T, Y=Y, stats=stats)

    def __iter__(self) -> Iterator[NDArray]:
        return iter((self.T, self.Y))

    def __len__(self) -> int:
        return self.T.shape[0]

    @property
    def N(self) -> int:
        """Number of accepted points, including the initial one."""
        return self.T.shape[0]

    @property
    def n(self) -> int:
        """State dimension."""
        return self.Y.shape[1]

    @property
    def t_final(self) -> float:
        """Last accepted time."""
        return float(self.T[-1])

    @property
    def y_final(self) -> NDArray:
        """Last accepted state."""
        return self.Y[-1]

    @property
    def steps(self) -> NDArray:
        """Sizes of the accepted steps, shape (N - 1,)."""
        return np.diff(self.T)
