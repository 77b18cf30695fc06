"""Two-dimensional example systems."""

from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class LinearSystem:
    """Linear system dy/dt = [[a, b], [c, d]] y.

    The defaults give the harmonic oscillator y1' = y2, y2' = -y1.
    """

    a: float = 0.0
    b: float = 1.0
    c: float = -1.0
    d: float = 0.0

    @property
    def matrix(self) -> NDArray:
        return np.array([[self.a, self.b], [self.c, self.d]])

    @property
    def eigenvalues(self) -> NDArray:
        return np.linalg.eigvals(self.matrix)

    def __call__(self, t: float, y: NDArray) -> NDArray:
        return np.array([
            self.a * y[0] + self.b * y[1],
            self.c * y[0] + self.d * y[1],
        ])


@dataclass(frozen=True)
class VanDerPol:
    """Van der Pol oscillator: y1' = y2, y2' = mu (1 - y1²) y2 - y1."""

    mu: float = 1.0

    def __call__(self, t: float, y: NDArray) -> NDArray:
        return np.array([
            y[1],
            self.mu * (1.0 - y[0] * y[0]) * y[1] - y[0],
        ])


@dataclass(frozen=True)
class LotkaVolterra:
    """Predator-prey model.

        y1' = alpha y1 - beta y1 y2     (prey)
        y2' = delta y1 y2 - gamma y2    (predator)
    """

    alpha: float = 1.0
    beta: float = 0.1
    delta: float = 0.1
    gamma: float = 1.0

    @property
    def equilibrium(self) -> NDArray:
        """Coexistence fixed point (gamma/delta, alpha/beta)."""
        return np.array([self.gamma / self.delta, self.alpha / self.beta])

    def invariant(self, y: NDArray) -> float:
        """First integral delta y1 - gamma ln y1 + beta y2 - alpha ln y2 (y > 0)."""
        return float(
            self.delta * y[0] - self.gamma * np.log(y[0])
            + self.beta * y[1] - self.alpha * np.log(y[1])
        )

    def __call__(self, t: float, y: NDArray) -> NDArray:
        return np.array([
            self.alpha * y[0] - self.beta * y[0] * y[1],
            self.delta * y[0] * y[1] - self.gamma * y[1],
        ])


@dataclass(frozen=True)
class UnstableNode:
    """Decoupled growth y1' = y1, y2' = 2 y2 (eigenvalues 1 and 2).

    Exact solution y1 = y1(0) e^t, y2 = y2(0) e^{2t}.
    """

    def exact(self, t: float, y0: NDArray) -> NDArray:
        return np.array([y0[0] * np.exp(t), y0[1] * np.exp(2.0 * t)])

    def __call__(self, t: float, y: NDArray) -> NDArray:
        return np.array([y[0], 2.0 * y[1]])
