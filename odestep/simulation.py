"""Parameter set of a simulated system and its cached solution."""

from dataclasses import dataclass, replace
import logging
from typing import Optional

import numpy as np

from odestep.core.options import SolverOptions
from odestep.core.problem import RightHandSide
from odestep.stepping.adaptive import solve
from odestep.stepping.trajectory import Trajectory
from odestep.systems.registry import SystemType, make_system

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """System choice, coefficients, interval and initial state."""

    system: SystemType = SystemType.LINEAR
    coefficients: tuple = ()  # (name, value) pairs; a mapping is accepted
    t_start: float = 0.0
    t_end: float = 20.0
    step_size: float = 0.01  # initial trial step
    initial_state: tuple = (1.0, 0.0)

    # Step control
    rel_tol: float = 1e-6
    abs_tol: float = 1e-9
    h_max: float = 0.1
    h_min: float = 1e-6

    def __post_init__(self):
        object.__setattr__(self, "system", SystemType(self.system))
        # Own copies: sorted (name, value) pairs and a state tuple
        object.__setattr__(
            self, "coefficients", tuple(sorted(dict(self.coefficients).items()))
        )
        object.__setattr__(self, "initial_state", tuple(self.initial_state))

    @property
    def solver_options(self) -> SolverOptions:
        """Integrator options; raises ConfigurationError if inconsistent."""
        return SolverOptions(
            rel_tol=self.rel_tol,
            abs_tol=self.abs_tol,
            h0=self.step_size,
            h_max=self.h_max,
            h_min=self.h_min,
        )

    def build_system(self) -> RightHandSide:
        return make_system(self.system, **dict(self.coefficients))


class Simulation:
    """
    Solves a configured system and re-solves whenever the configuration changes.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        self.config = config if config is not None else SimulationConfig()
        self._trajectory: Optional[Trajectory] = None

    @property
    def trajectory(self) -> Trajectory:
        """Solution of the current configuration (solved on first access)."""
        if self._trajectory is None:
            self._trajectory = self.run()
        return self._trajectory

    def run(self) -> Trajectory:
        """Solve the current configuration."""
        config = self.config
        logger.debug(
            "Solving %s on [%g, %g] from %s",
            config.system.value, config.t_start, config.t_end,
            config.initial_state,
        )
        return solve(
            config.build_system(),
            config.t_start,
            config.t_end,
            np.asarray(config.initial_state, dtype=float),
            options=config.solver_options,
        )

    def update(self, **changes) -> Trajectory:
        """
        Replace configuration fields and return the (re-)solved trajectory.

        Args:
            **changes: SimulationConfig fields, e.g. system="van_der_pol"

        Returns:
            Trajectory of the new configuration; the cached one when nothing changed
        """
        config = replace(self.config, **changes)
        if config != self.config:
            self.config = config
            self._trajectory = None
        return self.trajectory
