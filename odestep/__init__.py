"""
Odestep: adaptive-step integration of ordinary differential equations.

This library integrates first-order systems dy/dt = f(t, y) with the
Dormand-Prince 5(4) embedded Runge-Kutta pair and provides:
- Scaled mixed absolute/relative local error control
- Step-size adaptation within user bounds
- Immutable (T, Y) trajectories
- Built-in planar example systems
"""

__version__ = "0.1.0"

from odestep.core.method import EmbeddedMethod
from odestep.core.options import SolverOptions
from odestep.core.exceptions import (
    OdestepError,
    ConfigurationError,
    NumericalInstabilityError,
    IntegrationCancelled,
)
from odestep.methods.runge_kutta import dormand_prince
from odestep.stepping.adaptive import solve
from odestep.stepping.trajectory import Trajectory, SolveStats
from odestep.simulation import Simulation, SimulationConfig

__all__ = [
    "EmbeddedMethod",
    "SolverOptions",
    "OdestepError",
    "ConfigurationError",
    "NumericalInstabilityError",
    "IntegrationCancelled",
    "dormand_prince",
    "solve",
    "Trajectory",
    "SolveStats",
    "Simulation",
    "SimulationConfig",
]
