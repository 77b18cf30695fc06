"""Core abstractions for adaptive integration."""

from odestep.core.method import EmbeddedMethod
from odestep.core.problem import RightHandSide
from odestep.core.options import SolverOptions
from odestep.core.exceptions import (
    OdestepError,
    ConfigurationError,
    NumericalInstabilityError,
    IntegrationCancelled,
)

__all__ = [
    "EmbeddedMethod",
    "RightHandSide",
    "SolverOptions",
    "OdestepError",
    "ConfigurationError",
    "NumericalInstabilityError",
    "IntegrationCancelled",
]
