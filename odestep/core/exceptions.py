"""Exceptions raised by the integrator."""

from typing import Optional

import numpy as np


class OdestepError(Exception):
    """Base exception for odestep errors."""


class ConfigurationError(OdestepError, ValueError):
    """Solver inputs are invalid; raised before any step is taken."""


class NumericalInstabilityError(OdestepError, ArithmeticError):
    """
    The right-hand side or the error estimate became non-finite, or the step
    no longer advances t.

    Args:
        message: Error message
        t: Time of the last accepted point
        y: State at the last accepted point
    """

    def __init__(self, message: str, t: float, y: Optional[np.ndarray] = None):
        super().__init__(message)
        self.t = t
        self.y = y


class IntegrationCancelled(OdestepError):
    """
    The cancel callback requested a stop between steps.

    Args:
        message: Error message
        trajectory: Trajectory of the points accepted before cancellation
    """

    def __init__(self, message: str, trajectory):
        super().__init__(message)
        self.trajectory = trajectory
