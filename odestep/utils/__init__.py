"""Helpers around the integrator."""

from odestep.utils.projection import phase_points, time_series
from odestep.utils.log_config import setup_logging

__all__ = ["phase_points", "time_series", "setup_logging"]
