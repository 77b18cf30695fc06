"""Method tableaux."""

from odestep.methods.runge_kutta import dormand_prince

__all__ = ["dormand_prince"]
