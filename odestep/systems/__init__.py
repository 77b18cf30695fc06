"""Example right-hand sides."""

from odestep.systems.planar import (
    LinearSystem,
    VanDerPol,
    LotkaVolterra,
    UnstableNode,
)
from odestep.systems.registry import SystemType, make_system

__all__ = [
    "LinearSystem",
    "VanDerPol",
    "LotkaVolterra",
    "UnstableNode",
    "SystemType",
    "make_system",
]
