"""Named system variants and their construction."""

from enum import Enum

from odestep.core.problem import RightHandSide
from odestep.systems.planar import (
    LinearSystem,
    LotkaVolterra,
    UnstableNode,
    VanDerPol,
)


class SystemType(Enum):
    """Closed set of built-in systems."""
    LINEAR = "linear"
    VAN_DER_POL = "van_der_pol"
    LOTKA_VOLTERRA = "lotka_volterra"
    UNSTABLE_NODE = "unstable_node"


_SYSTEMS = {
    SystemType.LINEAR: LinearSystem,
    SystemType.VAN_DER_POL: VanDerPol,
    SystemType.LOTKA_VOLTERRA: LotkaVolterra,
    SystemType.UNSTABLE_NODE: UnstableNode,
}


def make_system(kind, **coefficients: float) -> RightHandSide:
    """
    Build a right-hand side from a system name and its coefficients.

    Args:
        kind: SystemType or its string value, e.g. "van_der_pol"
        **coefficients: Overrides of the system's defaults, e.g. mu=2.0

    Returns:
        Callable f(t, y)

    Raises:
        ValueError: unknown system name
        TypeError: coefficient not defined by that system
    """
    kind = SystemType(kind)
    return _SYSTEMS[kind](**coefficients)
