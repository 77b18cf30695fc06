"""Embedded Runge-Kutta pair tableaux."""

import numpy as np
from odestep.core.method import EmbeddedMethod


def dormand_prince() -> EmbeddedMethod:
    """
    Dormand-Prince 5(4) pair (seven stages, FSAL).

    The 5th-order solution is propagated; the 4th-order solution only feeds
    the local error estimate. The last row of A equals b, so stage 7 is the
    derivative at the new solution and doubles as stage 1 of the next step.

    Reference: Dormand, J. R. & Prince, P. J. (1980). "A family of embedded
    Runge-Kutta formulae". J. Comput. Appl. Math. 6(1), 19-26.
    """
    A = np.array([
        [0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0],
        [1.0/5.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0],
        [3.0/40.0, 9.0/40.0, 0.0, 0.0, 0.0, 0.0, 0.0],
        [44.0/45.0, -56.0/15.0, 32.0/9.0, 0.0, 0.0, 0.0, 0.0],
        [19372.0/6561.0, -25360.0/2187.0, 64448.0/6561.0, -212.0/729.0,
         0.0, 0.0, 0.0],
        [9017.0/3168.0, -355.0/33.0, 46732.0/5247.0, 49.0/176.0,
         -5103.0/18656.0, 0.0, 0.0],
        [35.0/384.0, 0.0, 500.0/1113.0, 125.0/192.0, -2187.0/6784.0,
         11.0/84.0, 0.0],
    ])
    b = np.array([
        35.0/384.0, 0.0, 500.0/1113.0, 125.0/192.0, -2187.0/6784.0,
        11.0/84.0, 0.0,
    ])
    b_hat = np.array([
        5179.0/57600.0, 0.0, 7571.0/16695.0, 393.0/640.0,
        -92097.0/339200.0, 187.0/2100.0, 1.0/40.0,
    ])
    c = np.array([0.0, 1.0/5.0, 3.0/10.0, 4.0/5.0, 8.0/9.0, 1.0, 1.0])
    return EmbeddedMethod(A=A, b=b, b_hat=b_hat, c=c, order=5, embedded_order=4)
