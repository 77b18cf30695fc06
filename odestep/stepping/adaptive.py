"""Adaptive-step integration with an embedded Runge-Kutta pair."""

import logging
import math
from typing import Callable, Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from odestep.core.exceptions import (
    ConfigurationError,
    IntegrationCancelled,
    NumericalInstabilityError,
)
from odestep.core.method import EmbeddedMethod
from odestep.core.options import SolverOptions
from odestep.core.problem import RightHandSide
from odestep.methods.runge_kutta import dormand_prince
from odestep.solvers.embedded import EmbeddedStageSolver
from odestep.stepping.control import StepSizeController, error_norm
from odestep.stepping.trajectory import SolveStats, Trajectory

logger = logging.getLogger(__name__)


def solve(
    f: RightHandSide,
    t0: float,
    tf: float,
    y0: ArrayLike,
    rel_tol: float = 1e-6,
    abs_tol: float = 1e-9,
    h0: float = 0.01,
    h_max: float = 0.1,
    h_min: float = 1e-6,
    *,
    options: Optional[SolverOptions] = None,
    method: Optional[EmbeddedMethod] = None,
    cancel: Optional[Callable[[], bool]] = None,
) -> Trajectory:
    """
    Integrate dy/dt = f(t, y) from t0 to tf with adaptive step-size control.

    While t < tf:
        1. Shrink h to tf - t if the step would pass tf
        2. Take a trial step of the embedded pair -> y_new, error
        3. Accept iff the scaled error norm is <= 1 (advance t, y; record)
        4. Adapt h from the error norm, accepted or not, within [h_min, h_max]

    A trial step that is already at h_min is accepted even when its error
    norm exceeds 1, so every iteration at the floor advances t.

    Args:
        f: Right-hand side f(t, y) returning a vector of len(y0)
        t0: Initial time
        tf: Final time, t0 <= tf
        y0: Initial state (n,), n >= 1
        rel_tol: Relative tolerance
        abs_tol: Absolute tolerance
        h0: Initial trial step
        h_max: Upper step-size bound
        h_min: Lower step-size bound (the final step may be smaller)
        options: Tolerances and bounds; replaces the five arguments above
        method: Explicit embedded pair (default Dormand-Prince 5(4))
        cancel: Polled between iterations; a true result stops the solve

    Returns:
        Trajectory with T[0] == t0, T[-1] == tf and Y[0] == y0

    Raises:
        ConfigurationError: invalid tolerances, bounds, interval or state
        NumericalInstabilityError: f or the error estimate became non-finite,
            or h fell below the float spacing of t
        IntegrationCancelled: cancel() returned True; carries the partial trajectory
    """
    if options is None:
        options = SolverOptions(
            rel_tol=rel_tol, abs_tol=abs_tol, h0=h0, h_max=h_max, h_min=h_min
        )
    if method is None:
        method = dormand_prince()

    t0, tf = _validate_interval(t0, tf)
    y = _initial_state(y0)

    solver = EmbeddedStageSolver(method)
    controller = StepSizeController(
        h_min=options.h_min, h_max=options.h_max, exponent=method.error_exponent
    )

    times = [t0]
    states = [y.copy()]
    n_rejected = 0
    n_forced = 0

    t = t0
    h = options.h0
    f_t = solver.evaluate(f, t, y) if t < tf else None
    _check_derivative(f_t, t, y)

    while t < tf:
        if cancel is not None and cancel():
            stats = SolveStats(
                n_accepted=len(times) - 1,
                n_rejected=n_rejected,
                n_forced=n_forced,
                n_evals=solver.n_evals,
            )
            raise IntegrationCancelled(
                f"Integration cancelled at t={t}",
                Trajectory.from_points(times, states, stats),
            )

        landing = t + h >= tf
        if t + h > tf:
            h = tf - t
        elif not landing and t + h <= t:
            # h is below the float spacing of t
            raise NumericalInstabilityError(
                f"Step h={h} does not advance t={t}", t, y.copy()
            )

        attempt = solver.attempt_step(f, t, y, h, f_t)
        err_norm = error_norm(
            attempt.error, y, attempt.y_new, options.rel_tol, options.abs_tol
        )

        accepted = err_norm <= 1.0
        if not accepted and controller.at_floor(h):
            if not math.isfinite(err_norm):
                raise NumericalInstabilityError(
                    f"Non-finite error estimate at t={t} with h={h}", t, y.copy()
                )
            logger.warning(
                "Accepting step at t=%g with h=%g at the lower bound "
                "(error norm %.3g)", t, h, err_norm,
            )
            n_forced += 1
            accepted = True

        if accepted:
            # Landing on tf exactly rather than on t + h
            t = tf if landing else t + h
            y = attempt.y_new
            if method.fsal:
                f_t = attempt.f_last
            else:
                f_t = solver.evaluate(f, t, y)
                _check_derivative(f_t, t, y)
            times.append(t)
            states.append(y)
        else:
            n_rejected += 1

        h = controller.adapt(h, err_norm)

    stats = SolveStats(
        n_accepted=len(times) - 1,
        n_rejected=n_rejected,
        n_forced=n_forced,
        n_evals=solver.n_evals,
    )
    logger.debug(
        "Solved [%g, %g]: %d accepted, %d rejected, %d forced, %d evaluations",
        t0, tf, stats.n_accepted, stats.n_rejected, stats.n_forced, stats.n_evals,
    )
    return Trajectory.from_points(times, states, stats)


def _validate_interval(t0: float, tf: float) -> tuple[float, float]:
    """Check the interval is finite and forward."""
    t0, tf = float(t0), float(tf)
    if not (math.isfinite(t0) and math.isfinite(tf)):
        raise ConfigurationError(f"t0 and tf must be finite, got ({t0}, {tf})")
    if t0 > tf:
        raise ConfigurationError(f"t0 ({t0}) must not exceed tf ({tf})")
    return t0, tf


def _initial_state(y0: ArrayLike) -> NDArray:
    """Copy y0 into a finite, non-empty float vector."""
    try:
        y = np.array(y0, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"y0 is not a numeric vector: {exc}") from exc
    if y.ndim != 1 or y.size == 0:
        raise ConfigurationError(
            f"y0 must be a non-empty 1-D vector, got shape {y.shape}"
        )
    if not np.all(np.isfinite(y)):
        raise ConfigurationError("y0 contains non-finite values")
    return y


def _check_derivative(f_t: Optional[NDArray], t: float, y: NDArray) -> None:
    """Raise if the derivative at an accepted point is non-finite."""
    if f_t is not None and not np.all(np.isfinite(f_t)):
        raise NumericalInstabilityError(
            f"Right-hand side returned non-finite values at t={t}", t, y.copy()
        )
