"""Tests for the built-in systems and the simulation layer."""

import logging

import numpy as np
import pytest

from odestep.core.exceptions import ConfigurationError
from odestep.simulation import Simulation, SimulationConfig
from odestep.stepping.adaptive import solve
from odestep.systems.planar import LinearSystem, LotkaVolterra, UnstableNode, VanDerPol
from odestep.systems.registry import SystemType, make_system
from odestep.utils.log_config import setup_logging
from odestep.utils.projection import phase_points, time_series


def test_linear_system_matrix_product():
    """LinearSystem evaluates [[a, b], [c, d]] @ y."""
    system = LinearSystem(a=1.0, b=2.0, c=-3.0, d=0.5)
    y = np.array([0.7, -1.1])

    assert np.allclose(system(0.0, y), system.matrix @ y)


def test_linear_system_defaults_are_a_center():
    """Default coefficients give purely imaginary eigenvalues ±i."""
    eigenvalues = np.sort_complex(LinearSystem().eigenvalues)

    assert np.allclose(eigenvalues, [-1j, 1j])


def test_van_der_pol_rhs():
    system = VanDerPol(mu=2.0)
    y = np.array([0.5, 1.0])

    assert np.allclose(system(0.0, y), [1.0, 2.0 * 0.75 * 1.0 - 0.5])


def test_van_der_pol_limit_cycle_amplitude():
    """For mu = 1 the limit cycle reaches |x| ≈ 2.01."""
    T, Y = solve(VanDerPol(mu=1.0), 0.0, 30.0, [0.1, 0.0])

    late = Y[T > 15.0, 0]
    assert 1.95 < np.max(np.abs(late)) < 2.05


def test_lotka_volterra_conserves_invariant():
    """Populations stay positive and the first integral is conserved."""
    system = LotkaVolterra()
    T, Y = solve(system, 0.0, 20.0, [10.0, 5.0])

    assert np.all(Y > 0.0)
    invariants = np.array([system.invariant(y) for y in Y])
    assert np.allclose(invariants, invariants[0], atol=1e-4)


def test_lotka_volterra_equilibrium_is_fixed():
    system = LotkaVolterra(alpha=1.5, beta=0.5, delta=0.2, gamma=0.8)

    assert np.allclose(system(0.0, system.equilibrium), 0.0)


def test_unstable_node_exact_solution():
    system = UnstableNode()
    y0 = np.array([0.5, -0.25])

    assert np.allclose(system.exact(0.0, y0), y0)
    assert np.allclose(system(0.0, y0), [0.5, -0.5])


@pytest.mark.parametrize(
    "kind, expected",
    [
        (SystemType.LINEAR, LinearSystem),
        ("linear", LinearSystem),
        ("van_der_pol", VanDerPol),
        (SystemType.LOTKA_VOLTERRA, LotkaVolterra),
        ("unstable_node", UnstableNode),
    ],
)
def test_make_system(kind, expected):
    assert isinstance(make_system(kind), expected)


def test_make_system_coefficients():
    system = make_system("van_der_pol", mu=3.5)

    assert system.mu == 3.5


def test_make_system_errors():
    """Unknown names and foreign coefficients are rejected."""
    with pytest.raises(ValueError):
        make_system("duffing")
    with pytest.raises(TypeError):
        make_system(SystemType.LINEAR, mu=1.0)


def test_phase_points_and_time_series():
    """Projection onto (y1, y2) and (t, y_i) point arrays."""
    trajectory = solve(LinearSystem(), 0.0, 1.0, [1.0, 0.0])

    phase = phase_points(trajectory)
    assert phase.shape == (trajectory.N, 2)
    assert np.array_equal(phase[:, 0], trajectory.Y[:, 0])
    assert np.array_equal(phase[:, 1], trajectory.Y[:, 1])

    series = time_series(trajectory, 1)
    assert series.shape == (trajectory.N, 2)
    assert np.array_equal(series[:, 0], trajectory.T)
    assert np.array_equal(series[:, 1], trajectory.Y[:, 1])

    swapped = phase_points(trajectory, 1, 0)
    assert np.array_equal(swapped, phase[:, ::-1])


def test_projection_component_out_of_range():
    trajectory = solve(lambda t, y: -y, 0.0, 1.0, [1.0])

    with pytest.raises(IndexError):
        phase_points(trajectory)
    with pytest.raises(IndexError):
        time_series(trajectory, 1)


def test_simulation_default_configuration():
    """Default: linear oscillator from (1, 0) over [0, 20]."""
    simulation = Simulation()
    T, Y = simulation.trajectory

    assert T[0] == 0.0
    assert T[-1] == 20.0
    assert np.allclose(Y[-1], [np.cos(20.0), -np.sin(20.0)], atol=1e-3)


def test_simulation_caches_until_config_changes():
    """The trajectory is re-solved only when a parameter changes."""
    simulation = Simulation(SimulationConfig(t_end=5.0))
    first = simulation.trajectory

    assert simulation.trajectory is first
    assert simulation.update(t_end=5.0) is first

    second = simulation.update(system="van_der_pol", coefficients={"mu": 2.0})
    assert second is not first
    assert simulation.config.system is SystemType.VAN_DER_POL
    assert second.T[-1] == 5.0
    assert not np.allclose(second.Y[-1], first.Y[-1])


def test_simulation_config_owns_its_coefficients():
    """Mutating the caller's dict after construction changes nothing."""
    coefficients = {"mu": 2.0}
    config = SimulationConfig(
        system=SystemType.VAN_DER_POL, coefficients=coefficients, t_end=5.0
    )
    simulation = Simulation(config)
    first = simulation.trajectory

    coefficients["mu"] = 5.0

    assert config.coefficients == (("mu", 2.0),)
    assert simulation.update(t_end=5.0) is first
    assert hash(config) == hash(
        SimulationConfig(system="van_der_pol", coefficients={"mu": 2.0}, t_end=5.0)
    )
    with pytest.raises(TypeError):
        config.coefficients["mu"] = 5.0

    third = simulation.update(coefficients=coefficients)
    assert third is not first
    assert simulation.config.build_system().mu == 5.0
    assert not np.allclose(third.Y[-1], first.Y[-1])


def test_simulation_invalid_step_size():
    """A non-positive step size surfaces as a configuration error."""
    simulation = Simulation(SimulationConfig(step_size=0.0))

    with pytest.raises(ConfigurationError):
        simulation.run()


def test_simulation_unstable_node_intervals():
    """Short (readable) and long (blown-up) intervals of the unstable node."""
    config = SimulationConfig(
        system=SystemType.UNSTABLE_NODE, initial_state=(0.5, 0.5), t_end=2.0
    )
    short = Simulation(config).trajectory
    long = Simulation(config).update(t_end=10.0)
    exact = UnstableNode().exact

    assert short.T[-1] == 2.0
    assert long.T[-1] == 10.0
    assert np.allclose(short.Y[-1], exact(2.0, np.array([0.5, 0.5])), rtol=1e-4)
    assert np.allclose(long.Y[-1], exact(10.0, np.array([0.5, 0.5])), rtol=1e-3)
    assert long.Y[-1, 1] > 1e3 * short.Y[-1, 1]


def test_setup_logging_attaches_stdout_handler():
    logger = setup_logging(level=logging.DEBUG)
    try:
        assert logger.name == "odestep"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
