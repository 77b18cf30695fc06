"""Demo script: solve each built-in system and summarize the trajectories."""

import logging

import numpy as np
from odestep.simulation import Simulation, SimulationConfig
from odestep.systems.registry import SystemType
from odestep.utils.log_config import setup_logging
from odestep.utils.projection import phase_points

setup_logging(level=logging.DEBUG)

configs = [
    SimulationConfig(system=SystemType.LINEAR),
    SimulationConfig(system=SystemType.VAN_DER_POL, coefficients={"mu": 1.0}),
    SimulationConfig(
        system=SystemType.LOTKA_VOLTERRA, initial_state=(10.0, 5.0)
    ),
    SimulationConfig(
        system=SystemType.UNSTABLE_NODE, initial_state=(0.5, 0.5), t_end=2.0
    ),
]

for config in configs:
    trajectory = Simulation(config).trajectory
    points = phase_points(trajectory)
    stats = trajectory.stats
    print(f"\n{config.system.value}")
    print(f"  points:     {trajectory.N}")
    print(f"  rejected:   {stats.n_rejected}")
    print(f"  evals:      {stats.n_evals}")
    print(f"  y(t_end):   {trajectory.y_final}")
    print(f"  y1 range:   [{points[:, 0].min():.4f}, {points[:, 0].max():.4f}]")
    print(f"  y2 range:   [{points[:, 1].min():.4f}, {points[:, 1].max():.4f}]")

# Unstable node: short interval stays readable, long interval blows up
simulation = Simulation(configs[-1])
for t_end in (2.0, 10.0):
    trajectory = simulation.update(t_end=t_end)
    exact = 0.5 * np.array([np.exp(t_end), np.exp(2.0 * t_end)])
    rel_err = np.abs(trajectory.y_final - exact) / exact
    print(f"\nunstable node to t={t_end}: y={trajectory.y_final}, rel. error={rel_err}")
