"""
Projection engine — period-stepping simulation, debt amortization, Monte Carlo runner.
"""

from .runner import (
    run_advanced_simulation,
    run_advanced_simulation_by_id,
    run_stochastic_paths,
)
from .simple import run_simulation, run_simulation_by_id

__all__ = [
    "run_advanced_simulation",
    "run_advanced_simulation_by_id",
    "run_stochastic_paths",
    "run_simulation",
    "run_simulation_by_id",
]
