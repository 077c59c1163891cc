"""
Simulation configuration.
Input records live in core/schema.py, the result document in core/result.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Fallbacks used when neither an override nor a stored record supplies a value
DEFAULT_REVENUE: float = 1000.0
DEFAULT_COST: float = 500.0
DEFAULT_GROWTH_RATE: float = 0.05
DEFAULT_COST_RATE: float = 0.02
DEFAULT_MARKETING_MULTIPLIER: float = 2.0


@dataclass(frozen=True)
class SimulationConfig:
    periods: int = 12
    scenario: str = "generic"  # startup | manufacturing | retail | generic

    # revenue noise (stochastic mode); seed=None draws from fresh OS entropy
    stochastic: bool = False
    seed: Optional[int] = None

    # IRR bisection bracket and stopping rules
    irr_low: float = -0.9999
    irr_high: float = 10.0
    irr_iterations: int = 80
    irr_tol: float = 1e-6
