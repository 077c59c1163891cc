"""
Base class for revenue noise models.
The engine asks the model once per period, after marketing lift is applied.
"""

from __future__ import annotations

import numpy as np


class RevenueNoiseModel:
    """Interface for perturbing a period's revenue (deterministic or random)."""

    def perturb(
        self,
        revenue: float,
        *,
        volatility: float,
        rng: np.random.Generator,
    ) -> float:
        raise NotImplementedError
