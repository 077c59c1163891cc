"""
Revenue noise models used by the projection engine.

NoRevenueNoise:      deterministic runs (stochastic=False)
UniformRevenueNoise: symmetric uniform shock of +/- volatility * revenue
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .base import RevenueNoiseModel


@dataclass(frozen=True)
class NoRevenueNoise(RevenueNoiseModel):
    """Returns revenue unchanged and never touches the generator."""

    def perturb(
        self, revenue: float, *, volatility: float, rng: np.random.Generator
    ) -> float:
        return revenue


@dataclass(frozen=True)
class UniformRevenueNoise(RevenueNoiseModel):
    """
    One draw per period: noise = (U(0,1) * 2 - 1) * volatility * revenue.

    Revenue is floored at zero after the shock. Reproducibility depends
    entirely on the generator passed in; an unseeded generator gives a
    different trajectory on every run.
    """

    def perturb(
        self, revenue: float, *, volatility: float, rng: np.random.Generator
    ) -> float:
        noise = (rng.random() * 2.0 - 1.0) * volatility * revenue
        return max(0.0, revenue + noise)


def noise_model_for(stochastic: bool) -> RevenueNoiseModel:
    return UniformRevenueNoise() if stochastic else NoRevenueNoise()
