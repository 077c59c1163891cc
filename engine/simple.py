"""
Simple projection: compound growth on revenue and cost, nothing else.

No debts, investments, marketing, pricing or noise. Kept independent of the
advanced runner for callers that only need the bare trajectory.
"""

from __future__ import annotations

from typing import Hashable, List

from core.result import SimplePeriodRecord
from core.schema import BusinessSnapshot, StrategyParams
from data_prep.lookup import RecordLookup, fetch_required


def run_simulation(
    business: BusinessSnapshot,
    strategy: StrategyParams,
    periods: int = 12,
) -> List[SimplePeriodRecord]:
    if periods < 0:
        raise ValueError(f"periods must be >= 0, got {periods}.")

    revenue = float(business.revenue)
    cost = float(business.cost)
    results = []
    for t in range(1, periods + 1):
        revenue = revenue * (1 + strategy.growth_rate)
        cost = cost * (1 + strategy.cost_rate)
        results.append(
            SimplePeriodRecord(period=t, revenue=revenue, cost=cost, profit=revenue - cost)
        )
    return results


def run_simulation_by_id(
    business_id: Hashable,
    strategy_id: Hashable,
    periods: int = 12,
    *,
    businesses: RecordLookup[BusinessSnapshot],
    strategies: RecordLookup[StrategyParams],
) -> List[SimplePeriodRecord]:
    """Both records are required; either missing raises RecordNotFoundError."""
    business = fetch_required(businesses, business_id, "Business")
    strategy = fetch_required(strategies, strategy_id, "Strategy")
    return run_simulation(business, strategy, periods)
