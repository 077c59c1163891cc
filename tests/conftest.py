"""
Pytest fixtures for the strategy simulation suite.

Markers:
    - property: Property-based tests (Hypothesis)
"""

import pytest

from core.config import SimulationConfig
from core.schema import BusinessSnapshot, DebtTerms, StrategyParams
from data_prep.lookup import InMemoryLookup


@pytest.fixture
def business():
    return BusinessSnapshot(id=1, name="Corner Bakery", revenue=1000.0, cost=500.0)


@pytest.fixture
def strategy():
    return StrategyParams(id=7, name="Steady growth", growth_rate=0.1, cost_rate=0.05)


@pytest.fixture
def leveraged_business():
    return BusinessSnapshot(
        id=2,
        name="Machine Shop",
        revenue=5000.0,
        cost=4200.0,
        initial_investment=3000.0,
        cash_balance=250.0,
        debts=[
            DebtTerms(principal=1000.0, annual_rate=0.08, periods_to_repay=4),
            DebtTerms(principal=600.0, annual_rate=0.0, periods_to_repay=3, start_period=2),
        ],
    )


@pytest.fixture
def deterministic_config():
    return SimulationConfig(periods=12, scenario="generic", stochastic=False)


@pytest.fixture
def lookups(business, strategy, leveraged_business):
    businesses = InMemoryLookup({1: business, 2: leveraged_business})
    strategies = InMemoryLookup({7: strategy})
    return businesses, strategies
