"""
Core package — configuration, input records, and the result document.
No business logic lives here.
"""

from .config import SimulationConfig
from .schema import BusinessSnapshot, DebtTerms, OneTimeInvestment, Overrides, StrategyParams
from .result import (
    DebtBalance,
    KPISummary,
    PeriodRecord,
    SimplePeriodRecord,
    SimulationMeta,
    SimulationResult,
)

__all__ = [
    "SimulationConfig",
    "BusinessSnapshot",
    "DebtTerms",
    "OneTimeInvestment",
    "Overrides",
    "StrategyParams",
    "DebtBalance",
    "KPISummary",
    "PeriodRecord",
    "SimplePeriodRecord",
    "SimulationMeta",
    "SimulationResult",
]
