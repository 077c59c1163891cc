"""
Scheduled one-time events inside the projection horizon.
"""

from __future__ import annotations

from typing import Iterable

from core.schema import OneTimeInvestment


def investment_for_period(investments: Iterable[OneTimeInvestment], period: int) -> float:
    """
    Sum of one-time investments scheduled for exactly this period.

    Investments scheduled for periods outside the horizon are never spent;
    nothing accrues across periods.
    """
    return float(sum(inv.amount for inv in investments if inv.period == period))
