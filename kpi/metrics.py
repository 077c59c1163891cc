"""
Per-run KPI computation over the period sequences of one simulation.

All degenerate cases come back as None (or zeros for the risk summary);
nothing here raises on a valid sequence.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import numpy as np


def compute_roi(total_net_profit: float, initial_investment: Optional[float]) -> Optional[float]:
    """ROI = total net profit / initial investment; None when nothing was invested."""
    if not initial_investment:
        return None
    return total_net_profit / initial_investment


def compute_break_even(
    cumulative_profits: Sequence[float],
    initial_investment: Optional[float],
) -> Optional[int]:
    """
    First period (1-based) whose cumulative profit covers the initial
    investment, or None if it never does within the horizon.
    """
    if not initial_investment or initial_investment <= 0:
        return None
    for i, cumulative in enumerate(cumulative_profits):
        if cumulative >= initial_investment:
            return i + 1
    return None


def compute_risk_index(profits: Sequence[float]) -> Dict[str, float]:
    """
    Volatility of per-period profit.

    Population standard deviation (ddof=0). risk_index is the std itself,
    not normalized by revenue.
    """
    values = np.asarray(profits, dtype=float)
    if values.size == 0:
        return {"std": 0.0, "mean": 0.0, "risk_index": 0.0}
    mean = float(np.mean(values))
    std = float(np.sqrt(np.mean((values - mean) ** 2)))
    return {"std": std, "mean": mean, "risk_index": std}
