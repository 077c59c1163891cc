"""
IRR via bisection on the NPV curve.

Bisection over a fixed bracket instead of Newton: no derivative, no divergence
on cash-flow streams with several sign changes, at the cost of returning None
when the bracket ends have the same sign.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np


def npv(cash_flows: Sequence[float], rate: float) -> float:
    """
    Net present value with cash_flows[0] at t=0.

    Extreme rates (close to -1, or large and positive over long horizons)
    over/underflow the discount factor; numpy turns those into +/-inf instead
    of raising, which keeps the sign usable for bracketing.
    """
    cf = np.asarray(cash_flows, dtype=float)
    t = np.arange(cf.size, dtype=float)
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        return float(np.sum(cf / np.power(1.0 + rate, t)))


def compute_irr(
    cash_flows: Sequence[float],
    low: float = -0.9999,
    high: float = 10.0,
    iterations: int = 80,
    tol: float = 1e-6,
) -> Optional[float]:
    """
    Internal rate of return, or None when no root is bracketed.

    The low bound stays above -1 so the discount factor never hits zero.
    If the loop runs out of iterations the midpoint of the last bracket is
    returned as the best available estimate.
    """
    if len(cash_flows) == 0:
        return None

    f_low = npv(cash_flows, low)
    f_high = npv(cash_flows, high)
    if f_low * f_high > 0:
        return None

    for _ in range(iterations):
        mid = (low + high) / 2.0
        f_mid = npv(cash_flows, mid)
        if abs(f_mid) < tol:
            return mid
        if f_low * f_mid <= 0:
            high, f_high = mid, f_mid
        else:
            low, f_low = mid, f_mid

    estimate = (low + high) / 2.0
    return estimate if np.isfinite(estimate) else None
