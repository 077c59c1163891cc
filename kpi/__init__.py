"""
KPI calculators — ROI, IRR, break-even, risk index, and multi-run aggregation.
"""

from .irr import compute_irr, npv
from .metrics import compute_break_even, compute_risk_index, compute_roi
from .aggregator import aggregate_simulation_runs, kpis_to_dataframe

__all__ = [
    "compute_irr",
    "npv",
    "compute_break_even",
    "compute_risk_index",
    "compute_roi",
    "aggregate_simulation_runs",
    "kpis_to_dataframe",
]
