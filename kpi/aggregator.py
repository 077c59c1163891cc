"""
Aggregate many stochastic runs of the same setup into KPI distributions.

One run says "IRR = 18%". A batch of seeded runs says
"IRR: mean=18%, P05=9%, P95=26%, break-even reached in 83% of runs",
which is what you need before trusting a strategy under revenue noise.
"""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

import numpy as np
import pandas as pd

from core.result import SimulationResult


def kpis_to_dataframe(results: Sequence[SimulationResult]) -> pd.DataFrame:
    """One row per run with its headline KPIs (None becomes NaN)."""
    rows = []
    for run_id, result in enumerate(results):
        k = result.kpis
        rows.append({
            "run_id": run_id,
            "total_net_profit": k.total_net_profit,
            "roi": k.roi,
            "irr": k.irr,
            "break_even_period": k.break_even_period,
            "risk_index": k.risk_index,
            "ending_cash_balance": result.results[-1].cash_balance if result.results else np.nan,
        })
    df = pd.DataFrame(rows)
    for col in df.columns:
        if col != "run_id":
            df[col] = pd.to_numeric(df[col], errors="coerce").astype(float)
    return df


def aggregate_simulation_runs(
    results: Sequence[SimulationResult],
    *,
    percentiles: Tuple[float, ...] = (0.05, 0.25, 0.50, 0.75, 0.95),
) -> Dict:
    """
    Summarize KPIs across runs.

    Returns
    -------
    Dict with:
      "summary_table":           one row per KPI with mean/std/min/percentiles/max
      "per_run":                 DataFrame of KPIs per run
      "break_even_probability":  share of runs that broke even (NaN if no runs)
      "n_runs":                  number of runs aggregated
    """
    per_run = kpis_to_dataframe(results)

    metrics_to_summarize = {
        "Total Net Profit": "total_net_profit",
        "ROI": "roi",
        "IRR": "irr",
        "Break-even Period": "break_even_period",
        "Risk Index": "risk_index",
        "Ending Cash Balance": "ending_cash_balance",
    }

    rows = []
    for label, col in metrics_to_summarize.items():
        if col not in per_run.columns:
            continue

        # runs where the KPI was undefined (None) are excluded, not zero-filled
        values = per_run[col].dropna().values
        if len(values) == 0:
            continue

        row = {
            "Metric": label,
            "N": int(len(values)),
            "Mean": float(np.mean(values)),
            "Std Dev": float(np.std(values)),
            "Min": float(np.min(values)),
        }
        for p in percentiles:
            row[f"P{int(round(p * 100)):02d}"] = float(np.percentile(values, p * 100))
        row["Max"] = float(np.max(values))
        rows.append(row)

    if per_run.empty:
        break_even_probability = float("nan")
    else:
        break_even_probability = float(per_run["break_even_period"].notna().mean())

    return {
        "summary_table": pd.DataFrame(rows),
        "per_run": per_run,
        "break_even_probability": break_even_probability,
        "n_runs": len(results),
    }
