"""
Load stored businesses / strategies from CSV exports into in-memory lookups.

Expected columns (camelCase or snake_case both work):
  businesses: id, name, revenue, cost, initialInvestment, cashBalance, debts
  strategies: id, name, description, growthRate, costRate

``debts`` is a JSON list of debt objects, e.g.
  [{"principal": 1000, "annualRate": 0.08, "periodsToRepay": 4, "startPeriod": 1}]
"""

from __future__ import annotations

import json
from typing import Dict, List, Type, TypeVar

import pandas as pd
from pydantic import BaseModel

from core.schema import BusinessSnapshot, StrategyParams

from .lookup import InMemoryLookup

M = TypeVar("M", bound=BaseModel)


def _clean_rows(df: pd.DataFrame) -> List[Dict]:
    """DataFrame rows as dicts with NaN/empty cells dropped (so model defaults apply)."""
    rows = []
    for raw in df.to_dict(orient="records"):
        rows.append({k: v for k, v in raw.items() if not (isinstance(v, float) and pd.isna(v))})
    return rows


def _load_csv(path: str, model: Type[M], *, id_col: str = "id") -> InMemoryLookup[M]:
    df = pd.read_csv(path)
    if id_col not in df.columns:
        raise ValueError(f"Missing required columns: {[id_col]}")
    df[id_col] = df[id_col].astype(str).str.strip()

    lookup: InMemoryLookup[M] = InMemoryLookup()
    for row in _clean_rows(df):
        if isinstance(row.get("debts"), str):
            row["debts"] = json.loads(row["debts"]) if row["debts"].strip() else []
        lookup.add(row[id_col], model.model_validate(row))
    return lookup


def load_businesses_csv(path: str) -> InMemoryLookup[BusinessSnapshot]:
    return _load_csv(path, BusinessSnapshot)


def load_strategies_csv(path: str) -> InMemoryLookup[StrategyParams]:
    return _load_csv(path, StrategyParams)
