"""
Simulation result document.

A plain, versioned structure the caller can persist as-is: ``to_document()``
gives the camelCase dict used on the wire, ``to_json()`` the serialized form.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RESULT_SCHEMA_VERSION = 1


class _Document(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class DebtBalance(_Document):
    """Value copy of one debt at the end of a period."""
    remaining: float
    principal: float


class PeriodRecord(_Document):
    period: int  # 1-based
    revenue: float
    cost: float
    profit: float  # before financing
    investment: float
    debt_payment: float
    net_cash_flow: float
    cash_balance: float
    cumulative_profit: float
    debts: List[DebtBalance] = Field(default_factory=list)


class SimplePeriodRecord(_Document):
    period: int
    revenue: float
    cost: float
    profit: float


class SimulationMeta(_Document):
    periods: int
    scenario: str
    stochastic: bool = False
    seed: Optional[int] = None
    overrides: Dict[str, Any] = Field(default_factory=dict)
    initial_investment: float
    starting_revenue: float
    starting_cost: float


class KPISummary(_Document):
    total_net_profit: float
    roi: Optional[float] = Field(None, alias="ROI")
    irr: Optional[float] = Field(None, alias="IRR")
    break_even_period: Optional[int] = None
    risk_index: float
    profit_std_dev: float
    profit_mean: float
    cash_flows: List[float]


class SimulationResult(_Document):
    schema_version: int = RESULT_SCHEMA_VERSION
    meta: SimulationMeta
    results: List[PeriodRecord]
    kpis: KPISummary

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    def to_dataframe(self) -> pd.DataFrame:
        """Per-period table (debt balances collapsed to a total remaining)."""
        rows = []
        for r in self.results:
            row = r.model_dump(exclude={"debts"})
            row["debt_remaining"] = sum(d.remaining for d in r.debts)
            rows.append(row)
        columns = list(PeriodRecord.model_fields) + ["debt_remaining"]
        columns.remove("debts")
        return pd.DataFrame(rows, columns=columns)
