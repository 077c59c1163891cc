"""
Input records for the simulation engine.

Fields are snake_case in Python and accept the camelCase names used by the
surrounding API (``initialInvestment``, ``growthRateDelta``, ...). Debt terms
additionally accept the short aliases ``amount``, ``rate`` and ``term``.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from .config import DEFAULT_COST_RATE, DEFAULT_GROWTH_RATE, DEFAULT_MARKETING_MULTIPLIER


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class DebtTerms(_Record):
    """
    One loan taken by the business.

    annual_rate is applied as a flat per-period rate; no periods-per-year
    conversion happens anywhere in the engine.
    """

    principal: float = Field(
        0.0,
        validation_alias=AliasChoices("principal", "amount"),
        serialization_alias="principal",
    )
    annual_rate: float = Field(
        0.0,
        validation_alias=AliasChoices("annual_rate", "annualRate", "rate"),
        serialization_alias="annualRate",
    )
    periods_to_repay: int = Field(
        0,
        validation_alias=AliasChoices("periods_to_repay", "periodsToRepay", "term"),
        serialization_alias="periodsToRepay",
    )
    start_period: int = Field(
        1,
        validation_alias=AliasChoices("start_period", "startPeriod"),
        serialization_alias="startPeriod",
    )


class OneTimeInvestment(_Record):
    period: int
    amount: float = 0.0


class BusinessSnapshot(_Record):
    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    revenue: float = 0.0
    cost: float = 0.0
    initial_investment: float = 0.0
    cash_balance: float = 0.0
    debts: List[DebtTerms] = Field(default_factory=list)


class StrategyParams(_Record):
    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    description: Optional[str] = None
    growth_rate: float = DEFAULT_GROWTH_RATE  # fractional revenue growth per period
    cost_rate: float = DEFAULT_COST_RATE  # fractional cost growth per period


class Overrides(_Record):
    """
    Sparse what-if levers. A field left unset falls back to the business
    snapshot / strategy / default chain.
    """

    revenue: Optional[float] = None
    cost: Optional[float] = None
    initial_investment: Optional[float] = None
    cash_balance: Optional[float] = None
    growth_rate: Optional[float] = None
    cost_rate: Optional[float] = None

    growth_rate_delta: float = 0.0
    cost_rate_delta: float = 0.0

    # replaces the snapshot's debts entirely when present (even if empty)
    debts: Optional[List[DebtTerms]] = None
    one_time_investments: List[OneTimeInvestment] = Field(default_factory=list)

    marketing_per_period: float = 0.0
    price_delta_percent: float = 0.0  # 0.05 => +5% on already-grown revenue
    marketing_multiplier: float = DEFAULT_MARKETING_MULTIPLIER

    @field_validator(
        "growth_rate_delta",
        "cost_rate_delta",
        "one_time_investments",
        "marketing_per_period",
        "price_delta_percent",
        "marketing_multiplier",
        mode="before",
    )
    @classmethod
    def _null_lever_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        # an explicit null in a request body behaves like an absent lever
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    def to_document(self) -> dict:
        """Only the levers the caller actually set, with their wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
