"""
Debt amortization — per-debt, per-period payment and remaining-principal update.

Key rules:
  1. The debt's rate is a flat per-period rate (no annual -> period conversion)
  2. Payment is the fixed annuity on the ORIGINAL principal, not the balance
  3. The payment is capped at remaining + one period of interest, so the last
     instalment never overpays
  4. Only the part of the payment above interest-on-remaining reduces principal
  5. Zero-rate debts repay in equal principal instalments
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from core.result import DebtBalance
from core.schema import DebtTerms


def level_payment(principal: float, rate: float, n_periods: int) -> float:
    """Fixed annuity payment (P*r)/(1-(1+r)^-n) with near-zero rate guard."""
    if n_periods <= 0:
        return 0.0
    if abs(rate) < 1e-12:
        return float(principal) / n_periods
    return (float(principal) * rate) / (1.0 - (1.0 + rate) ** (-n_periods))


@dataclass
class DebtState:
    """Working copy of one debt for a single simulation run."""
    principal: float
    rate: float
    periods_to_repay: int
    start_period: int
    remaining: float

    @classmethod
    def from_terms(cls, terms: DebtTerms) -> "DebtState":
        return cls(
            principal=float(terms.principal),
            rate=float(terms.annual_rate),
            periods_to_repay=int(terms.periods_to_repay),
            start_period=int(terms.start_period),
            remaining=float(terms.principal),
        )

    def is_due(self, period: int) -> bool:
        return period >= self.start_period and self.remaining > 0

    def service(self) -> float:
        """Apply one period's payment; returns the amount paid."""
        if self.periods_to_repay <= 0:
            return 0.0

        payment = level_payment(self.principal, self.rate, self.periods_to_repay)
        interest = self.remaining * self.rate
        payment_amount = min(payment, self.remaining + interest)

        principal_paid = max(payment_amount - interest, 0.0)
        self.remaining = max(0.0, self.remaining - principal_paid)
        return payment_amount

    def snapshot(self) -> DebtBalance:
        return DebtBalance(remaining=self.remaining, principal=self.principal)


def init_debts(terms: Iterable[DebtTerms]) -> List[DebtState]:
    return [DebtState.from_terms(t) for t in terms]


def service_debts(debts: List[DebtState], period: int) -> float:
    """Service every debt due this period; returns the total debt payment."""
    total = 0.0
    for debt in debts:
        if debt.is_due(period):
            total += debt.service()
    return total
