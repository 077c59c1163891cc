"""
Sanity checks on simulation inputs before they enter the engine.

Catches problems early:
- Negative horizons
- Debts that can't be amortized (rate <= -100%)
- Debts and one-time investments that will never be applied
- Rates that look like percentages instead of decimals
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from core.schema import DebtTerms, OneTimeInvestment


@dataclass
class ValidationResult:
    """Collects all validation errors/warnings/notes for one simulation request."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if self.notes:
            lines.append(f"NOTES ({len(self.notes)}):")
            for n in self.notes:
                lines.append(f"  · {n}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _validate_debts(debts: Sequence[DebtTerms], result: ValidationResult) -> None:
    for i, d in enumerate(debts):
        label = f"Debt #{i + 1}"
        if d.principal < 0:
            result.warnings.append(
                f"{label} has negative principal ({d.principal}); it will never be serviced."
            )
        if d.annual_rate <= -1.0:
            result.errors.append(
                f"{label} has rate {d.annual_rate} <= -1; the payment is undefined."
            )
        elif d.annual_rate > 1.0:
            result.warnings.append(
                f"{label} has rate {d.annual_rate} > 1.0; check if the rate is in "
                f"percent vs decimal form (it is applied per period)."
            )
        elif d.annual_rate == 0 and d.periods_to_repay > 0:
            result.warnings.append(
                f"{label} has zero rate; repaid in equal principal instalments."
            )
        if d.periods_to_repay <= 0:
            result.warnings.append(
                f"{label} has periods_to_repay={d.periods_to_repay}; it will never be serviced."
            )
        if d.start_period < 1:
            result.warnings.append(
                f"{label} has start_period={d.start_period}; servicing starts in period 1."
            )


def validate_inputs(
    *,
    periods: int,
    initial_investment: float,
    debts: Sequence[DebtTerms] = (),
    one_time_investments: Sequence[OneTimeInvestment] = (),
) -> ValidationResult:
    """
    Run all validation checks on resolved simulation inputs.

    Errors block the run and are reserved for inputs the engine cannot
    compute. Warnings flag inputs that are accepted but silently have no
    effect. Notes describe expected degenerate cases (e.g. no initial
    investment) and are only worth a debug line.
    """
    result = ValidationResult()

    if periods < 0:
        result.errors.append(f"periods must be >= 0, got {periods}.")
        return result  # nothing else is meaningful without a horizon

    if initial_investment <= 0:
        result.notes.append(
            "Initial investment is zero or negative; ROI and break-even will be undefined."
        )

    _validate_debts(debts, result)

    for inv in one_time_investments:
        if inv.period < 1 or inv.period > periods:
            result.warnings.append(
                f"One-time investment in period {inv.period} is outside the "
                f"1..{periods} horizon and will be ignored."
            )

    return result
