"""
Debt amortization and one-time investment scheduling.
"""

import pytest

from core.schema import DebtTerms, OneTimeInvestment
from engine.cashflow import DebtState, init_debts, level_payment, service_debts
from engine.events import investment_for_period


def test_level_payment_annuity_formula():
    # 1000 at 8% over 4 periods
    expected = (1000 * 0.08) / (1 - 1.08 ** -4)
    assert level_payment(1000, 0.08, 4) == pytest.approx(expected)
    assert level_payment(1000, 0.08, 4) == pytest.approx(301.92, abs=0.01)


def test_level_payment_zero_rate_is_equal_instalments():
    assert level_payment(600, 0.0, 3) == 200.0


def test_level_payment_no_term():
    assert level_payment(600, 0.05, 0) == 0.0


def test_debt_fully_repaid_over_its_term():
    debt = DebtState.from_terms(DebtTerms(principal=1000, annual_rate=0.08, periods_to_repay=4))
    payments = [service_debts([debt], t) for t in range(1, 5)]

    assert all(p == pytest.approx(301.92, abs=0.01) for p in payments)
    assert debt.remaining == pytest.approx(0.0, abs=1e-9)


def test_debt_remaining_non_increasing_and_non_negative():
    debt = DebtState.from_terms(DebtTerms(principal=1000, annual_rate=0.08, periods_to_repay=4))
    history = [debt.remaining]
    for t in range(1, 10):
        service_debts([debt], t)
        history.append(debt.remaining)

    assert all(b <= a for a, b in zip(history, history[1:]))
    assert min(history) >= 0.0


def test_last_payment_capped_at_remaining_plus_interest():
    debt = DebtState(principal=1000, rate=0.1, periods_to_repay=2, start_period=1, remaining=50.0)
    paid = debt.service()
    assert paid == pytest.approx(55.0)
    assert debt.remaining == 0.0


def test_debt_not_serviced_before_start_period():
    debts = init_debts([DebtTerms(principal=500, annual_rate=0.05, periods_to_repay=5, start_period=3)])
    assert service_debts(debts, 1) == 0.0
    assert service_debts(debts, 2) == 0.0
    assert debts[0].remaining == 500
    assert service_debts(debts, 3) > 0


def test_debt_without_term_is_skipped():
    debts = init_debts([DebtTerms(principal=500, annual_rate=0.05, periods_to_repay=0)])
    assert service_debts(debts, 1) == 0.0
    assert debts[0].remaining == 500


def test_zero_rate_debt_stays_finite():
    debts = init_debts([DebtTerms(principal=600, annual_rate=0.0, periods_to_repay=3)])
    paid = [service_debts(debts, t) for t in range(1, 5)]
    assert paid == [200.0, 200.0, 200.0, 0.0]
    assert debts[0].remaining == 0.0


def test_total_payment_sums_all_due_debts():
    debts = init_debts([
        DebtTerms(principal=600, annual_rate=0.0, periods_to_repay=3),
        DebtTerms(principal=300, annual_rate=0.0, periods_to_repay=3),
    ])
    assert service_debts(debts, 1) == 300.0


def test_snapshot_is_a_value_copy():
    debt = DebtState.from_terms(DebtTerms(principal=600, annual_rate=0.0, periods_to_repay=3))
    before = debt.snapshot()
    debt.service()
    assert before.remaining == 600.0
    assert debt.remaining == 400.0


def test_debt_terms_accept_short_aliases():
    terms = DebtTerms.model_validate({"amount": 1200, "rate": 0.02, "term": 6})
    assert terms.principal == 1200
    assert terms.annual_rate == 0.02
    assert terms.periods_to_repay == 6
    assert terms.start_period == 1


def test_investment_exact_period_match_only():
    investments = [
        OneTimeInvestment(period=2, amount=100),
        OneTimeInvestment(period=2, amount=50),
        OneTimeInvestment(period=4, amount=70),
    ]
    assert investment_for_period(investments, 1) == 0.0
    assert investment_for_period(investments, 2) == 150.0
    assert investment_for_period(investments, 3) == 0.0
    assert investment_for_period(investments, 4) == 70.0
