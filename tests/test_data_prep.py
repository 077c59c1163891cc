"""
Record lookups, CSV loaders and input validation.
"""

import pytest
from pydantic import ValidationError

from core.schema import BusinessSnapshot, DebtTerms, OneTimeInvestment, StrategyParams
from data_prep.loader import load_businesses_csv, load_strategies_csv
from data_prep.lookup import InMemoryLookup, RecordNotFoundError, fetch_optional, fetch_required
from data_prep.validators import validate_inputs


class TestLookup:
    def test_fetch_existing_and_missing(self, business):
        lookup = InMemoryLookup({1: business})
        assert lookup.fetch(1) is business
        assert lookup.fetch(2) is None
        assert 1 in lookup
        assert len(lookup) == 1

    def test_ids_match_across_int_and_str(self, business):
        assert InMemoryLookup({1: business}).fetch("1") is business
        assert InMemoryLookup({"1": business}).fetch(1) is business
        lookup = InMemoryLookup()
        lookup.add(7, business)
        assert "7" in lookup

    def test_fetch_required_raises_with_context(self):
        with pytest.raises(RecordNotFoundError) as exc_info:
            fetch_required(InMemoryLookup(), "abc", "Business")
        err = exc_info.value
        assert isinstance(err, LookupError)
        assert err.kind == "Business"
        assert "abc" in str(err)

    def test_fetch_optional_without_id(self):
        assert fetch_optional(None, None, "Strategy") is None


class TestLoader:
    def test_load_businesses_csv(self, tmp_path):
        path = tmp_path / "businesses.csv"
        path.write_text(
            "id,name,revenue,cost,initialInvestment,cashBalance,debts\n"
            '1,Bakery,1000,500,2000,100,"[{""principal"": 1000, ""annualRate"": 0.08, ""periodsToRepay"": 4}]"\n'
            "2,Kiosk,300,250,,,\n",
            encoding="utf-8",
        )
        lookup = load_businesses_csv(str(path))

        bakery = lookup.fetch(1)
        assert isinstance(bakery, BusinessSnapshot)
        assert bakery.initial_investment == 2000
        assert bakery.debts == [DebtTerms(principal=1000, annual_rate=0.08, periods_to_repay=4)]

        kiosk = lookup.fetch("2")
        assert kiosk.cash_balance == 0.0
        assert kiosk.debts == []

    def test_load_strategies_csv_snake_case(self, tmp_path):
        path = tmp_path / "strategies.csv"
        path.write_text("id,name,growth_rate,cost_rate\naggressive,Aggressive,0.2,0.08\n", encoding="utf-8")
        strategy = load_strategies_csv(str(path)).fetch("aggressive")
        assert isinstance(strategy, StrategyParams)
        assert (strategy.growth_rate, strategy.cost_rate) == (0.2, 0.08)

    def test_missing_id_column(self, tmp_path):
        path = tmp_path / "strategies.csv"
        path.write_text("name,growthRate\nx,0.1\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Missing required columns"):
            load_strategies_csv(str(path))

    def test_malformed_row_surfaces_validation_error(self, tmp_path):
        path = tmp_path / "businesses.csv"
        path.write_text("id,revenue\n1,lots\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_businesses_csv(str(path))


class TestValidators:
    def test_clean_inputs(self):
        result = validate_inputs(
            periods=12,
            initial_investment=1000,
            debts=[DebtTerms(principal=500, annual_rate=0.05, periods_to_repay=5)],
            one_time_investments=[OneTimeInvestment(period=3, amount=100)],
        )
        assert result.is_valid
        assert result.warnings == []
        assert "All checks passed" in result.summary()

    def test_negative_periods(self):
        result = validate_inputs(periods=-1, initial_investment=100)
        assert not result.is_valid

    def test_debt_errors_and_warnings(self):
        result = validate_inputs(
            periods=6,
            initial_investment=0,
            debts=[
                DebtTerms(principal=-5, annual_rate=0.05, periods_to_repay=2),
                DebtTerms(principal=100, annual_rate=8.0, periods_to_repay=2),
                DebtTerms(principal=100, annual_rate=0.0, periods_to_repay=0),
                DebtTerms(principal=100, annual_rate=-1.0, periods_to_repay=2),
            ],
        )
        assert len(result.errors) == 1
        assert "Debt #4" in result.errors[0]
        joined = " ".join(result.warnings)
        assert "negative principal" in joined
        assert "percent vs decimal" in joined
        assert "never be serviced" in joined
        assert result.notes == [
            "Initial investment is zero or negative; ROI and break-even will be undefined."
        ]

    def test_investment_schedule_checks(self):
        result = validate_inputs(
            periods=4,
            initial_investment=100,
            one_time_investments=[
                OneTimeInvestment(period=0, amount=10),
                OneTimeInvestment(period=9, amount=10),
            ],
        )
        assert result.is_valid
        assert len(result.warnings) == 2
        assert all("will be ignored" in w for w in result.warnings)
        assert "WARNINGS (2)" in result.summary()
