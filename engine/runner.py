"""
Projection runner — steps a business forward period by period under a strategy.

Per-period transition, in this order (the order matters for compounding):
  1. growth rate  = strategy growth + growth delta + scenario boost
  2. cost rate    = strategy cost rate + cost delta
  3. revenue     *= 1 + growth rate
  4. revenue     *= 1 + price delta         (price compounds onto grown revenue)
  5. revenue     += marketing * multiplier  (flat lift per unit of spend)
  6. revenue noise                          (stochastic mode only)
  7. cost        *= 1 + cost rate, then += marketing (full spend is a cost)
  8. one-time investments scheduled for this period
  9. profit       = revenue - cost          (before financing)
 10. debt service
 11. net cash flow = profit - investment - debt payments
 12. cash += net; cumulative profit += profit (pre-financing, NOT net)
 13. cash_flows[t] = net  (cash_flows[0] = -initial investment)
 14. period record with value snapshots of every debt

Two modes of operation:
  1. Single run:   run_advanced_simulation() / run_advanced_simulation_by_id()
  2. Monte Carlo:  run_stochastic_paths(), N noisy runs with one generator each
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Hashable, List, Mapping, Optional, Union

import numpy as np

from core.config import (
    DEFAULT_COST,
    DEFAULT_COST_RATE,
    DEFAULT_GROWTH_RATE,
    DEFAULT_REVENUE,
    SimulationConfig,
)
from core.result import KPISummary, PeriodRecord, SimulationMeta, SimulationResult
from core.schema import BusinessSnapshot, DebtTerms, Overrides, StrategyParams
from data_prep.lookup import RecordLookup, fetch_optional
from data_prep.validators import validate_inputs
from kpi.irr import compute_irr
from kpi.metrics import compute_break_even, compute_risk_index, compute_roi
from scenarios.noise import noise_model_for
from scenarios.scenario import get_scenario_profile

from .cashflow import init_debts, service_debts
from .events import investment_for_period

logger = logging.getLogger(__name__)

OverridesLike = Union[Overrides, Mapping[str, Any], None]


@dataclass(frozen=True)
class StartingState:
    """Inputs after applying override -> record -> default precedence."""
    revenue: float
    cost: float
    initial_investment: float
    cash_balance: float
    growth_rate: float
    cost_rate: float
    debts: List[DebtTerms]


def _pick(override: Optional[float], stored: Optional[float], default: float) -> float:
    if override is not None:
        return float(override)
    if stored is not None:
        return float(stored)
    return float(default)


def resolve_starting_state(
    business: Optional[BusinessSnapshot],
    strategy: Optional[StrategyParams],
    overrides: Overrides,
) -> StartingState:
    b, s, o = business, strategy, overrides
    if o.debts is not None:
        debts = list(o.debts)
    else:
        debts = list(b.debts) if b is not None else []
    return StartingState(
        revenue=_pick(o.revenue, b.revenue if b else None, DEFAULT_REVENUE),
        cost=_pick(o.cost, b.cost if b else None, DEFAULT_COST),
        initial_investment=_pick(
            o.initial_investment, b.initial_investment if b else None, 0.0
        ),
        cash_balance=_pick(o.cash_balance, b.cash_balance if b else None, 0.0),
        growth_rate=_pick(o.growth_rate, s.growth_rate if s else None, DEFAULT_GROWTH_RATE),
        cost_rate=_pick(o.cost_rate, s.cost_rate if s else None, DEFAULT_COST_RATE),
        debts=debts,
    )


def _as_overrides(overrides: OverridesLike) -> Overrides:
    if overrides is None:
        return Overrides()
    if isinstance(overrides, Overrides):
        return overrides
    return Overrides.model_validate(dict(overrides))


def run_advanced_simulation(
    business: Optional[BusinessSnapshot] = None,
    strategy: Optional[StrategyParams] = None,
    config: SimulationConfig = SimulationConfig(),
    *,
    overrides: OverridesLike = None,
    rng: Optional[np.random.Generator] = None,
) -> SimulationResult:
    """
    Run one projection and return the full result document.

    Parameters
    ----------
    business : BusinessSnapshot, optional
        Starting financials. Missing fields fall back to overrides / defaults.
    strategy : StrategyParams, optional
        Growth and cost rates. Missing -> overrides / defaults.
    config : SimulationConfig
        Horizon, scenario tag, stochastic flag, seed, IRR solver settings.
    overrides : Overrides or dict, optional
        What-if levers (camelCase keys accepted). Supersede business/strategy.
    rng : np.random.Generator, optional
        Noise source for stochastic mode. Defaults to default_rng(config.seed);
        with seed=None the run is not reproducible.

    The caller's records are never mutated; debts are copied into working state.
    """
    ovr = _as_overrides(overrides)
    state = resolve_starting_state(business, strategy, ovr)
    _check_inputs(state, ovr, config)
    return _project(state, ovr, config, rng)


def _check_inputs(state: StartingState, ovr: Overrides, config: SimulationConfig) -> None:
    validation = validate_inputs(
        periods=int(config.periods),
        initial_investment=state.initial_investment,
        debts=state.debts,
        one_time_investments=ovr.one_time_investments,
    )
    if not validation.is_valid:
        raise ValueError(f"Invalid simulation inputs:\n{validation.summary()}")
    for warning in validation.warnings:
        logger.warning(warning)
    for note in validation.notes:
        logger.debug(note)


def _project(
    state: StartingState,
    ovr: Overrides,
    config: SimulationConfig,
    rng: Optional[np.random.Generator],
) -> SimulationResult:
    """The period loop and KPI assembly over already-validated inputs."""
    periods = int(config.periods)
    profile = get_scenario_profile(config.scenario)
    noise = noise_model_for(config.stochastic)
    if rng is None:
        rng = np.random.default_rng(config.seed)

    logger.debug(
        "Starting simulation: periods=%d scenario=%s stochastic=%s debts=%d",
        periods, config.scenario, config.stochastic, len(state.debts),
    )

    revenue = state.revenue
    cost = state.cost
    cash = state.cash_balance
    cumulative_profit = 0.0
    debts = init_debts(state.debts)

    marketing = float(ovr.marketing_per_period)
    price_delta = float(ovr.price_delta_percent)

    results: List[PeriodRecord] = []
    cash_flows: List[float] = [-state.initial_investment]

    # ========= MAIN PERIOD LOOP =========
    for t in range(1, periods + 1):
        growth_rate = state.growth_rate + ovr.growth_rate_delta + profile.growth_rate_boost
        cost_rate = state.cost_rate + ovr.cost_rate_delta

        revenue = revenue * (1 + growth_rate)
        revenue = revenue * (1 + price_delta)
        if marketing > 0:
            revenue += marketing * ovr.marketing_multiplier

        revenue = noise.perturb(revenue, volatility=profile.cost_volatility, rng=rng)

        cost = cost * (1 + cost_rate)
        cost += marketing

        investment = investment_for_period(ovr.one_time_investments, t)
        profit = revenue - cost

        debt_payment = service_debts(debts, t)

        net = profit - investment - debt_payment
        cash += net
        cumulative_profit += profit
        cash_flows.append(net)

        results.append(
            PeriodRecord(
                period=t,
                revenue=revenue,
                cost=cost,
                profit=profit,
                investment=investment,
                debt_payment=debt_payment,
                net_cash_flow=net,
                cash_balance=cash,
                cumulative_profit=cumulative_profit,
                debts=[d.snapshot() for d in debts],
            )
        )

    # ========= KPIs =========
    profits = [r.profit for r in results]
    total_net_profit = float(sum(profits))
    risk = compute_risk_index(profits)

    kpis = KPISummary(
        total_net_profit=total_net_profit,
        roi=compute_roi(total_net_profit, state.initial_investment),
        irr=compute_irr(
            cash_flows,
            low=config.irr_low,
            high=config.irr_high,
            iterations=config.irr_iterations,
            tol=config.irr_tol,
        ),
        break_even_period=compute_break_even(
            [r.cumulative_profit for r in results], state.initial_investment
        ),
        risk_index=risk["risk_index"],
        profit_std_dev=risk["std"],
        profit_mean=risk["mean"],
        cash_flows=cash_flows,
    )
    if kpis.irr is None and periods > 0:
        logger.debug("IRR undetermined: NPV does not change sign in the search bracket")

    meta = SimulationMeta(
        periods=periods,
        scenario=config.scenario,
        stochastic=config.stochastic,
        seed=config.seed,
        overrides=ovr.to_document(),
        initial_investment=state.initial_investment,
        starting_revenue=state.revenue,
        starting_cost=state.cost,
    )

    logger.info(
        "Simulation complete: periods=%d scenario=%s total_net_profit=%.2f "
        "roi=%s irr=%s break_even=%s",
        periods, config.scenario, total_net_profit,
        kpis.roi, kpis.irr, kpis.break_even_period,
    )
    return SimulationResult(meta=meta, results=results, kpis=kpis)


def run_advanced_simulation_by_id(
    business_id: Optional[Hashable] = None,
    strategy_id: Optional[Hashable] = None,
    *,
    businesses: Optional[RecordLookup[BusinessSnapshot]] = None,
    strategies: Optional[RecordLookup[StrategyParams]] = None,
    config: SimulationConfig = SimulationConfig(),
    overrides: OverridesLike = None,
    rng: Optional[np.random.Generator] = None,
) -> SimulationResult:
    """
    Resolve stored records, then run the projection.

    An id that is not supplied means "use overrides/defaults"; an id that is
    supplied but does not resolve raises RecordNotFoundError before any work.
    """
    business = fetch_optional(businesses, business_id, "Business")
    strategy = fetch_optional(strategies, strategy_id, "Strategy")
    return run_advanced_simulation(
        business, strategy, config, overrides=overrides, rng=rng
    )


def run_stochastic_paths(
    business: Optional[BusinessSnapshot],
    strategy: Optional[StrategyParams],
    config: SimulationConfig,
    *,
    n_paths: int = 100,
    overrides: OverridesLike = None,
) -> List[SimulationResult]:
    """
    Run n_paths noisy projections of the same setup.

    Each path gets an independent generator spawned from config.seed, so a
    fixed seed reproduces the whole batch and paths never share draws.
    Stochastic mode is forced on. Inputs are resolved and validated once for
    the whole batch.
    """
    if n_paths <= 0:
        raise ValueError(f"n_paths must be positive, got {n_paths}.")

    cfg = replace(config, stochastic=True)
    ovr = _as_overrides(overrides)
    state = resolve_starting_state(business, strategy, ovr)
    _check_inputs(state, ovr, cfg)
    children = np.random.SeedSequence(cfg.seed).spawn(n_paths)

    logger.info("Running %d stochastic paths (seed=%s)", n_paths, cfg.seed)
    return [
        _project(state, ovr, cfg, np.random.default_rng(child))
        for child in children
    ]

