"""Financial summary: ROI, payback, NPV and IRR from a projected timeline."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from ..config.schemas import IRRSolverConfig, RoiModelConfig
from ..models import Scenario, TimelinePoint, TransformationInvestment
from .constants import MONTHS_PER_YEAR, resolve_settings
from .ramp import build_months, monthly_opex


def value_increments(
    timeline: Sequence[TimelinePoint], scenario: Scenario = Scenario.EXPECTED
) -> list[float]:
    """Value added in each month 1..horizon for one scenario series."""
    return [
        timeline[m].value_for(scenario) - timeline[m - 1].value_for(scenario)
        for m in range(1, len(timeline))
    ]


def opex_schedule(
    investment: TransformationInvestment, horizon: int, settings: RoiModelConfig | None = None
) -> list[float]:
    """OpEx charged in each month 1..horizon; zero during the build."""
    settings = resolve_settings(settings)
    n_build = build_months(investment.implementation_weeks, settings.weeks_per_month)
    opex = monthly_opex(investment, settings)
    return [0.0 if month <= n_build else opex for month in range(1, horizon + 1)]


def compute_three_year_roi(cumulative_value: float, total_cost: float) -> float:
    """ROI in percent over the projection horizon; NaN when there is no cost."""
    if total_cost == 0:
        return math.nan
    return (cumulative_value - total_cost) / total_cost * 100


def compute_npv(
    total_investment: float,
    increments: Sequence[float],
    opex: Sequence[float] | None = None,
    annual_rate: float = 0.10,
) -> float:
    """Net present value with monthly discounting.

    The investment is counted up front; each month's net value is
    discounted at ``annual_rate / 12``. With no value and no OpEx this is
    exactly ``-total_investment``.
    """
    monthly_rate = annual_rate / MONTHS_PER_YEAR
    opex = opex if opex is not None else [0.0] * len(increments)
    npv = -total_investment
    for month, (value, cost) in enumerate(zip(increments, opex), start=1):
        npv += (value - cost) / (1 + monthly_rate) ** month
    return npv


def build_monthly_cash_flows(
    investment: TransformationInvestment,
    increments: Sequence[float],
    opex: Sequence[float],
    settings: RoiModelConfig | None = None,
) -> list[float]:
    """Cash flow for months 0..horizon: build burn, then value net of OpEx."""
    settings = resolve_settings(settings)
    n_build = build_months(investment.implementation_weeks, settings.weeks_per_month)
    burn = investment.total_investment_amount / n_build

    flows = [0.0]
    for month, (value, cost) in enumerate(zip(increments, opex), start=1):
        outflow = burn if month <= n_build else 0.0
        flows.append(value - outflow - cost)
    return flows


def calculate_irr(cash_flows: Sequence[float], solver: IRRSolverConfig | None = None) -> float:
    """Annualized internal rate of return, in percent.

    Newton-Raphson on the monthly rate, annualized as ``(1 + r)^12 - 1``.
    Returns NaN when the flows have no sign change, the derivative
    vanishes, the rate leaves (-1, inf) or the solver does not converge.
    """
    solver = solver or IRRSolverConfig()
    flows = np.asarray(cash_flows, dtype=float)
    if flows.size == 0 or not np.all(np.isfinite(flows)):
        return math.nan
    if not (np.any(flows > 0) and np.any(flows < 0)):
        return math.nan

    periods = np.arange(flows.size, dtype=float)
    rate = solver.initial_guess
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        for _ in range(solver.max_iterations):
            if rate <= -1:
                return math.nan
            discount = (1 + rate) ** -periods
            npv = float(flows @ discount)
            derivative = float(-(periods * flows) @ (discount / (1 + rate)))
            if not math.isfinite(npv) or not math.isfinite(derivative) or abs(derivative) < 1e-12:
                return math.nan

            next_rate = rate - npv / derivative
            if not math.isfinite(next_rate) or next_rate <= -1:
                return math.nan
            if abs(next_rate - rate) < solver.tolerance:
                annual = float(np.power(1 + next_rate, MONTHS_PER_YEAR)) - 1
                return annual * 100 if math.isfinite(annual) else math.nan
            rate = next_rate

    return math.nan
