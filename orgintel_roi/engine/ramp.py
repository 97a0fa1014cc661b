"""Adoption ramp, investment curve and month-by-month timeline projection."""

from __future__ import annotations

import math
from typing import NamedTuple

import pandas as pd

from ..config.schemas import RoiModelConfig
from ..models import Scenario, TimelinePoint, TransformationInvestment, ValueStream, ValueStreams
from ..utils.logging_config import stage_logger
from .constants import MONTHS_PER_YEAR, resolve_settings


REFERENCE_HORIZON = 36

# (start month, end month, factor at start, factor at end) on the 36-month reference horizon
RAMP_SEGMENTS: tuple[tuple[float, float, float, float], ...] = (
    (0.0, 7.0, 0.0, 0.3),  # Build
    (7.0, 12.0, 0.3, 0.7),  # Supervised
    (12.0, 18.0, 0.7, 0.9),  # Graduated
    (18.0, 36.0, 0.9, 1.0),  # Maturity
)

BUILD_SUBPHASES = ("Discovery", "Ontology", "KG Population", "Digital Twin", "Validation")
SUPERVISED_PHASE = "Supervised Launch"
GRADUATED_PHASE = "Graduated Autonomy"
MATURITY_PHASE = "Operational Maturity"
PHASE_DURATION_MONTHS = 5


def ramp_factor(month: float, horizon: int = REFERENCE_HORIZON) -> float:
    """Share of steady-state value realized in ``month``.

    Piecewise linear through Build, Supervised, Graduated and Maturity.
    Breakpoints scale with ``horizon`` so the curve stays continuous and
    non-decreasing for any horizon. 0 for month <= 0, 1.0 for month >= horizon.
    """
    if math.isnan(month):
        return month
    if month <= 0:
        return 0.0
    if month >= horizon:
        return 1.0
    scale = horizon / REFERENCE_HORIZON
    for start, end, low, high in RAMP_SEGMENTS:
        start, end = start * scale, end * scale
        if month <= end:
            t = (month - start) / (end - start)
            return low * (1 - t) + high * t
    return 1.0


class StreamAdoption(NamedTuple):
    tech_ready_week: float
    change_mgmt_months: float
    cost_lag_months: float
    steepness: float
    midpoint_offset: float
    ceiling_18: float
    ceiling_36: float


# Tech-ready weeks are calibrated to a 28-week build and scale with the actual build length.
CALIBRATION_BUILD_WEEKS = 28

STREAM_ADOPTION: dict[ValueStream, StreamAdoption] = {
    ValueStream.TOOLING_OPTIMIZATION: StreamAdoption(12, 2, 4, 0.6, 5, 0.75, 1.0),
    ValueStream.CYCLE_TIME: StreamAdoption(16, 4, 0, 0.45, 7, 0.65, 0.95),
    ValueStream.CONTENT_VELOCITY: StreamAdoption(22, 3, 2, 0.5, 6, 0.70, 0.95),
    ValueStream.TIME_SAVINGS: StreamAdoption(28, 6, 0, 0.35, 9, 0.50, 0.85),
    ValueStream.REWORK_REDUCTION: StreamAdoption(28, 6, 0, 0.35, 9, 0.50, 0.85),
    ValueStream.ROAS_IMPROVEMENT: StreamAdoption(22, 4, 0, 0.45, 7, 0.70, 0.95),
    ValueStream.ATTRIBUTION_IMPROVEMENT: StreamAdoption(22, 5, 0, 0.4, 8, 0.55, 0.90),
    ValueStream.PERSONALIZATION_LIFT: StreamAdoption(22, 5, 0, 0.5, 7, 0.60, 0.95),
}


def stream_ramp_factor(
    month: float,
    stream: ValueStream,
    implementation_weeks: float,
    weeks_per_month: float = 4.33,
) -> float:
    """Logistic adoption curve for a single stream.

    Value starts once the capability is technically ready, change management
    has run and any contract lag has expired. The curve is shifted so it is
    0 at the start month and clipped to the realization ceiling, which rises
    linearly from the 18-month to the 36-month level.
    """
    params = STREAM_ADOPTION[ValueStream(stream)]
    tech_ready_month = (
        params.tech_ready_week * (implementation_weeks / CALIBRATION_BUILD_WEEKS) / weeks_per_month
    )
    start_month = tech_ready_month + params.change_mgmt_months + params.cost_lag_months
    elapsed = month - start_month
    if math.isnan(elapsed):
        return elapsed
    if elapsed <= 0:
        return 0.0

    raw = 1 / (1 + math.exp(-params.steepness * (elapsed - params.midpoint_offset)))
    at_zero = 1 / (1 + math.exp(params.steepness * params.midpoint_offset))
    normalized = (raw - at_zero) / (1 - at_zero)

    if month <= 18:
        ceiling = params.ceiling_18
    else:
        progress = min(1.0, (month - 18) / 18)
        ceiling = params.ceiling_18 + (params.ceiling_36 - params.ceiling_18) * progress
    return min(max(0.0, normalized), ceiling)


def build_months(implementation_weeks: float, weeks_per_month: float = 4.33) -> int:
    return max(1, math.ceil(implementation_weeks / weeks_per_month))


def phase_for_month(
    month: int, implementation_weeks: float, weeks_per_month: float = 4.33
) -> str:
    """Human-readable phase label for ``month``."""
    n_build = build_months(implementation_weeks, weeks_per_month)
    if month <= n_build:
        # Month m falls in the first sub-phase k with k * n_build / n_sub >= m.
        n_sub = len(BUILD_SUBPHASES)
        index = 0 if month <= 0 else min(math.ceil(month * n_sub / n_build) - 1, n_sub - 1)
        return BUILD_SUBPHASES[index]
    if month <= n_build + PHASE_DURATION_MONTHS:
        return SUPERVISED_PHASE
    if month <= n_build + 2 * PHASE_DURATION_MONTHS:
        return GRADUATED_PHASE
    return MATURITY_PHASE


def monthly_opex(investment: TransformationInvestment, settings: RoiModelConfig) -> float:
    return investment.total_investment_amount * (settings.ongoing_opex_pct / 100) / MONTHS_PER_YEAR


def build_investment_curve(
    investment: TransformationInvestment, settings: RoiModelConfig | None = None
) -> list[float]:
    """Cumulative spend for months 0..horizon.

    Flat burn over the build months, capped at the total, plus ongoing OpEx
    accrued for every month after the build.
    """
    settings = resolve_settings(settings)
    total = investment.total_investment_amount
    n_build = build_months(investment.implementation_weeks, settings.weeks_per_month)
    burn = total / n_build
    opex = monthly_opex(investment, settings)

    curve = [0.0]
    spent = 0.0
    accrued_opex = 0.0
    for month in range(1, settings.projection_months + 1):
        if month <= n_build:
            spent = min(spent + burn, total)
        else:
            accrued_opex += opex
        curve.append(spent + accrued_opex)
    return curve


def monthly_base_values(
    value_streams: ValueStreams,
    implementation_weeks: float,
    settings: RoiModelConfig | None = None,
) -> list[float]:
    """Expected-scenario value realized in each month 0..horizon (not cumulative)."""
    settings = resolve_settings(settings)
    horizon = settings.projection_months
    values = [0.0]

    if settings.ramp_model == "per_stream":
        others = {
            stream: value
            for stream, value in value_streams.enabled_values().items()
            if stream is not ValueStream.KNOWLEDGE_COMPOUND
        }
        other_total = sum(others.values())
        knowledge_share = (
            value_streams.knowledge_compound / other_total if other_total else 0.0
        )
        for month in range(1, horizon + 1):
            realized = sum(
                annual / MONTHS_PER_YEAR
                * stream_ramp_factor(month, stream, implementation_weeks, settings.weeks_per_month)
                for stream, annual in others.items()
            )
            values.append(realized * (1 + knowledge_share) * settings.maturity_multiplier(month))
        return values

    monthly = value_streams.total / MONTHS_PER_YEAR
    for month in range(1, horizon + 1):
        values.append(monthly * ramp_factor(month, horizon) * settings.maturity_multiplier(month))
    return values


def build_timeline(
    value_streams: ValueStreams,
    investment: TransformationInvestment,
    settings: RoiModelConfig | None = None,
) -> list[TimelinePoint]:
    """Cumulative investment and per-scenario cumulative value for months 0..horizon.

    Each scenario series accumulates its own scaled monthly values, so a
    multiplier applied to one series never leaks into another.
    """
    settings = resolve_settings(settings)
    weeks = investment.implementation_weeks
    investment_curve = build_investment_curve(investment, settings)
    monthly_values = monthly_base_values(value_streams, weeks, settings)
    multipliers = {scenario: settings.scenario_multipliers[scenario.value] for scenario in Scenario}

    cumulative = dict.fromkeys(Scenario, 0.0)
    timeline = []
    for month, monthly in enumerate(monthly_values):
        for scenario, multiplier in multipliers.items():
            cumulative[scenario] += monthly * multiplier
        timeline.append(
            TimelinePoint(
                month=month,
                investment_cumulative=investment_curve[month],
                value_conservative=cumulative[Scenario.CONSERVATIVE],
                value_expected=cumulative[Scenario.EXPECTED],
                value_aggressive=cumulative[Scenario.AGGRESSIVE],
                phase=phase_for_month(month, weeks, settings.weeks_per_month),
            )
        )

    stage_logger("timeline").debug(
        "Timeline projected",
        months=len(timeline) - 1,
        ramp_model=settings.ramp_model,
        final_expected_value=timeline[-1].value_expected,
    )
    return timeline


def find_break_even_month(
    timeline: list[TimelinePoint], scenario: Scenario = Scenario.EXPECTED
) -> int:
    """First month >= 1 where cumulative value covers cumulative investment.

    Saturates at the last month of the timeline when never reached.
    """
    for point in timeline[1:]:
        if point.value_for(scenario) >= point.investment_cumulative:
            return point.month
    return timeline[-1].month


def timeline_to_frame(timeline: list[TimelinePoint]) -> pd.DataFrame:
    """Timeline as a DataFrame indexed by month, with per-scenario net position columns."""
    frame = pd.DataFrame([point.model_dump() for point in timeline]).set_index("month")
    for scenario in Scenario:
        frame[f"net_{scenario.value}"] = frame[f"value_{scenario.value}"] - frame["investment_cumulative"]
    return frame
