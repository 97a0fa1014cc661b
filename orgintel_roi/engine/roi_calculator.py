"""ROI calculation entry point.

Runs the stages in dependency order: baseline, value streams, timeline
projection, financial summary, then the scenario and narrative tables.
Every call builds fresh records; nothing is cached or mutated.
"""

from __future__ import annotations

import math
import uuid
from collections.abc import Iterable

from ..config.schemas import EngineConfig, RoiModelConfig
from ..models import (
    ContentAndCampaignOps,
    ImprovementAssumptions,
    MartechAndMedia,
    OperationalPain,
    OrganizationProfile,
    RoiOutputs,
    SensitivityMatrix,
    TransformationInvestment,
    ValueStream,
)
from ..utils.logging_config import LogContext
from .baseline import compute_baseline
from .constants import MONTHS_PER_YEAR, resolve_settings
from .enterprise import (
    compute_channel_roas,
    compute_do_nothing_cost,
    compute_enterprise_model,
    compute_roas_comparison,
)
from .financial_summary import (
    build_monthly_cash_flows,
    calculate_irr,
    compute_npv,
    compute_three_year_roi,
    opex_schedule,
    value_increments,
)
from .ramp import build_timeline, find_break_even_month, monthly_opex
from .scenarios import build_workflows, compute_allocations, compute_scenario_returns
from .sensitivity import compute_sensitivity
from .value_streams import compute_value_streams


def compute_roi(
    org: OrganizationProfile,
    spend_profile: MartechAndMedia,
    ops_profile: ContentAndCampaignOps,
    pain_profile: OperationalPain,
    investment: TransformationInvestment,
    assumptions: ImprovementAssumptions,
    disabled_streams: Iterable[ValueStream | str] | None = None,
    settings: RoiModelConfig | None = None,
) -> RoiOutputs:
    """Full three-year ROI model for one set of inputs.

    Numeric problems never raise: undefined results come back as ``NaN``
    (ROI on zero cost, IRR without a sign change) and malformed inputs
    propagate through the arithmetic.

    Args:
        org: Organization profile
        spend_profile: Martech and paid media spend
        ops_profile: Campaign and content operations
        pain_profile: Operational pain points
        investment: Total investment and build duration
        assumptions: Improvement assumptions
        disabled_streams: Value streams to exclude
        settings: Optional model constants override; defaults never read files

    Returns:
        RoiOutputs record
    """
    settings = resolve_settings(settings)
    run_id = uuid.uuid4().hex[:8]

    with LogContext(stage="roi", run_id=run_id) as log:
        log.debug(
            "Computing ROI",
            total_investment=investment.total_investment_amount,
            implementation_weeks=investment.implementation_weeks,
        )

        baseline = compute_baseline(org, spend_profile, ops_profile, pain_profile, settings)
        streams = compute_value_streams(
            baseline, spend_profile, ops_profile, pain_profile, assumptions, disabled_streams, settings
        )
        total_annual_value = streams.total

        timeline = build_timeline(streams, investment, settings)
        horizon = settings.projection_months
        break_even_month = find_break_even_month(timeline)

        opex = opex_schedule(investment, horizon, settings)
        increments = value_increments(timeline)
        total_investment = investment.total_investment_amount
        three_year_roi = compute_three_year_roi(
            timeline[-1].value_expected, total_investment + sum(opex)
        )
        npv = compute_npv(total_investment, increments, opex, settings.discount_rate)
        irr = calculate_irr(
            build_monthly_cash_flows(investment, increments, opex, settings), settings.irr
        )

        current_allocation, future_allocation = compute_allocations(pain_profile)

        outputs = RoiOutputs(
            total_investment=total_investment,
            implementation_weeks=investment.implementation_weeks,
            annual_opex=monthly_opex(investment, settings) * MONTHS_PER_YEAR,
            value_streams=streams,
            total_annual_value=total_annual_value,
            three_year_roi=three_year_roi,
            payback_months=break_even_month,
            net_present_value=npv,
            irr=irr,
            timeline=tuple(timeline),
            break_even_month=break_even_month,
            workflows=tuple(build_workflows(ops_profile, pain_profile, settings)),
            roas=compute_roas_comparison(baseline, spend_profile, assumptions, streams),
            channel_roas=tuple(compute_channel_roas(assumptions.roas_lift_pct)),
            current_allocation=tuple(current_allocation),
            future_allocation=tuple(future_allocation),
            enterprise_model=compute_enterprise_model(baseline, org),
            do_nothing=compute_do_nothing_cost(org.annual_revenue, org.marketing_budget_pct),
            scenario_returns=tuple(compute_scenario_returns(timeline, investment, settings)),
        )

        log.info(
            "ROI computed",
            total_annual_value=total_annual_value,
            three_year_roi=three_year_roi,
            payback_months=break_even_month,
            npv=npv,
            irr=irr,
        )
        if math.isnan(irr):
            log.warning("IRR undefined for this cash-flow profile")
        if not math.isfinite(three_year_roi):
            log.warning("Three-year ROI is not finite", total_investment=total_investment)
        return outputs


class RoiCalculator:
    """Calculator bound to the active engine configuration.

    Convenience wrapper for callers that want the YAML/environment settings
    rather than the built-in defaults.
    """

    def __init__(self, config: EngineConfig | None = None):
        if config is None:
            from ..config.loader import get_config

            config = get_config()
        self.config = config
        self.settings = config.roi_model

    def compute(
        self,
        org: OrganizationProfile,
        spend_profile: MartechAndMedia,
        ops_profile: ContentAndCampaignOps,
        pain_profile: OperationalPain,
        investment: TransformationInvestment,
        assumptions: ImprovementAssumptions,
        disabled_streams: Iterable[ValueStream | str] | None = None,
    ) -> RoiOutputs:
        return compute_roi(
            org,
            spend_profile,
            ops_profile,
            pain_profile,
            investment,
            assumptions,
            disabled_streams,
            self.settings,
        )

    def sensitivity(
        self,
        org: OrganizationProfile,
        spend_profile: MartechAndMedia,
        ops_profile: ContentAndCampaignOps,
        pain_profile: OperationalPain,
        investment: TransformationInvestment,
        assumptions: ImprovementAssumptions,
        disabled_streams: Iterable[ValueStream | str] | None = None,
    ) -> SensitivityMatrix:
        return compute_sensitivity(
            org,
            spend_profile,
            ops_profile,
            pain_profile,
            investment,
            assumptions,
            disabled_streams,
            self.settings,
        )
