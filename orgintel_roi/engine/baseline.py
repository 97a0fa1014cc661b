"""Baseline cost calculator.

Derives the current-state annual operating cost from the organization, spend,
operations and pain profiles. Inputs are not re-validated: malformed values
propagate through the arithmetic as ``NaN``/``inf`` instead of raising.
"""

from __future__ import annotations

import math

from ..config.schemas import RoiModelConfig
from ..models import (
    COST_SEGMENT_LABELS,
    BaselineOutputs,
    ContentAndCampaignOps,
    CostSegment,
    DerivedMetrics,
    MartechAndMedia,
    OperationalPain,
    OrganizationProfile,
)
from ..utils.logging_config import stage_logger
from .constants import (
    APPROVAL_BLOCKED_FTE_FRACTION,
    ATTRIBUTION_WASTE_FACTOR,
    CONTENT_TEAM_SHARE,
    DAYS_PER_YEAR,
    MONTHS_PER_YEAR,
    resolve_settings,
)


def _non_negative(value: float) -> float:
    # NaN fails the comparison and passes through unchanged.
    return 0.0 if value < 0 else value


def compute_derived(
    org: OrganizationProfile,
    spend_profile: MartechAndMedia,
    ops_profile: ContentAndCampaignOps,
    settings: RoiModelConfig | None = None,
) -> DerivedMetrics:
    """Quantities shared by the baseline and every value stream."""
    settings = resolve_settings(settings)

    total_marketing_budget = org.annual_revenue * (org.marketing_budget_pct / 100)
    total_team_cost = org.marketing_headcount * org.avg_loaded_fte_cost
    annual_paid_media_spend = total_marketing_budget * (spend_profile.paid_media_pct_of_budget / 100)

    return DerivedMetrics(
        total_marketing_budget=total_marketing_budget,
        total_team_cost=total_team_cost,
        annual_martech_spend=total_marketing_budget * (spend_profile.martech_pct_of_budget / 100),
        annual_paid_media_spend=annual_paid_media_spend,
        annual_agency_spend=total_marketing_budget * (ops_profile.agency_pct_of_budget / 100),
        current_ad_revenue=annual_paid_media_spend * spend_profile.current_blended_roas,
        content_team_cost=total_team_cost * CONTENT_TEAM_SHARE,
        hourly_rate=org.avg_loaded_fte_cost / settings.hours_per_year,
        daily_marketing_budget=total_marketing_budget / DAYS_PER_YEAR,
        team_hours=org.marketing_headcount * settings.hours_per_year,
    )


def approval_bottleneck_hours(
    org: OrganizationProfile,
    ops_profile: ContentAndCampaignOps,
    pain_profile: OperationalPain,
    settings: RoiModelConfig | None = None,
) -> float:
    """Hours lost waiting on approvals, capped at the blocked share of team capacity."""
    settings = resolve_settings(settings)
    campaigns_per_year = ops_profile.monthly_campaigns * MONTHS_PER_YEAR
    raw_hours = campaigns_per_year * pain_profile.approval_cycle_days * settings.hours_per_day
    blocked_ftes = math.ceil(org.marketing_headcount * APPROVAL_BLOCKED_FTE_FRACTION)
    available_hours = blocked_ftes * settings.hours_per_year
    return min(raw_hours, available_hours)


def compute_baseline(
    org: OrganizationProfile,
    spend_profile: MartechAndMedia,
    ops_profile: ContentAndCampaignOps,
    pain_profile: OperationalPain,
    settings: RoiModelConfig | None = None,
) -> BaselineOutputs:
    """Current annual cost structure.

    Each segment is an independent product of a base quantity and a
    percentage; negative segments are clamped to zero. ``total_annual_cost``
    is the literal sum of the seven segments in ``COST_SEGMENT_LABELS``
    order, so ``sum(s.value for s in baseline.segments())`` equals it
    exactly. Admin overhead is reported separately because it is a subset
    of team cost.

    Args:
        org: Organization profile
        spend_profile: Martech and paid media spend
        ops_profile: Campaign and content operations
        pain_profile: Operational pain points
        settings: Optional model constants override

    Returns:
        BaselineOutputs with the derived metrics, segments and waterfall
    """
    settings = resolve_settings(settings)
    derived = compute_derived(org, spend_profile, ops_profile, settings)
    team_cost = derived.total_team_cost

    segments = {
        "annual_team_cost": _non_negative(team_cost),
        "annual_martech_waste": _non_negative(
            derived.annual_martech_spend * (1 - spend_profile.martech_utilization_pct / 100)
        ),
        "annual_media_waste": _non_negative(
            derived.annual_paid_media_spend * (pain_profile.marketing_waste_rate_pct / 100)
        ),
        "annual_agency_cost": _non_negative(derived.annual_agency_spend),
        "annual_rework_cost": _non_negative(team_cost * (pain_profile.rework_rate_pct / 100)),
        "annual_approval_bottleneck_cost": _non_negative(
            approval_bottleneck_hours(org, ops_profile, pain_profile, settings) * derived.hourly_rate
        ),
        "annual_attribution_waste": _non_negative(
            derived.annual_paid_media_spend
            * (pain_profile.manual_attribution_pct / 100)
            * ATTRIBUTION_WASTE_FACTOR
        ),
    }
    total_annual_cost = sum(segments[key] for key, _ in COST_SEGMENT_LABELS)

    waterfall = tuple(
        CostSegment(key=key, label=label, value=segments[key])
        for key, label in COST_SEGMENT_LABELS
        if segments[key] > 0
    )

    baseline = BaselineOutputs(
        derived=derived,
        annual_admin_overhead_cost=team_cost * (pain_profile.admin_time_pct / 100),
        total_annual_cost=total_annual_cost,
        waterfall=waterfall,
        **segments,
    )

    stage_logger("baseline").debug(
        "Baseline computed",
        total_annual_cost=total_annual_cost,
        segment_count=len(waterfall),
    )
    return baseline
