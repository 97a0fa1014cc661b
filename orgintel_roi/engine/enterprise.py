"""Top-down enterprise model, cost of inaction and channel ROAS benchmarks."""

from __future__ import annotations

from ..models import (
    BaselineOutputs,
    ChannelRoasEntry,
    DoNothingOutputs,
    EnterpriseModelOutputs,
    ImprovementAssumptions,
    MartechAndMedia,
    OrganizationProfile,
    RoasComparison,
    ValueStreams,
)
from .constants import (
    AGENCY_CONTENT_SHARE,
    AI_IMPACT_BENCHMARKS,
    CHANNEL_ROAS_BENCHMARKS,
    DO_NOTHING_EROSION,
)


DO_NOTHING_QUARTERS = 8
YEAR3_LAST_QUARTER = 12


def compute_enterprise_model(
    baseline: BaselineOutputs, org: OrganizationProfile
) -> EnterpriseModelOutputs:
    """Benchmark-driven view of recoverable value across the whole marketing budget.

    Independent of the bottom-up value streams; uses published AI impact
    benchmarks for waste recovery, content cost and headcount.
    """
    derived = baseline.derived
    total_budget = derived.total_marketing_budget

    budget_waste_total = (
        baseline.annual_martech_waste + baseline.annual_media_waste + baseline.annual_attribution_waste
    )
    ai_recovery_potential = budget_waste_total * (AI_IMPACT_BENCHMARKS["waste_recovery"] / 100)

    agency_content = derived.annual_agency_spend * AGENCY_CONTENT_SHARE
    content_savings = (derived.content_team_cost + agency_content) * (
        AI_IMPACT_BENCHMARKS["content_cost_reduction"] / 100
    )
    headcount_savings = derived.total_team_cost * (AI_IMPACT_BENCHMARKS["headcount_savings"] / 100)

    # Same revenue on a smaller budget; half the content savings come out of budget.
    reduced_budget = total_budget - ai_recovery_potential - content_savings * 0.5
    if reduced_budget > 0:
        mer = org.annual_revenue / reduced_budget
    elif total_budget:
        mer = org.annual_revenue / total_budget
    else:
        mer = float("nan")

    return EnterpriseModelOutputs(
        budget_waste_total=budget_waste_total,
        ai_recovery_potential=ai_recovery_potential,
        content_savings=content_savings,
        headcount_savings=headcount_savings,
        mer_improvement=mer,
        total_enterprise_value=ai_recovery_potential + content_savings + headcount_savings,
    )


def compute_do_nothing_cost(annual_revenue: float, marketing_budget_pct: float) -> DoNothingOutputs:
    """Cumulative revenue lost to competitors who adopt AI while this organization waits.

    Erosion applies to the marketing budget and grows linearly each quarter.
    """
    marketing_budget = annual_revenue * (marketing_budget_pct / 100)
    quarterly_rate = DO_NOTHING_EROSION["quarterly_pct"] / 100

    quarterly_losses = []
    cumulative = 0.0
    for quarter in range(1, DO_NOTHING_QUARTERS + 1):
        cumulative += marketing_budget * quarterly_rate * quarter
        quarterly_losses.append(cumulative)

    year3_loss = cumulative
    for quarter in range(DO_NOTHING_QUARTERS + 1, YEAR3_LAST_QUARTER + 1):
        year3_loss += marketing_budget * quarterly_rate * quarter

    return DoNothingOutputs(
        quarterly_losses=tuple(quarterly_losses),
        year1_loss=quarterly_losses[3],
        year2_loss=quarterly_losses[7],
        year3_loss=year3_loss,
        year1_erosion_pct=DO_NOTHING_EROSION["year1_pct"],
        year2_erosion_pct=DO_NOTHING_EROSION["year2_pct"],
        year3_erosion_pct=DO_NOTHING_EROSION["year3_pct"],
    )


def compute_channel_roas(roas_lift_pct: float) -> list[ChannelRoasEntry]:
    """Per-channel ROAS benchmarks with the assumed lift applied."""
    entries = []
    for channel, (current, _) in CHANNEL_ROAS_BENCHMARKS.items():
        optimized = current * (1 + roas_lift_pct / 100)
        entries.append(
            ChannelRoasEntry(
                channel=channel,
                current_roas=current,
                ai_optimized_roas=round(optimized, 1),
                lift_pct=round((optimized - current) / current * 100, 0),
            )
        )
    return entries


def compute_roas_comparison(
    baseline: BaselineOutputs,
    spend_profile: MartechAndMedia,
    assumptions: ImprovementAssumptions,
    value_streams: ValueStreams,
) -> RoasComparison:
    projected_roas = spend_profile.current_blended_roas * (1 + assumptions.roas_lift_pct / 100)
    return RoasComparison(
        current_roas=spend_profile.current_blended_roas,
        projected_roas=projected_roas,
        current_ad_revenue=baseline.derived.current_ad_revenue,
        projected_ad_revenue=baseline.derived.annual_paid_media_spend * projected_roas,
        incremental_revenue=value_streams.roas_improvement,
    )
