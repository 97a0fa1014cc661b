"""Pydantic input records for the ROI engine.

Inputs only coerce types. Out-of-range numbers are accepted on purpose and
propagate through the arithmetic; use ``orgintel_roi.validators.check_inputs``
to report range problems before calling the engine.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# Midpoints (weeks) of the campaign lifecycle buckets: 1-10, 11-25, 25-52.
CAMPAIGN_CYCLE_MIDPOINTS = {
    "short": 5.5,
    "medium": 18.0,
    "long": 38.5,
}
FALLBACK_CYCLE_WEEKS = 6.0


def compute_weighted_cycle_weeks(short_pct: float, medium_pct: float, long_pct: float) -> float:
    """Weighted average campaign cycle from the lifecycle distribution."""
    total = short_pct + medium_pct + long_pct
    if total == 0:
        return FALLBACK_CYCLE_WEEKS
    return (
        short_pct * CAMPAIGN_CYCLE_MIDPOINTS["short"]
        + medium_pct * CAMPAIGN_CYCLE_MIDPOINTS["medium"]
        + long_pct * CAMPAIGN_CYCLE_MIDPOINTS["long"]
    ) / total


class OrganizationProfile(BaseModel):
    """Revenue-anchored organization profile. Everything cascades from annual revenue."""

    annual_revenue: float = Field(default=2_000_000_000, description="Annual revenue (USD)")
    marketing_budget_pct: float = Field(default=7.7, description="Marketing budget as % of revenue")
    marketing_headcount: int = Field(default=200, description="Marketing team size")
    avg_loaded_fte_cost: float = Field(default=180_000, description="Fully-loaded cost per head")
    industry: str | None = Field(default="B2B Average", description="Industry label")
    company_name: str | None = Field(default=None, description="Company label for reports")

    model_config = ConfigDict(frozen=True)


class MartechAndMedia(BaseModel):
    """Martech stack and paid media spend profile."""

    martech_pct_of_budget: float = Field(default=23.8, description="Martech share of budget (%)")
    martech_tool_count: int = Field(default=120, description="Number of tools in the stack")
    martech_utilization_pct: float = Field(default=33, description="% of tool capability in use")
    paid_media_pct_of_budget: float = Field(default=30.6, description="Paid media share of budget (%)")
    current_blended_roas: float = Field(default=2.5, description="Cross-channel return on ad spend")

    model_config = ConfigDict(frozen=True)


class ContentAndCampaignOps(BaseModel):
    """Campaign and content volume."""

    monthly_campaigns: float = Field(default=80, description="Campaigns launched per month")
    monthly_content_assets: float = Field(default=500, description="Content assets per month")
    avg_campaign_cycle_weeks: float = Field(default=6, description="Average campaign cycle (weeks)")
    channel_count: int = Field(default=10, description="Active channels")
    agency_pct_of_budget: float = Field(default=15, description="Agency share of budget (%)")
    campaign_cycle_short_pct: float = Field(default=55, description="% of campaigns at 1-10 weeks")
    campaign_cycle_medium_pct: float = Field(default=30, description="% of campaigns at 11-25 weeks")
    campaign_cycle_long_pct: float = Field(default=15, description="% of campaigns at 25-52 weeks")

    model_config = ConfigDict(frozen=True)

    def with_cycle_distribution(
        self, short_pct: float, medium_pct: float, long_pct: float
    ) -> ContentAndCampaignOps:
        """Copy with a new lifecycle distribution and the matching average cycle."""
        return self.model_copy(
            update={
                "campaign_cycle_short_pct": short_pct,
                "campaign_cycle_medium_pct": medium_pct,
                "campaign_cycle_long_pct": long_pct,
                "avg_campaign_cycle_weeks": compute_weighted_cycle_weeks(
                    short_pct, medium_pct, long_pct
                ),
            }
        )


class OperationalPain(BaseModel):
    """Quantified operational inefficiencies."""

    rework_rate_pct: float = Field(default=20, description="% of team work redone")
    approval_cycle_days: float = Field(default=7, description="Days waiting on approvals per campaign")
    admin_time_pct: float = Field(default=60, description="% of time spent on admin work")
    marketing_waste_rate_pct: float = Field(default=30, description="% of paid media wasted")
    manual_attribution_pct: float = Field(default=33, description="% of spend attributed manually")

    model_config = ConfigDict(frozen=True)


class TransformationInvestment(BaseModel):
    """Planned investment; anchors the build-phase curve."""

    total_investment_amount: float = Field(default=3_000_000, description="Total investment (USD)")
    implementation_weeks: int = Field(default=28, description="Build duration in weeks")

    model_config = ConfigDict(frozen=True)


class ImprovementAssumptions(BaseModel):
    """Editable lift knobs, one per value stream, in percent.

    All knobs live in [0, 100] except ``roas_lift_pct``, which multiplies the
    current ROAS and may exceed 100.
    """

    roas_lift_pct: float = Field(default=12, description="ROAS lift (multiplicative)")
    content_time_savings_pct: float = Field(default=40, description="Content production time saved")
    personalization_rev_lift_pct: float = Field(default=8, description="Revenue lift from personalization")
    cycle_time_reduction_pct: float = Field(default=25, description="Campaign cycle time reduction")
    rework_reduction_pct: float = Field(default=40, description="Rework avoided")
    admin_to_strategic_shift_pct: float = Field(default=30, description="Admin time shifted to strategy")
    attribution_improvement_pct: float = Field(default=10, description="Attribution waste recovered")
    martech_utilization_target_pct: float = Field(default=50, description="Target tool utilization")
    martech_tool_consolidation_pct: float = Field(default=20, description="Tools consolidated")

    model_config = ConfigDict(frozen=True)
