"""Benchmark constants and presets for the ROI engine.

Benchmark sources: Gartner 2025 CMO Spend Survey, McKinsey Personalization
Analysis, Salesforce State of Marketing, Forrester, HubSpot State of
Marketing 2025. All monetary values in USD.
"""

from __future__ import annotations

from ..config.schemas import RoiModelConfig
from ..models import AgentIntensity, ImprovementAssumptions


# Share of the marketing team whose time is blocked by approval waits.
APPROVAL_BLOCKED_FTE_FRACTION = 0.30
# Share of manually attributed paid media lost to poor allocation decisions.
ATTRIBUTION_WASTE_FACTOR = 0.15
# Content producers as a share of total team cost.
CONTENT_TEAM_SHARE = 0.25
# Share of the team actively working on campaign operations.
ACTIVE_CAMPAIGN_FTE_FRACTION = 0.30
# Unused martech spend recoverable once utilization improves (license minimums).
UTILIZATION_RECOVERY_FRACTION = 0.5
# Discount on consolidated tool spend for overlapping capabilities.
CONSOLIDATION_OVERLAP_DISCOUNT = 0.3
DAYS_PER_YEAR = 365
MONTHS_PER_YEAR = 12


INDUSTRY_BUDGET_RATIOS: dict[str, float] = {
    "B2B Average": 6.7,
    "B2C Average": 9.6,
    "Technology": 8.5,
    "Financial Services": 8.0,
    "Healthcare / Pharma": 7.2,
    "Consumer Packaged Goods": 10.9,
    "Retail": 8.3,
    "Media / Entertainment": 9.1,
    "Telecom": 5.3,
    "Energy / Industrial": 3.1,
    "Professional Services": 7.8,
}

# (current ROAS, AI-optimized ROAS) per channel
CHANNEL_ROAS_BENCHMARKS: dict[str, tuple[float, float]] = {
    "Google Search": (8.0, 9.6),
    "Google Shopping": (5.5, 6.8),
    "Meta (Facebook/Instagram)": (3.5, 4.3),
    "LinkedIn": (2.1, 2.7),
    "Programmatic Display": (1.8, 2.3),
    "TikTok": (2.4, 3.1),
    "YouTube": (2.0, 2.6),
    "Connected TV": (1.5, 2.0),
}

AI_IMPACT_BENCHMARKS = {
    "content_cost_reduction": 65,
    "headcount_savings": 20,
    "waste_recovery": 50,
    "personalization_lift": 12,
    "roas_improvement": 20,
    "agentic_speed_multiplier": 3,
    "agentic_cost_reduction": 40,
}
# Share of agency spend that goes to content production.
AGENCY_CONTENT_SHARE = 0.4

DO_NOTHING_EROSION = {
    "quarterly_pct": 2.0,
    "year1_pct": 16.0,
    "year2_pct": 25.0,
    "year3_pct": 34.0,
}

CFO_FRAMEWORK = {
    "wacc": 10,
    "hurdle_rate": 15,
    "payback_expectation_months": 24,
    "risk_adjustment_pct": 20,
}

AGENT_INTENSITY_LEVELS: dict[AgentIntensity, dict[str, str]] = {
    AgentIntensity.LOW: {
        "label": "Co-Pilot",
        "short_description": "Humans lead, AI assists",
    },
    AgentIntensity.MEDIUM: {
        "label": "Agentic",
        "short_description": "AI executes, humans supervise",
    },
    AgentIntensity.HIGH: {
        "label": "Autonomous",
        "short_description": "AI drives, humans steer strategy",
    },
}

INTENSITY_PRESETS: dict[AgentIntensity, ImprovementAssumptions] = {
    AgentIntensity.LOW: ImprovementAssumptions(
        roas_lift_pct=6,
        content_time_savings_pct=20,
        personalization_rev_lift_pct=4,
        cycle_time_reduction_pct=10,
        rework_reduction_pct=20,
        admin_to_strategic_shift_pct=15,
        attribution_improvement_pct=5,
        martech_utilization_target_pct=40,
        martech_tool_consolidation_pct=10,
    ),
    AgentIntensity.MEDIUM: ImprovementAssumptions(),
    AgentIntensity.HIGH: ImprovementAssumptions(
        roas_lift_pct=20,
        content_time_savings_pct=65,
        personalization_rev_lift_pct=15,
        cycle_time_reduction_pct=50,
        rework_reduction_pct=60,
        admin_to_strategic_shift_pct=55,
        attribution_improvement_pct=20,
        martech_utilization_target_pct=65,
        martech_tool_consolidation_pct=35,
    ),
}


def assumptions_for_intensity(intensity: AgentIntensity | str) -> ImprovementAssumptions:
    """Improvement assumptions preset for an agent-intensity level."""
    return INTENSITY_PRESETS[AgentIntensity(intensity)]


def industry_budget_pct(industry: str | None) -> float | None:
    """Benchmark marketing budget (% of revenue) for an industry label, if known."""
    if industry is None:
        return None
    return INDUSTRY_BUDGET_RATIOS.get(industry)


def resolve_settings(settings: RoiModelConfig | None) -> RoiModelConfig:
    """Model defaults when no settings are supplied; never reads configuration files."""
    return settings if settings is not None else RoiModelConfig()
