"""Range checks for ROI engine inputs.

The engine accepts any number and lets bad values propagate as NaN/inf;
these checks let callers report problems before calculating.
"""

from __future__ import annotations

import math
from typing import Any

import pandas as pd
from loguru import logger

from ..models import (
    ContentAndCampaignOps,
    ImprovementAssumptions,
    MartechAndMedia,
    OperationalPain,
    OrganizationProfile,
    TransformationInvestment,
)
from ..models.quality import QualityIssue, QualitySeverity


PERCENT_FIELDS = {
    "org": ("marketing_budget_pct",),
    "spend": ("martech_pct_of_budget", "martech_utilization_pct", "paid_media_pct_of_budget"),
    "ops": (
        "agency_pct_of_budget",
        "campaign_cycle_short_pct",
        "campaign_cycle_medium_pct",
        "campaign_cycle_long_pct",
    ),
    "pain": (
        "rework_rate_pct",
        "admin_time_pct",
        "marketing_waste_rate_pct",
        "manual_attribution_pct",
    ),
    "assumptions": (
        "content_time_savings_pct",
        "personalization_rev_lift_pct",
        "cycle_time_reduction_pct",
        "rework_reduction_pct",
        "admin_to_strategic_shift_pct",
        "attribution_improvement_pct",
        "martech_utilization_target_pct",
        "martech_tool_consolidation_pct",
    ),
}

# Marketing budgets above this share of revenue are almost always a data entry error.
TYPICAL_MAX_BUDGET_PCT = 25.0


def validate_finite(value: Any, field_name: str) -> QualityIssue | None:
    """Validate a value is a finite number."""
    if pd.isna(value) or (isinstance(value, float) and math.isinf(value)):
        return QualityIssue(
            field=field_name,
            value=value,
            expected="finite number",
            message=f"{field_name} must be a finite number, got {value}",
            severity=QualitySeverity.ERROR,
            rule="finite",
        )
    return None


def validate_range(
    value: Any,
    field_name: str,
    lower: float | None = None,
    upper: float | None = None,
    severity: QualitySeverity = QualitySeverity.ERROR,
) -> QualityIssue | None:
    """Validate a number lies within [lower, upper]; either bound may be open."""
    issue = validate_finite(value, field_name)
    if issue:
        return issue

    if (lower is not None and value < lower) or (upper is not None and value > upper):
        expected = f"[{'-inf' if lower is None else lower}, {'inf' if upper is None else upper}]"
        return QualityIssue(
            field=field_name,
            value=value,
            expected=expected,
            message=f"{field_name} {value} is outside {expected}",
            severity=severity,
            rule="range",
        )
    return None


def validate_percentage(value: Any, field_name: str) -> QualityIssue | None:
    return validate_range(value, field_name, 0.0, 100.0)


def validate_positive(value: Any, field_name: str) -> QualityIssue | None:
    """Validate a strictly positive amount."""
    issue = validate_finite(value, field_name)
    if issue:
        return issue
    if value <= 0:
        return QualityIssue(
            field=field_name,
            value=value,
            expected="> 0",
            message=f"{field_name} must be positive, got {value}",
            severity=QualitySeverity.ERROR,
            rule="positive",
        )
    return None


def validate_budget_share(spend: MartechAndMedia) -> QualityIssue | None:
    """Martech and paid media cannot together exceed the whole budget."""
    combined = spend.martech_pct_of_budget + spend.paid_media_pct_of_budget
    if combined > 100:
        return QualityIssue(
            field="spend.martech_pct_of_budget+paid_media_pct_of_budget",
            value=combined,
            expected="<= 100",
            message=f"Martech and paid media shares sum to {combined}% of budget",
            severity=QualitySeverity.WARNING,
            rule="budget_share",
        )
    return None


def validate_cycle_distribution(ops: ContentAndCampaignOps) -> QualityIssue | None:
    total = ops.campaign_cycle_short_pct + ops.campaign_cycle_medium_pct + ops.campaign_cycle_long_pct
    if not math.isclose(total, 100.0, abs_tol=1e-6):
        return QualityIssue(
            field="ops.campaign_cycle_distribution",
            value=total,
            expected=100,
            message=f"Campaign cycle distribution sums to {total}%, expected 100%",
            severity=QualitySeverity.WARNING,
            rule="distribution_sum",
        )
    return None


def _percent_issues(prefix: str, record: Any) -> list[QualityIssue]:
    issues = []
    for name in PERCENT_FIELDS[prefix]:
        issue = validate_percentage(getattr(record, name), f"{prefix}.{name}")
        if issue:
            issues.append(issue)
    return issues


def check_inputs(
    org: OrganizationProfile,
    spend_profile: MartechAndMedia,
    ops_profile: ContentAndCampaignOps,
    pain_profile: OperationalPain,
    investment: TransformationInvestment,
    assumptions: ImprovementAssumptions,
) -> list[QualityIssue]:
    """
    Check every input record against its documented range.

    Args:
        org: Organization profile
        spend_profile: Martech and paid media spend
        ops_profile: Campaign and content operations
        pain_profile: Operational pain points
        investment: Total investment and build duration
        assumptions: Improvement assumptions

    Returns:
        List of QualityIssue objects (empty if all checks pass)
    """
    issues: list[QualityIssue] = []

    candidates = [
        validate_positive(org.annual_revenue, "org.annual_revenue"),
        validate_range(org.marketing_headcount, "org.marketing_headcount", lower=1),
        validate_positive(org.avg_loaded_fte_cost, "org.avg_loaded_fte_cost"),
        validate_range(
            org.marketing_budget_pct,
            "org.marketing_budget_pct",
            upper=TYPICAL_MAX_BUDGET_PCT,
            severity=QualitySeverity.WARNING,
        ),
        validate_range(spend_profile.current_blended_roas, "spend.current_blended_roas", lower=0.0),
        validate_range(spend_profile.martech_tool_count, "spend.martech_tool_count", lower=0),
        validate_budget_share(spend_profile),
        validate_range(ops_profile.monthly_campaigns, "ops.monthly_campaigns", lower=0.0),
        validate_range(ops_profile.monthly_content_assets, "ops.monthly_content_assets", lower=0.0),
        validate_positive(ops_profile.avg_campaign_cycle_weeks, "ops.avg_campaign_cycle_weeks"),
        validate_cycle_distribution(ops_profile),
        validate_range(pain_profile.approval_cycle_days, "pain.approval_cycle_days", lower=0.0),
        validate_range(
            investment.total_investment_amount, "investment.total_investment_amount", lower=0.0
        ),
        validate_range(investment.implementation_weeks, "investment.implementation_weeks", lower=1),
        # ROAS lift is multiplicative and may exceed 100%.
        validate_range(assumptions.roas_lift_pct, "assumptions.roas_lift_pct", lower=0.0),
    ]
    issues.extend(issue for issue in candidates if issue)

    for prefix, record in (
        ("org", org),
        ("spend", spend_profile),
        ("ops", ops_profile),
        ("pain", pain_profile),
        ("assumptions", assumptions),
    ):
        issues.extend(_percent_issues(prefix, record))

    errors = [i for i in issues if i.severity == QualitySeverity.ERROR]
    if issues:
        logger.warning(
            f"Input check found {len(errors)} errors and {len(issues) - len(errors)} warnings"
        )
    return issues
