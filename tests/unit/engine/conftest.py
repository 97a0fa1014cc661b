"""Shared engine fixtures: the reference $2B B2B organization."""

import pytest

from orgintel_roi.config.schemas import RoiModelConfig
from orgintel_roi.engine import compute_baseline
from orgintel_roi.models import (
    ContentAndCampaignOps,
    ImprovementAssumptions,
    MartechAndMedia,
    OperationalPain,
    OrganizationProfile,
    TransformationInvestment,
)


@pytest.fixture
def org():
    """$2B revenue, 7.7% marketing budget, 200 heads at $180K loaded."""
    return OrganizationProfile(
        annual_revenue=2_000_000_000,
        marketing_budget_pct=7.7,
        marketing_headcount=200,
        avg_loaded_fte_cost=180_000,
    )


@pytest.fixture
def spend_profile():
    return MartechAndMedia()


@pytest.fixture
def ops_profile():
    return ContentAndCampaignOps()


@pytest.fixture
def pain_profile():
    return OperationalPain()


@pytest.fixture
def investment():
    """$20M over a 28-week build."""
    return TransformationInvestment(total_investment_amount=20_000_000, implementation_weeks=28)


@pytest.fixture
def assumptions():
    return ImprovementAssumptions()


@pytest.fixture
def settings():
    return RoiModelConfig()


@pytest.fixture
def baseline(org, spend_profile, ops_profile, pain_profile):
    return compute_baseline(org, spend_profile, ops_profile, pain_profile)


@pytest.fixture
def roi_inputs(org, spend_profile, ops_profile, pain_profile, investment, assumptions):
    """Positional arguments for compute_roi, in order."""
    return (org, spend_profile, ops_profile, pain_profile, investment, assumptions)
