"""Payback sensitivity to the two most uncertain assumptions."""

from __future__ import annotations

from collections.abc import Iterable

from ..config.schemas import RoiModelConfig
from ..models import (
    ContentAndCampaignOps,
    ImprovementAssumptions,
    MartechAndMedia,
    OperationalPain,
    OrganizationProfile,
    SensitivityMatrix,
    TransformationInvestment,
    ValueStream,
)
from ..utils.logging_config import stage_logger
from .baseline import compute_baseline
from .constants import resolve_settings
from .ramp import build_timeline, find_break_even_month
from .value_streams import compute_value_streams


SENSITIVITY_OFFSETS = (-0.25, 0.0, 0.25)


def compute_sensitivity(
    org: OrganizationProfile,
    spend_profile: MartechAndMedia,
    ops_profile: ContentAndCampaignOps,
    pain_profile: OperationalPain,
    investment: TransformationInvestment,
    assumptions: ImprovementAssumptions,
    disabled_streams: Iterable[ValueStream | str] | None = None,
    settings: RoiModelConfig | None = None,
) -> SensitivityMatrix:
    """3x3 grid of payback months.

    Rows vary content time savings and columns vary ROAS lift, each by
    -25%, 0 and +25% of the base assumption. The centre cell equals the
    payback month of the unmodified inputs.
    """
    settings = resolve_settings(settings)
    disabled = list(disabled_streams or [])
    baseline = compute_baseline(org, spend_profile, ops_profile, pain_profile, settings)

    base_content = assumptions.content_time_savings_pct
    base_roas = assumptions.roas_lift_pct

    paybacks = []
    for content_offset in SENSITIVITY_OFFSETS:
        row = []
        for roas_offset in SENSITIVITY_OFFSETS:
            varied = assumptions.model_copy(
                update={
                    "content_time_savings_pct": base_content * (1 + content_offset),
                    "roas_lift_pct": base_roas * (1 + roas_offset),
                }
            )
            streams = compute_value_streams(
                baseline, spend_profile, ops_profile, pain_profile, varied, disabled, settings
            )
            row.append(find_break_even_month(build_timeline(streams, investment, settings)))
        paybacks.append(tuple(row))

    stage_logger("sensitivity").debug("Sensitivity grid computed", paybacks=paybacks)
    return SensitivityMatrix(
        row_label="Content Time Savings",
        col_label="ROAS Lift",
        row_values=tuple(base_content * (1 + offset) for offset in SENSITIVITY_OFFSETS),
        col_values=tuple(base_roas * (1 + offset) for offset in SENSITIVITY_OFFSETS),
        paybacks=tuple(paybacks),
    )
