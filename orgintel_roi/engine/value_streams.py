"""Value stream calculator.

Each stream is a standalone function over a ``StreamInputs`` bundle so it can
be evaluated even when the stream is disabled (the UI shows the value a
stream would add if toggled back on). ``compute_value_streams`` assembles
them, applies the labor guardrail, zeroes disabled streams and derives the
knowledge-compound premium last.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from ..config.schemas import RoiModelConfig
from ..models import (
    LABOR_STREAMS,
    BaselineOutputs,
    ContentAndCampaignOps,
    ImprovementAssumptions,
    MartechAndMedia,
    OperationalPain,
    ValueStream,
    ValueStreams,
)
from ..utils.logging_config import stage_logger
from .constants import (
    ACTIVE_CAMPAIGN_FTE_FRACTION,
    CONSOLIDATION_OVERLAP_DISCOUNT,
    MONTHS_PER_YEAR,
    UTILIZATION_RECOVERY_FRACTION,
    resolve_settings,
)


@dataclass(frozen=True)
class StreamInputs:
    """Everything a single value stream needs."""

    baseline: BaselineOutputs
    spend_profile: MartechAndMedia
    ops_profile: ContentAndCampaignOps
    pain_profile: OperationalPain
    assumptions: ImprovementAssumptions
    settings: RoiModelConfig


def tooling_optimization_value(inputs: StreamInputs) -> float:
    """Recovered martech spend from higher utilization plus tool consolidation."""
    martech_spend = inputs.baseline.derived.annual_martech_spend
    utilization_gap = max(
        0.0,
        inputs.assumptions.martech_utilization_target_pct
        - inputs.spend_profile.martech_utilization_pct,
    )
    utilization_savings = martech_spend * (utilization_gap / 100) * UTILIZATION_RECOVERY_FRACTION
    consolidation_savings = (
        martech_spend
        * (inputs.assumptions.martech_tool_consolidation_pct / 100)
        * CONSOLIDATION_OVERLAP_DISCOUNT
    )
    return utilization_savings + consolidation_savings


def roas_improvement_value(inputs: StreamInputs) -> float:
    """Contribution margin on the incremental ad revenue from a ROAS lift."""
    current_roas = inputs.spend_profile.current_blended_roas
    projected_roas = current_roas * (1 + inputs.assumptions.roas_lift_pct / 100)
    margin = inputs.settings.contribution_margin_pct / 100
    return inputs.baseline.derived.annual_paid_media_spend * (projected_roas - current_roas) * margin


def content_velocity_value(inputs: StreamInputs) -> float:
    return inputs.baseline.derived.content_team_cost * (
        inputs.assumptions.content_time_savings_pct / 100
    )


def cycle_time_value(inputs: StreamInputs) -> float:
    """Team time freed by shorter campaign cycles, capped at a share of team cost."""
    derived = inputs.baseline.derived
    campaigns_per_year = inputs.ops_profile.monthly_campaigns * MONTHS_PER_YEAR
    days_saved_per_campaign = (
        inputs.ops_profile.avg_campaign_cycle_weeks
        * 7
        * (inputs.assumptions.cycle_time_reduction_pct / 100)
    )
    value_per_campaign_day = (
        ACTIVE_CAMPAIGN_FTE_FRACTION * inputs.settings.hours_per_day * derived.hourly_rate
    )
    raw_value = campaigns_per_year * days_saved_per_campaign * value_per_campaign_day
    cap = derived.total_team_cost * (inputs.settings.campaign_speed_cap_pct / 100)
    return min(raw_value, cap)


def time_savings_value(inputs: StreamInputs) -> float:
    """Admin hours shifted to strategic work, valued at the hourly rate."""
    derived = inputs.baseline.derived
    automatable_share = (inputs.pain_profile.admin_time_pct / 100) * (
        inputs.assumptions.admin_to_strategic_shift_pct / 100
    )
    recovered_hours = derived.team_hours * automatable_share * inputs.settings.time_recovery_fraction
    return recovered_hours * derived.hourly_rate


def rework_reduction_value(inputs: StreamInputs) -> float:
    return inputs.baseline.annual_rework_cost * (inputs.assumptions.rework_reduction_pct / 100)


def attribution_improvement_value(inputs: StreamInputs) -> float:
    """Better allocation from improved attribution.

    Discounted by the ROAS lift so gains already counted by the ROAS
    stream are not counted twice.
    """
    return (
        inputs.baseline.derived.annual_paid_media_spend
        * (inputs.pain_profile.manual_attribution_pct / 100)
        * (inputs.assumptions.attribution_improvement_pct / 100)
        * (1 - inputs.assumptions.roas_lift_pct / 100)
    )


def personalization_lift_value(inputs: StreamInputs) -> float:
    return (
        inputs.baseline.derived.current_ad_revenue
        * (inputs.assumptions.personalization_rev_lift_pct / 100)
        * (inputs.settings.contribution_margin_pct / 100)
    )


def knowledge_compound_value(
    other_values: Mapping[ValueStream, float], settings: RoiModelConfig | None = None
) -> float:
    """Premium on the other streams for knowledge that accumulates in the platform.

    ``other_values`` should hold only the enabled streams.
    """
    settings = resolve_settings(settings)
    base = sum(
        value for stream, value in other_values.items() if stream is not ValueStream.KNOWLEDGE_COMPOUND
    )
    return base * (settings.knowledge_premium_pct / 100)


STREAM_CALCULATORS: dict[ValueStream, Callable[[StreamInputs], float]] = {
    ValueStream.TOOLING_OPTIMIZATION: tooling_optimization_value,
    ValueStream.ROAS_IMPROVEMENT: roas_improvement_value,
    ValueStream.CONTENT_VELOCITY: content_velocity_value,
    ValueStream.CYCLE_TIME: cycle_time_value,
    ValueStream.TIME_SAVINGS: time_savings_value,
    ValueStream.REWORK_REDUCTION: rework_reduction_value,
    ValueStream.ATTRIBUTION_IMPROVEMENT: attribution_improvement_value,
    ValueStream.PERSONALIZATION_LIFT: personalization_lift_value,
}


def apply_labor_guardrail(
    values: Mapping[ValueStream, float], team_cost: float, cap_pct: float
) -> dict[ValueStream, float]:
    """Scale labor streams proportionally so together they stay within ``cap_pct`` of team cost."""
    guarded = dict(values)
    labor_total = sum(values[stream] for stream in LABOR_STREAMS if stream in values)
    cap = team_cost * (cap_pct / 100)
    if labor_total > cap and labor_total > 0:
        scale = cap / labor_total
        for stream in LABOR_STREAMS:
            if stream in guarded:
                guarded[stream] = guarded[stream] * scale
    return guarded


def normalize_disabled(disabled_streams: Iterable[ValueStream | str] | None) -> frozenset[ValueStream]:
    if not disabled_streams:
        return frozenset()
    return frozenset(ValueStream(stream) for stream in disabled_streams)


def compute_value_streams(
    baseline: BaselineOutputs,
    spend_profile: MartechAndMedia,
    ops_profile: ContentAndCampaignOps,
    pain_profile: OperationalPain,
    assumptions: ImprovementAssumptions,
    disabled_streams: Iterable[ValueStream | str] | None = None,
    settings: RoiModelConfig | None = None,
) -> ValueStreams:
    """Annual value for every stream.

    The labor guardrail is applied to the full set of labor streams before
    any stream is disabled, so toggling one stream never re-derives the
    others. Disabled streams are exactly 0; ``potential`` keeps their
    would-be contribution.

    Args:
        baseline: Output of ``compute_baseline``
        spend_profile: Martech and paid media spend
        ops_profile: Campaign and content operations
        pain_profile: Operational pain points
        assumptions: Improvement assumptions
        disabled_streams: Streams to exclude from the total
        settings: Optional model constants override

    Returns:
        ValueStreams record
    """
    settings = resolve_settings(settings)
    disabled = normalize_disabled(disabled_streams)
    inputs = StreamInputs(
        baseline=baseline,
        spend_profile=spend_profile,
        ops_profile=ops_profile,
        pain_profile=pain_profile,
        assumptions=assumptions,
        settings=settings,
    )

    raw = {stream: calculator(inputs) for stream, calculator in STREAM_CALCULATORS.items()}
    potential = apply_labor_guardrail(
        raw, baseline.derived.total_team_cost, settings.labor_savings_cap_pct
    )

    enabled_primary = {stream: value for stream, value in potential.items() if stream not in disabled}
    potential[ValueStream.KNOWLEDGE_COMPOUND] = knowledge_compound_value(enabled_primary, settings)

    values = {
        stream.value: (0.0 if stream in disabled else potential[stream]) for stream in ValueStream
    }
    streams = ValueStreams(
        disabled=disabled,
        potential_values={stream: potential[stream] for stream in ValueStream},
        **values,
    )

    stage_logger("value_streams").debug(
        "Value streams computed",
        total_annual_value=streams.total,
        disabled=sorted(stream.value for stream in disabled),
    )
    return streams
