"""ROI calculation engine: baseline, value streams, timeline and financial summary."""

from .baseline import approval_bottleneck_hours, compute_baseline, compute_derived
from .constants import (
    AGENT_INTENSITY_LEVELS,
    CHANNEL_ROAS_BENCHMARKS,
    INDUSTRY_BUDGET_RATIOS,
    INTENSITY_PRESETS,
    assumptions_for_intensity,
    industry_budget_pct,
)
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
from .ramp import (
    build_investment_curve,
    build_months,
    build_timeline,
    find_break_even_month,
    phase_for_month,
    ramp_factor,
    stream_ramp_factor,
    timeline_to_frame,
)
from .roi_calculator import RoiCalculator, compute_roi
from .scenarios import (
    apply_scenario,
    build_workflows,
    compute_allocations,
    compute_scenario_returns,
    scenario_values,
)
from .sensitivity import compute_sensitivity
from .value_streams import (
    STREAM_CALCULATORS,
    StreamInputs,
    apply_labor_guardrail,
    attribution_improvement_value,
    compute_value_streams,
    content_velocity_value,
    cycle_time_value,
    knowledge_compound_value,
    personalization_lift_value,
    roas_improvement_value,
    rework_reduction_value,
    time_savings_value,
    tooling_optimization_value,
)


__all__ = [
    "AGENT_INTENSITY_LEVELS",
    "CHANNEL_ROAS_BENCHMARKS",
    "INDUSTRY_BUDGET_RATIOS",
    "INTENSITY_PRESETS",
    "RoiCalculator",
    "STREAM_CALCULATORS",
    "StreamInputs",
    "apply_labor_guardrail",
    "apply_scenario",
    "approval_bottleneck_hours",
    "assumptions_for_intensity",
    "attribution_improvement_value",
    "build_investment_curve",
    "build_monthly_cash_flows",
    "build_months",
    "build_timeline",
    "build_workflows",
    "calculate_irr",
    "compute_allocations",
    "compute_baseline",
    "compute_channel_roas",
    "compute_derived",
    "compute_do_nothing_cost",
    "compute_enterprise_model",
    "compute_npv",
    "compute_roas_comparison",
    "compute_roi",
    "compute_scenario_returns",
    "compute_sensitivity",
    "compute_three_year_roi",
    "compute_value_streams",
    "content_velocity_value",
    "cycle_time_value",
    "find_break_even_month",
    "industry_budget_pct",
    "knowledge_compound_value",
    "opex_schedule",
    "personalization_lift_value",
    "phase_for_month",
    "ramp_factor",
    "roas_improvement_value",
    "rework_reduction_value",
    "scenario_values",
    "stream_ramp_factor",
    "time_savings_value",
    "timeline_to_frame",
    "tooling_optimization_value",
    "value_increments",
]
