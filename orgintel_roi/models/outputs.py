"""Pydantic output records produced by the ROI engine.

Every record is frozen. Numeric fields accept ``NaN`` and ``inf``, which the
engine uses as sentinels for undefined results (IRR without a sign change,
ROI on a zero investment).
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import Scenario, TimeUnit, ValueStream


_FROZEN = ConfigDict(frozen=True)


class DerivedMetrics(BaseModel):
    """Intermediate quantities computed once and shared by baseline and value streams."""

    total_marketing_budget: float
    total_team_cost: float
    annual_martech_spend: float
    annual_paid_media_spend: float
    annual_agency_spend: float
    current_ad_revenue: float
    content_team_cost: float
    hourly_rate: float
    daily_marketing_budget: float
    team_hours: float

    model_config = _FROZEN


class CostSegment(BaseModel):
    """One named slice of the current annual cost."""

    key: str = Field(..., description="Field name on BaselineOutputs")
    label: str = Field(..., description="Display label")
    value: float = Field(..., description="Annual amount (USD)")

    model_config = _FROZEN


class BaselineOutputs(BaseModel):
    """Current-state annual operating cost breakdown."""

    derived: DerivedMetrics

    annual_team_cost: float
    annual_martech_waste: float
    annual_media_waste: float
    annual_agency_cost: float
    annual_rework_cost: float
    annual_approval_bottleneck_cost: float
    annual_attribution_waste: float
    annual_admin_overhead_cost: float = Field(
        ..., description="Opportunity cost of admin time; a subset of team cost, not additive"
    )
    total_annual_cost: float = Field(..., description="Sum of every cost segment")

    waterfall: tuple[CostSegment, ...] = Field(
        default=(), description="Segments with a positive value, in display order"
    )

    model_config = _FROZEN

    def segments(self) -> tuple[CostSegment, ...]:
        """All seven cost segments, including zero ones, in summation order."""
        return tuple(
            CostSegment(key=key, label=label, value=getattr(self, key))
            for key, label in COST_SEGMENT_LABELS
        )


COST_SEGMENT_LABELS: tuple[tuple[str, str], ...] = (
    ("annual_team_cost", "Team Salaries"),
    ("annual_martech_waste", "Martech Waste"),
    ("annual_media_waste", "Media Waste"),
    ("annual_agency_cost", "Agency Spend"),
    ("annual_rework_cost", "Rework"),
    ("annual_approval_bottleneck_cost", "Approval Delays"),
    ("annual_attribution_waste", "Attribution Waste"),
)


class ValueStreams(BaseModel):
    """Annual recoverable value per stream.

    Disabled streams are exactly 0 here; ``potential`` is a read-only view of
    what each stream would contribute if re-enabled, so callers can toggle
    without recomputing. It is stored as ``(stream, value)`` pairs.
    """

    tooling_optimization: float = 0.0
    roas_improvement: float = 0.0
    content_velocity: float = 0.0
    cycle_time: float = 0.0
    time_savings: float = 0.0
    rework_reduction: float = 0.0
    attribution_improvement: float = 0.0
    personalization_lift: float = 0.0
    knowledge_compound: float = 0.0

    disabled: frozenset[ValueStream] = Field(default_factory=frozenset)
    potential_values: tuple[tuple[ValueStream, float], ...] = Field(
        default=(), description="Pre-disable value per stream, as (stream, value) pairs"
    )

    model_config = _FROZEN

    @field_validator("potential_values", mode="before")
    @classmethod
    def _pairs_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    @property
    def potential(self) -> Mapping[ValueStream, float]:
        return MappingProxyType(dict(self.potential_values))

    def value(self, stream: ValueStream) -> float:
        return getattr(self, stream.value)

    def enabled_values(self) -> dict[ValueStream, float]:
        """Values of the enabled streams, in declaration order."""
        return {s: self.value(s) for s in ValueStream if s not in self.disabled}

    @property
    def total(self) -> float:
        return sum(self.enabled_values().values())


class TimelinePoint(BaseModel):
    """Cumulative investment and value at the end of one projection month."""

    month: int
    investment_cumulative: float
    value_conservative: float
    value_expected: float
    value_aggressive: float
    phase: str

    model_config = _FROZEN

    def value_for(self, scenario: Scenario) -> float:
        return getattr(self, f"value_{Scenario(scenario).value}")


class WorkflowComparison(BaseModel):
    """Illustrative before/after cycle time for a named workflow."""

    name: str
    before_days: float
    after_value: float
    after_unit: TimeUnit
    savings_pct: float

    model_config = _FROZEN


class AllocationSlice(BaseModel):
    """One tier of the time-allocation split, in percent."""

    label: str
    pct: float

    model_config = _FROZEN


class RoasComparison(BaseModel):
    current_roas: float
    projected_roas: float
    current_ad_revenue: float
    projected_ad_revenue: float
    incremental_revenue: float

    model_config = _FROZEN


class ChannelRoasEntry(BaseModel):
    channel: str
    current_roas: float
    ai_optimized_roas: float
    lift_pct: float

    model_config = _FROZEN


class EnterpriseModelOutputs(BaseModel):
    """Top-down enterprise view of recoverable value."""

    budget_waste_total: float
    ai_recovery_potential: float
    content_savings: float
    headcount_savings: float
    mer_improvement: float = Field(..., description="Marketing efficiency ratio after savings")
    total_enterprise_value: float

    model_config = _FROZEN


class DoNothingOutputs(BaseModel):
    """Illustrative cost of inaction from competitive erosion."""

    quarterly_losses: tuple[float, ...] = Field(..., description="Cumulative loss after each of 8 quarters")
    year1_loss: float
    year2_loss: float
    year3_loss: float
    year1_erosion_pct: float
    year2_erosion_pct: float
    year3_erosion_pct: float

    model_config = _FROZEN


class ScenarioReturn(BaseModel):
    """Summary metrics recomputed from one scenario's value series."""

    scenario: Scenario
    payback_months: int
    net_present_value: float
    three_year_roi: float

    model_config = _FROZEN


class SensitivityMatrix(BaseModel):
    """Payback months when two assumptions vary by -25%, 0 and +25%."""

    row_label: str
    col_label: str
    row_values: tuple[float, ...]
    col_values: tuple[float, ...]
    paybacks: tuple[tuple[int, ...], ...] = Field(..., description="[row][col] payback months")

    model_config = _FROZEN


class RoiOutputs(BaseModel):
    """Terminal output of ``compute_roi``."""

    total_investment: float
    implementation_weeks: int
    annual_opex: float

    value_streams: ValueStreams
    total_annual_value: float

    three_year_roi: float = Field(..., description="Three-year ROI in percent; NaN on zero cost")
    payback_months: int = Field(..., description="Breakeven month; the horizon when never reached")
    net_present_value: float
    irr: float = Field(..., description="Annualized IRR in percent; NaN when undefined")

    timeline: tuple[TimelinePoint, ...]
    break_even_month: int

    workflows: tuple[WorkflowComparison, ...]
    roas: RoasComparison
    channel_roas: tuple[ChannelRoasEntry, ...]

    current_allocation: tuple[AllocationSlice, ...]
    future_allocation: tuple[AllocationSlice, ...]

    enterprise_model: EnterpriseModelOutputs
    do_nothing: DoNothingOutputs
    scenario_returns: tuple[ScenarioReturn, ...]

    model_config = _FROZEN
