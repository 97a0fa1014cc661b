"""Pydantic records for the ROI engine inputs and outputs."""

from .enums import LABOR_STREAMS, AgentIntensity, Scenario, TimeUnit, ValueStream
from .inputs import (
    CAMPAIGN_CYCLE_MIDPOINTS,
    ContentAndCampaignOps,
    ImprovementAssumptions,
    MartechAndMedia,
    OperationalPain,
    OrganizationProfile,
    TransformationInvestment,
    compute_weighted_cycle_weeks,
)
from .outputs import (
    COST_SEGMENT_LABELS,
    AllocationSlice,
    BaselineOutputs,
    ChannelRoasEntry,
    CostSegment,
    DerivedMetrics,
    DoNothingOutputs,
    EnterpriseModelOutputs,
    RoasComparison,
    RoiOutputs,
    ScenarioReturn,
    SensitivityMatrix,
    TimelinePoint,
    ValueStreams,
    WorkflowComparison,
)
from .quality import QualityIssue, QualitySeverity


__all__ = [
    "AgentIntensity",
    "AllocationSlice",
    "BaselineOutputs",
    "CAMPAIGN_CYCLE_MIDPOINTS",
    "COST_SEGMENT_LABELS",
    "ChannelRoasEntry",
    "ContentAndCampaignOps",
    "CostSegment",
    "DerivedMetrics",
    "DoNothingOutputs",
    "EnterpriseModelOutputs",
    "ImprovementAssumptions",
    "LABOR_STREAMS",
    "MartechAndMedia",
    "OperationalPain",
    "OrganizationProfile",
    "QualityIssue",
    "QualitySeverity",
    "RoasComparison",
    "RoiOutputs",
    "Scenario",
    "ScenarioReturn",
    "SensitivityMatrix",
    "TimeUnit",
    "TimelinePoint",
    "TransformationInvestment",
    "ValueStream",
    "ValueStreams",
    "WorkflowComparison",
    "compute_weighted_cycle_weeks",
]
