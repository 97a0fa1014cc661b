"""Economic model behind the marketing transformation ROI simulator.

Pure, synchronous calculations: a baseline of today's marketing operating
cost, recoverable value per stream, a 36-month adoption timeline and the
financial summary (ROI, payback, NPV, IRR) under three scenarios.
"""

from .engine import (
    RoiCalculator,
    build_timeline,
    calculate_irr,
    compute_baseline,
    compute_channel_roas,
    compute_do_nothing_cost,
    compute_enterprise_model,
    compute_roi,
    compute_sensitivity,
    compute_value_streams,
    ramp_factor,
    timeline_to_frame,
)
from .exceptions import ConfigurationError, OrgIntelROIError, ShareLinkError
from .models import (
    AgentIntensity,
    ContentAndCampaignOps,
    ImprovementAssumptions,
    MartechAndMedia,
    OperationalPain,
    OrganizationProfile,
    RoiOutputs,
    Scenario,
    TransformationInvestment,
    ValueStream,
)
from .share_link import ShareConfig, decode_share_config, encode_share_config
from .validators import check_inputs


__version__ = "0.1.0"

__all__ = [
    "AgentIntensity",
    "ConfigurationError",
    "ContentAndCampaignOps",
    "ImprovementAssumptions",
    "MartechAndMedia",
    "OperationalPain",
    "OrgIntelROIError",
    "OrganizationProfile",
    "RoiCalculator",
    "RoiOutputs",
    "Scenario",
    "ShareConfig",
    "ShareLinkError",
    "TransformationInvestment",
    "ValueStream",
    "build_timeline",
    "calculate_irr",
    "check_inputs",
    "compute_baseline",
    "compute_channel_roas",
    "compute_do_nothing_cost",
    "compute_enterprise_model",
    "compute_roi",
    "compute_sensitivity",
    "compute_value_streams",
    "decode_share_config",
    "encode_share_config",
    "ramp_factor",
    "timeline_to_frame",
]
