"""Root EngineConfig composed from modular schema components."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .roi_model import IRRSolverConfig, RoiModelConfig
from .runtime import LoggingConfig


class EngineMetadata(BaseModel):
    """Metadata for the configured engine."""

    name: str = Field(default="orgintel-roi", description="Engine identifier")
    version: str = Field(default="0.1.0", description="Semantic version of the model")
    environment: str = Field(default="development", description="Active environment name")

    model_config = ConfigDict(extra="allow")


class EngineConfig(BaseModel):
    """Root configuration model for the ROI engine."""

    engine: EngineMetadata = Field(default_factory=EngineMetadata)
    roi_model: RoiModelConfig = Field(default_factory=RoiModelConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(
        validate_assignment=True,
        extra="allow",
    )


__all__ = [
    "EngineConfig",
    "EngineMetadata",
    "IRRSolverConfig",
    "LoggingConfig",
    "RoiModelConfig",
]
