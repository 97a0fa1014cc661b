"""Modular configuration schemas for the ROI engine."""

from .engine import EngineConfig, EngineMetadata
from .roi_model import SCENARIO_NAMES, IRRSolverConfig, RoiModelConfig
from .runtime import LoggingConfig


__all__ = [
    "EngineConfig",
    "EngineMetadata",
    "IRRSolverConfig",
    "LoggingConfig",
    "RoiModelConfig",
    "SCENARIO_NAMES",
]
