"""Utility helpers shared across the engine."""

from .logging_config import (
    LogContext,
    configure_logging_from_config,
    log_with_context,
    setup_logging,
    stage_logger,
)


__all__ = [
    "LogContext",
    "configure_logging_from_config",
    "log_with_context",
    "setup_logging",
    "stage_logger",
]
