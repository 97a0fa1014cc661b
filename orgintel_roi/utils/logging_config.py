"""Structured logging configuration using loguru."""

import sys
from contextvars import ContextVar
from pathlib import Path

from loguru import logger

from ..config.schemas import LoggingConfig

# Context variables for structured logging
stage_context: ContextVar[str | None] = ContextVar("stage", default=None)
run_id_context: ContextVar[str | None] = ContextVar("run_id", default=None)


def setup_logging(
    level: str = "INFO",
    format_type: str = "text",
    file_path: str | None = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
    include_stage: bool = True,
    include_run_id: bool = True,
    include_timestamps: bool = True,
) -> None:
    """Set up structured logging configuration.

    Invalid logging level names fall back to 'INFO'.
    """
    logger.remove()
    # Format strings reference these keys; unbound records need a placeholder.
    logger.configure(extra={"stage": "-", "run_id": "-"})

    format_parts = []

    if include_timestamps:
        format_parts.append("<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green>")

    format_parts.append("<level>{level: <8}</level>")

    if include_stage:
        format_parts.append("<cyan>{extra[stage]: <12}</cyan>")

    if include_run_id:
        format_parts.append("<magenta>{extra[run_id]: <8}</magenta>")

    format_parts.append("<level>{message}</level>")

    if format_type == "json":
        log_format = "{message}"
        serialize = True
    else:
        log_format = " | ".join(format_parts)
        serialize = False

    try:
        logger.level(level)
        safe_level = level
    except ValueError:
        safe_level = "INFO"

    logger.add(
        sys.stdout,
        level=safe_level,
        format=log_format,
        serialize=serialize,
        colorize=format_type != "json",
    )

    if safe_level != level:
        logger.warning(f"Invalid logging level '{level}' provided; falling back to 'INFO'")

    if file_path:
        log_file_path = Path(file_path)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file_path,
            level=safe_level,
            format=log_format,
            serialize=serialize,
            rotation=f"{max_file_size_mb} MB",
            retention=backup_count,
            encoding="utf-8",
        )


def configure_logging_from_config(logging_config: LoggingConfig | None = None) -> None:
    """Configure logging from a LoggingConfig, loading the active config when omitted."""
    if logging_config is None:
        from ..config.loader import get_config

        logging_config = get_config().logging

    setup_logging(
        level=logging_config.level,
        format_type=logging_config.format,
        file_path=logging_config.file_path,
        max_file_size_mb=logging_config.max_file_size_mb,
        backup_count=logging_config.backup_count,
        include_stage=logging_config.include_stage,
        include_run_id=logging_config.include_run_id,
        include_timestamps=logging_config.include_timestamps,
    )


class LogContext:
    """Context manager for adding context to log messages."""

    def __init__(self, stage: str | None = None, run_id: str | None = None):
        """Initialize log context.

        Args:
            stage: Engine stage name (e.g. "baseline", "timeline")
            run_id: Calculation identifier
        """
        self.stage = stage
        self.run_id = run_id
        self.stage_token = None
        self.run_id_token = None

    def __enter__(self):
        if self.stage is not None:
            self.stage_token = stage_context.set(self.stage)
        if self.run_id is not None:
            self.run_id_token = run_id_context.set(self.run_id)

        extra = {}
        if self.stage:
            extra["stage"] = self.stage
        if self.run_id:
            extra["run_id"] = self.run_id

        if extra:
            return logger.bind(**extra)
        return logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.stage_token is not None:
            stage_context.reset(self.stage_token)
        if self.run_id_token is not None:
            run_id_context.reset(self.run_id_token)


def log_with_context(stage: str | None = None, run_id: str | None = None):
    """Context manager for logging with context.

    Returns:
        Context manager that yields a logger with context
    """
    return LogContext(stage=stage, run_id=run_id)


def stage_logger(stage: str):
    """Logger bound to ``stage`` and to the run id of the enclosing LogContext, if any."""
    return logger.bind(stage=stage, run_id=run_id_context.get() or "-")
