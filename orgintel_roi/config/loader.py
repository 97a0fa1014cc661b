"""Configuration loader: minimal file merging + get_config that applies defaults.

`load_config_from_files` only reads and deep-merges YAML files (base + optional
environment). Runtime defaults and environment-variable overrides are applied
in `get_config()` so tests that inspect raw file merging see an unmodified
merge output.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigurationError, ErrorCode
from .schemas import EngineConfig


ENV_PREFIX = "ORGINTEL_ROI"


def _deep_merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def _convert_env_value(value: str) -> Any:
    """Convert environment variable string to appropriate type."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value


def _apply_env_overrides(config_dict: dict[str, Any], prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Apply environment variable overrides to configuration dictionary.

    Example:
      ORGINTEL_ROI__ROI_MODEL__DISCOUNT_RATE=0.08 -> config_dict["roi_model"]["discount_rate"] = 0.08
    """
    result = config_dict.copy()

    for env_key, env_value in os.environ.items():
        if not env_key.startswith(f"{prefix}__"):
            continue

        config_path = env_key[len(f"{prefix}__") :].lower().split("__")

        current = result
        for path_part in config_path[:-1]:
            if path_part not in current or not isinstance(current[path_part], dict):
                current[path_part] = {}
            else:
                current[path_part] = dict(current[path_part])
            current = current[path_part]

        final_key = config_path[-1]
        current[final_key] = _convert_env_value(env_value)

    return result


def load_config_from_files(
    environment: str | None = None, config_dir: Path | None = None
) -> dict[str, Any]:
    """Load configuration from YAML files with environment-specific overrides.

    Loads `base.yaml` and merges an optional `<environment>.yaml` on top of it.
    """
    if config_dir is None:
        config_dir = Path("config")

    base_file = Path(config_dir) / "base.yaml"
    if not base_file.exists():
        raise ConfigurationError(
            f"Base configuration file not found: {base_file}",
            operation="load_config_from_files",
            details={"file_path": str(base_file), "config_dir": str(config_dir)},
            status_code=ErrorCode.CONFIG_LOAD_FAILED,
        )

    try:
        with open(base_file, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse base config: {e}",
            operation="load_config_from_files",
            details={"file_path": str(base_file)},
            status_code=ErrorCode.CONFIG_LOAD_FAILED,
            cause=e,
        ) from e

    if environment:
        env_file = Path(config_dir) / f"{environment}.yaml"
        if env_file.exists():
            try:
                with open(env_file, encoding="utf-8") as f:
                    env_config = yaml.safe_load(f) or {}
                config = _deep_merge_dicts(config, env_config)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Failed to parse {environment} config: {e}",
                    operation="load_config_from_files",
                    details={"file_path": str(env_file), "environment": environment},
                    status_code=ErrorCode.CONFIG_LOAD_FAILED,
                    cause=e,
                ) from e

    return config


@lru_cache(maxsize=1)
def get_config(
    environment: str | None = None,
    config_dir: Path | None = None,
    apply_env_overrides_flag: bool = True,
) -> EngineConfig:
    """Get validated configuration with caching.

    Responsibility:
    - Load merged file config via `load_config_from_files`
    - Record the active environment name under `engine.environment`
    - Apply environment variable overrides (if requested)
    - Validate and return an EngineConfig instance
    """
    if environment is None:
        environment = os.getenv(f"{ENV_PREFIX}__ENGINE__ENVIRONMENT", "development")

    config_dict = load_config_from_files(environment=environment, config_dir=config_dir)

    config_dict.setdefault("engine", {})
    config_dict["engine"] = dict(config_dict["engine"] or {})
    config_dict["engine"].setdefault("environment", environment)

    if apply_env_overrides_flag:
        config_dict = _apply_env_overrides(config_dict)

    try:
        return EngineConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration validation failed: {e}",
            operation="get_config",
            details={"environment": environment},
            cause=e,
        ) from e


def reload_config() -> None:
    """Clear configuration cache to force reload on next access."""
    get_config.cache_clear()
