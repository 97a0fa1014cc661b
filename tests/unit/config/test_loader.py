"""Unit tests for the YAML configuration loader."""

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from orgintel_roi.config.loader import (
    _apply_env_overrides,
    _convert_env_value,
    _deep_merge_dicts,
    get_config,
    load_config_from_files,
    reload_config,
)
from orgintel_roi.exceptions import ConfigurationError, ErrorCode


pytestmark = pytest.mark.fast


@pytest.fixture(autouse=True)
def clear_config_cache():
    reload_config()
    yield
    reload_config()


def _write(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8")


class TestDeepMergeDicts:
    """Tests for _deep_merge_dicts."""

    def test_merge_flat_dicts(self):
        assert _deep_merge_dicts({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}

    def test_merge_nested_dicts(self):
        base = {"roi_model": {"discount_rate": 0.1, "projection_months": 36}}
        override = {"roi_model": {"discount_rate": 0.08}}

        result = _deep_merge_dicts(base, override)

        assert result == {"roi_model": {"discount_rate": 0.08, "projection_months": 36}}

    def test_override_replaces_non_dict(self):
        assert _deep_merge_dicts({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}

    def test_base_not_mutated(self):
        base = {"a": {"b": 1}}
        _deep_merge_dicts(base, {"a": {"b": 2}})
        assert base == {"a": {"b": 1}}


class TestConvertEnvValue:
    """Tests for environment value coercion."""

    def test_convert_boolean_true(self):
        assert _convert_env_value("true") is True
        assert _convert_env_value("TRUE") is True

    def test_convert_boolean_false(self):
        assert _convert_env_value("false") is False

    def test_convert_integer(self):
        assert _convert_env_value("36") == 36
        assert isinstance(_convert_env_value("36"), int)

    def test_convert_float(self):
        assert _convert_env_value("0.08") == 0.08

    def test_convert_string(self):
        assert _convert_env_value("per_stream") == "per_stream"


class TestApplyEnvOverrides:
    """Tests for ORGINTEL_ROI__ environment overrides."""

    def test_apply_single_level_override(self):
        config = {"logging": {"level": "INFO"}}

        with patch.dict(os.environ, {"ORGINTEL_ROI__LOGGING__LEVEL": "DEBUG"}):
            result = _apply_env_overrides(config)

        assert result["logging"]["level"] == "DEBUG"

    def test_apply_multi_level_override(self):
        config = {"roi_model": {"irr": {"max_iterations": 100}}}

        with patch.dict(os.environ, {"ORGINTEL_ROI__ROI_MODEL__IRR__MAX_ITERATIONS": "250"}):
            result = _apply_env_overrides(config)

        assert result["roi_model"]["irr"]["max_iterations"] == 250

    def test_apply_creates_missing_keys(self):
        with patch.dict(os.environ, {"ORGINTEL_ROI__NEW__NESTED__KEY": "value"}):
            result = _apply_env_overrides({})

        assert result["new"]["nested"]["key"] == "value"

    def test_apply_ignores_non_prefixed_vars(self):
        with patch.dict(os.environ, {"OTHER__KEY": "value"}):
            result = _apply_env_overrides({})

        assert "key" not in result

    def test_apply_custom_prefix(self):
        with patch.dict(os.environ, {"CUSTOM__KEY": "value"}):
            result = _apply_env_overrides({}, prefix="CUSTOM")

        assert result["key"] == "value"

    def test_apply_preserves_original(self):
        config = {"roi_model": {"discount_rate": 0.1}}

        with patch.dict(os.environ, {"ORGINTEL_ROI__ROI_MODEL__DISCOUNT_RATE": "0.05"}):
            _apply_env_overrides(config)

        assert config["roi_model"]["discount_rate"] == 0.1


class TestLoadConfigFromFiles:
    """Tests for reading and merging YAML files."""

    def test_load_base_config_only(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            _write(config_dir / "base.yaml", "roi_model:\n  discount_rate: 0.1\n")

            result = load_config_from_files(config_dir=config_dir)

        assert result == {"roi_model": {"discount_rate": 0.1}}

    def test_environment_file_merged_on_top(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            _write(config_dir / "base.yaml", "logging:\n  level: INFO\n  format: text\n")
            _write(config_dir / "production.yaml", "logging:\n  level: WARNING\n")

            result = load_config_from_files(environment="production", config_dir=config_dir)

        assert result["logging"] == {"level": "WARNING", "format": "text"}

    def test_missing_environment_file_is_ignored(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            _write(config_dir / "base.yaml", "engine:\n  name: test\n")

            result = load_config_from_files(environment="staging", config_dir=config_dir)

        assert result == {"engine": {"name": "test"}}

    def test_empty_base_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            _write(config_dir / "base.yaml", "")

            assert load_config_from_files(config_dir=config_dir) == {}

    def test_missing_base_file_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(ConfigurationError) as exc_info:
                load_config_from_files(config_dir=Path(tmpdir))

        assert exc_info.value.status_code == ErrorCode.CONFIG_LOAD_FAILED
        assert "base.yaml" in exc_info.value.details["file_path"]

    def test_invalid_yaml_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            _write(config_dir / "base.yaml", "roi_model: [unclosed\n")

            with pytest.raises(ConfigurationError) as exc_info:
                load_config_from_files(config_dir=config_dir)

        assert exc_info.value.cause is not None


class TestGetConfig:
    """Tests for validated, cached configuration."""

    def test_repository_development_config(self, config_dir):
        config = get_config(environment="development", config_dir=config_dir)

        assert config.engine.environment == "development"
        assert config.roi_model.discount_rate == 0.10
        assert config.roi_model.projection_months == 36
        assert config.roi_model.scenario_multipliers["conservative"] == 0.6

    def test_repository_production_config(self, config_dir):
        config = get_config(environment="production", config_dir=config_dir)

        assert config.engine.environment == "production"
        assert config.logging.level == "WARNING"
        assert config.logging.format == "json"
        assert config.roi_model.discount_rate == 0.10

    def test_config_is_cached(self, config_dir):
        first = get_config(environment="development", config_dir=config_dir)
        second = get_config(environment="development", config_dir=config_dir)

        assert first is second

    def test_reload_clears_cache(self, config_dir):
        first = get_config(environment="development", config_dir=config_dir)
        reload_config()
        second = get_config(environment="development", config_dir=config_dir)

        assert first is not second
        assert first == second

    def test_env_override_applied(self, config_dir):
        with patch.dict(os.environ, {"ORGINTEL_ROI__ROI_MODEL__ONGOING_OPEX_PCT": "20"}):
            config = get_config(environment="development", config_dir=config_dir)

        assert config.roi_model.ongoing_opex_pct == 20

    def test_env_override_can_be_disabled(self, config_dir):
        with patch.dict(os.environ, {"ORGINTEL_ROI__ROI_MODEL__ONGOING_OPEX_PCT": "20"}):
            config = get_config(
                environment="development", config_dir=config_dir, apply_env_overrides_flag=False
            )

        assert config.roi_model.ongoing_opex_pct == 0

    def test_invalid_values_raise_configuration_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            _write(config_dir / "base.yaml", "roi_model:\n  discount_rate: 1.5\n")

            with pytest.raises(ConfigurationError) as exc_info:
                get_config(environment="development", config_dir=config_dir)

        assert exc_info.value.operation == "get_config"
        assert exc_info.value.details["environment"] == "development"

    def test_load_config_uses_default_paths(self, config_dir, monkeypatch):
        from orgintel_roi.config import load_config

        monkeypatch.chdir(config_dir.parent)

        assert load_config().roi_model.projection_months == 36
