"""Tests for configuration loading."""

import json

import pytest
from pydantic import ValidationError

from emlkit.config.app_config import AppConfig, EncodingConfig
from emlkit.config.config_loader import ConfigError, ConfigLoader


class TestConfigLoader:
    """Test ConfigLoader."""

    @pytest.fixture
    def config_file(self, tmp_path):
        path = tmp_path / "app_config.json"
        path.write_text(
            json.dumps(
                {
                    "encoding": {"line_width": 64},
                    "storage": {"audit_log_path": str(tmp_path / "audit.log")},
                }
            ),
            encoding="utf-8",
        )
        return path

    def test_load_from_file(self, config_file, tmp_path):
        config = ConfigLoader(config_file).load_app_config()

        assert config.encoding.line_width == 64
        assert config.storage.get_audit_log_path() == tmp_path / "audit.log"

    def test_defaults_when_file_missing(self, tmp_path):
        config = ConfigLoader(tmp_path / "missing.json").load_app_config()

        assert config.encoding.line_width == 76
        assert config.schema_version == "1.0"

    def test_config_is_cached(self, config_file):
        loader = ConfigLoader(config_file)
        assert loader.load_app_config() is loader.load_app_config()

    def test_reload_reads_file_again(self, config_file):
        loader = ConfigLoader(config_file)
        loader.load_app_config()

        config_file.write_text(json.dumps({"encoding": {"line_width": 40}}), encoding="utf-8")
        assert loader.reload().encoding.line_width == 40

    def test_invalid_json_raises_config_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError):
            ConfigLoader(path).load_app_config()

    def test_invalid_line_width_raises_config_error(self, tmp_path):
        path = tmp_path / "bad_width.json"
        path.write_text(json.dumps({"encoding": {"line_width": 2000}}), encoding="utf-8")

        with pytest.raises(ConfigError):
            ConfigLoader(path).load_app_config()


class TestAppConfig:
    """Test configuration model validation."""

    def test_line_width_bounds(self):
        assert EncodingConfig(line_width=998).line_width == 998
        with pytest.raises(ValidationError):
            EncodingConfig(line_width=3)

    def test_empty_schema_version_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig(schema_version="")
