"""
Unit tests for configuration loading.

Tests defaults, YAML/JSON overrides and error reporting.
"""

import json

import pytest

from evapotranspiration.config.settings import (
    LOGGING,
    default_config,
    load_config,
)
from evapotranspiration.utils.exceptions import ConfigurationError


class TestDefaults:
    """Test default settings."""

    def test_only_logging_section(self):
        """Every default section has a reader; logging is the only one."""
        assert set(default_config()) == {"logging"}

    def test_logging_defaults(self):
        assert LOGGING["level"] == "INFO"
        assert LOGGING["file_log"] is False
        assert LOGGING["log_file"].endswith("evapotranspiration.log")

    def test_default_config_is_a_copy(self):
        config = default_config()
        config["logging"]["level"] = "DEBUG"
        assert LOGGING["level"] == "INFO"

    def test_load_without_path_returns_defaults(self):
        assert load_config() == default_config()


class TestLoadConfig:
    """Test loading configuration files."""

    def test_load_yaml_overrides(self, tmp_path):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(
            "logging:\n"
            "  level: DEBUG\n"
            "  file_log: true\n"
        )

        config = load_config(config_file)

        assert config["logging"]["level"] == "DEBUG"
        assert config["logging"]["file_log"] is True
        # Untouched keys keep their default
        assert config["logging"]["rotation"] == LOGGING["rotation"]
        assert config["logging"]["console"] is True

    def test_load_yml_suffix(self, tmp_path):
        config_file = tmp_path / "settings.yml"
        config_file.write_text("logging:\n  level: WARNING\n")
        assert load_config(str(config_file))["logging"]["level"] == "WARNING"

    def test_load_empty_yaml(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert load_config(config_file) == default_config()

    def test_load_json(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text(json.dumps({"logging": {"level": "ERROR"}}))
        assert load_config(config_file)["logging"]["level"] == "ERROR"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as excinfo:
            load_config(tmp_path / "missing.yaml")
        assert excinfo.value.details["parameter"] == "config_path"

    def test_unsupported_suffix(self, tmp_path):
        config_file = tmp_path / "settings.ini"
        config_file.write_text("[logging]\nlevel = DEBUG\n")
        with pytest.raises(ConfigurationError, match="Unsupported config format"):
            load_config(config_file)

    def test_malformed_yaml(self, tmp_path):
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("logging: [unclosed\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_non_mapping(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(config_file)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
