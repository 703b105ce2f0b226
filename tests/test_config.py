"""
Tests for configuration loading and validation.
"""

import json

import pytest
import yaml

from struts2scaffold.config import (
    ConfigurationError,
    ConfigurationManager,
    Struts2ScaffoldConfig,
    load_config,
)


class TestConfigurationManager:
    """Tests for ConfigurationManager helpers."""

    def test_merge_configs_nested(self):
        merged = ConfigurationManager.merge_configs(
            {"scaffold": {"default_version": "2.0.14", "file_set_name": "A"}},
            {"scaffold": {"file_set_name": "B"}},
            {},
        )
        assert merged == {"scaffold": {"default_version": "2.0.14", "file_set_name": "B"}}

    def test_unknown_version_rejected(self):
        with pytest.raises(ConfigurationError):
            ConfigurationManager.validate_config({"scaffold": {"default_version": "1.3"}})

    def test_empty_file_set_name_rejected(self):
        with pytest.raises(ConfigurationError):
            ConfigurationManager.validate_config({"scaffold": {"file_set_name": "  "}})

    def test_missing_template_dir_rejected(self, tmp_path):
        with pytest.raises(ConfigurationError):
            ConfigurationManager.validate_config(
                {"scaffold": {"template_dir": str(tmp_path / "missing")}}
            )

    def test_modules_need_path(self):
        with pytest.raises(ConfigurationError):
            ConfigurationManager.validate_config({"project": {"modules": [{"name": "web"}]}})

    def test_env_config(self, monkeypatch):
        monkeypatch.setenv("STRUTS2SCAFFOLD_DEFAULT_VERSION", "2.0.14")
        monkeypatch.setenv("STRUTS2SCAFFOLD_SOURCE_ROOTS", "src/main/java, src/main/resources")
        monkeypatch.setenv("STRUTS2SCAFFOLD_NOTIFICATIONS_ENABLED", "false")

        config = ConfigurationManager.load_env_config()
        assert config == {
            "scaffold": {"default_version": "2.0.14"},
            "project": {"source_roots": ["src/main/java", "src/main/resources"]},
            "notifications": {"enabled": False},
        }

    def test_invalid_file_format(self, tmp_path):
        path = tmp_path / "struts2scaffold.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            ConfigurationManager.load_config_file(str(path))


class TestStruts2ScaffoldConfig:
    """Tests for Struts2ScaffoldConfig."""

    def test_defaults(self):
        config = Struts2ScaffoldConfig.default()
        assert config.scaffold_settings.default_version == "2.1.8.1"
        assert config.scaffold_settings.file_set_name == "Default File Set"
        assert config.notification_settings.enabled is True

    def test_load_yaml_file(self, tmp_path):
        path = tmp_path / "struts2scaffold.yaml"
        path.write_text(
            yaml.safe_dump(
                {
                    "scaffold": {"default_version": "2.0.14"},
                    "project": {"web_xml": "WebContent/WEB-INF/web.xml"},
                }
            ),
            encoding="utf-8",
        )

        config = Struts2ScaffoldConfig.from_file(str(path))
        assert config.scaffold_settings.default_version == "2.0.14"
        assert config.project_settings.web_xml == "WebContent/WEB-INF/web.xml"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "struts2scaffold.json"
        path.write_text(json.dumps({"scaffold": {"file_set_name": "From File"}}), encoding="utf-8")
        monkeypatch.setenv("STRUTS2SCAFFOLD_FILE_SET_NAME", "From Env")

        config = load_config(str(path))
        assert config.scaffold_settings.file_set_name == "From Env"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(str(tmp_path / "nope.json"))

    def test_default_file_discovered(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "struts2scaffold.json").write_text(
            json.dumps({"notifications": {"enabled": False}}), encoding="utf-8"
        )
        config = load_config()
        assert config.notification_settings.enabled is False

    @pytest.mark.parametrize("format", ["json", "yaml"])
    def test_to_file_round_trip(self, tmp_path, format):
        path = tmp_path / f"struts2scaffold.{format}"
        config = Struts2ScaffoldConfig.default()
        config.scaffold_settings.default_version = "2.3.37"
        config.to_file(str(path), format)

        loaded = Struts2ScaffoldConfig.from_file(str(path))
        assert loaded.to_dict() == config.to_dict()

    def test_summary(self):
        summary = Struts2ScaffoldConfig.default().get_config_summary()
        assert "Default version: 2.1.8.1" in summary
