"""
Configuration system for struts2-scaffold

Provides configuration management with support for files and environment variables.
Includes validation, default value handling, and configuration merging.
"""

import os
import json
import yaml
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Any
import logging

from .constants import DEFAULT_FILE_SET_NAME
from .errors import ScaffoldError
from .framework.versions import known_version_names

logger = logging.getLogger(__name__)


class ConfigurationError(ScaffoldError):
    """Raised when configuration validation fails."""

    pass


class ConfigurationManager:
    """Manages configuration loading, validation, and merging."""

    DEFAULT_CONFIG_PATHS = [
        "struts2scaffold.json",
        "struts2scaffold.yaml",
        "struts2scaffold.yml",
        ".struts2scaffold.json",
        ".struts2scaffold.yaml",
        ".struts2scaffold.yml",
        os.path.expanduser("~/.struts2scaffold.json"),
        os.path.expanduser("~/.struts2scaffold.yaml"),
    ]

    @staticmethod
    def find_config_file(search_paths: Optional[List[str]] = None) -> Optional[str]:
        """Find the first existing configuration file."""
        paths = search_paths or ConfigurationManager.DEFAULT_CONFIG_PATHS

        for path in paths:
            if os.path.exists(path):
                return path
        return None

    @staticmethod
    def load_config_file(config_path: str) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if config_path.endswith((".yaml", ".yml")):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid configuration file format: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error reading configuration file: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError("Configuration file must contain a mapping")
        return data

    @staticmethod
    def load_env_config() -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config = {}

        # Scaffold settings
        scaffold = {}
        if os.getenv("STRUTS2SCAFFOLD_DEFAULT_VERSION"):
            scaffold["default_version"] = os.getenv("STRUTS2SCAFFOLD_DEFAULT_VERSION")

        if os.getenv("STRUTS2SCAFFOLD_FILE_SET_NAME"):
            scaffold["file_set_name"] = os.getenv("STRUTS2SCAFFOLD_FILE_SET_NAME")

        if os.getenv("STRUTS2SCAFFOLD_TEMPLATE_DIR"):
            scaffold["template_dir"] = os.getenv("STRUTS2SCAFFOLD_TEMPLATE_DIR")

        if scaffold:
            config["scaffold"] = scaffold

        # Project settings
        project = {}
        if os.getenv("STRUTS2SCAFFOLD_SOURCE_ROOTS"):
            project["source_roots"] = [
                p.strip() for p in os.getenv("STRUTS2SCAFFOLD_SOURCE_ROOTS").split(",") if p.strip()
            ]

        if os.getenv("STRUTS2SCAFFOLD_WEB_XML"):
            project["web_xml"] = os.getenv("STRUTS2SCAFFOLD_WEB_XML")

        if project:
            config["project"] = project

        # Notification settings
        notifications = {}
        if os.getenv("STRUTS2SCAFFOLD_NOTIFICATIONS_ENABLED"):
            notifications["enabled"] = (
                os.getenv("STRUTS2SCAFFOLD_NOTIFICATIONS_ENABLED").lower() == "true"
            )

        if notifications:
            config["notifications"] = notifications

        return config

    @staticmethod
    def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge multiple configuration dictionaries, with later ones taking precedence."""
        result = {}

        for config in configs:
            if not config:
                continue

            for key, value in config.items():
                if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                    result[key] = ConfigurationManager.merge_configs(result[key], value)
                else:
                    result[key] = value

        return result

    @staticmethod
    def validate_config(config_data: Dict[str, Any]) -> None:
        """Validate configuration data."""
        # Validate scaffold settings
        if "scaffold" in config_data:
            scaffold = config_data["scaffold"]

            if "default_version" in scaffold:
                valid_versions = known_version_names()
                if scaffold["default_version"] not in valid_versions:
                    raise ConfigurationError(f"default_version must be one of: {valid_versions}")

            if "file_set_name" in scaffold:
                name = scaffold["file_set_name"]
                if not isinstance(name, str) or not name.strip():
                    raise ConfigurationError("file_set_name must be a non-empty string")

            template_dir = scaffold.get("template_dir")
            if template_dir and not os.path.isdir(template_dir):
                raise ConfigurationError(f"template_dir does not exist: {template_dir}")

        # Validate project settings
        if "project" in config_data:
            project = config_data["project"]

            source_roots = project.get("source_roots")
            if source_roots is not None and (
                not isinstance(source_roots, list)
                or not all(isinstance(r, str) for r in source_roots)
            ):
                raise ConfigurationError("source_roots must be a list of paths")

            for module in project.get("modules") or []:
                if not isinstance(module, dict) or "path" not in module:
                    raise ConfigurationError("each entry of project.modules needs a 'path'")


@dataclass
class ScaffoldSettings:
    """Configuration for scaffolding operations."""

    default_version: str = "2.1.8.1"
    file_set_name: str = DEFAULT_FILE_SET_NAME
    template_dir: Optional[str] = None


@dataclass
class ProjectSettings:
    """Configuration for project and module discovery."""

    source_roots: Optional[List[str]] = None
    web_xml: Optional[str] = None
    modules: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class NotificationSettings:
    """Configuration for user notifications."""

    enabled: bool = True


@dataclass
class Struts2ScaffoldConfig:
    """Main configuration class for struts2-scaffold."""

    scaffold_settings: ScaffoldSettings = field(default_factory=ScaffoldSettings)
    project_settings: ProjectSettings = field(default_factory=ProjectSettings)
    notification_settings: NotificationSettings = field(default_factory=NotificationSettings)

    @classmethod
    def default(cls) -> "Struts2ScaffoldConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def load(
        cls,
        config_path: Optional[str] = None,
        use_env: bool = True,
        validate: bool = True,
    ) -> "Struts2ScaffoldConfig":
        """
        Load configuration from multiple sources with precedence:
        1. Default values
        2. Configuration file
        3. Environment variables (if use_env=True)

        Args:
            config_path: Path to configuration file. If None, searches for default files.
            use_env: Whether to load environment variables
            validate: Whether to validate the configuration
        """
        configs_to_merge = []

        # Load from file
        file_config = {}
        if config_path:
            if not os.path.exists(config_path):
                raise ConfigurationError(f"Configuration file not found: {config_path}")
            file_config = ConfigurationManager.load_config_file(config_path)
        else:
            found_config = ConfigurationManager.find_config_file()
            if found_config:
                file_config = ConfigurationManager.load_config_file(found_config)
                logger.info("Loaded configuration from: %s", found_config)

        configs_to_merge.append(file_config)

        if use_env:
            configs_to_merge.append(ConfigurationManager.load_env_config())

        merged_config = ConfigurationManager.merge_configs(*configs_to_merge)

        if validate:
            ConfigurationManager.validate_config(merged_config)

        return cls.from_dict(merged_config)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Struts2ScaffoldConfig":
        scaffold_config = ScaffoldSettings()
        for key, value in (data.get("scaffold") or {}).items():
            if hasattr(scaffold_config, key):
                setattr(scaffold_config, key, value)

        project_config = ProjectSettings()
        for key, value in (data.get("project") or {}).items():
            if hasattr(project_config, key):
                setattr(project_config, key, value)

        notification_config = NotificationSettings()
        for key, value in (data.get("notifications") or {}).items():
            if hasattr(notification_config, key):
                setattr(notification_config, key, value)

        return cls(
            scaffold_settings=scaffold_config,
            project_settings=project_config,
            notification_settings=notification_config,
        )

    @classmethod
    def from_file(cls, config_path: str) -> "Struts2ScaffoldConfig":
        """Load configuration from a JSON or YAML file."""
        return cls.load(config_path=config_path, use_env=False)

    @classmethod
    def from_env(cls) -> "Struts2ScaffoldConfig":
        """Load configuration from environment variables."""
        return cls.load(config_path=None, use_env=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "scaffold": asdict(self.scaffold_settings),
            "project": asdict(self.project_settings),
            "notifications": asdict(self.notification_settings),
        }

    def to_file(self, config_path: str, format: str = "json") -> None:
        """
        Save configuration to file.

        Args:
            config_path: Path to save configuration
            format: File format ('json' or 'yaml')
        """
        config_data = self.to_dict()

        try:
            with open(config_path, "w", encoding="utf-8") as f:
                if format.lower() in ("yaml", "yml"):
                    yaml.dump(config_data, f, default_flow_style=False, indent=2)
                else:
                    json.dump(config_data, f, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Error saving configuration file: {e}")

    def validate(self) -> None:
        """Validate the current configuration."""
        ConfigurationManager.validate_config(self.to_dict())

    def get_config_summary(self) -> str:
        """Get a human-readable summary of the configuration."""
        return f"""struts2-scaffold Configuration Summary:
Scaffold:
  - Default version: {self.scaffold_settings.default_version}
  - File set name: {self.scaffold_settings.file_set_name}
  - Template directory: {self.scaffold_settings.template_dir or "(bundled)"}

Project:
  - Source roots: {self.project_settings.source_roots or "(detected)"}
  - web.xml: {self.project_settings.web_xml or "(detected)"}
  - Modules: {len(self.project_settings.modules)} configured

Notifications:
  - Enabled: {self.notification_settings.enabled}
"""


def load_config(config_path: Optional[str] = None, use_env: bool = True) -> Struts2ScaffoldConfig:
    """
    Load configuration from file and/or environment variables.

    Args:
        config_path: Path to configuration file
        use_env: Whether to load environment variables

    Returns:
        Struts2ScaffoldConfig: Loaded configuration
    """
    return Struts2ScaffoldConfig.load(config_path=config_path, use_env=use_env)
